"""
Django admin configuration for administrators app.
"""

from django import forms
from django.contrib import admin

from administrators.infrastructure.models import Administrator


class AdministratorForm(forms.ModelForm):
    """Form accepting a raw password and storing its hash."""

    password = forms.CharField(
        widget=forms.PasswordInput,
        required=False,
        help_text="Leave blank to keep the current password.",
    )

    class Meta:
        model = Administrator
        fields = ["username"]

    def save(self, commit=True):
        """Hash the password before saving."""
        administrator = super().save(commit=False)
        if self.cleaned_data.get("password"):
            administrator.set_password(self.cleaned_data["password"])
        if commit:
            administrator.save()
        return administrator


@admin.register(Administrator)
class AdministratorAdmin(admin.ModelAdmin):
    """Admin interface for Administrator model."""

    form = AdministratorForm
    list_display = ["username", "created_at", "updated_at"]
    search_fields = ["username"]
    readonly_fields = ["id", "created_at", "updated_at"]
