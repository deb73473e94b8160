"""
Django admin configuration for activation_codes app.
"""

from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from activation_codes.infrastructure.models import Account, ActivationCode


@admin.action(description="Soft-delete selected rows")
def soft_delete_selected(modeladmin, request, queryset):
    """Mark the selected rows as deleted."""
    updated = queryset.update(deleted_at=timezone.now())
    modeladmin.message_user(request, f"{updated} row(s) soft-deleted.")


class AccountInline(admin.TabularInline):
    """Accounts registered under a code, read-only."""

    model = Account
    extra = 0
    can_delete = False
    fields = ["email", "created_at"]
    readonly_fields = ["email", "created_at"]


@admin.register(ActivationCode)
class ActivationCodeAdmin(admin.ModelAdmin):
    """Admin interface for ActivationCode model."""

    list_display = [
        "code",
        "status_display",
        "max_accounts",
        "used_accounts",
        "expires_at",
        "created_at",
    ]
    list_filter = ["status", "expires_at", "created_at"]
    search_fields = ["code"]
    readonly_fields = ["id", "code", "expires_at", "created_at", "updated_at"]
    inlines = [AccountInline]
    actions = [soft_delete_selected]

    def status_display(self, obj):
        """Display status with color, flagging expired codes."""
        if obj.status == "disabled":
            return format_html('<span style="color: red; font-weight: bold;">Disabled</span>')
        if obj.expires_at < timezone.now():
            return format_html('<span style="color: orange; font-weight: bold;">Expired</span>')
        return format_html('<span style="color: green; font-weight: bold;">Enabled</span>')

    status_display.short_description = "Status"

    def used_accounts(self, obj):
        """Number of registered accounts."""
        return obj.accounts.count()

    used_accounts.short_description = "Used"


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """Admin interface for Account model."""

    list_display = ["email", "activation_code", "created_at"]
    search_fields = ["email", "activation_code__code"]
    readonly_fields = ["id", "created_at", "updated_at"]
    exclude = ["deleted_at"]
    actions = [soft_delete_selected]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("activation_code")
