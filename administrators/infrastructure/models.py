"""
Administrator Django ORM model.

This is the infrastructure layer model for administrators.
Domain entities are in administrators.domain.administrator.
"""
from django.db import models


class Administrator(models.Model):
    """
    An operator allowed to manage activation codes.
    """

    username = models.CharField(max_length=150, unique=True)
    password_hash = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "administrators"
        ordering = ["username"]

    def set_password(self, raw_password: str):
        """Hash and store a password."""
        from django.contrib.auth.hashers import make_password

        self.password_hash = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        """Check a password against the stored hash."""
        from django.contrib.auth.hashers import check_password

        return check_password(raw_password, self.password_hash)

    def __str__(self):
        return self.username
