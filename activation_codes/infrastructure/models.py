"""
Activation code Django ORM models.

This is the infrastructure layer model for activation codes and accounts.
Domain entities are in activation_codes.domain.
"""
from django.db import models
from django.utils import timezone


class ActiveManager(models.Manager):
    """Manager hiding soft-deleted rows."""

    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class SoftDeleteModel(models.Model):
    """Abstract base adding a soft-delete marker."""

    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)

    objects = ActiveManager()
    all_objects = models.Manager()

    class Meta:
        abstract = True

    def soft_delete(self):
        """Mark this row as deleted without removing it."""
        if self.deleted_at is not None:
            return  # Already deleted
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at", "updated_at"])


class ActivationCode(SoftDeleteModel):
    """
    A time-limited code granting access to a quota of accounts.
    """

    STATUS_CHOICES = [
        ("enabled", "Enabled"),
        ("disabled", "Disabled"),
    ]

    code = models.CharField(
        max_length=18, unique=True, help_text="Random [0-9A-Z] code"
    )
    expires_at = models.DateTimeField(db_index=True)
    max_accounts = models.PositiveIntegerField(default=1)
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default="enabled"
    )
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "activation_codes"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status", "expires_at"], name="act_code_status_expires_idx"),
        ]

    def __str__(self):
        return self.code


class Account(SoftDeleteModel):
    """
    Credentials of a linked third-party account registered under a code.
    """

    activation_code = models.ForeignKey(
        ActivationCode,
        on_delete=models.CASCADE,
        related_name="accounts",
    )
    email = models.CharField(max_length=255)
    email_password = models.CharField(max_length=255)
    service_password = models.CharField(max_length=255)
    access_token = models.TextField()
    refresh_token = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "accounts"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["activation_code", "deleted_at"], name="account_code_deleted_idx"),
        ]

    def __str__(self):
        return f"{self.email} @ {self.activation_code_id}"
