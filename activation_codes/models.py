"""
Model registration for the activation_codes app.

ORM models live in activation_codes.infrastructure.models.
"""

from activation_codes.infrastructure.models import Account, ActivationCode  # noqa: F401
