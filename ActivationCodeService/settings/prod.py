"""
Production settings for ActivationCodeService.
"""

import os

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403, F401
from .logging import get_logging_config

DEBUG = False

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "").split(",")

# Security settings
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# Secrets must come from the environment
SECRET_KEY = os.environ.get("SECRET_KEY", "")
JWT_ADMIN_SECRET = os.environ.get("JWT_ADMIN_SECRET", "")
JWT_APP_SECRET = os.environ.get("JWT_APP_SECRET", "")

for _name in ("SECRET_KEY", "JWT_ADMIN_SECRET", "JWT_APP_SECRET"):
    if not globals()[_name]:
        raise ImproperlyConfigured(f"{_name} must be set in production")
if JWT_ADMIN_SECRET == JWT_APP_SECRET:
    raise ImproperlyConfigured("JWT_ADMIN_SECRET and JWT_APP_SECRET must differ")

LOGGING = get_logging_config(
    "production", log_file=os.environ.get("LOG_FILE", "/var/log/activation-code-service/app.log")
)
