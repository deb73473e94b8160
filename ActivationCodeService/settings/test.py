"""
Test settings for ActivationCodeService.
"""

import os
import tempfile

from .base import *  # noqa: F403, F401
from .base import database_from_url

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# Use PostgreSQL in CI (from DATABASE_URL), file-backed SQLite locally.
# The file database lets worker threads in concurrency tests share tables.
DATABASE_URL = os.environ.get("DATABASE_URL")
if DATABASE_URL and DATABASE_URL.startswith("postgres"):
    DATABASES = {"default": database_from_url(DATABASE_URL)}
    DATABASES["default"]["TEST"] = {"NAME": DATABASES["default"]["NAME"] + "_test"}
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.path.join(tempfile.gettempdir(), "activation_codes.sqlite3"),
            "OPTIONS": {
                "timeout": 30,
            },
            "TEST": {
                "NAME": os.path.join(
                    tempfile.gettempdir(), f"test_activation_codes_{os.getpid()}.sqlite3"
                ),
            },
        }
    }

JWT_ADMIN_SECRET = "test-admin-secret"
JWT_APP_SECRET = "test-app-secret"
TOKEN_TTL_SECONDS = 24 * 60 * 60

# Password hashers for faster tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

OTEL_ENABLED = False

# Disable logging during tests
LOGGING_CONFIG = None
