"""
Test Settings

Used by pytest (see [tool.pytest.ini_options] in pyproject.toml).
"""

import os

os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-freedom-wall-suite-0123456789")
os.environ.setdefault("DJANGO_ENV", "test")

from .base import *

DEBUG = False
ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test.sqlite3",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Counters live in a shared cache; keep them out of the suite
REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []
