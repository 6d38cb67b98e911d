"""
Test settings – in-memory SQLite so the suite runs without PostgreSQL.
"""
import os

import structlog

os.environ.setdefault("SECRET_KEY", "test-only-secret-key")

from .base import *  # noqa: E402, F401, F403

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOGGING["root"]["level"] = "WARNING"  # noqa: F405

# Lets structlog.testing.capture_logs intercept module-level loggers.
structlog.configure(cache_logger_on_first_use=False)
