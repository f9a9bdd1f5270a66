"""
core.exceptions — Re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, NotFoundError, AuthenticationError

The DRF handler lives in ``core.exceptions.handlers`` and is referenced by
dotted path from ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``; it is not imported
here because it depends on ``rest_framework.views``, which itself loads the
authentication classes that import this package.
"""

from .base import (
    FreedomWallError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    ConfigurationError,
)

__all__ = [
    # Base
    "FreedomWallError",
    # Client
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    # Config
    "ConfigurationError",
]
