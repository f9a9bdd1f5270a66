"""
Freedom Wall Exception Hierarchy
================================

Domain-specific exceptions for structured error handling across the API.
Every error reaches the client as ``{"error": "<message>"}`` with the status
code carried by the exception class.

Usage::

    from core.exceptions import ValidationError, NotFoundError

    # In a service:
    raise NotFoundError("Post not found", resource="post")

    # In a serializer-free view:
    raise ValidationError("Avatar data is required", field="avatar")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class FreedomWallError(Exception):
    """Base exception for all Freedom Wall application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="Internal server error", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        # Details stay server-side; clients only ever see the message.
        return {"error": self.message}


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(FreedomWallError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


class NotFoundError(FreedomWallError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, message="Resource not found", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)


class AuthenticationError(FreedomWallError):
    """Bearer token missing or rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "authentication_error"

    def __init__(self, message="No token provided", **kwargs):
        super().__init__(message, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(FreedomWallError):
    """Missing or invalid configuration (env vars, settings)."""

    error_code = "configuration_error"

    def __init__(self, message="Configuration error", setting=None, **kwargs):
        if setting:
            kwargs["setting"] = setting
        super().__init__(message, **kwargs)
