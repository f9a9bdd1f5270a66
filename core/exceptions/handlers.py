"""
DRF Exception Handler
=====================

Custom exception handler that turns every failure into the
``{"error": "<message>"}`` JSON shape the clients expect.

Registered in ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

import logging
from rest_framework import exceptions, status
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback
from rest_framework.response import Response

from .base import FreedomWallError

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "No token provided"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _first_message(detail):
    """Collapse DRF's nested error detail into a single readable string."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ("non_field_errors", "detail"):
                return message
            return f"{field}: {message}"
        return "Invalid request data"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid request data"
    return str(detail)


def freedomwall_exception_handler(exc, context):
    """
    Custom DRF exception handler.

    - Catches any ``FreedomWallError`` subtype → ``{error}`` with its status.
    - Reshapes DRF's own exceptions (auth, parse, validation, 404, 405).
    - Logs and masks anything else as a 500 without leaking internals.
    """
    view = context.get("view")

    if isinstance(exc, FreedomWallError):
        logger.warning(
            "FreedomWallError [%s]: %s %s",
            exc.error_code,
            exc.message,
            exc.details or "",
        )
        set_rollback()
        return Response(exc.to_dict(), status=exc.status_code)

    response = drf_exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, exceptions.NotAuthenticated):
            message = MISSING_TOKEN_MESSAGE
        else:
            message = _first_message(response.data)
        response.data = {"error": message}
        return response

    logger.exception("Unhandled exception in %s", view.__class__.__name__ if view else "unknown")
    set_rollback()
    return Response(
        {"error": INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
