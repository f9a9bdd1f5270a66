# Request/response middleware package

from .security import (
    SecurityHeadersMiddleware,
    RequestLoggingMiddleware,
)

__all__ = [
    "SecurityHeadersMiddleware",
    "RequestLoggingMiddleware",
]
