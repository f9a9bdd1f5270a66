"""
Security Middleware for Freedom Wall

Adds hardening headers to responses and audit-logs API traffic.
"""

import logging
import time

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware:
    """
    Add security headers to all responses.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        response["X-Content-Type-Options"] = "nosniff"
        response["X-Frame-Options"] = "DENY"
        response["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

        return response


class RequestLoggingMiddleware:
    """
    Log all API requests for auditing.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        ip = self.get_client_ip(request)
        started = time.monotonic()
        logger.info("API Request: %s %s from %s", request.method, request.path, ip)

        response = self.get_response(request)

        elapsed_ms = (time.monotonic() - started) * 1000
        if response.status_code >= 400:
            logger.warning(
                "API Error %s: %s %s (%.1fms)",
                response.status_code, request.method, request.path, elapsed_ms,
            )
        else:
            logger.debug("API %s %s -> %s (%.1fms)", request.method, request.path, response.status_code, elapsed_ms)

        return response

    def get_client_ip(self, request):
        x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
        if x_forwarded_for:
            return x_forwarded_for.split(",")[0].strip()
        return request.META.get("REMOTE_ADDR", "unknown")
