"""
Health check endpoint for deployment platforms.
"""

from django.http import JsonResponse
from django.views import View


class HealthCheckView(View):
    """
    Simple health check endpoint for load balancers and deployment platforms.
    Returns 200 OK if the service is running.
    """

    def get(self, request):
        return JsonResponse({
            "status": "healthy",
            "service": "freedomwall-api",
            "version": "1.0.0",
        })


def json_body(request) -> dict:
    """Request body as a dict; non-object JSON bodies read as empty."""
    data = request.data
    return data if isinstance(data, dict) else {}
