"""
Freedom Wall URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def api_root(request):
    """API root — minimal public surface."""
    return JsonResponse({
        "service": "Freedom Wall API",
        "version": "1.0.0",
    })


urlpatterns = [
    path('', api_root, name='api_root'),
    path('admin/', admin.site.urls),

    # ── API ───────────────────────────────────────────────────────────
    path('api/', include('core.urls')),
    path('api/', include('users.urls')),
    path('api/', include('feed.urls')),
]
