"""
WSGI config for the Freedom Wall API.

Exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "freedomwall.settings")

application = get_wsgi_application()
