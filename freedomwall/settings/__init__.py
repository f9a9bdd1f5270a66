"""
Freedom Wall Settings Package

When DJANGO_SETTINGS_MODULE points at this package, settings are loaded
based on the DJANGO_ENV environment variable (default 'development').
Environment modules can also be selected directly, e.g.
``freedomwall.settings.test`` under pytest.
"""

import os

from dotenv import load_dotenv

load_dotenv()

env = os.getenv('DJANGO_ENV', 'development')

if os.getenv('DJANGO_SETTINGS_MODULE', __name__) == __name__:
    if env == 'production':
        from .production import *
    else:
        from .development import *
