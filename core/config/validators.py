"""
Configuration Validators
========================

Startup validation for the Freedom Wall configuration layer.

- FATAL issues (e.g. no JWT signing secret) raise ImproperlyConfigured in
  every environment: the API cannot authenticate anyone without them.
- CRITICAL issues raise in production and are logged elsewhere.
- WARNING / INFO issues are only logged.

Called automatically via core.apps.CoreConfig.ready().
"""

import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


def validate_config_on_startup(app_config=None):
    """Validate configuration on application startup; raise on fatal issues."""
    if app_config is None:
        from freedomwall.config import config as app_config

    issues = app_config.validate()

    if not issues:
        logger.info("Configuration validated — no issues found")
        return

    fatal_issues = [i for i in issues if i.startswith("FATAL")]
    critical_issues = [i for i in issues if i.startswith("CRITICAL")]

    for issue in issues:
        if issue in fatal_issues or issue in critical_issues:
            logger.critical(issue)
        elif issue.startswith("WARNING"):
            logger.warning(issue)
        else:
            logger.info(issue)

    blocking = list(fatal_issues)
    if app_config.is_production:
        blocking += critical_issues

    if blocking:
        raise ImproperlyConfigured(
            "Configuration validation failed:\n"
            + "\n".join(f"  • {i}" for i in blocking)
        )
