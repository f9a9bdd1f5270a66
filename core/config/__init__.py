from .validators import validate_config_on_startup

__all__ = ["validate_config_on_startup"]
