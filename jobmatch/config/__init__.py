from .settings import (
    AppConfig,
    ConfigError,
    load_config,
    validate_config,
    matching_config_from
)

__all__ = [
    'AppConfig',
    'ConfigError',
    'load_config',
    'validate_config',
    'matching_config_from'
]
