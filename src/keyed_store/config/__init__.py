from .loader import ConfigError, load_config, load_yaml_config, parse_config
from .models import EntryDecl, LoggingConfig, StoreAppConfig, StoreConfig

# Config exports are intentionally small.
__all__ = [
    "ConfigError",
    "EntryDecl",
    "LoggingConfig",
    "StoreAppConfig",
    "StoreConfig",
    "load_config",
    "load_yaml_config",
    "parse_config",
]
