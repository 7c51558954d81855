from .loader import load_settings
from .resolve import resolve_config, validate_region
from .types import ConfigError, FileSettings, UnsupportedConfigFormatError, WatchConfig

__all__ = [
    "load_settings",
    "resolve_config",
    "validate_region",
    "ConfigError",
    "FileSettings",
    "UnsupportedConfigFormatError",
    "WatchConfig",
]
