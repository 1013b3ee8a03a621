"""
Utilities submodule for BuildConfig.

Provides configuration loading, config sources, date handling and logging helpers.
"""

from .config import BuildConfigLoader, current, initialize, reset
from .config_source import ConfigSource, EnvironmentConfigSource, MappingConfigSource, SettingsConfigSource
from .dates import format_expiry_date, now_ms, parse_expiry_date
from .helpers import get_app_data_path, setup_logging

__all__ = [
    "BuildConfigLoader",
    "current",
    "initialize",
    "reset",
    "ConfigSource",
    "EnvironmentConfigSource",
    "MappingConfigSource",
    "SettingsConfigSource",
    "format_expiry_date",
    "now_ms",
    "parse_expiry_date",
    "get_app_data_path",
    "setup_logging",
]
