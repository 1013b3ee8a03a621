"""
Core submodule for BuildConfig.

Contains the build classification enums, the immutable BuildConfig and its errors.
"""

from buildconfig.core.build_config import BuildConfig
from buildconfig.core.build_types import BuildType, ConfigPolicy, SoftwareType
from buildconfig.core.errors import (
    AlreadyInitializedError,
    ConfigError,
    ExpiredError,
    InvalidConfigurationError,
)

__all__ = [
    "BuildConfig",
    "BuildType",
    "ConfigPolicy",
    "SoftwareType",
    "AlreadyInitializedError",
    "ConfigError",
    "ExpiredError",
    "InvalidConfigurationError",
]
