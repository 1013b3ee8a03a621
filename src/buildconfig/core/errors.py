"""
Exceptions raised by the build configuration.
"""


class ConfigError(Exception):
    """Base exception for build configuration errors."""


class AlreadyInitializedError(ConfigError):
    """Raised when the process-wide build configuration is initialized twice."""


class InvalidConfigurationError(ConfigError):
    """Raised when a type tag or (under the strict policy) the expiry date cannot be parsed."""


class ExpiredError(ConfigError):
    """Raised by `BuildConfig.check_expired` once the build's expiry date has passed."""
