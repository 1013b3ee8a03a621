"""
Constants for build configuration keys, parsing rules and log messages.
"""
from typing import Final, Tuple


class ConfigMessages:
    """Log message templates for build configuration loading."""
    LOADED: Final[str] = "Build configuration loaded: {summary}"
    INVALID_EXPIRY: Final[str] = "Invalid expiry date '{value}', build will never expire"
    MISSING_EXPIRY: Final[str] = "No expiry date configured, build will never expire"
    INVALID_TAG: Final[str] = "Invalid {key} '{value}'. Valid choices: {choices}"
    MISSING_TAG: Final[str] = "Missing {key}. Valid choices: {choices}"
    BLANK_TAG_DEFAULTED: Final[str] = "No {key} configured, using '{default}'"
    INVALID_POLICY: Final[str] = "Invalid {env_var} '{value}', using default policy '{default}'. Valid choices: {choices}"
    ALREADY_INITIALIZED: Final[str] = "Build configuration already initialized"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines resource keys, parsing rules and defaults for the build configuration."""
    # --- Resource keys supplied by the config source ---
    KEY_SOFTWARE_TYPE: Final[str] = "software_type"
    KEY_BUILD_TYPE: Final[str] = "build_type"
    KEY_EXPIRY: Final[str] = "expiry"
    RESOURCE_KEYS: Final[Tuple[str, ...]] = (KEY_SOFTWARE_TYPE, KEY_BUILD_TYPE, KEY_EXPIRY)

    # --- Expiry date parsing ---
    # Qt date pattern for the US English medium format, e.g. "Jul 1, 2012".
    EXPIRY_DATE_FORMAT: Final[str] = "MMM d, yyyy"
    EXPIRY_DATE_LOCALE: Final[str] = "en_US"
    # Largest signed 64-bit millisecond value.
    NEVER_EXPIRES_MS: Final[int] = 2**63 - 1

    # --- Policy and environment ---
    # Name of a ConfigPolicy member.
    DEFAULT_POLICY: Final[str] = "lenient"
    ENV_VAR_POLICY: Final[str] = "BUILDCONFIG_POLICY"
    ENV_VAR_PREFIX: Final[str] = "BUILDCONFIG_"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if len(set(self.RESOURCE_KEYS)) != len(self.RESOURCE_KEYS):
            raise ValueError("RESOURCE_KEYS must be unique")
        if not all(self.RESOURCE_KEYS):
            raise ValueError("RESOURCE_KEYS must not contain empty keys")
        if not self.EXPIRY_DATE_FORMAT or not self.EXPIRY_DATE_LOCALE:
            raise ValueError("EXPIRY_DATE_FORMAT and EXPIRY_DATE_LOCALE must not be empty")
        if self.NEVER_EXPIRES_MS <= 0:
            raise ValueError("NEVER_EXPIRES_MS must be positive")
        from buildconfig.core.build_types import ConfigPolicy
        try:
            ConfigPolicy.from_name(self.DEFAULT_POLICY)
        except ValueError as e:
            raise ValueError(f"DEFAULT_POLICY must name a ConfigPolicy: {e}") from e
        if not self.ENV_VAR_PREFIX.endswith("_"):
            raise ValueError("ENV_VAR_PREFIX must end with an underscore")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
