"""
Build configuration loading for BuildConfig.

This module provides the BuildConfigLoader, which turns the three raw strings of a
config source into an immutable BuildConfig under a single, explicit error policy,
and a process-wide registry for hosts that cannot pass the BuildConfig around.

Prefer passing the BuildConfig returned by `initialize` to the code that needs it.
`current()` exists for call sites that have no other way to reach it.
"""

import os
import logging
import threading
from typing import Optional, Type

from buildconfig import constants
from buildconfig.core.build_config import BuildConfig
from buildconfig.core.build_types import BuildType, ConfigPolicy, SoftwareType, TagT
from buildconfig.core.errors import AlreadyInitializedError, InvalidConfigurationError
from .config_source import ConfigSource
from .dates import parse_expiry_date


def resolve_policy(policy: Optional[ConfigPolicy] = None) -> ConfigPolicy:
    """
    Returns the policy to load with: the explicit argument, else the
    BUILDCONFIG_POLICY environment variable, else the default policy.
    """
    if policy is not None:
        return policy
    defaults = constants.config.defaults
    default_policy = ConfigPolicy.from_name(defaults.DEFAULT_POLICY)
    env_value = os.environ.get(defaults.ENV_VAR_POLICY)
    if not env_value:
        return default_policy
    try:
        return ConfigPolicy.from_name(env_value)
    except ValueError:
        logging.getLogger(f"{constants.app.APP_NAME}.Config").warning(
            constants.config.messages.INVALID_POLICY.format(
                env_var=defaults.ENV_VAR_POLICY, value=env_value,
                default=default_policy.value, choices=[p.value for p in ConfigPolicy]))
        return default_policy


class BuildConfigLoader:
    """
    Loads and validates the build configuration from a config source.
    """

    def __init__(self, policy: Optional[ConfigPolicy] = None) -> None:
        self.policy = resolve_policy(policy)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.Config")

    def _parse_tag(self, enum_cls: Type[TagT], key: str, raw: Optional[str]) -> TagT:
        """Parses a type tag and logs when a blank tag falls back to UNKNOWN."""
        member = enum_cls.from_tag(raw, self.policy, key=key)
        if member is enum_cls.UNKNOWN and (raw is None or not raw.strip()):
            self.logger.info(constants.config.messages.BLANK_TAG_DEFAULTED.format(key=key, default=member.value))
        return member

    def _parse_expiry(self, raw: Optional[str]) -> int:
        """
        Parses the expiry date into epoch milliseconds.

        Under the lenient policy a missing or malformed date is logged and the build
        never expires. Under the strict policy it raises InvalidConfigurationError.
        """
        try:
            return parse_expiry_date(raw)
        except ValueError as e:
            if self.policy is ConfigPolicy.STRICT:
                raise InvalidConfigurationError(f"Expiry date invalid: '{raw}'") from e
            if raw is None or not raw.strip():
                self.logger.warning(constants.config.messages.MISSING_EXPIRY)
            else:
                self.logger.warning(constants.config.messages.INVALID_EXPIRY.format(value=raw))
            return constants.config.defaults.NEVER_EXPIRES_MS

    def load(self, source: ConfigSource) -> BuildConfig:
        """Reads the three resource keys from `source` and builds the BuildConfig."""
        defaults = constants.config.defaults
        raw_expiry = source.get_string(defaults.KEY_EXPIRY)

        build_config = BuildConfig(
            software_type=self._parse_tag(SoftwareType, defaults.KEY_SOFTWARE_TYPE,
                                          source.get_string(defaults.KEY_SOFTWARE_TYPE)),
            build_type=self._parse_tag(BuildType, defaults.KEY_BUILD_TYPE,
                                       source.get_string(defaults.KEY_BUILD_TYPE)),
            expiry_date_text=raw_expiry or "",
            expiry_timestamp=self._parse_expiry(raw_expiry),
        )
        self.logger.info(constants.config.messages.LOADED.format(summary=build_config.describe()))
        return build_config


# --- Process-wide registry ---

_instance_lock: threading.Lock = threading.Lock()
_instance: Optional[BuildConfig] = None


def initialize(source: ConfigSource, policy: Optional[ConfigPolicy] = None) -> BuildConfig:
    """
    Loads the build configuration and stores it for the rest of the process.

    Raises:
        AlreadyInitializedError: If a configuration is already stored.
        InvalidConfigurationError: If the source holds invalid values. Nothing is
            stored in that case.
    """
    global _instance
    with _instance_lock:
        if _instance is not None:
            raise AlreadyInitializedError(constants.config.messages.ALREADY_INITIALIZED)
        _instance = BuildConfigLoader(policy).load(source)
        return _instance


def current() -> Optional[BuildConfig]:
    """Returns the stored build configuration, or None if `initialize` has not succeeded."""
    return _instance


def reset() -> None:
    """Clears the stored build configuration. Intended for tests."""
    global _instance
    with _instance_lock:
        _instance = None
