"""
Sources of raw build configuration strings.

A config source answers string lookups for the keys in
`constants.config.defaults.RESOURCE_KEYS`. The loader never cares where the values
come from: an in-memory mapping, environment variables, or an INI resource file
written by the packaging step.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union, runtime_checkable

from PyQt6.QtCore import QSettings

from buildconfig import constants
from buildconfig.core.errors import ConfigError


@runtime_checkable
class ConfigSource(Protocol):
    """Provides raw string values by key. Returns None for a key that is not present."""

    def get_string(self, key: str) -> Optional[str]:
        ...


class MappingConfigSource:
    """Config source backed by an in-memory mapping."""

    def __init__(self, values: Mapping[str, Optional[str]]) -> None:
        self._values = dict(values)

    def get_string(self, key: str) -> Optional[str]:
        return self._values.get(key)


class EnvironmentConfigSource:
    """
    Config source backed by environment variables.

    A key maps to the upper-cased variable name behind a prefix, so `software_type`
    is read from `BUILDCONFIG_SOFTWARE_TYPE` by default.
    """

    def __init__(self, prefix: str = constants.config.defaults.ENV_VAR_PREFIX) -> None:
        self.prefix = prefix

    def variable_name(self, key: str) -> str:
        return f"{self.prefix}{key.upper()}"

    def get_string(self, key: str) -> Optional[str]:
        return os.environ.get(self.variable_name(key))


class SettingsConfigSource:
    """
    Config source backed by an INI resource file, read through QSettings.

    Keys are looked up in the file's top-level (General) section.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.Source")
        if not self.path.is_file():
            raise ConfigError(f"Build configuration file not found: {self.path}")
        self._settings = QSettings(str(self.path), QSettings.Format.IniFormat)
        if self._settings.status() != QSettings.Status.NoError:
            raise ConfigError(f"Failed to read build configuration file {self.path}: {self._settings.status().name}")
        self.logger.debug("Reading build configuration from %s", self.path)

    def get_string(self, key: str) -> Optional[str]:
        if not self._settings.contains(key):
            return None
        value = self._settings.value(key)
        if value is None:
            return None
        # Unquoted INI values containing commas come back as string lists.
        if isinstance(value, (list, tuple)):
            return ", ".join(str(part).strip() for part in value)
        return str(value)
