"""
Build classification enums for BuildConfig.

This module defines the `SoftwareType` and `BuildType` enumerations whose values are
the exact tag strings found in the configuration source, along with the `ConfigPolicy`
that decides how absent or malformed configuration is treated.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional, Type, TypeVar

from .errors import InvalidConfigurationError
from buildconfig import constants


class ConfigPolicy(Enum):
    """
    Error-handling policy for malformed configuration input.

    STRICT: a missing or blank tag and an unparseable expiry date fail initialization.
    LENIENT: a missing or blank tag becomes `Unknown`, an unparseable expiry date
    means the build never expires. A non-blank tag that matches no member fails
    under both policies.
    """
    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def from_name(cls, name: str) -> ConfigPolicy:
        """Looks up a policy by its name, case-insensitively. Raises ValueError if unknown."""
        normalized = name.strip().lower()
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(f"Unknown config policy '{name}'")


TagT = TypeVar("TagT", bound="TypeTag")


class TypeTag(Enum):
    """Shared tag parsing for the build classification enums."""

    @classmethod
    def tags(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_tag(cls: Type[TagT], raw: Optional[str], policy: ConfigPolicy, key: Optional[str] = None) -> TagT:
        """
        Parses a raw tag string into an enum member.

        Matching is exact and case-sensitive against the member values. Under the
        lenient policy an absent or blank tag yields `UNKNOWN`.

        Raises:
            InvalidConfigurationError: If the tag matches no member, or is absent or
                blank under the strict policy.
        """
        key = key or cls.__name__
        if raw is None or not raw.strip():
            if policy is ConfigPolicy.LENIENT:
                return cls.UNKNOWN
            raise InvalidConfigurationError(
                constants.config.messages.MISSING_TAG.format(key=key, choices=cls.tags()))
        try:
            return cls(raw)
        except ValueError:
            raise InvalidConfigurationError(
                constants.config.messages.INVALID_TAG.format(key=key, value=raw, choices=cls.tags())) from None


class SoftwareType(TypeTag):
    """Release maturity tier of the running build."""
    UNKNOWN = "Unknown"
    EXPERIMENTAL = "Experimental"
    DEVELOPMENT = "Development"
    TRIAL = "Trial"
    PRE_RELEASE = "PreRelease"
    RELEASE = "Release"

    @property
    def flag(self) -> int:
        return _FLAGS[self]


class BuildType(TypeTag):
    """Build pipeline that produced the binary."""
    UNKNOWN = "Unknown"
    ECLIPSE = "Eclipse"
    ANT = "Ant"
    GERRIT = "Gerrit"
    AUTO = "Auto"
    MASTER = "Master"

    @property
    def flag(self) -> int:
        return _FLAGS[self]


# One distinct bit per known member so a software type and a build type can be
# combined into a single mask. UNKNOWN never matches a mask.
_FLAGS: Dict[Enum, int] = {
    SoftwareType.UNKNOWN: 0,
    SoftwareType.DEVELOPMENT: 0x1,
    SoftwareType.EXPERIMENTAL: 0x1 << 1,
    SoftwareType.TRIAL: 0x1 << 2,
    SoftwareType.PRE_RELEASE: 0x1 << 3,
    SoftwareType.RELEASE: 0x1 << 4,
    BuildType.UNKNOWN: 0,
    BuildType.ECLIPSE: 0x1 << 5,
    BuildType.ANT: 0x1 << 6,
    BuildType.GERRIT: 0x1 << 7,
    BuildType.AUTO: 0x1 << 8,
    BuildType.MASTER: 0x1 << 9,
}
