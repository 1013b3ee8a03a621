"""
Immutable build configuration for BuildConfig.

This module defines the `BuildConfig` dataclass, the read-only result of loading the
build metadata. It answers "has this build expired?" for an explicitly supplied point
in time and provides helpers that choose a value or run a callable depending on the answer.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, TypeVar

from .build_types import BuildType, SoftwareType
from .errors import ExpiredError
from buildconfig import constants

T = TypeVar("T")


@dataclass(frozen=True)
class BuildConfig:
    """
    Build metadata fixed at startup.

    Attributes:
        software_type: Release maturity tier of the build.
        build_type: Pipeline that produced the build.
        expiry_date_text: The expiry date exactly as it appeared in the source.
        expiry_timestamp: Expiry in epoch milliseconds, or
            `constants.config.defaults.NEVER_EXPIRES_MS` if the build never expires.
    """
    software_type: SoftwareType
    build_type: BuildType
    expiry_date_text: str
    expiry_timestamp: int

    @property
    def never_expires(self) -> bool:
        return self.expiry_timestamp >= constants.config.defaults.NEVER_EXPIRES_MS

    @property
    def expires_at(self) -> Optional[datetime]:
        """The expiry instant in UTC, or None if the build never expires."""
        if self.never_expires:
            return None
        return datetime.fromtimestamp(self.expiry_timestamp / 1000, tz=timezone.utc)

    @property
    def flags(self) -> int:
        """The software type and build type flags combined into one mask."""
        return self.software_type.flag | self.build_type.flag

    def matches(self, mask: int) -> bool:
        """Returns True if the software type or the build type is selected by `mask`."""
        return bool(self.flags & mask)

    def is_expired(self, now: int) -> bool:
        """Returns True if `now` (epoch milliseconds) is past the expiry timestamp."""
        return now > self.expiry_timestamp

    def check_expired(self, now: int) -> None:
        """
        Raises ExpiredError if the build has expired at `now`, otherwise does nothing.
        """
        if self.is_expired(now):
            raise ExpiredError(f"Build expired on {self.expiry_date_text}")

    def select_by_expiry(self, now: int, valid_value: T, expired_value: T) -> T:
        """Returns `expired_value` if the build has expired at `now`, else `valid_value`."""
        return expired_value if self.is_expired(now) else valid_value

    def dispatch_by_expiry(self, now: int, on_valid: Callable[[], T], on_expired: Callable[[], T]) -> T:
        """
        Calls exactly one of two zero-argument callables and returns its result.

        `on_expired` runs if the build has expired at `now`, `on_valid` otherwise.
        Exceptions raised by the callable propagate unchanged.
        """
        if self.is_expired(now):
            return on_expired()
        return on_valid()

    def describe(self) -> str:
        expiry = "never" if self.never_expires else self.expiry_date_text
        return f"software_type={self.software_type.value}, build_type={self.build_type.value}, expiry={expiry}"
