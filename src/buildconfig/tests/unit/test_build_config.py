"""
Unit tests for BuildConfig expiry checks and dispatch helpers.
"""
import dataclasses
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from buildconfig import constants
from buildconfig.core.build_config import BuildConfig
from buildconfig.core.build_types import BuildType, SoftwareType
from buildconfig.core.errors import ExpiredError
from buildconfig.utils.dates import parse_expiry_date

JUN_1 = parse_expiry_date("Jun 1, 2012")
JUL_1 = parse_expiry_date("Jul 1, 2012")
AUG_1 = parse_expiry_date("Aug 1, 2012")


@pytest.fixture
def release_config() -> BuildConfig:
    return BuildConfig(
        software_type=SoftwareType.RELEASE,
        build_type=BuildType.MASTER,
        expiry_date_text="Jul 1, 2012",
        expiry_timestamp=JUL_1,
    )


@pytest.fixture
def never_expiring_config() -> BuildConfig:
    return BuildConfig(
        software_type=SoftwareType.TRIAL,
        build_type=BuildType.UNKNOWN,
        expiry_date_text="not-a-date",
        expiry_timestamp=constants.config.defaults.NEVER_EXPIRES_MS,
    )


def test_is_expired_around_expiry(release_config):
    assert release_config.is_expired(AUG_1)
    assert not release_config.is_expired(JUN_1)
    assert not release_config.is_expired(JUL_1)
    assert release_config.is_expired(JUL_1 + 1)


def test_is_expired_is_monotonic(release_config):
    step = 6 * 60 * 60 * 1000
    results = [release_config.is_expired(now) for now in range(JUN_1, AUG_1, step)]
    first_expired = results.index(True)
    assert all(results[first_expired:])
    assert not any(results[:first_expired])


def test_never_expiring_config(never_expiring_config):
    assert never_expiring_config.never_expires
    assert never_expiring_config.expires_at is None
    far_future = int(datetime(9999, 12, 31, tzinfo=timezone.utc).timestamp() * 1000)
    assert not never_expiring_config.is_expired(far_future)


def test_expires_at(release_config):
    assert not release_config.never_expires
    assert release_config.expires_at == datetime(2012, 7, 1, tzinfo=timezone.utc)


def test_check_expired_raises_only_when_expired(release_config):
    assert release_config.check_expired(JUN_1) is None
    with pytest.raises(ExpiredError, match="Jul 1, 2012"):
        release_config.check_expired(AUG_1)


def test_select_by_expiry(release_config):
    assert release_config.select_by_expiry(JUN_1, "valid", "expired") == "valid"
    assert release_config.select_by_expiry(AUG_1, "valid", "expired") == "expired"


@pytest.mark.parametrize("now, expected_branch", [(JUN_1, "valid"), (JUL_1, "valid"), (AUG_1, "expired")])
def test_dispatch_invokes_exactly_one_action(release_config, now, expected_branch):
    on_valid = Mock(return_value=None)
    on_expired = Mock(return_value=None)

    release_config.dispatch_by_expiry(now, on_valid, on_expired)

    called = on_expired if expected_branch == "expired" else on_valid
    not_called = on_valid if expected_branch == "expired" else on_expired
    called.assert_called_once_with()
    not_called.assert_not_called()


def test_dispatch_returns_producer_result(release_config):
    assert release_config.dispatch_by_expiry(JUN_1, lambda: 1, lambda: 2) == 1
    assert release_config.dispatch_by_expiry(AUG_1, lambda: 1, lambda: 2) == 2


def test_dispatch_propagates_action_errors_unchanged(release_config):
    error = RuntimeError("boom")
    on_valid = Mock()
    on_expired = Mock(side_effect=error)

    with pytest.raises(RuntimeError) as exc_info:
        release_config.dispatch_by_expiry(AUG_1, on_valid, on_expired)

    assert exc_info.value is error
    on_expired.assert_called_once_with()
    on_valid.assert_not_called()


def test_flags_and_matches(release_config):
    assert release_config.flags == SoftwareType.RELEASE.flag | BuildType.MASTER.flag
    assert release_config.matches(SoftwareType.RELEASE.flag)
    assert release_config.matches(SoftwareType.TRIAL.flag | BuildType.MASTER.flag)
    assert not release_config.matches(SoftwareType.TRIAL.flag | SoftwareType.PRE_RELEASE.flag)


def test_describe(release_config, never_expiring_config):
    assert release_config.describe() == "software_type=Release, build_type=Master, expiry=Jul 1, 2012"
    assert never_expiring_config.describe().endswith("expiry=never")


def test_build_config_is_immutable(release_config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        release_config.expiry_timestamp = AUG_1
