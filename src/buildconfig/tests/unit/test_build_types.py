"""
Unit tests for the SoftwareType and BuildType tag parsing.
"""
import pytest

from buildconfig import constants
from buildconfig.core.build_types import BuildType, ConfigPolicy, SoftwareType
from buildconfig.core.errors import InvalidConfigurationError


@pytest.mark.parametrize("policy", list(ConfigPolicy))
@pytest.mark.parametrize("member", list(SoftwareType) + list(BuildType))
def test_every_member_name_parses_to_its_member(member, policy):
    assert type(member).from_tag(member.value, policy) is member


@pytest.mark.parametrize("raw", ["release", "RELEASE", "Release ", "Beta", "PRE_RELEASE"])
@pytest.mark.parametrize("policy", list(ConfigPolicy))
def test_non_matching_tag_fails_under_both_policies(raw, policy):
    with pytest.raises(InvalidConfigurationError):
        SoftwareType.from_tag(raw, policy)


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_tag_is_unknown_when_lenient(raw):
    assert SoftwareType.from_tag(raw, ConfigPolicy.LENIENT) is SoftwareType.UNKNOWN
    assert BuildType.from_tag(raw, ConfigPolicy.LENIENT) is BuildType.UNKNOWN


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_tag_fails_when_strict(raw):
    with pytest.raises(InvalidConfigurationError, match="Missing build_type"):
        BuildType.from_tag(raw, ConfigPolicy.STRICT, key="build_type")


def test_error_message_lists_valid_choices():
    with pytest.raises(InvalidConfigurationError) as exc_info:
        BuildType.from_tag("Jenkins", ConfigPolicy.STRICT, key="build_type")
    message = str(exc_info.value)
    assert "Jenkins" in message
    assert "Gerrit" in message


def test_flags_are_distinct_single_bits():
    known = [m for m in list(SoftwareType) + list(BuildType) if m.value != "Unknown"]
    flags = [m.flag for m in known]
    assert len(set(flags)) == len(flags)
    assert all(flag > 0 and flag & (flag - 1) == 0 for flag in flags)
    assert SoftwareType.DEVELOPMENT.flag == 0x1
    assert BuildType.MASTER.flag == 0x200


def test_unknown_has_no_flag():
    assert SoftwareType.UNKNOWN.flag == 0
    assert BuildType.UNKNOWN.flag == 0


@pytest.mark.parametrize("name, expected", [
    ("strict", ConfigPolicy.STRICT),
    ("LENIENT", ConfigPolicy.LENIENT),
    (" Strict ", ConfigPolicy.STRICT),
])
def test_policy_from_name(name, expected):
    assert ConfigPolicy.from_name(name) is expected


def test_policy_from_unknown_name_raises():
    with pytest.raises(ValueError):
        ConfigPolicy.from_name("forgiving")


def test_tag_errors_use_message_templates():
    messages = constants.config.messages
    with pytest.raises(InvalidConfigurationError) as invalid_info:
        SoftwareType.from_tag("Beta", ConfigPolicy.STRICT, key="software_type")
    assert str(invalid_info.value) == messages.INVALID_TAG.format(
        key="software_type", value="Beta", choices=SoftwareType.tags())

    with pytest.raises(InvalidConfigurationError) as missing_info:
        SoftwareType.from_tag(" ", ConfigPolicy.STRICT, key="software_type")
    assert str(missing_info.value) == messages.MISSING_TAG.format(
        key="software_type", choices=SoftwareType.tags())
