"""Tests for field enumerations and Instance.

Critical Invariants:
- Out-of-range numerals raise instead of mapping to INVALID
- Instance packs type into the low 12 bits and flags into the high 8
- At most one instance flag can be set
"""

import pytest

from steamid import (
    AccountType,
    Instance,
    InstanceFlags,
    InstanceType,
    MalformedIdentifierError,
    Universe,
)


@pytest.mark.parametrize(
    ("enum_cls", "value"),
    [
        (AccountType, 11),
        (AccountType, 15),
        (Universe, 6),
        (Universe, 255),
        (InstanceType, 3),
        (InstanceFlags, 0xC0),
        (InstanceFlags, 0x10),
    ],
)
def test_from_value_rejects_unknown_numerals(enum_cls, value):
    """CRITICAL: Unknown numerals are errors, never a silent INVALID member.

    Why: Defaulting hides corrupt input behind a valid-looking identifier.
    """
    with pytest.raises(MalformedIdentifierError, match=enum_cls.__name__):
        enum_cls.from_value(value)


def test_malformed_identifier_error_is_value_error():
    """Validators in other frameworks rely on ValueError semantics."""
    assert issubclass(MalformedIdentifierError, ValueError)


def test_from_value_returns_members():
    assert AccountType.from_value(10) is AccountType.ANON_USER
    assert Universe.from_value(5) is Universe.RC
    assert InstanceType.from_value(4) is InstanceType.WEB
    assert InstanceFlags.from_value(0x20) is InstanceFlags.MMS_LOBBY


def test_instance_value_layout():
    """Type occupies bits 0-11, flags bits 12-19."""
    assert Instance().value == 0
    assert Instance(InstanceType.DESKTOP).value == 1
    assert Instance(InstanceType.ALL, InstanceFlags.CLAN).value == 0x80000
    assert Instance(InstanceType.ALL, InstanceFlags.LOBBY).value == 0x40000
    assert Instance(InstanceType.WEB, InstanceFlags.MMS_LOBBY).value == 0x20004


def test_instance_from_value_round_trip():
    for instance_type in InstanceType:
        for flags in InstanceFlags:
            instance = Instance(instance_type, flags)
            assert Instance.from_value(instance.value) == instance


@pytest.mark.parametrize("value", [3, 0xC0000, 0x100000, -1, 0x00005])
def test_instance_from_value_rejects_illegal_patterns(value):
    with pytest.raises(MalformedIdentifierError):
        Instance.from_value(value)


def test_instance_coerces_and_validates_plain_ints():
    assert Instance(2, 0x40) == Instance(InstanceType.CONSOLE, InstanceFlags.LOBBY)
    with pytest.raises(MalformedIdentifierError):
        Instance(3)


def test_instance_str():
    assert str(Instance(InstanceType.WEB)) == "WEB"
    assert str(Instance(InstanceType.ALL, InstanceFlags.LOBBY)) == "ALL|LOBBY"
