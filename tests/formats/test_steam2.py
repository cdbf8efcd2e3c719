"""Tests for steam2 parsing and rendering.

Critical Invariants:
- Universe 0 is read as PUBLIC (pre-Orange Box clients)
- Account id is number << 1 | auth bit, never truncated
- Non-individual ids render as the decimal SteamID64
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from steamid import AccountType, Instance, InstanceType, MalformedIdentifierError, SteamID, Universe
from steamid.formats import steam2


def test_render():
    s = SteamID(76561197969249708)
    assert steam2.render(s) == "STEAM_1:0:4491990"

    s = s.with_universe(Universe.INVALID)
    assert s.steam2() == "STEAM_0:0:4491990"

    s = s.with_universe(Universe.BETA)
    assert s.steam2() == "STEAM_2:0:4491990"

    s = s.with_account_type(AccountType.GAME_SERVER)
    assert s.steam2() == "157625991261918636"


def test_parse_universe_zero_is_public():
    """CRITICAL: Legacy universe 0 parses as PUBLIC.

    Why: Games before the Orange Box printed 0 for public accounts.
    """
    s = steam2.parse("STEAM_0:0:4491990")

    assert s.account_id == 8983980
    assert s.instance == Instance(InstanceType.DESKTOP)
    assert s.account_type is AccountType.INDIVIDUAL
    assert s.universe is Universe.PUBLIC


def test_parse_combines_auth_bit():
    assert steam2.parse("STEAM_0:1:4491990").account_id == 8983981

    s = SteamID.from_steam2("STEAM_1:1:4491990")
    assert s.account_id == 8983981
    assert s.universe is Universe.PUBLIC
    assert s == SteamID(76561197969249709)


def test_parse_keeps_other_universes():
    assert steam2.parse("STEAM_4:0:1").universe is Universe.DEV


@pytest.mark.parametrize(
    "text",
    [
        "STEAM_bogus:bogus:bogus",
        "STEAM_5:0:1",
        "STEAM_1:2:1",
        "STEAM_1:0:",
        "STEAM_1:0:12345678901",
        "steam_1:0:1",
        "STEAM_1:0:1 ",
        "STEAM_1:0:1\n",
        " STEAM_1:0:1",
        "STEAM_1:0:-1",
        "STEAM_1:0:١٢",
        "",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(MalformedIdentifierError):
        steam2.parse(text)


def test_overflowing_account_number_fails_cleanly():
    """CRITICAL: Ten-digit numbers beyond 32 bits raise instead of wrapping."""
    with pytest.raises(MalformedIdentifierError, match="32 bits"):
        steam2.parse("STEAM_0:0:9999999999")


def test_shifted_account_id_must_fit():
    """number << 1 | auth must still fit in 32 bits."""
    assert steam2.parse("STEAM_1:1:2147483647").account_id == 0xFFFFFFFF
    with pytest.raises(MalformedIdentifierError):
        steam2.parse("STEAM_1:0:2147483648")


@given(
    account_id=st.integers(min_value=0, max_value=0xFFFFFFFF),
    universe=st.sampled_from([Universe.PUBLIC, Universe.BETA, Universe.INTERNAL, Universe.DEV]),
)
def test_round_trip_individual(account_id, universe):
    """PROPERTY: parse(render(id)) == id for desktop individuals."""
    s = SteamID.individual(account_id, universe)

    assert steam2.parse(steam2.render(s)) == s
