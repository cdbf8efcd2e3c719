"""steam2 notation: ``STEAM_<universe>:<auth bit>:<account number>``.

The account id is ``number << 1 | auth``. Only individual (and invalid)
accounts have a steam2 form; everything else renders as the decimal SteamID64.
"""

from __future__ import annotations

import re

from steamid.core.errors import MalformedIdentifierError
from steamid.core.fields import AccountType, Instance, InstanceType, Universe
from steamid.core.identity import SteamID
from steamid.formats.numeric import U32_MAX, parse_u32

STEAM2_RE = re.compile(r"STEAM_([0-4]):([01]):([0-9]{1,10})")


def parse(text: str) -> SteamID:
    """Parse steam2 text into an individual desktop SteamID.

    Args:
        text: e.g. "STEAM_0:1:4491990".

    Returns:
        The parsed SteamID.

    Raises:
        MalformedIdentifierError: If text does not match the grammar or the
            account id does not fit in 32 bits.
    """
    match = STEAM2_RE.fullmatch(text)
    if match is None:
        raise MalformedIdentifierError(f"Not a steam2 id: {text!r}")

    universe = Universe.from_value(int(match.group(1)))
    # Clients before the Orange Box wrote universe 0 for public accounts.
    if universe is Universe.INVALID:
        universe = Universe.PUBLIC

    auth = int(match.group(2))
    number = parse_u32(match.group(3), "Account number")
    account_id = (number << 1) | auth
    if account_id > U32_MAX:
        raise MalformedIdentifierError(f"Account number {number} does not fit in 31 bits")

    return SteamID.new(account_id, Instance(InstanceType.DESKTOP), AccountType.INDIVIDUAL, universe)


def render(steamid: SteamID) -> str:
    """Render as steam2, falling back to the decimal value for non-individuals."""
    if steamid.account_type not in (AccountType.INDIVIDUAL, AccountType.INVALID):
        return str(steamid.value)
    account_id = steamid.account_id
    return f"STEAM_{int(steamid.universe)}:{account_id & 1}:{account_id >> 1}"
