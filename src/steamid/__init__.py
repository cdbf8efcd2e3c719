"""steamid: a validated 64-bit SteamID type with steam2/steam3 codecs.

Usage:
    from steamid import AccountType, Instance, InstanceType, SteamID, Universe

    x = SteamID(76561197960287930)
    y = SteamID.from_steam3("[U:1:22202]")
    z = SteamID.from_steam2("STEAM_1:0:11101")
    assert x == y == z

    assert x.account_id == 22202
    assert x.instance == Instance(InstanceType.DESKTOP)
    assert x.account_type is AccountType.INDIVIDUAL
    assert x.universe is Universe.PUBLIC

    SteamID.parse("STEAM_0:0:4491990")  # decimal, steam2 or steam3
"""

__version__ = "0.1.0"

from steamid.core import (
    AccountType,
    Instance,
    InstanceFlags,
    InstanceType,
    MalformedIdentifierError,
    SteamID,
    Universe,
)
from steamid.formats import account_type_to_char, char_to_account_type, parse

__all__ = [
    # Version
    "__version__",
    # Core
    "SteamID",
    "AccountType",
    "Instance",
    "InstanceFlags",
    "InstanceType",
    "Universe",
    "MalformedIdentifierError",
    # Formats
    "parse",
    "account_type_to_char",
    "char_to_account_type",
]
