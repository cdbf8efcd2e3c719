"""Text notations for SteamIDs.

Usage:
    from steamid.formats import parse, steam2, steam3

    sid = steam3.parse("[U:1:123]")
    steam2.render(sid)  # "STEAM_1:1:61"
    parse("76561197960265851") == sid
"""

from steamid.formats import steam2, steam3
from steamid.formats.auto import parse, parse_decimal
from steamid.formats.steam3 import account_type_to_char, char_to_account_type

__all__ = [
    "account_type_to_char",
    "char_to_account_type",
    "parse",
    "parse_decimal",
    "steam2",
    "steam3",
]
