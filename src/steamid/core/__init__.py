"""Core primitives: field enumerations, bit layout and the SteamID value.

Architecture Note:
    core/ is pure and stateless. fields/ and layout/ know nothing about text;
    the steam2/steam3 grammars live in steamid.formats.
"""

from steamid.core.errors import MalformedIdentifierError
from steamid.core.fields import (
    AccountType,
    Instance,
    InstanceFlags,
    InstanceType,
    Universe,
)
from steamid.core import layout
from steamid.core.identity import SteamID

__all__ = [
    "AccountType",
    "Instance",
    "InstanceFlags",
    "InstanceType",
    "MalformedIdentifierError",
    "SteamID",
    "Universe",
    "layout",
]
