"""SteamID value type."""

from steamid.core.identity.models import SteamID

__all__ = [
    "SteamID",
]
