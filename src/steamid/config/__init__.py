"""Configuration module using Pydantic Settings.

Usage:
    from steamid.config import SteamIDSettings

    settings = SteamIDSettings(default_universe=Universe.BETA)
"""

from steamid.config.settings import SteamIDSettings

__all__ = [
    "SteamIDSettings",
]
