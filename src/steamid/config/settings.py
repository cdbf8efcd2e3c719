"""Configuration settings using Pydantic Settings.

Usage:
    from steamid.config import SteamIDSettings

    # Load from environment variables (STEAMID_*)
    settings = SteamIDSettings()

    # Or override with explicit values
    settings = SteamIDSettings(serialize_as="str")
"""

from __future__ import annotations

from typing import Literal

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install steamid-ng"
    ) from e

from steamid.core.fields import Universe


class SteamIDSettings(BaseSettings):  # type: ignore[misc]
    """Library-wide defaults.

    Attributes:
        default_universe: Universe used by SteamID.individual when none is given.
        serialize_as: How the pydantic adapter serializes a SteamID, as the
            integer SteamID64 or as its decimal string (for JSON consumers
            limited to 53-bit integers).

    Environment Variables:
        STEAMID_DEFAULT_UNIVERSE
        STEAMID_SERIALIZE_AS
    """

    model_config = SettingsConfigDict(
        env_prefix="STEAMID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_universe: Universe = Universe.PUBLIC
    serialize_as: Literal["int", "str"] = "int"
