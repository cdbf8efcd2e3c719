"""Adapters connecting SteamID to external serialization frameworks.

The pydantic adapter is picked up automatically through
SteamID.__get_pydantic_core_schema__; import it directly only to build a schema
with explicit settings.
"""

from steamid.adapters.pydantic import steamid_core_schema, validate_steamid

__all__ = [
    "steamid_core_schema",
    "validate_steamid",
]
