"""Pydantic glue for SteamID fields.

Validation accepts a SteamID, a SteamID64 integer, or any string understood by
SteamID.parse. Serialization emits the integer SteamID64 (or its decimal
string, see SteamIDSettings.serialize_as).

Usage:
    from pydantic import BaseModel

    class Player(BaseModel):
        steamid: SteamID

    Player(steamid="[U:1:22202]").model_dump_json()  # '{"steamid":76561197960287930}'
"""

from __future__ import annotations

from typing import Any

try:
    from pydantic_core import core_schema
except ImportError as e:
    raise ImportError(
        "pydantic is required for the pydantic adapter. Install with: pip install pydantic"
    ) from e

from steamid.config import SteamIDSettings
from steamid.core.identity import SteamID


def validate_steamid(value: Any) -> SteamID:
    """Coerce an integer or string into a SteamID.

    Raises:
        ValueError: If value is of an unsupported type or does not decode.
            MalformedIdentifierError is a ValueError, so pydantic reports it as
            a ValidationError.
    """
    if isinstance(value, SteamID):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return SteamID.from_raw(value)
    if isinstance(value, str):
        return SteamID.parse(value)
    raise ValueError(f"Expected a SteamID integer or string, got {type(value).__name__}")


def _serialize_int(steamid: SteamID) -> int:
    return steamid.value


def _serialize_str(steamid: SteamID) -> str:
    return str(steamid.value)


def steamid_core_schema(settings: SteamIDSettings | None = None) -> core_schema.CoreSchema:
    """Build the pydantic-core schema for SteamID.

    Args:
        settings: Settings controlling serialization; loaded from the
            environment when omitted.

    Returns:
        A plain validator schema with a matching serializer.
    """
    settings = settings or SteamIDSettings()
    serializer = _serialize_str if settings.serialize_as == "str" else _serialize_int
    return core_schema.no_info_plain_validator_function(
        validate_steamid,
        serialization=core_schema.plain_serializer_function_ser_schema(serializer),
    )
