"""Bit-layout codec: pack, unpack and validate 64-bit SteamID words."""

from steamid.core.layout.operations import (
    MAX_ACCOUNT_ID,
    MAX_RAW,
    from_raw,
    pack,
    set_account_id,
    set_account_type,
    set_instance,
    set_universe,
    unpack_account_id,
    unpack_account_type,
    unpack_fields,
    unpack_instance,
    unpack_universe,
)

__all__ = [
    "MAX_ACCOUNT_ID",
    "MAX_RAW",
    "from_raw",
    "pack",
    "set_account_id",
    "set_account_type",
    "set_instance",
    "set_universe",
    "unpack_account_id",
    "unpack_account_type",
    "unpack_fields",
    "unpack_instance",
    "unpack_universe",
]
