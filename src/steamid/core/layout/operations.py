"""Pure functions packing SteamID fields into a 64-bit word.

Layout (bit 0 is the least significant bit):

    bits  0-31  account id
    bits 32-51  instance (type in 32-43, flags in 44-51)
    bits 52-55  account type
    bits 56-63  universe

Raw integers are validated once, in `from_raw`. Every other function takes
typed fields, so the words it returns are valid by construction.
"""

from __future__ import annotations

from steamid.core.errors import MalformedIdentifierError
from steamid.core.fields import AccountType, Instance, Universe

ACCOUNT_ID_SHIFT = 0
INSTANCE_SHIFT = 32
ACCOUNT_TYPE_SHIFT = 52
UNIVERSE_SHIFT = 56

ACCOUNT_ID_MASK = 0xFFFFFFFF
INSTANCE_MASK = 0xFFFFF
ACCOUNT_TYPE_MASK = 0xF
UNIVERSE_MASK = 0xFF

MAX_ACCOUNT_ID = ACCOUNT_ID_MASK
MAX_RAW = 0xFFFFFFFFFFFFFFFF


def _check_account_id(account_id: int) -> int:
    if not 0 <= account_id <= MAX_ACCOUNT_ID:
        raise MalformedIdentifierError(f"Account id {account_id!r} does not fit in 32 bits")
    return account_id


def _replace(value: int, mask: int, shift: int, field: int) -> int:
    return (value & ~(mask << shift) & MAX_RAW) | (field << shift)


# Packing


def pack(
    account_id: int,
    instance: Instance,
    account_type: AccountType,
    universe: Universe,
) -> int:
    """Pack typed fields into a 64-bit word.

    Args:
        account_id: Account number, 0 to 2**32 - 1.
        instance: Instance descriptor.
        account_type: Account kind.
        universe: Deployment realm.

    Returns:
        The packed identifier.

    Raises:
        MalformedIdentifierError: If account_id does not fit in 32 bits.
    """
    return (
        (_check_account_id(account_id) << ACCOUNT_ID_SHIFT)
        | (instance.value << INSTANCE_SHIFT)
        | (AccountType.from_value(account_type) << ACCOUNT_TYPE_SHIFT)
        | (Universe.from_value(universe) << UNIVERSE_SHIFT)
    )


def from_raw(value: int) -> int:
    """Validate a raw 64-bit word.

    Args:
        value: Candidate packed identifier.

    Returns:
        The same word, once every field decodes to a known value.

    Raises:
        MalformedIdentifierError: If value is not an unsigned 64-bit integer or
            any field holds an unknown bit pattern.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedIdentifierError(f"Expected an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_RAW:
        raise MalformedIdentifierError(f"{value!r} does not fit in 64 unsigned bits")
    unpack_instance(value)
    unpack_account_type(value)
    unpack_universe(value)
    return value


# Unpacking


def unpack_account_id(value: int) -> int:
    return (value >> ACCOUNT_ID_SHIFT) & ACCOUNT_ID_MASK


def unpack_instance(value: int) -> Instance:
    return Instance.from_value((value >> INSTANCE_SHIFT) & INSTANCE_MASK)


def unpack_account_type(value: int) -> AccountType:
    return AccountType.from_value((value >> ACCOUNT_TYPE_SHIFT) & ACCOUNT_TYPE_MASK)


def unpack_universe(value: int) -> Universe:
    return Universe.from_value((value >> UNIVERSE_SHIFT) & UNIVERSE_MASK)


def unpack_fields(value: int) -> tuple[int, Instance, AccountType, Universe]:
    """Split a packed word into (account_id, instance, account_type, universe)."""
    return (
        unpack_account_id(value),
        unpack_instance(value),
        unpack_account_type(value),
        unpack_universe(value),
    )


# Field replacement


def set_account_id(value: int, account_id: int) -> int:
    return _replace(value, ACCOUNT_ID_MASK, ACCOUNT_ID_SHIFT, _check_account_id(account_id))


def set_instance(value: int, instance: Instance) -> int:
    return _replace(value, INSTANCE_MASK, INSTANCE_SHIFT, instance.value)


def set_account_type(value: int, account_type: AccountType) -> int:
    return _replace(
        value, ACCOUNT_TYPE_MASK, ACCOUNT_TYPE_SHIFT, AccountType.from_value(account_type)
    )


def set_universe(value: int, universe: Universe) -> int:
    return _replace(value, UNIVERSE_MASK, UNIVERSE_SHIFT, Universe.from_value(universe))
