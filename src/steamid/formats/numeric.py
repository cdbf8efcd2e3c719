"""Bounded decimal conversion shared by the text grammars."""

from __future__ import annotations

from steamid.core.errors import MalformedIdentifierError

U32_MAX = 0xFFFFFFFF


def parse_u32(digits: str, what: str) -> int:
    """Convert ASCII digits matched by a grammar to an unsigned 32-bit int.

    Args:
        digits: One to ten ASCII digits.
        what: Field name for the error message.

    Raises:
        MalformedIdentifierError: If the number exceeds 32 bits.
    """
    number = int(digits)
    if number > U32_MAX:
        raise MalformedIdentifierError(f"{what} {digits} does not fit in 32 bits")
    return number
