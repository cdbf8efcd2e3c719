"""Format-agnostic parsing: SteamID64 decimal, then steam2, then steam3."""

from __future__ import annotations

import logging
import re

from steamid.core.errors import MalformedIdentifierError
from steamid.core.identity import SteamID
from steamid.formats import steam2, steam3

logger = logging.getLogger("steamid.formats")

DECIMAL_RE = re.compile(r"[0-9]{1,20}")


def parse_decimal(text: str) -> SteamID:
    """Parse a decimal SteamID64 string.

    Raises:
        MalformedIdentifierError: If text is not 1-20 ASCII digits or the value
            is not a valid packed identifier.
    """
    if DECIMAL_RE.fullmatch(text) is None:
        raise MalformedIdentifierError(f"Not a decimal SteamID64: {text!r}")
    return SteamID.from_raw(int(text))


def parse(text: str) -> SteamID:
    """Parse text in any supported notation.

    Tries a decimal SteamID64, steam2 and steam3 in that order and returns the
    first success.

    Args:
        text: Identifier text.

    Returns:
        The parsed SteamID.

    Raises:
        MalformedIdentifierError: If no notation accepts text.
    """
    for name, parser in (
        ("decimal", parse_decimal),
        ("steam2", steam2.parse),
        ("steam3", steam3.parse),
    ):
        try:
            return parser(text)
        except MalformedIdentifierError as e:
            logger.debug("%s parse of %r failed: %s", name, text, e)
    raise MalformedIdentifierError(f"Invalid SteamID: {text!r}")
