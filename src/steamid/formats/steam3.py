"""steam3 notation: ``[<type char>:<universe>:<account id>(:<instance>)?]``.

The type character encodes the account type and, for chat ids, the instance
flag. The optional trailing number is the instance type.
"""

from __future__ import annotations

import re

from steamid.core.errors import MalformedIdentifierError
from steamid.core.fields import AccountType, Instance, InstanceFlags, InstanceType, Universe
from steamid.core.identity import SteamID
from steamid.formats.numeric import parse_u32

# Universe 5 (RC) is a valid Universe but not part of the one-digit grammar.
STEAM3_RE = re.compile(r"\[(.):([0-4]):([0-9]{1,10})(?::([0-9]{1,10}))?\]", re.DOTALL)

TYPE_CHARS: dict[str, tuple[AccountType, InstanceFlags]] = {
    "I": (AccountType.INVALID, InstanceFlags.NONE),
    "i": (AccountType.INVALID, InstanceFlags.NONE),
    "U": (AccountType.INDIVIDUAL, InstanceFlags.NONE),
    "M": (AccountType.MULTISEAT, InstanceFlags.NONE),
    "G": (AccountType.GAME_SERVER, InstanceFlags.NONE),
    "A": (AccountType.ANON_GAME_SERVER, InstanceFlags.NONE),
    "P": (AccountType.PENDING, InstanceFlags.NONE),
    "C": (AccountType.CONTENT_SERVER, InstanceFlags.NONE),
    "g": (AccountType.CLAN, InstanceFlags.NONE),
    "T": (AccountType.CHAT, InstanceFlags.NONE),
    "c": (AccountType.CHAT, InstanceFlags.CLAN),
    "L": (AccountType.CHAT, InstanceFlags.LOBBY),
    "a": (AccountType.ANON_USER, InstanceFlags.NONE),
}

ACCOUNT_TYPE_CHARS: dict[AccountType, str] = {
    AccountType.INVALID: "I",
    AccountType.INDIVIDUAL: "U",
    AccountType.MULTISEAT: "M",
    AccountType.GAME_SERVER: "G",
    AccountType.ANON_GAME_SERVER: "A",
    AccountType.PENDING: "P",
    AccountType.CONTENT_SERVER: "C",
    AccountType.CLAN: "g",
    AccountType.CHAT: "T",
    AccountType.CONSOLE_USER: "i",
    AccountType.ANON_USER: "a",
}

CHAT_FLAG_CHARS: dict[InstanceFlags, str] = {
    InstanceFlags.CLAN: "c",
    InstanceFlags.LOBBY: "L",
}

# Clan and chat ids carry no meaningful instance type.
_FORCED_ALL_TYPES = frozenset({AccountType.CLAN, AccountType.CHAT})
_ALWAYS_RENDER_INSTANCE = frozenset({AccountType.ANON_GAME_SERVER, AccountType.MULTISEAT})


def char_to_account_type(char: str) -> tuple[AccountType, InstanceFlags]:
    """Map a steam3 type character to its account type and instance flag.

    Raises:
        MalformedIdentifierError: If char is not a known type character.
    """
    try:
        return TYPE_CHARS[char]
    except KeyError:
        raise MalformedIdentifierError(f"Unknown steam3 type character {char!r}") from None


def account_type_to_char(
    account_type: AccountType, flags: InstanceFlags = InstanceFlags.NONE
) -> str:
    """Map an account type (and chat flag) to its steam3 type character."""
    if account_type is AccountType.CHAT:
        return CHAT_FLAG_CHARS.get(flags, "T")
    return ACCOUNT_TYPE_CHARS[account_type]


def _resolve_instance_type(account_type: AccountType, suffix: str | None) -> InstanceType:
    if suffix is None:
        if account_type is AccountType.INDIVIDUAL:
            return InstanceType.DESKTOP
        return InstanceType.ALL

    instance_type = InstanceType.from_value(parse_u32(suffix, "Instance"))
    if account_type in _FORCED_ALL_TYPES:
        return InstanceType.ALL
    return instance_type


def parse(text: str) -> SteamID:
    """Parse steam3 text.

    Args:
        text: e.g. "[U:1:123]", "[A:1:123:4]" or "[L:2:123]".

    Returns:
        The parsed SteamID. Without an instance suffix, individuals default to
        DESKTOP and everything else to ALL; clan and chat ids are always ALL.

    Raises:
        MalformedIdentifierError: If text does not match the grammar, a number
            overflows 32 bits, or the instance suffix is not a known type.
    """
    match = STEAM3_RE.fullmatch(text)
    if match is None:
        raise MalformedIdentifierError(f"Not a steam3 id: {text!r}")

    type_char, universe_digit, account_digits, suffix = match.groups()
    account_type, flags = char_to_account_type(type_char)
    universe = Universe.from_value(int(universe_digit))
    account_id = parse_u32(account_digits, "Account id")
    instance_type = _resolve_instance_type(account_type, suffix)

    return SteamID.new(account_id, Instance(instance_type, flags), account_type, universe)


def render(steamid: SteamID) -> str:
    """Render as steam3, appending the instance type where it is significant."""
    instance = steamid.instance
    account_type = steamid.account_type
    type_char = account_type_to_char(account_type, instance.flags)

    if account_type in _ALWAYS_RENDER_INSTANCE:
        render_instance = True
    elif account_type is AccountType.INDIVIDUAL:
        render_instance = instance.type is not InstanceType.DESKTOP
    else:
        render_instance = False

    rendered = f"[{type_char}:{int(steamid.universe)}:{steamid.account_id}"
    if render_instance:
        rendered += f":{int(instance.type)}"
    return rendered + "]"
