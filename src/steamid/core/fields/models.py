"""Field enumerations and the composite Instance value.

Every enumeration is closed: building one from an out-of-range integer raises
instead of falling back to an INVALID member.

Usage:
    instance = Instance(InstanceType.DESKTOP)
    lobby = Instance(InstanceType.ALL, InstanceFlags.LOBBY)
    assert Instance.from_value(lobby.value) == lobby
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Self

from steamid.core.errors import MalformedIdentifierError


class _ClosedIntEnum(IntEnum):
    @classmethod
    def from_value(cls, value: int) -> Self:
        """Look up the member for value.

        Raises:
            MalformedIdentifierError: If value is not a member of the enumeration.
        """
        try:
            return cls(value)
        except ValueError:
            raise MalformedIdentifierError(f"{value!r} is not a valid {cls.__name__}") from None


class Universe(_ClosedIntEnum):
    """Deployment realm an identifier belongs to (8 bits)."""

    INVALID = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4
    RC = 5


class AccountType(_ClosedIntEnum):
    """Kind of entity an identifier names (4 bits, 11-15 unused)."""

    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAME_SERVER = 3
    ANON_GAME_SERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7
    CHAT = 8
    CONSOLE_USER = 9
    ANON_USER = 10


class InstanceType(_ClosedIntEnum):
    """Low 12 bits of the instance. 3 is not a legal value."""

    ALL = 0
    DESKTOP = 1
    CONSOLE = 2
    WEB = 4


class InstanceFlags(_ClosedIntEnum):
    """High 8 bits of the instance. At most one flag may be set."""

    NONE = 0
    CLAN = 0x80
    LOBBY = 0x40
    MMS_LOBBY = 0x20


INSTANCE_TYPE_BITS = 12


@dataclass(frozen=True, slots=True)
class Instance:
    """20-bit instance descriptor: a type plus a mutually exclusive flag.

    Attributes:
        type: Session kind (all, desktop, console, web).
        flags: Chat flag, only meaningful for chat account types.
    """

    type: InstanceType = InstanceType.ALL
    flags: InstanceFlags = InstanceFlags.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", InstanceType.from_value(self.type))
        object.__setattr__(self, "flags", InstanceFlags.from_value(self.flags))

    @property
    def value(self) -> int:
        """Packed 20-bit instance value."""
        return self.type | (self.flags << INSTANCE_TYPE_BITS)

    @classmethod
    def from_value(cls, value: int) -> Instance:
        """Decode a packed 20-bit instance value.

        Args:
            value: Instance bits, type in bits 0-11 and flags in bits 12-19.

        Returns:
            The decoded Instance.

        Raises:
            MalformedIdentifierError: If the value has bits outside the 20-bit
                range, an unknown type, or more than one flag set.
        """
        if not 0 <= value <= 0xFFFFF:
            raise MalformedIdentifierError(f"Instance value {value!r} out of range")
        return cls(
            type=InstanceType.from_value(value & 0xFFF),
            flags=InstanceFlags.from_value(value >> INSTANCE_TYPE_BITS),
        )

    def __str__(self) -> str:
        if self.flags is InstanceFlags.NONE:
            return self.type.name
        return f"{self.type.name}|{self.flags.name}"
