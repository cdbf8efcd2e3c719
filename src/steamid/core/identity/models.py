"""SteamID value model.

Usage:
    x = SteamID(76561197960287930)
    y = SteamID.from_steam3("[U:1:22202]")
    z = SteamID.from_steam2("STEAM_1:0:11101")
    assert x == y == z

    assert int(z) == 76561197960287930
    assert y.steam2() == "STEAM_1:0:11101"
    assert x.steam3() == "[U:1:22202]"

    console = x.with_instance(Instance(InstanceType.CONSOLE))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from steamid.core import layout
from steamid.core.fields import AccountType, Instance, InstanceType, Universe

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema


@dataclass(frozen=True, slots=True, repr=False)
class SteamID:
    """Immutable 64-bit Steam identifier.

    Construction validates the raw word, so every instance holds a known
    account type, universe, instance type and at most one instance flag.
    Field "setters" return a new SteamID.

    Args:
        value: Packed 64-bit identifier.

    Raises:
        MalformedIdentifierError: If value does not decode to valid fields.
    """

    value: int

    def __post_init__(self) -> None:
        layout.from_raw(self.value)

    # Construction

    @classmethod
    def from_raw(cls, value: int) -> SteamID:
        return cls(value)

    @classmethod
    def new(
        cls,
        account_id: int,
        instance: Instance,
        account_type: AccountType,
        universe: Universe,
    ) -> SteamID:
        """Build a SteamID from its four fields."""
        return cls(layout.pack(account_id, instance, account_type, universe))

    @classmethod
    def individual(cls, account_id: int, universe: Universe | None = None) -> SteamID:
        """Build a desktop individual-user SteamID.

        Args:
            account_id: 32-bit account number.
            universe: Realm; defaults to SteamIDSettings.default_universe.

        Returns:
            SteamID with instance DESKTOP and account type INDIVIDUAL.
        """
        if universe is None:
            from steamid.config import SteamIDSettings

            universe = SteamIDSettings().default_universe
        return cls.new(account_id, Instance(InstanceType.DESKTOP), AccountType.INDIVIDUAL, universe)

    @classmethod
    def from_steam2(cls, text: str) -> SteamID:
        from steamid.formats import steam2

        return steam2.parse(text)

    @classmethod
    def from_steam3(cls, text: str) -> SteamID:
        from steamid.formats import steam3

        return steam3.parse(text)

    @classmethod
    def parse(cls, text: str) -> SteamID:
        """Parse a decimal SteamID64, steam2 or steam3 string, in that order."""
        from steamid.formats import parse

        return parse(text)

    # Fields

    @property
    def account_id(self) -> int:
        return layout.unpack_account_id(self.value)

    @property
    def instance(self) -> Instance:
        return layout.unpack_instance(self.value)

    @property
    def account_type(self) -> AccountType:
        return layout.unpack_account_type(self.value)

    @property
    def universe(self) -> Universe:
        return layout.unpack_universe(self.value)

    def with_account_id(self, account_id: int) -> SteamID:
        return SteamID(layout.set_account_id(self.value, account_id))

    def with_instance(self, instance: Instance) -> SteamID:
        return SteamID(layout.set_instance(self.value, instance))

    def with_account_type(self, account_type: AccountType) -> SteamID:
        return SteamID(layout.set_account_type(self.value, account_type))

    def with_universe(self, universe: Universe) -> SteamID:
        return SteamID(layout.set_universe(self.value, universe))

    # Rendering

    def steam2(self) -> str:
        """Render as STEAM_X:Y:Z, or the decimal value if not an individual account."""
        from steamid.formats import steam2

        return steam2.render(self)

    def steam3(self) -> str:
        """Render as [T:U:N] or [T:U:N:I]."""
        from steamid.formats import steam3

        return steam3.render(self)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.steam3()

    def __repr__(self) -> str:
        return (
            f"SteamID({self.value}) {{ID: {self.account_id}, Instance: {self.instance}, "
            f"Type: {self.account_type.name}, Universe: {self.universe.name}}}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from steamid.adapters.pydantic import steamid_core_schema

        return steamid_core_schema()
