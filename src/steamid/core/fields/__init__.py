"""Closed field enumerations packed into a SteamID."""

from steamid.core.fields.models import (
    AccountType,
    Instance,
    InstanceFlags,
    InstanceType,
    Universe,
)

__all__ = [
    "AccountType",
    "Instance",
    "InstanceFlags",
    "InstanceType",
    "Universe",
]
