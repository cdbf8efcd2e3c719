"""Tests for SteamIDSettings."""

from steamid import SteamID, Universe
from steamid.adapters import steamid_core_schema
from steamid.config import SteamIDSettings


def test_defaults():
    settings = SteamIDSettings()

    assert settings.default_universe is Universe.PUBLIC
    assert settings.serialize_as == "int"


def test_serialize_as_from_environment(monkeypatch):
    monkeypatch.setenv("STEAMID_SERIALIZE_AS", "str")

    assert SteamIDSettings().serialize_as == "str"


def test_schema_reads_environment_when_settings_omitted(monkeypatch):
    from pydantic_core import SchemaSerializer

    monkeypatch.setenv("STEAMID_SERIALIZE_AS", "str")

    serializer = SchemaSerializer(steamid_core_schema())
    assert serializer.to_python(SteamID(76561197960287930)) == "76561197960287930"


def test_explicit_default_universe():
    assert SteamIDSettings(default_universe=Universe.BETA).default_universe is Universe.BETA
