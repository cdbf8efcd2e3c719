"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from steamid.config import SteamIDSettings  # noqa: E402


@pytest.fixture(autouse=True)
def clean_steamid_env(monkeypatch):
    """Keep developer STEAMID_* variables out of tests."""
    for name in list(SteamIDSettings.model_fields):
        monkeypatch.delenv(f"STEAMID_{name.upper()}", raising=False)
