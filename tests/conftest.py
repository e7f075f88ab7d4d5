"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from jankenv._once import clear_all
from jankenv._platform import PlatformProfile

_ENV_VARS = (
    "JANK_HOME",
    "JANK_CONFIG_DIR",
    "JANK_CACHE_DIR",
    "JANK_RESOURCE_DIR",
    "JANK_BUILD_FLAGS",
    "XDG_CONFIG_HOME",
    "XDG_CACHE_HOME",
    "APPDATA",
    "LOCALAPPDATA",
    "USERPROFILE",
    "HOMEDRIVE",
    "HOMEPATH",
    "SDKROOT",
)

_PROFILE_USERS = (
    "jankenv.config.current_profile",
    "jankenv.process.current_profile",
    "jankenv.flags.current_profile",
    "jankenv.version.current_profile",
)


def use_profile(monkeypatch: pytest.MonkeyPatch, profile: PlatformProfile) -> None:
    """Make every resolver behave as if running on *profile*'s platform."""
    for target in _PROFILE_USERS:
        monkeypatch.setattr(target, lambda: profile)


@pytest.fixture
def home(tmp_path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, home):
    """Point HOME at a scratch directory and drop cached locations around each test."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(home))
    clear_all()
    yield
    clear_all()
