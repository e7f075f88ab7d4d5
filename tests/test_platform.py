"""Tests for platform profiles and uncached OS lookups."""

from __future__ import annotations

import dataclasses
import os
import sys

import pytest

from jankenv._platform import (
    BSD,
    GENERIC_POSIX,
    LINUX,
    MACOS,
    WINDOWS,
    current_profile,
    env,
    executable_path,
    home_from_env,
    home_from_passwd,
    profile_for,
)
from jankenv.errors import ProcessIntrospectionError


@pytest.fixture
def not_frozen(monkeypatch):
    monkeypatch.delattr(sys, "frozen", raising=False)


class TestProfileFor:
    @pytest.mark.parametrize(
        ("platform", "expected"),
        [
            ("linux", LINUX),
            ("darwin", MACOS),
            ("win32", WINDOWS),
            ("cygwin", WINDOWS),
            ("freebsd14", BSD),
            ("openbsd7", BSD),
            ("sunos5", GENERIC_POSIX),
        ],
    )
    def test_mapping(self, platform, expected):
        assert profile_for(platform) is expected

    def test_current_profile_matches_sys_platform(self):
        assert current_profile() is profile_for(sys.platform)

    def test_only_macos_needs_sysroot(self):
        assert MACOS.needs_sysroot
        assert not any(p.needs_sysroot for p in (LINUX, BSD, WINDOWS, GENERIC_POSIX))


class TestEnv:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv("JANK_TEST_VAR", raising=False)
        assert env("JANK_TEST_VAR") is None

    def test_empty_counts_as_unset(self, monkeypatch):
        monkeypatch.setenv("JANK_TEST_VAR", "")
        assert env("JANK_TEST_VAR") is None

    def test_value(self, monkeypatch):
        monkeypatch.setenv("JANK_TEST_VAR", "x")
        assert env("JANK_TEST_VAR") == "x"

    def test_none_name(self):
        assert env(None) is None


class TestHomeFromEnv:
    def test_posix_home(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/someone")
        assert home_from_env(LINUX) == "/home/someone"

    def test_windows_userprofile(self, monkeypatch):
        monkeypatch.setenv("USERPROFILE", r"C:\Users\someone")
        assert home_from_env(WINDOWS) == r"C:\Users\someone"

    def test_windows_drive_and_path(self, monkeypatch):
        monkeypatch.setenv("HOMEDRIVE", "D:")
        monkeypatch.setenv("HOMEPATH", r"\Users\someone")
        assert home_from_env(WINDOWS) == r"D:\Users\someone"

    def test_windows_drive_without_path(self, monkeypatch):
        monkeypatch.setenv("HOMEDRIVE", "D:")
        assert home_from_env(WINDOWS) is None

    def test_missing(self, monkeypatch):
        monkeypatch.delenv("HOME")
        assert home_from_env(LINUX) is None


@pytest.mark.skipif(sys.platform == "win32", reason="password database is POSIX only")
def test_home_from_passwd():
    result = home_from_passwd()
    assert result is None or os.path.isabs(result)


@pytest.mark.usefixtures("not_frozen")
class TestExecutablePath:
    @pytest.mark.skipif(not sys.platform.startswith("linux"), reason="/proc/self/exe is Linux only")
    def test_linux_proc(self):
        assert executable_path(LINUX) == os.readlink("/proc/self/exe")

    def test_missing_proc_link(self, tmp_path):
        profile = dataclasses.replace(LINUX, proc_exe_link=str(tmp_path / "missing"))
        with pytest.raises(ProcessIntrospectionError, match="Cannot read"):
            executable_path(profile)

    def test_unsupported_platform(self):
        with pytest.raises(ProcessIntrospectionError, match="posix"):
            executable_path(GENERIC_POSIX)

    def test_frozen_uses_sys_executable(self, monkeypatch):
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        assert executable_path(GENERIC_POSIX) == sys.executable
