"""Tests for the names exported by the jankenv package."""

from __future__ import annotations

import jankenv


def test_public_operations_exported():
    for name in (
        "user_home_dir",
        "user_cache_dir",
        "user_config_dir",
        "binary_cache_dir",
        "binary_version",
        "process_path",
        "process_dir",
        "resource_dir",
        "add_system_flags",
        "make_temp_file",
    ):
        assert callable(getattr(jankenv, name)), name


def test_errors_share_base():
    for exc in (
        jankenv.UnresolvableLocationError,
        jankenv.DirectoryCreationError,
        jankenv.ProcessIntrospectionError,
        jankenv.TempFileCreationError,
    ):
        assert issubclass(exc, jankenv.JankEnvError)
