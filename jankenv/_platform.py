"""Platform profiles and uncached OS lookups.

Per-OS differences in home lookup, executable introspection and system
flags live in a :class:`PlatformProfile`; callers ask :func:`current_profile`
once and never branch on ``sys.platform`` themselves. Config and cache roots
come from ``platformdirs``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from jankenv.errors import ProcessIntrospectionError


class ExeLookup(StrEnum):
    PROC = "proc"
    DARWIN = "darwin"
    WIN32 = "win32"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class PlatformProfile:
    """Environment conventions of one OS family."""

    name: str
    home_vars: tuple[str, ...]
    exe_lookup: ExeLookup
    home_drive_vars: tuple[str, str] | None = None
    use_passwd: bool = False
    proc_exe_link: str | None = None
    needs_sysroot: bool = False


LINUX = PlatformProfile(
    name="linux",
    home_vars=("HOME",),
    exe_lookup=ExeLookup.PROC,
    use_passwd=True,
    proc_exe_link="/proc/self/exe",
)

BSD = PlatformProfile(
    name="bsd",
    home_vars=("HOME",),
    exe_lookup=ExeLookup.PROC,
    use_passwd=True,
    proc_exe_link="/proc/curproc/file",
)

MACOS = PlatformProfile(
    name="macos",
    home_vars=("HOME",),
    exe_lookup=ExeLookup.DARWIN,
    use_passwd=True,
    needs_sysroot=True,
)

WINDOWS = PlatformProfile(
    name="windows",
    home_vars=("USERPROFILE",),
    exe_lookup=ExeLookup.WIN32,
    home_drive_vars=("HOMEDRIVE", "HOMEPATH"),
)

# POSIX systems without a known executable lookup.
GENERIC_POSIX = PlatformProfile(
    name="posix",
    home_vars=("HOME",),
    exe_lookup=ExeLookup.UNSUPPORTED,
    use_passwd=True,
)


def profile_for(platform: str) -> PlatformProfile:
    """Map a ``sys.platform`` value to its profile."""
    if platform.startswith("linux"):
        return LINUX
    if platform == "darwin":
        return MACOS
    if platform in ("win32", "cygwin"):
        return WINDOWS
    if "bsd" in platform or platform.startswith("dragonfly"):
        return BSD
    return GENERIC_POSIX


@lru_cache(maxsize=1)
def current_profile() -> PlatformProfile:
    return profile_for(sys.platform)


def env(name: str | None) -> str | None:
    """Return ``os.environ[name]``, treating unset and empty values alike."""
    if name is None:
        return None
    return os.environ.get(name) or None


def home_from_env(profile: PlatformProfile) -> str | None:
    for var in profile.home_vars:
        value = env(var)
        if value is not None:
            return value
    if profile.home_drive_vars is not None:
        drive_var, path_var = profile.home_drive_vars
        drive, rest = env(drive_var), env(path_var)
        if drive and rest:
            return drive + rest
    return None


def home_from_passwd() -> str | None:
    """Look up the current user's home in the password database (POSIX only)."""
    try:
        import pwd
    except ImportError:
        return None
    try:
        return pwd.getpwuid(os.getuid()).pw_dir or None
    except KeyError:
        return None


def executable_path(profile: PlatformProfile) -> str:
    """Ask the OS for the path of the running executable image.

    Frozen applications report ``sys.executable``, which the bundler points
    at the real binary.
    """
    if getattr(sys, "frozen", False) and sys.executable:
        return sys.executable
    if profile.exe_lookup is ExeLookup.PROC and profile.proc_exe_link:
        try:
            return os.readlink(profile.proc_exe_link)
        except OSError as e:
            raise ProcessIntrospectionError(
                f"Cannot read {profile.proc_exe_link}: {e.strerror or e}"
            ) from e
    if profile.exe_lookup is ExeLookup.DARWIN:
        return _darwin_executable_path()
    if profile.exe_lookup is ExeLookup.WIN32:
        return _win32_executable_path()
    raise ProcessIntrospectionError(
        f"No executable introspection available on platform '{profile.name}'"
    )


def _darwin_executable_path() -> str:
    import ctypes

    libc = ctypes.CDLL(None)
    size = ctypes.c_uint32(0)
    libc._NSGetExecutablePath(None, ctypes.byref(size))
    buf = ctypes.create_string_buffer(size.value)
    if libc._NSGetExecutablePath(buf, ctypes.byref(size)) != 0:
        raise ProcessIntrospectionError("_NSGetExecutablePath failed")
    return os.fsdecode(buf.value)


def _win32_executable_path() -> str:
    import ctypes

    kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    size = 260
    # The path is truncated when the returned length fills the buffer.
    while size <= 32768:
        buf = ctypes.create_unicode_buffer(size)
        length = kernel32.GetModuleFileNameW(None, buf, size)
        if length == 0:
            error = ctypes.GetLastError()  # type: ignore[attr-defined]
            raise ProcessIntrospectionError(f"GetModuleFileNameW failed: error {error}")
        if length < size:
            return buf.value
        size *= 2
    raise ProcessIntrospectionError("GetModuleFileNameW: path exceeds 32768 characters")
