"""Centralized directory resolution for the jank toolchain.

Each location honors a ``JANK_*`` override first, then the platform
convention as reported by ``platformdirs``. Values are resolved once per
process and the directory is created on first use.
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from urllib.parse import quote

import platformdirs

from jankenv._log import get_logger
from jankenv._once import once
from jankenv._paths import ensure_private_dir
from jankenv._platform import current_profile, env, home_from_env, home_from_passwd
from jankenv.errors import ProcessIntrospectionError, UnresolvableLocationError

_log = get_logger("config")

APP_NAME = "jank"

HOME_ENV = "JANK_HOME"
CONFIG_DIR_ENV = "JANK_CONFIG_DIR"
CACHE_DIR_ENV = "JANK_CACHE_DIR"
RESOURCE_DIR_ENV = "JANK_RESOURCE_DIR"

BINARY_CACHE_SUBDIR = "bin"
BUNDLED_RESOURCE_DIR = "resources"
INSTALLED_RESOURCE_DIR = Path("..", "share", APP_NAME)
PACKAGE_RESOURCE_DIR = Path(__file__).parent / "resources"

MAX_SEGMENT_LENGTH = 128
_DIGEST_LENGTH = 32
# Device names Windows refuses as file names, with or without an extension.
_RESERVED_NAMES = frozenset(
    ["con", "prn", "aux", "nul"]
    + [f"com{i}" for i in range(1, 10)]
    + [f"lpt{i}" for i in range(1, 10)]
)


def _absolute(raw: str) -> Path:
    return Path(os.path.abspath(os.path.expanduser(raw)))


def version_segment(version: str | None = None) -> str:
    """Turn *version* into a single, filesystem-safe path segment.

    ``None`` selects :func:`jankenv.version.binary_version`. Surrounding
    whitespace is ignored. Everything outside ``[A-Za-z0-9._~-]`` is
    percent-encoded (``%`` included). A result that is lowercase, short and
    safe on every filesystem is used as-is. Anything else (uppercase, escapes,
    over :data:`MAX_SEGMENT_LENGTH`, dot-only, trailing dot, Windows device
    names) becomes ``<lowercased prefix>+<sha256 of the version>``. ``+`` never
    survives quoting, so the two forms cannot collide, and neither form
    depends on case.
    """
    if version is None:
        from jankenv.version import binary_version

        version = binary_version()
    stripped = version.strip()
    if not stripped:
        raise ValueError("version must be a non-empty string")
    segment = quote(stripped, safe="")
    if _is_plain_segment(segment):
        return segment
    digest = hashlib.sha256(stripped.encode()).hexdigest()
    readable = segment.lower()[: MAX_SEGMENT_LENGTH - _DIGEST_LENGTH - 1]
    return f"{readable}+{digest[:_DIGEST_LENGTH]}"


def _is_plain_segment(segment: str) -> bool:
    return (
        len(segment) <= MAX_SEGMENT_LENGTH
        and segment == segment.lower()
        and not segment.endswith(".")
        and segment.split(".")[0] not in _RESERVED_NAMES
    )


@once
def user_home_dir() -> Path:
    """Return the user's home directory.

    Resolution order:
    1. ``JANK_HOME`` environment variable
    2. the platform home variable (``HOME``, or ``USERPROFILE`` /
       ``HOMEDRIVE`` + ``HOMEPATH`` on Windows)
    3. the password database entry of the current user (POSIX)

    There is no working-directory fallback.
    """
    profile = current_profile()
    raw = env(HOME_ENV)
    source = HOME_ENV
    if raw is None:
        raw = home_from_env(profile)
        source = "environment"
    if raw is None and profile.use_passwd:
        raw = home_from_passwd()
        source = "password database"
    if raw is None:
        raise UnresolvableLocationError(
            f"Cannot determine the home directory on {profile.name}; set {HOME_ENV}"
        )
    path = _absolute(raw)
    _log.debug("home directory %s (from %s)", path, source)
    return ensure_private_dir(path)


@once
def user_config_dir() -> Path:
    """Return the jank configuration directory.

    Resolution order:
    1. ``JANK_CONFIG_DIR`` (used as-is)
    2. ``platformdirs.user_config_path("jank")``: ``XDG_CONFIG_HOME/jank`` or
       ``~/.config/jank``, ``~/Library/Application Support/jank``, or the
       roaming AppData folder on Windows
    """
    raw = env(CONFIG_DIR_ENV)
    if raw is not None:
        path = _absolute(raw)
    else:
        path = _absolute(str(platformdirs.user_config_path(APP_NAME, appauthor=False)))
    _log.debug("config directory %s", path)
    return ensure_private_dir(path)


@once
def cache_root() -> Path:
    """Return the (not yet created) root that versioned cache directories live under."""
    raw = env(CACHE_DIR_ENV)
    if raw is not None:
        return _absolute(raw)
    return _absolute(str(platformdirs.user_cache_path(APP_NAME, appauthor=False)))


@once
def _user_cache_dir(segment: str) -> Path:
    path = cache_root() / segment
    _log.debug("cache directory %s", path)
    return ensure_private_dir(path)


@once
def _binary_cache_dir(segment: str) -> Path:
    path = _user_cache_dir(segment) / BINARY_CACHE_SUBDIR
    _log.debug("binary cache directory %s", path)
    return ensure_private_dir(path)


def user_cache_dir(version: str | None = None) -> Path:
    """Return the cache directory for *version* (default: this build's binary version)."""
    return _user_cache_dir(version_segment(version))


def binary_cache_dir(version: str | None = None) -> Path:
    """Return the directory holding compiled artifacts for *version*."""
    return _binary_cache_dir(version_segment(version))


def _resource_candidates() -> list[tuple[Path, str]]:
    from jankenv.process import process_dir

    raw = env(RESOURCE_DIR_ENV)
    if raw is not None:
        path = Path(os.path.expanduser(raw))
        if not path.is_absolute():
            path = process_dir() / path
        return [(path, RESOURCE_DIR_ENV)]

    candidates: list[tuple[Path, str]] = []
    try:
        exe_dir = process_dir()
    except ProcessIntrospectionError as e:
        _log.debug("skipping executable-relative resources: %s", e)
    else:
        candidates.append((exe_dir / BUNDLED_RESOURCE_DIR, "bundled"))
        candidates.append((exe_dir / INSTALLED_RESOURCE_DIR, "installed prefix"))
    candidates.append((PACKAGE_RESOURCE_DIR, "package"))
    return candidates


@once
def resource_dir() -> Path:
    """Return the directory of bundled, read-only support files.

    Resolution order:
    1. ``JANK_RESOURCE_DIR`` (relative values are taken from the executable's directory)
    2. ``resources/`` next to the executable
    3. ``<executable dir>/../share/jank``
    4. ``resources/`` shipped inside this package

    The first existing directory wins. Nothing is created.
    """
    candidates = _resource_candidates()
    for path, source in candidates:
        if path.is_dir():
            resolved = path.resolve()
            _log.debug("resource directory %s (%s)", resolved, source)
            return resolved
    tried = ", ".join(str(p) for p, _ in candidates)
    raise UnresolvableLocationError(f"No resource directory found (tried: {tried})")
