"""Identifier of this build, used to keep incompatible caches apart."""

from __future__ import annotations

import hashlib
import platform
import sys

from jankenv import __version__
from jankenv._once import once
from jankenv._platform import current_profile, env

BUILD_FLAGS_ENV = "JANK_BUILD_FLAGS"


def target_triple() -> str:
    machine = platform.machine() or "unknown"
    return f"{machine}-{current_profile().name}".lower()


@once
def binary_version() -> str:
    """Return ``<version>-<target>-<digest>`` for the running build.

    The digest covers the package version, the target, the Python
    implementation with its major.minor version and ``JANK_BUILD_FLAGS``,
    so artifacts built under a different interpreter or flag set land in
    a different binary cache.
    """
    target = target_triple()
    impl = sys.implementation.name
    py = f"{sys.version_info.major}.{sys.version_info.minor}"
    flags = env(BUILD_FLAGS_ENV) or ""
    digest = hashlib.sha256("\0".join((__version__, target, impl, py, flags)).encode())
    return f"{__version__}-{target}-{digest.hexdigest()[:12]}"
