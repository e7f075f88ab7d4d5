"""Platform-mandated compiler flags."""

from __future__ import annotations

import subprocess
from collections.abc import MutableSequence

from jankenv._log import get_logger
from jankenv._once import once
from jankenv._platform import current_profile, env

_log = get_logger("flags")

SYSROOT_FLAG = "-isysroot"
SDKROOT_ENV = "SDKROOT"


@once
def macos_sdk_path() -> str | None:
    """Return the macOS SDK path from ``SDKROOT`` or ``xcrun --show-sdk-path``."""
    override = env(SDKROOT_ENV)
    if override is not None:
        return override
    try:
        result = subprocess.run(
            ["xcrun", "--show-sdk-path"],
            check=True,
            capture_output=True,
            text=True,
            timeout=30,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as exc:
        _log.debug("xcrun failed: %s", exc)
        return None
    return result.stdout.strip() or None


def add_system_flags(args: MutableSequence[str]) -> None:
    """Append the flags the current platform requires to *args*, in place.

    Existing entries are left untouched. On macOS this is
    ``-isysroot <sdk>``; elsewhere nothing is added.
    """
    if not current_profile().needs_sysroot:
        return
    sdk = macos_sdk_path()
    if sdk is None:
        _log.warning(
            "No macOS SDK found; set %s or install the Xcode command line tools", SDKROOT_ENV
        )
        return
    args.append(SYSROOT_FLAG)
    args.append(sdk)
