"""Location of the running executable."""

from __future__ import annotations

from pathlib import Path

from jankenv._log import get_logger
from jankenv._once import once
from jankenv._platform import current_profile, executable_path
from jankenv.errors import ProcessIntrospectionError

_log = get_logger("process")


@once
def process_path() -> Path:
    """Return the absolute, symlink-free path of the running executable.

    Uses OS introspection (``/proc``, ``_NSGetExecutablePath``,
    ``GetModuleFileNameW``), never ``argv``.
    """
    raw = executable_path(current_profile())
    try:
        path = Path(raw).resolve(strict=True)
    except OSError as e:
        raise ProcessIntrospectionError(f"Executable path {raw!r} does not exist: {e}") from e
    _log.debug("process path %s", path)
    return path


@once
def process_dir() -> Path:
    """Return the directory containing :func:`process_path`."""
    return process_path().parent
