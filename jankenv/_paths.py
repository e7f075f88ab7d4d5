"""Shared directory-creation helper for resolved locations."""

from __future__ import annotations

import os
from pathlib import Path

from jankenv._log import get_logger
from jankenv.errors import DirectoryCreationError

_log = get_logger("paths")


def ensure_private_dir(path: Path) -> Path:
    """Create *path* and its parents (new segments get mode 0o700) and check it is writable.

    Existing directories keep their mode. Raises :class:`DirectoryCreationError`
    when something other than a directory is in the way, when creation
    fails, or when the result is not writable by this process.
    """
    if not path.is_dir():
        try:
            path.mkdir(parents=True, exist_ok=True, mode=0o700)
        except FileExistsError as e:
            raise DirectoryCreationError(path, "a non-directory file is in the way") from e
        except OSError as e:
            raise DirectoryCreationError(path, e.strerror or str(e)) from e
        _log.debug("created %s", path)
    if not os.access(path, os.W_OK | os.X_OK):
        raise DirectoryCreationError(path, "not writable by the current process")
    return path
