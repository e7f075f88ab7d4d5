"""Unique temporary file creation."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from jankenv._log import get_logger
from jankenv.errors import TempFileCreationError

_log = get_logger("tempfiles")


def make_temp_file(prefix: str) -> Path:
    """Create an empty file named ``<prefix><unique suffix>`` in the system temp directory.

    Uniqueness comes from ``tempfile.mkstemp``, which opens candidates with
    ``O_CREAT | O_EXCL`` and retries a bounded number of names. The caller
    owns the returned file and must delete it.
    """
    if os.sep in prefix or (os.altsep and os.altsep in prefix):
        raise ValueError(f"prefix must not contain a path separator: {prefix!r}")
    try:
        fd, name = tempfile.mkstemp(prefix=prefix)
    except OSError as e:
        raise TempFileCreationError(prefix, e.strerror or str(e)) from e
    try:
        os.close(fd)
    except OSError as e:
        os.unlink(name)
        raise TempFileCreationError(prefix, e.strerror or str(e)) from e
    path = Path(os.path.abspath(name))
    _log.debug("created temporary file %s", path)
    return path
