"""Exceptions raised when a location or file cannot be produced."""

from __future__ import annotations

from pathlib import Path


class JankEnvError(Exception):
    """Base class for every jankenv failure."""


class UnresolvableLocationError(JankEnvError):
    """Raised when a base directory cannot be determined from env or platform convention."""


class DirectoryCreationError(JankEnvError):
    """Raised when a resolved directory is missing and cannot be created or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot use directory {path}: {reason}")


class ProcessIntrospectionError(JankEnvError):
    """Raised when the platform cannot report the running executable's path."""


class TempFileCreationError(JankEnvError):
    """Raised when a unique temporary file cannot be created."""

    def __init__(self, prefix: str, reason: str) -> None:
        self.prefix = prefix
        super().__init__(f"Cannot create temporary file with prefix {prefix!r}: {reason}")
