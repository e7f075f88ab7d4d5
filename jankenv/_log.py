"""Centralized logging for jankenv."""

from __future__ import annotations

import logging
import sys
import threading

_lock = threading.Lock()
_setup_done = False


class _Formatter(logging.Formatter):
    """Format log records as ``[tag] message``, stripping the ``jankenv.`` prefix.

    The record itself is left alone, so other handlers see the plain message.
    """

    def formatMessage(self, record: logging.LogRecord) -> str:
        return f"[{tag_for(record.name)}] {super().formatMessage(record)}"


def tag_for(logger_name: str) -> str:
    if logger_name.startswith("jankenv."):
        return logger_name[len("jankenv.") :]
    return logger_name


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``jankenv`` root logger (idempotent).

    Attaches a single ``StreamHandler(sys.stderr)`` with level WARNING
    (or DEBUG when *verbose* is True). Sets ``propagate = False`` so
    messages don't bubble to the root logger.

    A later call with ``verbose=True`` still lowers the level to DEBUG, so
    the CLI flag works even when a module logged before the callback ran.
    """
    global _setup_done
    with _lock:
        logger = logging.getLogger("jankenv")
        if _setup_done:
            if verbose:
                logger.setLevel(logging.DEBUG)
            return
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.propagate = False
        _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(f"jankenv.{name}")``.

    Lazily calls :func:`setup_logging` on first use so that log output
    is routed to stderr even when callers skip explicit setup.
    """
    setup_logging()
    return logging.getLogger(f"jankenv.{name}")
