"""Initialize-once caching for process-wide lookups.

``functools.lru_cache`` may run the wrapped function more than once when
several threads miss the cache at the same time. Resolvers here create
directories as a side effect, so each cache key gets its own lock and the
first caller computes the value while the others wait for it.
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from typing import Any, TypeVar

_F = TypeVar("_F", bound=Callable[..., Any])

_registry: list[Callable[[], None]] = []
_registry_lock = threading.Lock()


def once(func: _F) -> _F:
    """Cache *func* per distinct positional arguments, computing each value exactly once.

    A call that raises is not cached; the next caller for the same key
    retries. The wrapper gains a ``cache_clear()`` method like
    ``lru_cache`` does.
    """
    values: dict[tuple, Any] = {}
    locks: dict[tuple, threading.Lock] = {}
    locks_lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args):
        try:
            return values[args]
        except KeyError:
            pass
        with locks_lock:
            lock = locks.setdefault(args, threading.Lock())
        with lock:
            if args in values:
                return values[args]
            value = func(*args)
            values[args] = value
            return value

    def cache_clear() -> None:
        with locks_lock:
            values.clear()
            locks.clear()

    wrapper.cache_clear = cache_clear  # type: ignore[attr-defined]
    with _registry_lock:
        _registry.append(cache_clear)
    return wrapper  # type: ignore[return-value]


def clear_all() -> None:
    """Drop every value cached through :func:`once`. Intended for tests."""
    with _registry_lock:
        clearers = list(_registry)
    for clear in clearers:
        clear()
