"""Last-known-good position cache.

A :class:`PositionCache` holds a single slot: the most recent fix
accepted by any session sharing the cache.  There is no staleness check
and no partitioning by provider — the last writer wins.  Sessions that
need a fresh fix set ``require_fresh_location`` instead.

:data:`shared_position_cache` is the process-wide default used when a
session is not given its own cache.
"""

from __future__ import annotations

import threading

from simple_location.core.models import Position


class PositionCache:
    """Single-slot, thread-safe store for the last known position."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._position: Position | None = None

    def get(self) -> Position | None:
        """Return the cached position, or ``None`` if nothing was cached."""
        with self._lock:
            return self._position

    def put(self, position: Position) -> None:
        """Overwrite the slot with *position* unconditionally."""
        with self._lock:
            self._position = position

    def clear(self) -> None:
        """Empty the slot."""
        with self._lock:
            self._position = None


shared_position_cache = PositionCache()
