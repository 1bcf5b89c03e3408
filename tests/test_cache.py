"""Tests for the single-slot position cache (core/cache.py)."""

from __future__ import annotations

import threading

from simple_location.core.cache import PositionCache, shared_position_cache
from simple_location.core.models import Position, ProviderId


class TestPositionCache:
    def test_starts_empty(self) -> None:
        assert PositionCache().get() is None

    def test_put_then_get(self) -> None:
        cache = PositionCache()
        pos = Position(1.0, 2.0)
        cache.put(pos)
        assert cache.get() is pos

    def test_last_writer_wins_without_merging(self) -> None:
        cache = PositionCache()
        cache.put(Position(1.0, 2.0, speed=5.0, provider=ProviderId.FINE_ACTIVE))
        newer = Position(3.0, 4.0)
        cache.put(newer)
        assert cache.get() is newer

    def test_no_timestamp_comparison(self) -> None:
        cache = PositionCache()
        cache.put(Position(1.0, 2.0, timestamp_millis=2_000))
        older = Position(3.0, 4.0, timestamp_millis=1_000)
        cache.put(older)
        assert cache.get() is older

    def test_clear(self) -> None:
        cache = PositionCache()
        cache.put(Position(1.0, 2.0))
        cache.clear()
        assert cache.get() is None

    def test_instances_are_independent(self) -> None:
        a, b = PositionCache(), PositionCache()
        a.put(Position(1.0, 2.0))
        assert b.get() is None

    def test_shared_cache_is_a_position_cache(self) -> None:
        assert isinstance(shared_position_cache, PositionCache)

    def test_concurrent_writers_leave_one_of_their_values(self) -> None:
        cache = PositionCache()
        written = [Position(float(i), 0.0) for i in range(16)]

        def _write(pos: Position) -> None:
            for _ in range(200):
                cache.put(pos)

        threads = [threading.Thread(target=_write, args=(pos,)) for pos in written]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert cache.get() in written
