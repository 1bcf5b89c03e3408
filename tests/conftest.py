"""Shared pytest fixtures and configuration for the simple-location test suite.

Guidelines
----------
* No network or platform location access in any test.
* Position sources are mocked or replayed in memory.
* Every session gets its own cache — the process-wide cache is reset
  around each test so tests cannot leak fixes into each other.
* Randomness is seeded wherever an exact value is asserted.
"""

from __future__ import annotations

import random
from collections.abc import Iterator

import pytest

from simple_location.core.blur import BlurEngine
from simple_location.core.cache import PositionCache, shared_position_cache
from simple_location.core.models import Position
from simple_location.infra.replay_source import ReplayPositionSource


@pytest.fixture(autouse=True)
def _reset_shared_cache() -> Iterator[None]:
    shared_position_cache.clear()
    yield
    shared_position_cache.clear()


@pytest.fixture
def cache() -> PositionCache:
    return PositionCache()


@pytest.fixture
def source() -> ReplayPositionSource:
    return ReplayPositionSource()


@pytest.fixture
def seeded_engine() -> BlurEngine:
    return BlurEngine(random.Random(1234))


@pytest.fixture
def berlin() -> Position:
    """Fix at Berlin's Brandenburg Gate area."""
    return Position(latitude=52.52, longitude=13.405, speed=0.0, altitude=34.0)
