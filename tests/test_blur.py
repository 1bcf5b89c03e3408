"""Tests for privacy blurring (core/blur.py).

Randomness is injected through a seeded :class:`random.Random` or a
mock whose ``randint`` returns fixed offsets, so the offset geometry
can be asserted exactly.
"""

from __future__ import annotations

import math
import random
from unittest.mock import MagicMock

import pytest

from simple_location.core.blur import SQUARE_ROOT_TWO, BlurEngine, blur
from simple_location.core.geomath import (
    distance_meters,
    latitude_to_meters,
    longitude_to_meters,
    meters_to_latitude,
    meters_to_longitude,
)
from simple_location.core.models import Position, ProviderId


def _fixed_rng(*offsets: int) -> MagicMock:
    rng = MagicMock(spec=random.Random)
    rng.randint.side_effect = list(offsets)
    return rng


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

class TestNoBlur:
    def test_zero_radius_returns_original(self, berlin: Position) -> None:
        assert BlurEngine().blur(berlin, 0) is berlin

    def test_negative_radius_returns_original(self, berlin: Position) -> None:
        assert BlurEngine().blur(berlin, -50) is berlin

    def test_module_level_identity(self, berlin: Position) -> None:
        assert blur(berlin, 0) == berlin


# ---------------------------------------------------------------------------
# Offset geometry
# ---------------------------------------------------------------------------

class TestOffsets:
    def test_draws_from_closed_interval(self, berlin: Position) -> None:
        rng = _fixed_rng(0, 0)
        BlurEngine(rng).blur(berlin, 100)
        assert rng.randint.call_count == 2
        rng.randint.assert_called_with(-100, 100)

    def test_longitude_then_latitude_scaled_by_root_two(self, berlin: Position) -> None:
        result = BlurEngine(_fixed_rng(100, -100)).blur(berlin, 100)
        expected_lon = berlin.longitude + meters_to_longitude(
            100 / SQUARE_ROOT_TWO, berlin.latitude
        )
        expected_lat = berlin.latitude + meters_to_latitude(-100 / SQUARE_ROOT_TWO)
        assert result.longitude == pytest.approx(expected_lon)
        assert result.latitude == pytest.approx(expected_lat)

    def test_diagonal_corner_stays_inside_radius(self, berlin: Position) -> None:
        result = BlurEngine(_fixed_rng(500, 500)).blur(berlin, 500)
        dx = longitude_to_meters(result.longitude - berlin.longitude, berlin.latitude)
        dy = latitude_to_meters(result.latitude - berlin.latitude)
        assert math.hypot(dx, dy) == pytest.approx(500.0)

    def test_speed_altitude_and_metadata_pass_through(self) -> None:
        original = Position(
            10.0, 20.0, speed=4.5, altitude=120.0,
            provider=ProviderId.FINE_ACTIVE, timestamp_millis=99,
        )
        result = BlurEngine(random.Random(7)).blur(original, 1000)
        assert result.speed == 4.5
        assert result.altitude == 120.0
        assert result.provider is ProviderId.FINE_ACTIVE
        assert result.timestamp_millis == 99

    def test_seeded_engines_are_reproducible(self, berlin: Position) -> None:
        a = BlurEngine(random.Random(42)).blur(berlin, 250)
        b = BlurEngine(random.Random(42)).blur(berlin, 250)
        assert a == b

    def test_rerandomizes_every_call(self, berlin: Position) -> None:
        engine = BlurEngine(random.Random(3))
        results = {engine.blur(berlin, 5000).point for _ in range(20)}
        assert len(results) > 1


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

class TestBounds:
    @pytest.mark.parametrize("radius", [1, 37, 10_000])
    def test_per_axis_offsets_within_radius(self, berlin: Position, radius: int) -> None:
        engine = BlurEngine(random.Random(radius))
        for _ in range(10_000):
            result = engine.blur(berlin, radius)
            dx = longitude_to_meters(result.longitude - berlin.longitude, berlin.latitude)
            dy = latitude_to_meters(result.latitude - berlin.latitude)
            assert -radius <= dx <= radius
            assert -radius <= dy <= radius

    def test_geodesic_distance_within_radius(
        self, berlin: Position, seeded_engine: BlurEngine,
    ) -> None:
        for _ in range(200):
            result = seeded_engine.blur(berlin, 10_000)
            assert distance_meters(berlin.point, result.point) <= 10_000
