"""Tests for domain models (core/models.py).

Value models are frozen dataclasses — these tests verify immutability,
defaults, equality semantics and configuration validation.
"""

from __future__ import annotations

import dataclasses

import pytest

from simple_location.core.models import (
    DEFAULT_UPDATE_INTERVAL_MILLIS,
    LocationConfig,
    Point,
    Position,
    ProviderId,
)
from simple_location.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------

class TestPoint:
    def test_fields_accessible(self) -> None:
        p = Point(52.52, 13.405)
        assert p.latitude == 52.52
        assert p.longitude == 13.405

    def test_frozen(self) -> None:
        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.latitude = 3.0  # type: ignore[misc]

    def test_value_equality_and_hash(self) -> None:
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert len({Point(1.0, 2.0), Point(1.0, 2.0)}) == 1

    def test_str(self) -> None:
        assert str(Point(52.52, 13.405)) == "(52.52, 13.405)"


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------

class TestPosition:
    def test_defaults(self) -> None:
        pos = Position(10.0, 20.0)
        assert pos.speed == 0.0
        assert pos.altitude == 0.0
        assert pos.provider is None
        assert pos.timestamp_millis is None

    def test_point_drops_speed_and_altitude(self) -> None:
        pos = Position(10.0, 20.0, speed=3.0, altitude=100.0)
        assert pos.point == Point(10.0, 20.0)

    def test_frozen(self) -> None:
        pos = Position(10.0, 20.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pos.speed = 1.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# ProviderId
# ---------------------------------------------------------------------------

class TestProviderId:
    def test_three_providers(self) -> None:
        assert set(ProviderId) == {
            ProviderId.FINE_ACTIVE,
            ProviderId.FINE_PASSIVE,
            ProviderId.COARSE_ACTIVE,
        }

    def test_str_is_platform_name(self) -> None:
        assert str(ProviderId.FINE_ACTIVE) == "gps"
        assert str(ProviderId.COARSE_ACTIVE) == "network"

    def test_lookup_by_value(self) -> None:
        assert ProviderId("passive") is ProviderId.FINE_PASSIVE


# ---------------------------------------------------------------------------
# LocationConfig
# ---------------------------------------------------------------------------

class TestLocationConfig:
    def test_defaults(self) -> None:
        cfg = LocationConfig()
        assert cfg.require_fine is False
        assert cfg.passive is False
        assert cfg.update_interval_millis == DEFAULT_UPDATE_INTERVAL_MILLIS == 600_000
        assert cfg.require_fresh_location is False

    def test_zero_interval_allowed(self) -> None:
        assert LocationConfig(update_interval_millis=0).update_interval_millis == 0

    def test_negative_interval_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="negative"):
            LocationConfig(update_interval_millis=-1)

    def test_frozen(self) -> None:
        cfg = LocationConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.passive = True  # type: ignore[misc]
