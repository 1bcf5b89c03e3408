"""Domain models for simple-location.

All value models are **frozen** dataclasses — immutable value objects
with no behaviour beyond data access and trivial derivations.  They
carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from simple_location.exceptions import ConfigurationError

DEFAULT_UPDATE_INTERVAL_MILLIS: int = 10 * 60 * 1000
"""Default interval between position updates (ten minutes)."""


# ---------------------------------------------------------------------------
# Providers and session state
# ---------------------------------------------------------------------------

class ProviderId(str, Enum):
    """Logical location providers.

    There is deliberately no coarse passive member: passive updates are
    only available for fine location.
    """

    FINE_ACTIVE = "gps"
    FINE_PASSIVE = "passive"
    COARSE_ACTIVE = "network"

    def __str__(self) -> str:
        return self.value


class SessionState(str, Enum):
    """Lifecycle state of a :class:`~simple_location.core.session.LocationSession`."""

    IDLE = "idle"
    UPDATING = "updating"


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A pair of coordinates in degrees.

    Latitude is expected in ``[-90, 90]`` and longitude in
    ``[-180, 180]``; the ranges are assumed, not enforced.
    """

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


@dataclass(frozen=True, slots=True)
class Position:
    """A single fix reported by a position source."""

    latitude: float
    """Latitude in degrees."""

    longitude: float
    """Longitude in degrees."""

    speed: float = 0.0
    """Ground speed in meters per second."""

    altitude: float = 0.0
    """Altitude in meters, ``0.0`` when unknown."""

    provider: ProviderId | None = None
    """Provider that produced the fix, when known."""

    timestamp_millis: int | None = None
    """Fix time in milliseconds, or ``None`` if the source has no clock."""

    @property
    def point(self) -> Point:
        """The coordinates of this fix without speed or altitude."""
        return Point(self.latitude, self.longitude)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LocationConfig:
    """Immutable session configuration, fixed at construction time."""

    require_fine: bool = False
    """Require fine (satellite) location instead of allowing coarse."""

    passive: bool = False
    """Receive updates only when other consumers request them."""

    update_interval_millis: int = DEFAULT_UPDATE_INTERVAL_MILLIS
    """Minimum time between update callbacks; longer saves battery."""

    require_fresh_location: bool = False
    """Ignore cached and last-known fixes until a new update arrives."""

    def __post_init__(self) -> None:
        if self.update_interval_millis < 0:
            raise ConfigurationError(
                f"Update interval must not be negative: {self.update_interval_millis}",
                hint="Use 0 to receive updates as often as the provider allows.",
            )


# ---------------------------------------------------------------------------
# Subscriptions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SubscriptionHandle:
    """Opaque token identifying one active update subscription."""

    subscription_id: int
    provider: ProviderId
    interval_millis: int
