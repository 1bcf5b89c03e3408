"""Core / service layer — pure location logic and the session orchestrator.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Platform access only through :class:`PositionSource`.
"""

from simple_location.core.blur import BlurEngine, blur
from simple_location.core.cache import PositionCache, shared_position_cache
from simple_location.core.geomath import (
    distance_between,
    distance_meters,
    kilometers_to_latitude,
    kilometers_to_longitude,
    latitude_to_kilometers,
    latitude_to_meters,
    longitude_to_kilometers,
    longitude_to_meters,
    meters_to_latitude,
    meters_to_longitude,
)
from simple_location.core.models import (
    LocationConfig,
    Point,
    Position,
    ProviderId,
    SessionState,
    SubscriptionHandle,
)
from simple_location.core.protocols import PositionListener, PositionSource
from simple_location.core.provider_selector import select_provider
from simple_location.core.session import LocationSession

__all__: list[str] = [
    "BlurEngine",
    "LocationConfig",
    "LocationSession",
    "Point",
    "Position",
    "PositionCache",
    "PositionListener",
    "PositionSource",
    "ProviderId",
    "SessionState",
    "SubscriptionHandle",
    "blur",
    "distance_between",
    "distance_meters",
    "kilometers_to_latitude",
    "kilometers_to_longitude",
    "latitude_to_kilometers",
    "latitude_to_meters",
    "longitude_to_kilometers",
    "longitude_to_meters",
    "meters_to_latitude",
    "meters_to_longitude",
    "select_provider",
    "shared_position_cache",
]
