"""simple-location — device location access with privacy blurring.

Pick a location provider for a requested accuracy/power trade-off,
receive position updates through a :class:`LocationSession`, blur the
reported coordinates, and measure distances between points.
"""

from simple_location.core import (
    BlurEngine,
    LocationConfig,
    LocationSession,
    Point,
    Position,
    PositionCache,
    PositionSource,
    ProviderId,
    SessionState,
    blur,
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
    select_provider,
)
from simple_location.infra.settings import open_platform_location_settings
from simple_location.version import __version__

__all__: list[str] = [
    "BlurEngine",
    "LocationConfig",
    "LocationSession",
    "Point",
    "Position",
    "PositionCache",
    "PositionSource",
    "ProviderId",
    "SessionState",
    "__version__",
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
    "open_platform_location_settings",
    "select_provider",
]
