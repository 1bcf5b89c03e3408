"""Conversions between angular degrees and linear distance.

Every function in this module is a **pure** transformation — no I/O,
no state, fully deterministic.

The degree/distance conversions are rough estimations using fixed
empirical constants:

* 1° of latitude ≈ 111.133 km everywhere.
* 1° of longitude ≈ 111.320 km × cos(latitude), shrinking toward the
  poles.

Each inverse divides by the forward conversion of one degree.  At
latitudes of ±90° the longitude divisor degenerates toward zero, so
meters → longitude there is huge (or raises ``ZeroDivisionError`` when
the cosine is exactly zero).  That is a limit of the approximation.

Distances between points are solved on the WGS-84 ellipsoid with
:mod:`geopy`, the same class of inverse solution platform location
APIs use.
"""

from __future__ import annotations

import math

from geopy.distance import geodesic

from simple_location.core.models import Point

KILOMETER_TO_METER: float = 1000.0
LATITUDE_TO_KILOMETER: float = 111.133
LONGITUDE_TO_KILOMETER_AT_ZERO_LATITUDE: float = 111.320


# ---------------------------------------------------------------------------
# Latitude
# ---------------------------------------------------------------------------

def latitude_to_kilometers(latitude: float) -> float:
    """Convert a difference in latitude to a difference in kilometers."""
    return latitude * LATITUDE_TO_KILOMETER


def kilometers_to_latitude(kilometers: float) -> float:
    """Convert a difference in kilometers to a difference in latitude."""
    return kilometers / latitude_to_kilometers(1.0)


def latitude_to_meters(latitude: float) -> float:
    """Convert a difference in latitude to a difference in meters."""
    return latitude_to_kilometers(latitude) * KILOMETER_TO_METER


def meters_to_latitude(meters: float) -> float:
    """Convert a difference in meters to a difference in latitude."""
    return meters / latitude_to_meters(1.0)


# ---------------------------------------------------------------------------
# Longitude
# ---------------------------------------------------------------------------

def longitude_to_kilometers(longitude: float, at_latitude: float) -> float:
    """Convert a difference in longitude to kilometers at *at_latitude*."""
    return (
        longitude
        * LONGITUDE_TO_KILOMETER_AT_ZERO_LATITUDE
        * math.cos(math.radians(at_latitude))
    )


def kilometers_to_longitude(kilometers: float, at_latitude: float) -> float:
    """Convert a difference in kilometers to longitude at *at_latitude*."""
    return kilometers / longitude_to_kilometers(1.0, at_latitude)


def longitude_to_meters(longitude: float, at_latitude: float) -> float:
    """Convert a difference in longitude to meters at *at_latitude*."""
    return longitude_to_kilometers(longitude, at_latitude) * KILOMETER_TO_METER


def meters_to_longitude(meters: float, at_latitude: float) -> float:
    """Convert a difference in meters to longitude at *at_latitude*."""
    return meters / longitude_to_meters(1.0, at_latitude)


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------

def _normalized(latitude: float, longitude: float) -> tuple[float, float]:
    """Fold a coordinate pair back into ``[-90, 90] x [-180, 180]``.

    A latitude past a pole continues down the opposite meridian, which
    is where a fix offset beyond the pole actually lies.  In-range
    values are returned untouched.
    """
    if not -90.0 <= latitude <= 90.0:
        latitude = (latitude + 180.0) % 360.0 - 180.0
        if latitude > 90.0:
            latitude, longitude = 180.0 - latitude, longitude + 180.0
        elif latitude < -90.0:
            latitude, longitude = -180.0 - latitude, longitude + 180.0
    if not -180.0 <= longitude <= 180.0:
        longitude = (longitude + 180.0) % 360.0 - 180.0
    return latitude, longitude


def distance_between(
    start_latitude: float,
    start_longitude: float,
    end_latitude: float,
    end_longitude: float,
) -> float:
    """Return the geodesic distance in meters between two coordinate pairs.

    Coordinates outside the valid ranges, such as a blurred fix pushed
    across a pole, are folded back onto the globe first.  The endpoints
    are then put into a canonical order, so the result is exactly
    symmetric in its arguments.
    """
    first, second = sorted(
        (
            _normalized(start_latitude, start_longitude),
            _normalized(end_latitude, end_longitude),
        )
    )
    if first == second:
        return 0.0
    return float(geodesic(first, second).meters)


def distance_meters(start: Point, end: Point) -> float:
    """Return the geodesic distance in meters from *start* to *end*.

    Always ``>= 0`` and symmetric.  ``0.0`` means both points name the
    same place on the ellipsoid, which includes coordinate aliases such
    as longitudes ``180`` and ``-180``, or any two longitudes at a pole.
    """
    return distance_between(
        start.latitude, start.longitude, end.latitude, end.longitude
    )
