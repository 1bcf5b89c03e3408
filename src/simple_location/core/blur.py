"""Privacy blurring of reported positions.

:class:`BlurEngine` moves a fix by a random offset of at most the blur
radius so callers can report an approximate location.

Algorithm
---------
1. Draw two independent uniform integers in ``[-radius, radius]`` —
   one for the longitude axis and one for the latitude axis.
2. Scale both by ``1/√2`` so the combined offset vector never exceeds
   the radius, even along a diagonal.
3. Convert the offsets to degrees at the original latitude and add
   them to the coordinates.  Speed, altitude, provider and timestamp
   pass through unchanged.

The result is uniform over a square inscribed in the blur disk, not
over the disk itself; this distribution is kept as-is.  Every call
re-randomizes, so repeated reads of one fix do not wander
monotonically.  Blurring is a privacy aid, not a security control.
"""

from __future__ import annotations

import math
import random
from dataclasses import replace

from simple_location.core.geomath import meters_to_latitude, meters_to_longitude
from simple_location.core.models import Position

SQUARE_ROOT_TWO: float = math.sqrt(2)


class BlurEngine:
    """Applies randomized per-axis offsets to positions.

    Parameters
    ----------
    rng:
        Source of randomness.  Pass a seeded :class:`random.Random`
        for reproducible offsets; defaults to a fresh unseeded one.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng: random.Random = rng if rng is not None else random.Random()

    def random_offset(self, radius_meters: int) -> int:
        """Return a uniform random integer in ``[-radius, radius]``."""
        return self._rng.randint(-radius_meters, radius_meters)

    def blur(self, original: Position, radius_meters: int) -> Position:
        """Return *original* moved by a random offset within *radius_meters*.

        A radius of zero or less returns *original* itself.
        """
        if radius_meters <= 0:
            return original

        offset_longitude = self.random_offset(radius_meters) / SQUARE_ROOT_TWO
        offset_latitude = self.random_offset(radius_meters) / SQUARE_ROOT_TWO

        return replace(
            original,
            latitude=original.latitude + meters_to_latitude(offset_latitude),
            longitude=original.longitude
            + meters_to_longitude(offset_longitude, original.latitude),
        )


_default_engine = BlurEngine()


def blur(original: Position, radius_meters: int) -> Position:
    """Blur *original* with the module-level default engine."""
    return _default_engine.blur(original, radius_meters)
