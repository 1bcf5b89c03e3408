"""Infrastructure layer — external system integration.

This layer holds the concrete position source, track-file reading and
the platform settings hook.  Every raw exception from the filesystem
must be caught here and re-raised as a
:class:`~simple_location.exceptions.SimpleLocationError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from simple_location.infra.replay_source import ReplayPositionSource
from simple_location.infra.settings import open_platform_location_settings
from simple_location.infra.track_file import read_track

__all__: list[str] = [
    "ReplayPositionSource",
    "open_platform_location_settings",
    "read_track",
]
