"""Infrastructure: reading recorded tracks from CSV files.

A track file holds one fix per line::

    # latitude,longitude[,speed[,altitude[,timestamp_millis]]]
    52.5200,13.4050,0.0,34.0,0
    52.5203,13.4061,1.4,34.5,60000

Blank lines and ``#`` comments are skipped, as is a header row whose
first cell starts with ``lat`` ahead of the first fix.  Every failure is
raised as :class:`~simple_location.exceptions.TrackFileError` carrying
the line number.
"""

from __future__ import annotations

import csv
from pathlib import Path

from simple_location.core.models import Position
from simple_location.exceptions import TrackFileError

_MIN_COLUMNS = 2
_MAX_COLUMNS = 5


def parse_track_row(cells: list[str], line_number: int) -> Position:
    """Convert the cells of one CSV row to a :class:`Position`."""
    values = [cell.strip() for cell in cells]
    if not _MIN_COLUMNS <= len(values) <= _MAX_COLUMNS:
        raise TrackFileError(
            f"Line {line_number}: expected 2 to 5 columns, got {len(values)}.",
            hint="Columns are latitude,longitude[,speed[,altitude[,timestamp_millis]]].",
        )
    try:
        latitude = float(values[0])
        longitude = float(values[1])
        speed = float(values[2]) if len(values) > 2 and values[2] else 0.0
        altitude = float(values[3]) if len(values) > 3 and values[3] else 0.0
        timestamp = int(values[4]) if len(values) > 4 and values[4] else None
    except ValueError as exc:
        raise TrackFileError(f"Line {line_number}: {exc}") from exc
    return Position(
        latitude=latitude,
        longitude=longitude,
        speed=speed,
        altitude=altitude,
        timestamp_millis=timestamp,
    )


def read_track(path: Path | str) -> list[Position]:
    """Read all fixes from the track file at *path*.

    Raises
    ------
    TrackFileError
        When the file cannot be read or a row is malformed.
    """
    track_path = Path(path)
    try:
        text = track_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TrackFileError(
            f"Cannot read track file {track_path}: {exc.strerror or exc}",
        ) from exc

    positions: list[Position] = []
    for line_number, cells in enumerate(csv.reader(text.splitlines()), start=1):
        if not cells or not "".join(cells).strip():
            continue
        first = cells[0].strip()
        if first.startswith("#"):
            continue
        if not positions and first.lower().startswith("lat"):
            continue
        positions.append(parse_track_row(cells, line_number))
    return positions
