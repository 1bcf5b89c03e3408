"""Tabular rendering of reported positions for the CLI layer.

This module is responsible for:

* Formatting coordinates, speeds and offsets for display.
* Rendering a Rich table of reported positions, or a plain-text table
  when Rich is not installed.

All display-related logic lives here — no session handling, no file
reading.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from simple_location.cli.console import console
from simple_location.core.models import Point


@dataclass(frozen=True, slots=True)
class ReportRow:
    """One reported position as shown to the user."""

    reported: Point
    """Coordinates as reported (blurred when a radius is set)."""

    offset_meters: float
    """Distance between the reported and the raw position."""

    speed: float = 0.0
    altitude: float = 0.0


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _format_coordinate(value: float) -> str:
    """Render a coordinate with six decimals (about 0.1 m)."""
    return f"{value:.6f}"


def _format_meters(value: float) -> str:
    """Render a distance, switching to kilometers from 1000 m."""
    if value >= 1000.0:
        return f"{value / 1000.0:.2f} km"
    return f"{value:.1f} m"


def _format_speed(speed: float) -> str:
    """Render a speed in m/s, or ``"—"`` when stationary."""
    if speed <= 0.0:
        return "—"
    return f"{speed:.1f} m/s"


def _row_cells(index: int, row: ReportRow) -> tuple[str, ...]:
    return (
        str(index),
        _format_coordinate(row.reported.latitude),
        _format_coordinate(row.reported.longitude),
        _format_meters(row.offset_meters),
        _format_speed(row.speed),
        f"{row.altitude:.1f} m",
    )


_HEADERS: tuple[str, ...] = ("#", "Latitude", "Longitude", "Offset", "Speed", "Altitude")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_table(title: str, rows: Sequence[ReportRow]) -> None:
    """Render *rows* without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print(
        f"{_HEADERS[0]:>4} {_HEADERS[1]:>12} {_HEADERS[2]:>12} "
        f"{_HEADERS[3]:>10} {_HEADERS[4]:>10} {_HEADERS[5]:>10}",
        file=sys.stderr,
    )
    for i, row in enumerate(rows, start=1):
        cells = _row_cells(i, row)
        print(
            f"{cells[0]:>4} {cells[1]:>12} {cells[2]:>12} "
            f"{cells[3]:>10} {cells[4]:>10} {cells[5]:>10}",
            file=sys.stderr,
        )
    print(file=sys.stderr)


def render_report(title: str, rows: Sequence[ReportRow]) -> None:
    """Print a table of reported positions."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(title, rows)
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column(_HEADERS[0], justify="right", style="dim", width=4)
    for header in _HEADERS[1:]:
        table.add_column(header, justify="right", min_width=10)

    for i, row in enumerate(rows, start=1):
        table.add_row(*_row_cells(i, row))

    console.print()
    console.print(table)
    console.print()
