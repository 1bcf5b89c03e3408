"""CLI application entry point and command routing for simple-location.

This module is the **sole error boundary** for the entire application.
It catches :class:`~simple_location.exceptions.SimpleLocationError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* ``print()`` is forbidden outside the CLI layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
* Computed values (``distance``, ``convert``) go to stdout so they can be
  piped; tables and diagnostics go to the stderr console.
"""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable

from simple_location.cli import exit_codes
from simple_location.cli.console import configure_logging, console
from simple_location.core.models import ProviderId
from simple_location.exceptions import SimpleLocationError
from simple_location.version import __version__

# name -> (conversion, needs a reference latitude, result unit)
_CONVERSIONS: dict[str, tuple[str, bool, str]] = {
    "lat-to-m": ("latitude_to_meters", False, "m"),
    "m-to-lat": ("meters_to_latitude", False, "°"),
    "lat-to-km": ("latitude_to_kilometers", False, "km"),
    "km-to-lat": ("kilometers_to_latitude", False, "°"),
    "lon-to-m": ("longitude_to_meters", True, "m"),
    "m-to-lon": ("meters_to_longitude", True, "°"),
    "lon-to-km": ("longitude_to_kilometers", True, "km"),
    "km-to-lon": ("kilometers_to_longitude", True, "°"),
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``distance``  — geodesic distance between two points
    * ``convert``   — degree / distance conversions
    * ``blur``      — sample blurred positions around a point
    * ``track``     — replay a recorded track through a location session
    * ``doctor``    — environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="simple-location",
        description="Device location helpers: distances, blurring and track replay.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    distance = commands.add_parser("distance", help="Distance in meters between two points.")
    for name in ("lat1", "lon1", "lat2", "lon2"):
        distance.add_argument(name, type=float)

    convert = commands.add_parser("convert", help="Convert between degrees and distance.")
    convert.add_argument("conversion", choices=sorted(_CONVERSIONS))
    convert.add_argument("value", type=float)
    convert.add_argument(
        "--at-latitude",
        type=float,
        default=0.0,
        help="Reference latitude for longitude conversions (default: 0).",
    )

    blur = commands.add_parser("blur", help="Sample blurred positions around a point.")
    blur.add_argument("lat", type=float)
    blur.add_argument("lon", type=float)
    blur.add_argument("--radius", type=int, required=True, help="Blur radius in meters.")
    blur.add_argument("--count", type=int, default=5, help="Number of samples.")
    blur.add_argument("--seed", type=int, default=None, help="Seed for reproducible output.")

    track = commands.add_parser("track", help="Replay a CSV track through a location session.")
    track.add_argument("file", help="CSV of latitude,longitude[,speed[,altitude[,timestamp_millis]]].")
    track.add_argument("--radius", type=int, default=0, help="Blur radius in meters.")
    track.add_argument("--fine", action="store_true", help="Require fine location.")
    track.add_argument("--passive", action="store_true", help="Use passive mode.")
    track.add_argument(
        "--interval",
        type=int,
        default=0,
        help="Minimum milliseconds between updates (default: 0).",
    )
    track.add_argument("--fresh", action="store_true", help="Ignore cached positions.")
    track.add_argument(
        "--disable",
        action="append",
        default=[],
        choices=[provider.value for provider in ProviderId],
        help="Treat a provider as disabled (repeatable).",
    )
    track.add_argument("--seed", type=int, default=None, help="Seed for reproducible blurring.")

    commands.add_parser("doctor", help="Check the runtime environment.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch (no business logic)
# ---------------------------------------------------------------------------

def _handle_distance(args: argparse.Namespace) -> int:
    from simple_location.core.geomath import distance_between

    meters = distance_between(args.lat1, args.lon1, args.lat2, args.lon2)
    print(f"{meters:.3f} m")
    return exit_codes.SUCCESS


def _handle_convert(args: argparse.Namespace) -> int:
    from simple_location.core import geomath

    function_name, needs_latitude, unit = _CONVERSIONS[args.conversion]
    conversion: Callable[..., float] = getattr(geomath, function_name)
    if needs_latitude:
        result = conversion(args.value, args.at_latitude)
    else:
        result = conversion(args.value)
    print(f"{result:.9g} {unit}")
    return exit_codes.SUCCESS


def _handle_blur(args: argparse.Namespace) -> int:
    """Draw ``--count`` blurred samples around one point."""
    from simple_location.cli.report import ReportRow, render_report
    from simple_location.core.blur import BlurEngine
    from simple_location.core.geomath import distance_meters
    from simple_location.core.models import Position

    engine = BlurEngine(random.Random(args.seed))
    original = Position(args.lat, args.lon)

    rows = []
    for _ in range(max(args.count, 0)):
        blurred = engine.blur(original, args.radius)
        rows.append(
            ReportRow(
                reported=blurred.point,
                offset_meters=distance_meters(original.point, blurred.point),
            )
        )

    render_report(f"Blurred samples (radius {args.radius} m)", rows)
    return exit_codes.SUCCESS


def _handle_track(args: argparse.Namespace) -> int:
    """Replay a recorded track through a :class:`LocationSession`.

    Flow:
    1. Read the track file.
    2. Build a replay source with the requested providers disabled.
    3. Start a session and collect what it reports on every update.
    4. Render the reported positions.
    """
    from simple_location.cli.report import ReportRow, render_report
    from simple_location.core.blur import BlurEngine
    from simple_location.core.cache import PositionCache
    from simple_location.core.geomath import distance_meters
    from simple_location.core.models import LocationConfig
    from simple_location.core.session import LocationSession
    from simple_location.infra.replay_source import ReplayPositionSource
    from simple_location.infra.settings import open_platform_location_settings
    from simple_location.infra.track_file import read_track

    positions = read_track(args.file)

    disabled = {ProviderId(value) for value in args.disable}
    source = ReplayPositionSource(enabled=set(ProviderId) - disabled)
    config = LocationConfig(
        require_fine=args.fine,
        passive=args.passive,
        update_interval_millis=args.interval,
        require_fresh_location=args.fresh,
    )
    session = LocationSession(
        source,
        config,
        cache=PositionCache(),
        blur_engine=BlurEngine(random.Random(args.seed)),
    )
    session.set_blur_radius(args.radius)

    session.start()
    provider = session.provider or ProviderId.COARSE_ACTIVE
    if not session.is_enabled():
        console.print(f"[yellow]Provider {provider} is disabled.[/yellow]")
        open_platform_location_settings()

    # Passive subscribers only see fixes that other consumers requested.
    emit_as = ProviderId.FINE_ACTIVE if provider is ProviderId.FINE_PASSIVE else provider

    rows: list[ReportRow] = []

    def _on_position_changed() -> None:
        reported = session.current_position()
        raw = source.get_last_known_position(emit_as)
        if reported is None or raw is None:
            return
        rows.append(
            ReportRow(
                reported=reported,
                offset_meters=distance_meters(raw.point, reported),
                speed=session.current_speed(),
                altitude=session.current_altitude(),
            )
        )

    session.set_listener(_on_position_changed)
    try:
        source.replay(positions, provider=emit_as)
    finally:
        session.stop()

    render_report(
        f"{len(rows)} of {len(positions)} fixes reported via {provider}",
        rows,
    )
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from simple_location.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the simple-location CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)

    if args.command == "doctor":
        return _handle_doctor()

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "distance": _handle_distance,
        "convert": _handle_convert,
        "blur": _handle_blur,
        "track": _handle_track,
    }
    return handlers[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SimpleLocationError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
