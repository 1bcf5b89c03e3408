"""``simple-location doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies simple-location's
requirements.

This module lives in the CLI layer and renders via Rich when it is
available.  No business logic resides here; it purely collects and
displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from simple_location.cli import exit_codes
from simple_location.cli.console import console
from simple_location.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _package_version(distribution: str) -> str:
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return "unknown"


def _geopy_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the geopy row.

    geopy is required: distances cannot be computed without it.
    """
    try:
        import geopy  # noqa: F401
    except ImportError:
        return "geopy", "NOT INSTALLED", "[red]FAIL[/red]"
    return "geopy", _package_version("geopy"), "[green]OK[/green]"


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rich row (optional)."""
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "not installed", "[yellow]WARN[/yellow]"
    return "rich", _package_version("rich"), "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _simple_location_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the simple-location version row."""
    return "simple-location", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nsimple-location doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<16} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<16} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _simple_location_version_check(),
        _python_version_check(),
        _geopy_check(),
        _rich_check(),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        summary = "Some checks failed." if has_failure else "All checks passed."
        print(summary, file=sys.stderr)
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="simple-location doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=16)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
