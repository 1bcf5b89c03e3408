"""Allow ``python -m simple_location`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m simple_location`` behaves identically to the
``simple-location`` console script.
"""

from __future__ import annotations

from simple_location.cli.app import cli

if __name__ == "__main__":
    cli()
