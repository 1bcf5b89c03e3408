"""Process exit codes returned by ``simple-location``.

Every command handler and the :func:`~simple_location.cli.app.cli`
boundary return one of these; nothing else in the package exits.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command finished; for ``doctor``, every critical check passed."""

GENERAL_ERROR: int = 1
"""A library error was reported, e.g. an unreadable track file, passive
coarse mode, or a failed ``doctor`` check."""

UNEXPECTED_ERROR: int = 2
"""Anything that is not a :class:`SimpleLocationError` reached the CLI."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
