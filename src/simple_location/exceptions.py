"""Custom exception hierarchy for simple-location.

All exceptions that cross layer boundaries must inherit from
:class:`SimpleLocationError`.  Raw exceptions raised by a position
source must NEVER propagate beyond the session — they are either
recovered locally (enablement and last-known queries) or re-raised as a
typed subclass defined here.

Hierarchy
---------
SimpleLocationError
├── ConfigurationError
│   └── UnsupportedModeError
├── ProviderQueryError
├── SubscriptionError
├── TrackFileError
└── EnvironmentError
"""

from __future__ import annotations


class SimpleLocationError(Exception):
    """Base exception for all simple-location errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(SimpleLocationError):
    """Raised when a session configuration is invalid."""


class UnsupportedModeError(ConfigurationError):
    """Raised when passive mode is requested for coarse location.

    There is no passive coarse provider, so the request cannot be
    honoured and is never silently downgraded.
    """


# --- Position source -------------------------------------------------------

class ProviderQueryError(SimpleLocationError):
    """Raised by a position source when a provider query fails.

    The session treats this as "disabled" / "no position" and never
    lets it reach the caller.
    """


class SubscriptionError(SimpleLocationError):
    """Raised when subscribing to position updates fails."""


# --- Track files -----------------------------------------------------------

class TrackFileError(SimpleLocationError):
    """Raised when a recorded track cannot be read or parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SimpleLocationError):
    """Raised when an optional runtime dependency is not available."""
