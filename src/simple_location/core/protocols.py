"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from simple_location.core.models import Position, ProviderId, SubscriptionHandle

PositionListener = Callable[[], None]
"""Session listener, called with no arguments whenever the position changes.

Listeners read the (possibly blurred) position back from the session so
raw coordinates are never handed out past the blurring step.
"""

UpdateCallback = Callable[[Position], None]
"""Callback a position source invokes with every delivered fix."""


class PositionSource(Protocol):
    """Contract for the runtime facility that reports device positions.

    Any object that implements these four methods with the correct
    signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def is_provider_enabled(self, provider: ProviderId) -> bool:
        """Return whether *provider* is currently enabled.

        Raises
        ------
        ProviderQueryError
            When the enablement state cannot be determined.  Callers
            treat any failure as "not enabled".
        """
        ...  # pragma: no cover

    def get_last_known_position(self, provider: ProviderId) -> Position | None:
        """Return the most recent fix of *provider*, or ``None``.

        Raises
        ------
        ProviderQueryError
            When the query fails.  Callers treat any failure as
            "no position".
        """
        ...  # pragma: no cover

    def subscribe(
        self,
        provider: ProviderId,
        interval_millis: int,
        callback: UpdateCallback,
    ) -> SubscriptionHandle:
        """Start delivering fixes of *provider* to *callback*.

        *interval_millis* throttles the callback frequency; it does not
        bound the latency to the first fix.
        """
        ...  # pragma: no cover

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """Stop the subscription identified by *handle*."""
        ...  # pragma: no cover
