"""Pure provider-selection policy.

Given the requested accuracy and mode plus live provider enablement,
:func:`select_provider` deterministically picks one
:class:`~simple_location.core.models.ProviderId`.

Policy
------
1. **Fine required** — the fine provider for the requested mode; no
   enablement check at this level.
2. **Coarse acceptable** — walk :data:`COARSE_FALLBACK_ORDER`:

   a. coarse enabled → coarse (passive mode is an error: no passive
      coarse provider exists);
   b. any fine provider enabled → the fine provider for the mode;
   c. nothing enabled → coarse, the minimum-permission default.

Coarse comes first to save power; fine is the graceful fallback.
Enablement probes run lazily in table order.
"""

from __future__ import annotations

from collections.abc import Callable

from simple_location.core.models import ProviderId
from simple_location.exceptions import UnsupportedModeError

ProviderCheck = Callable[[ProviderId], bool]

COARSE_FALLBACK_ORDER: tuple[tuple[tuple[ProviderId, ...], bool], ...] = (
    ((ProviderId.COARSE_ACTIVE,), False),
    ((ProviderId.FINE_ACTIVE, ProviderId.FINE_PASSIVE), True),
)
"""Ordered ``(providers to probe, resolves to fine)`` rows.

A row matches when any of its providers is enabled.
"""

DEFAULT_PROVIDER: ProviderId = ProviderId.COARSE_ACTIVE
"""Returned when no provider is enabled at all."""


def fine_provider(passive: bool) -> ProviderId:
    """Return the fine provider for the requested mode."""
    return ProviderId.FINE_PASSIVE if passive else ProviderId.FINE_ACTIVE


def _coarse_provider(passive: bool) -> ProviderId:
    if passive:
        raise UnsupportedModeError(
            "There is no passive provider for the coarse location.",
            hint="Require fine location or disable passive mode.",
        )
    return ProviderId.COARSE_ACTIVE


def select_provider(
    require_fine: bool,
    passive: bool,
    is_provider_enabled: ProviderCheck,
) -> ProviderId:
    """Pick the provider matching the requested accuracy and mode.

    Parameters
    ----------
    require_fine:
        Whether fine location is mandatory.
    passive:
        Whether passive mode is requested.
    is_provider_enabled:
        Live enablement probe.  It should not raise; callers wrap
        fallible sources so failures read as "disabled".

    Raises
    ------
    UnsupportedModeError
        When coarse location is enabled and selected but passive mode
        was requested.
    """
    if require_fine:
        return fine_provider(passive)

    for providers, resolves_to_fine in COARSE_FALLBACK_ORDER:
        if any(is_provider_enabled(provider) for provider in providers):
            if resolves_to_fine:
                return fine_provider(passive)
            return _coarse_provider(passive)

    return DEFAULT_PROVIDER
