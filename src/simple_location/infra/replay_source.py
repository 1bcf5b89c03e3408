"""In-memory implementation of :class:`~simple_location.core.protocols.PositionSource`.

:class:`ReplayPositionSource` stands in for the platform location
service: fixes are pushed in by the host (a recorded track, a test, a
simulator) and delivered synchronously to subscribers.

Delivery rules
--------------
* A fix emitted for provider *P* reaches every subscriber of *P* and
  every :attr:`~ProviderId.FINE_PASSIVE` subscriber — passive consumers
  piggy-back on fixes requested by others.
* A fix carrying ``timestamp_millis`` is delivered to a subscription
  only when at least its ``interval_millis`` elapsed since the last fix
  delivered to it.  Fixes without a timestamp are always delivered.
* The latest fix emitted for a provider becomes its last known
  position, even when no subscriber received it.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from simple_location.core.models import Position, ProviderId, SubscriptionHandle
from simple_location.core.protocols import UpdateCallback

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Subscription:
    handle: SubscriptionHandle
    callback: UpdateCallback
    last_delivered_millis: int | None = None

    def accepts(self, position: Position) -> bool:
        if position.timestamp_millis is None or self.last_delivered_millis is None:
            return True
        elapsed = position.timestamp_millis - self.last_delivered_millis
        return elapsed >= self.handle.interval_millis


class ReplayPositionSource:
    """Concrete :class:`PositionSource` driven by explicitly emitted fixes.

    Usage::

        source = ReplayPositionSource()
        session = LocationSession(source)
        session.start()
        source.emit(Position(52.52, 13.405))

    This class satisfies the
    :class:`~simple_location.core.protocols.PositionSource` protocol
    structurally — no explicit inheritance required.

    Parameters
    ----------
    enabled:
        Providers that start out enabled.  Defaults to all of them.
    last_known:
        Initial last known fix per provider.
    """

    def __init__(
        self,
        enabled: Iterable[ProviderId] | None = None,
        last_known: Mapping[ProviderId, Position] | None = None,
    ) -> None:
        self._enabled: set[ProviderId] = (
            set(ProviderId) if enabled is None else set(enabled)
        )
        self._last_known: dict[ProviderId, Position] = dict(last_known or {})
        self._subscriptions: dict[int, _Subscription] = {}
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Host controls
    # ------------------------------------------------------------------

    def set_enabled(self, provider: ProviderId, enabled: bool) -> None:
        """Enable or disable *provider*."""
        if enabled:
            self._enabled.add(provider)
        else:
            self._enabled.discard(provider)

    def set_last_known(self, provider: ProviderId, position: Position | None) -> None:
        """Replace (or clear) the last known fix of *provider*."""
        if position is None:
            self._last_known.pop(provider, None)
        else:
            self._last_known[provider] = position

    @property
    def subscriptions(self) -> tuple[SubscriptionHandle, ...]:
        """Handles of all active subscriptions, oldest first."""
        return tuple(sub.handle for sub in self._subscriptions.values())

    def emit(self, position: Position, provider: ProviderId | None = None) -> int:
        """Deliver *position* as a fix of *provider*.

        *provider* defaults to ``position.provider`` and then to
        :attr:`ProviderId.FINE_ACTIVE`.  The delivered fix always names
        its provider.

        Returns
        -------
        int
            Number of subscriptions the fix was delivered to.
        """
        provider = provider or position.provider or ProviderId.FINE_ACTIVE
        if position.provider is not provider:
            position = replace(position, provider=provider)
        self._last_known[provider] = position

        delivered = 0
        # Snapshot: callbacks may subscribe or unsubscribe while we iterate.
        for sub in list(self._subscriptions.values()):
            if sub.handle.subscription_id not in self._subscriptions:
                continue
            if sub.handle.provider not in (provider, ProviderId.FINE_PASSIVE):
                continue
            if not sub.accepts(position):
                continue
            if position.timestamp_millis is not None:
                sub.last_delivered_millis = position.timestamp_millis
            sub.callback(position)
            delivered += 1
        return delivered

    def replay(
        self,
        positions: Iterable[Position],
        provider: ProviderId | None = None,
    ) -> int:
        """Emit every fix of *positions* in order; return total deliveries."""
        return sum(self.emit(position, provider) for position in positions)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def is_provider_enabled(self, provider: ProviderId) -> bool:
        return provider in self._enabled

    def get_last_known_position(self, provider: ProviderId) -> Position | None:
        return self._last_known.get(provider)

    def subscribe(
        self,
        provider: ProviderId,
        interval_millis: int,
        callback: UpdateCallback,
    ) -> SubscriptionHandle:
        handle = SubscriptionHandle(
            subscription_id=next(self._ids),
            provider=provider,
            interval_millis=interval_millis,
        )
        self._subscriptions[handle.subscription_id] = _Subscription(handle, callback)
        logger.debug("Subscription %d opened for %s", handle.subscription_id, provider)
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """Remove the subscription; unknown handles are ignored."""
        if self._subscriptions.pop(handle.subscription_id, None) is not None:
            logger.debug("Subscription %d closed", handle.subscription_id)
