"""Location session — orchestrates provider selection, updates and blurring.

A :class:`LocationSession` depends on a
:class:`~simple_location.core.protocols.PositionSource` injected at
construction time (dependency inversion), keeping the core free of any
platform imports.  It is responsible for:

* Selecting a provider for its :class:`LocationConfig`.
* Subscribing to and unsubscribing from position updates.
* Keeping the current fix and writing accepted fixes to the cache.
* Reporting the current position, blurred with the current radius.
* Notifying a single listener synchronously on every update.

Guarantees
----------
* No ``print()``, no filesystem access, no blocking calls.
* Provider query failures never reach the caller — enablement reads as
  ``False`` and last-known lookups as "no position".
* Only :class:`~simple_location.exceptions.SimpleLocationError`
  subclasses escape :meth:`LocationSession.start`.

All methods and the update callback are expected to run on the same
logical thread; only the cache is safe to share across threads.
"""

from __future__ import annotations

import logging

from simple_location.core.blur import BlurEngine
from simple_location.core.cache import PositionCache, shared_position_cache
from simple_location.core.models import (
    LocationConfig,
    Point,
    Position,
    ProviderId,
    SessionState,
    SubscriptionHandle,
)
from simple_location.core.protocols import PositionListener, PositionSource
from simple_location.core.provider_selector import select_provider
from simple_location.exceptions import (
    SimpleLocationError,
    SubscriptionError,
    UnsupportedModeError,
)

logger = logging.getLogger(__name__)


class LocationSession:
    """Stateful access to the device position through a position source.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`PositionSource` protocol.
    config:
        Session configuration; defaults to coarse, active updates every
        ten minutes.
    cache:
        Last-known-position cache.  Defaults to the process-wide
        :data:`~simple_location.core.cache.shared_position_cache`.
    blur_engine:
        Engine used to blur reported coordinates.
    """

    def __init__(
        self,
        source: PositionSource,
        config: LocationConfig | None = None,
        *,
        cache: PositionCache | None = None,
        blur_engine: BlurEngine | None = None,
    ) -> None:
        self._source: PositionSource = source
        self._config: LocationConfig = config if config is not None else LocationConfig()
        self._cache: PositionCache = cache if cache is not None else shared_position_cache
        self._blur_engine: BlurEngine = (
            blur_engine if blur_engine is not None else BlurEngine()
        )

        self._blur_radius: int = 0
        self._listener: PositionListener | None = None
        self._position: Position | None = None
        self._provider: ProviderId | None = None
        self._subscription: SubscriptionHandle | None = None

        if not self._config.require_fresh_location:
            self._position = self._cached_position()
            self._cache_current()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> LocationConfig:
        return self._config

    @property
    def state(self) -> SessionState:
        if self._subscription is None:
            return SessionState.IDLE
        return SessionState.UPDATING

    @property
    def is_updating(self) -> bool:
        return self._subscription is not None

    @property
    def provider(self) -> ProviderId | None:
        """Provider chosen by the last :meth:`start`, if any."""
        return self._provider

    @property
    def blur_radius(self) -> int:
        return self._blur_radius

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_blur_radius(self, meters: int) -> None:
        """Set the blur radius in meters; ``0`` disables blurring."""
        self._blur_radius = meters

    def set_listener(self, listener: PositionListener | None) -> None:
        """Attach *listener*, replacing any previous one; ``None`` detaches."""
        self._listener = listener

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Subscribe to position updates, restarting if already updating.

        Raises
        ------
        UnsupportedModeError
            If passive coarse location is selected.
        SubscriptionError
            If the position source fails to subscribe.  The session
            stays idle; call :meth:`start` again to retry.
        """
        if self._subscription is not None:
            self.stop()

        provider = self._select_provider()
        self._provider = provider

        if not self._config.require_fresh_location:
            self._position = self._cached_position()

        try:
            handle = self._source.subscribe(
                provider,
                self._config.update_interval_millis,
                self.on_external_update,
            )
        except SimpleLocationError:
            raise
        except Exception as exc:
            raise SubscriptionError(
                f"Could not subscribe to {provider} updates: {exc}",
                hint="Check that location access is granted, then start again.",
            ) from exc

        self._subscription = handle
        logger.debug(
            "Subscribed to %s updates every %d ms",
            provider,
            self._config.update_interval_millis,
        )

    def stop(self) -> None:
        """Stop receiving updates (no-op when idle)."""
        if self._subscription is None:
            return
        handle = self._subscription
        self._subscription = None
        self._source.unsubscribe(handle)
        logger.debug("Unsubscribed from %s updates", handle.provider)

    # ------------------------------------------------------------------
    # Update callback
    # ------------------------------------------------------------------

    def on_external_update(self, position: Position) -> None:
        """Accept a new fix from the position source.

        The fix becomes the current position, is written to the cache,
        and the listener (if any) is called on the calling thread.
        """
        self._position = position
        self._cache_current()
        logger.debug(
            "Position update (%s, %s) from %s",
            position.latitude,
            position.longitude,
            position.provider,
        )
        if self._listener is not None:
            self._listener()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_enabled(self) -> bool:
        """Return whether the selected provider is enabled.

        Failures of the underlying query read as ``False``.

        Raises
        ------
        UnsupportedModeError
            If no provider was selected yet and selection hits the
            passive coarse combination.
        """
        provider = self._provider if self._provider is not None else self._select_provider()
        return self._is_provider_enabled(provider)

    def current_position(self) -> Point | None:
        """Return the blurred current position, or ``None`` if unknown."""
        if self._position is None:
            return None
        return self._blur(self._position).point

    def current_latitude(self) -> float:
        """Return the blurred current latitude, or ``0.0`` if unknown.

        Each call draws a fresh offset, so latitude and longitude read
        separately do not come from the same blurred fix.
        """
        if self._position is None:
            return 0.0
        return self._blur(self._position).latitude

    def current_longitude(self) -> float:
        """Return the blurred current longitude, or ``0.0`` if unknown."""
        if self._position is None:
            return 0.0
        return self._blur(self._position).longitude

    def current_speed(self) -> float:
        """Return the raw current speed, or ``0.0`` if unknown."""
        if self._position is None:
            return 0.0
        return self._position.speed

    def current_altitude(self) -> float:
        """Return the raw current altitude, or ``0.0`` if unknown."""
        if self._position is None:
            return 0.0
        return self._position.altitude

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _blur(self, position: Position) -> Position:
        return self._blur_engine.blur(position, self._blur_radius)

    def _select_provider(self) -> ProviderId:
        return select_provider(
            self._config.require_fine,
            self._config.passive,
            self._is_provider_enabled,
        )

    def _is_provider_enabled(self, provider: ProviderId) -> bool:
        """Query enablement of *provider*, failing closed."""
        try:
            return bool(self._source.is_provider_enabled(provider))
        except Exception as exc:  # noqa: BLE001
            logger.debug("Enablement query for %s failed: %s", provider, exc)
            return False

    def _cached_position(self) -> Position | None:
        """Return the cached fix, else the source's last known one."""
        cached = self._cache.get()
        if cached is not None:
            return cached
        try:
            provider = self._select_provider()
        except UnsupportedModeError:
            # Reported by start(); seeding just finds nothing.
            return None
        try:
            return self._source.get_last_known_position(provider)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Last known position lookup failed: %s", exc)
            return None

    def _cache_current(self) -> None:
        if self._position is not None:
            self._cache.put(self._position)
