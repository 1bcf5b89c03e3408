"""Infrastructure: the platform's location settings screen.

No host UI is attached to this library, so opening the settings screen
is a logged no-op.  Hosts with a settings screen call it themselves
when :meth:`LocationSession.is_enabled` reports ``False``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def open_platform_location_settings() -> bool:
    """Ask the host to show its location settings.

    Returns
    -------
    bool
        Whether a settings screen was opened — always ``False`` here.
    """
    logger.info("No platform location settings screen is available on this host.")
    return False
