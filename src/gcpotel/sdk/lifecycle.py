"""Global SDK state management.

This module manages the singleton state of the SDK, including:
- Whether the SDK has been initialized
- The active providers
- Shutdown coordination
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gcpotel.exporters.gcp.exporter import TelemetryProviders

logger = logging.getLogger(__name__)

_configured: bool = False
_providers: TelemetryProviders | None = None


def set_configured(providers: TelemetryProviders) -> None:
    """Mark the SDK as configured with the given providers.

    Args:
        providers: The providers to flush and shut down on shutdown().
    """
    global _configured, _providers
    if _configured:
        logger.warning(
            "SDK already configured. Call shutdown() before re-initializing."
        )
    _configured = True
    _providers = providers


def is_configured() -> bool:
    """Check if the SDK has been initialized.

    Returns:
        True if init() has been called successfully.
    """
    return _configured


def get_providers() -> TelemetryProviders | None:
    """Get the active providers.

    Returns:
        The TelemetryProviders if configured, None otherwise.
    """
    return _providers


def shutdown() -> None:
    """Shutdown the SDK and flush pending telemetry.

    This function is idempotent and safe to call multiple times.
    After shutdown, is_configured() returns False.
    """
    global _configured, _providers
    if _providers is not None:
        for provider in _providers.all():
            name = type(provider).__name__
            try:
                provider.force_flush()
                provider.shutdown()
                logger.debug("%s shutdown complete", name)
            except Exception as e:
                logger.warning("Error during %s shutdown: %s", name, e)
    _configured = False
    _providers = None
