"""Pipeline composition: provider creation + global installation.

This module is responsible for:
- Dispatching to the exporter factory that builds the providers
- Installing the created providers as the OpenTelemetry globals
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from opentelemetry import _logs, metrics, trace

if TYPE_CHECKING:
    from gcpotel.api.types import Config
    from gcpotel.exporters.gcp.exporter import TelemetryProviders

logger = logging.getLogger(__name__)

# Exporter factory: (module_path, factory_function_name)
EXPORTER_FACTORY: tuple[str, str] = (
    "gcpotel.exporters.gcp.exporter",
    "create_gcp_providers",
)


def create_providers(config: Config) -> TelemetryProviders:
    """Create SDK providers for the configured signals.

    Args:
        config: SDK configuration.

    Returns:
        Providers for every enabled signal.

    Raises:
        ImportError: If exporter dependencies are not installed.
    """
    module_path, factory_name = EXPORTER_FACTORY
    module = importlib.import_module(module_path)
    factory = getattr(module, factory_name)

    providers: TelemetryProviders = factory(config)
    return providers


def install_providers(providers: TelemetryProviders) -> None:
    """Set the created providers as the OpenTelemetry global providers.

    OTel only allows each global to be set once per process; later
    attempts are ignored by the API with a warning.
    """
    if providers.tracer_provider is not None:
        trace.set_tracer_provider(providers.tracer_provider)
        logger.debug("Installed global TracerProvider")
    if providers.meter_provider is not None:
        metrics.set_meter_provider(providers.meter_provider)
        logger.debug("Installed global MeterProvider")
    if providers.logger_provider is not None:
        _logs.set_logger_provider(providers.logger_provider)
        logger.debug("Installed global LoggerProvider")
