"""Google Cloud provider factory.

Builds OpenTelemetry SDK providers whose processors and readers feed the
Cloud Trace, Cloud Monitoring and Cloud Logging exporters. Batching and
collection intervals are left to the SDK components.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

if TYPE_CHECKING:
    from gcpotel.api.types import Config

logger = logging.getLogger(__name__)


@dataclass
class TelemetryProviders:
    """SDK providers created for one configuration; disabled signals are None."""

    tracer_provider: TracerProvider | None = None
    meter_provider: MeterProvider | None = None
    logger_provider: LoggerProvider | None = None

    def all(self) -> list[TracerProvider | MeterProvider | LoggerProvider]:
        """Return the providers that were created."""
        return [
            p
            for p in (self.tracer_provider, self.meter_provider, self.logger_provider)
            if p is not None
        ]


def check_dependencies() -> None:
    """Verify the Google Cloud exporter packages are installed.

    Raises:
        ImportError: If any of the exporter packages is missing.
    """
    required = [
        ("opentelemetry.exporter.cloud_trace", "opentelemetry-exporter-gcp-trace"),
        ("opentelemetry.exporter.cloud_monitoring", "opentelemetry-exporter-gcp-monitoring"),
        ("google.cloud.logging", "google-cloud-logging"),
    ]
    for module_path, package in required:
        try:
            __import__(module_path)
        except ImportError:
            raise ImportError(
                f"Google Cloud export requires '{package}' package.\n"
                f"Install with: pip install {package}"
            ) from None


def create_resource(config: Config) -> Resource:
    """Build the Resource shared by all providers."""
    resource_attrs: dict[str, str] = {
        SERVICE_NAME: config.service.name,
    }
    if config.service.version:
        resource_attrs[SERVICE_VERSION] = config.service.version
    return Resource.create(resource_attrs)


def create_gcp_providers(config: Config) -> TelemetryProviders:
    """Create SDK providers that export to Google Cloud.

    Args:
        config: SDK configuration with gcp section.

    Returns:
        TelemetryProviders with one provider per enabled signal.

    Raises:
        ImportError: If a Google Cloud exporter package is not installed.
    """
    check_dependencies()

    from gcpotel.exporters.gcp.log_exporter import GcpLogExporter
    from gcpotel.exporters.gcp.metric_exporter import GcpMetricExporter
    from gcpotel.exporters.gcp.trace_exporter import GcpTraceExporter

    gcp = config.gcp
    resource = create_resource(config)
    providers = TelemetryProviders()

    if gcp.traces:
        tracer_provider = TracerProvider(resource=resource)
        tracer_provider.add_span_processor(
            BatchSpanProcessor(GcpTraceExporter(gcp.project_id))
        )
        providers.tracer_provider = tracer_provider

    if gcp.metrics:
        reader = PeriodicExportingMetricReader(
            GcpMetricExporter(gcp.project_id),
            export_interval_millis=gcp.metric_export_interval_ms,
        )
        providers.meter_provider = MeterProvider(
            resource=resource, metric_readers=[reader]
        )

    if gcp.logs:
        logger_provider = LoggerProvider(resource=resource)
        logger_provider.add_log_record_processor(
            BatchLogRecordProcessor(GcpLogExporter(gcp.project_id))
        )
        providers.logger_provider = logger_provider

    logger.debug(
        "Google Cloud providers configured for project %s (traces=%s, metrics=%s, logs=%s)",
        gcp.project_id or "<default>",
        gcp.traces,
        gcp.metrics,
        gcp.logs,
    )

    return providers
