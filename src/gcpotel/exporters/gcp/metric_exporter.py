"""Cloud Monitoring metric exporter."""

from __future__ import annotations

import logging
from typing import Any, Optional

from opentelemetry.exporter.cloud_monitoring import CloudMonitoringMetricsExporter
from opentelemetry.sdk.metrics.export import (
    MetricExporter,
    MetricExportResult,
    MetricsData,
)

logger = logging.getLogger(__name__)


class GcpMetricExporter(MetricExporter):
    """MetricExporter that sends metrics to Google Cloud Monitoring.

    Thin wrapper around ``CloudMonitoringMetricsExporter``. The preferred
    temporality and aggregation are copied from the vendor exporter so
    metric readers collect data in the shape Cloud Monitoring expects.

    Args:
        project_id: Google Cloud project. None lets the vendor exporter
            resolve it from the environment.
    """

    def __init__(self, project_id: Optional[str] = None) -> None:
        self._delegate = CloudMonitoringMetricsExporter(project_id=project_id)
        super().__init__(
            preferred_temporality=getattr(self._delegate, "_preferred_temporality", None),
            preferred_aggregation=getattr(self._delegate, "_preferred_aggregation", None),
        )
        logger.debug("Cloud Monitoring exporter created for project %s", project_id)

    def export(
        self,
        metrics_data: MetricsData,
        timeout_millis: float = 10_000,
        **kwargs: Any,
    ) -> MetricExportResult:
        return self._delegate.export(metrics_data, timeout_millis=timeout_millis, **kwargs)

    def force_flush(self, timeout_millis: float = 10_000) -> bool:
        return self._delegate.force_flush(timeout_millis=timeout_millis)

    def shutdown(self, timeout_millis: float = 30_000, **kwargs: Any) -> None:
        self._delegate.shutdown(timeout_millis=timeout_millis, **kwargs)
