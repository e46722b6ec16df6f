"""Cloud Trace span exporter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from opentelemetry.exporter.cloud_trace import CloudTraceSpanExporter
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import ReadableSpan

logger = logging.getLogger(__name__)


class GcpTraceExporter(SpanExporter):
    """SpanExporter that sends spans to Google Cloud Trace.

    Thin wrapper around ``CloudTraceSpanExporter``. Every call is forwarded
    unchanged, including whatever the vendor exporter raises or returns.

    Args:
        project_id: Google Cloud project. None lets the vendor exporter
            resolve it from the environment.
    """

    def __init__(self, project_id: Optional[str] = None) -> None:
        self._delegate = CloudTraceSpanExporter(project_id=project_id)
        logger.debug("Cloud Trace exporter created for project %s", project_id)

    def export(self, spans: Sequence["ReadableSpan"]) -> SpanExportResult:
        return self._delegate.export(spans)

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return self._delegate.force_flush(timeout_millis)

    def shutdown(self) -> None:
        self._delegate.shutdown()
