"""Unit tests for the Cloud Trace and Cloud Monitoring exporters.

Both exporters forward every call to the vendor exporter unchanged.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from opentelemetry.sdk.metrics.export import MetricExporter, MetricExportResult
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from gcpotel.exporters.gcp.metric_exporter import GcpMetricExporter
from gcpotel.exporters.gcp.trace_exporter import GcpTraceExporter


@pytest.mark.unit
class TestGcpTraceExporter:
    """Tests for GcpTraceExporter."""

    def test_creates_trace_exporter_with_project_id(self, fake_gcp: Any) -> None:
        exporter = GcpTraceExporter("test-project")

        assert isinstance(exporter, SpanExporter)
        (delegate,) = fake_gcp.trace_exporters
        assert delegate.project_id == "test-project"

    def test_creates_trace_exporter_without_project_id(self, fake_gcp: Any) -> None:
        GcpTraceExporter()

        (delegate,) = fake_gcp.trace_exporters
        assert delegate.project_id is None

    def test_export_is_forwarded(self, fake_gcp: Any) -> None:
        """
        GIVEN a batch of spans
        WHEN export() is called
        THEN the vendor exporter receives the same spans and its result is returned
        """
        exporter = GcpTraceExporter("test-project")
        (delegate,) = fake_gcp.trace_exporters
        delegate.export_result = SpanExportResult.FAILURE
        spans = [MagicMock(), MagicMock()]

        result = exporter.export(spans)

        assert result is SpanExportResult.FAILURE
        assert delegate.exported == spans

    def test_force_flush_and_shutdown_are_forwarded(self, fake_gcp: Any) -> None:
        exporter = GcpTraceExporter("test-project")
        (delegate,) = fake_gcp.trace_exporters

        assert exporter.force_flush(1234) is True
        exporter.shutdown()

        assert delegate.flush_calls == [1234]
        assert delegate.shutdown_calls == 1

    def test_vendor_errors_propagate(self, fake_gcp: Any) -> None:
        """
        GIVEN the vendor exporter raises
        WHEN export() is called
        THEN the error is not intercepted
        """
        exporter = GcpTraceExporter("test-project")
        (delegate,) = fake_gcp.trace_exporters
        delegate.export = MagicMock(side_effect=RuntimeError("quota exceeded"))

        with pytest.raises(RuntimeError, match="quota exceeded"):
            exporter.export([MagicMock()])


@pytest.mark.unit
class TestGcpMetricExporter:
    """Tests for GcpMetricExporter."""

    def test_creates_metric_exporter_with_project_id(self, fake_gcp: Any) -> None:
        exporter = GcpMetricExporter("test-project")

        assert isinstance(exporter, MetricExporter)
        (delegate,) = fake_gcp.metric_exporters
        assert delegate.project_id == "test-project"

    def test_creates_metric_exporter_without_project_id(self, fake_gcp: Any) -> None:
        GcpMetricExporter()

        (delegate,) = fake_gcp.metric_exporters
        assert delegate.project_id is None

    def test_export_is_forwarded(self, fake_gcp: Any) -> None:
        exporter = GcpMetricExporter("test-project")
        (delegate,) = fake_gcp.metric_exporters
        metrics_data = MagicMock()

        result = exporter.export(metrics_data, timeout_millis=500)

        assert result is MetricExportResult.SUCCESS
        assert delegate.exported == [metrics_data]

    def test_force_flush_and_shutdown_are_forwarded(self, fake_gcp: Any) -> None:
        exporter = GcpMetricExporter("test-project")
        (delegate,) = fake_gcp.metric_exporters

        assert exporter.force_flush(timeout_millis=250) is True
        exporter.shutdown(timeout_millis=750)

        assert delegate.flush_calls == [250]
        assert delegate.shutdown_calls == [750]
