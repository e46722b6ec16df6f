"""Shared pytest configuration and fixtures.

This module provides test fixtures that:
1. Reset OpenTelemetry global state between tests for isolation
2. Replace the Google Cloud clients with typed fakes so no test needs
   credentials or network access

Following OpenTelemetry Python SDK testing patterns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generator

import pytest
from opentelemetry import trace as trace_api

from tests.fakes import (
    FakeCloudMonitoringMetricsExporter,
    FakeCloudTraceSpanExporter,
    FakeLoggingClient,
    FakeLoggingClientFactory,
)

if TYPE_CHECKING:
    from pathlib import Path


def _reset_otel_globals() -> None:
    """Reset OpenTelemetry globals for test isolation.

    This ensures each test starts with a clean slate and avoids
    "provider already set" errors.

    WARNING: Only use this in tests. This accesses internal OTel APIs.
    """
    from opentelemetry._logs import _internal as logs_internal
    from opentelemetry.metrics import _internal as metrics_internal
    from opentelemetry.util._once import Once

    trace_api._TRACER_PROVIDER_SET_ONCE = Once()
    trace_api._TRACER_PROVIDER = None
    trace_api._PROXY_TRACER_PROVIDER = trace_api.ProxyTracerProvider()

    metrics_internal._METER_PROVIDER_SET_ONCE = Once()
    metrics_internal._METER_PROVIDER = None

    logs_internal._LOGGER_PROVIDER_SET_ONCE = Once()
    logs_internal._LOGGER_PROVIDER = None


def _reset_sdk_state() -> None:
    """Shut down anything a test initialized and reset SDK state."""
    from gcpotel.sdk import lifecycle

    lifecycle.shutdown()
    lifecycle._configured = False
    lifecycle._providers = None


@dataclass
class FakeGcp:
    """Handles on the fakes installed by the fake_gcp fixture."""

    logging_clients: FakeLoggingClientFactory

    @property
    def trace_exporters(self) -> list[FakeCloudTraceSpanExporter]:
        return FakeCloudTraceSpanExporter.instances

    @property
    def metric_exporters(self) -> list[FakeCloudMonitoringMetricsExporter]:
        return FakeCloudMonitoringMetricsExporter.instances


@pytest.fixture(autouse=True)
def reset_otel_state() -> Generator[None, None, None]:
    """Reset OpenTelemetry global state before and after each test."""
    _reset_otel_globals()
    yield
    _reset_sdk_state()
    _reset_otel_globals()


@pytest.fixture(autouse=True)
def fake_gcp(monkeypatch: pytest.MonkeyPatch) -> Generator[FakeGcp, None, None]:
    """Replace the Google Cloud clients with fakes for every test."""
    from gcpotel.exporters.gcp import log_exporter, metric_exporter, trace_exporter

    FakeCloudTraceSpanExporter.instances = []
    FakeCloudMonitoringMetricsExporter.instances = []
    factory = FakeLoggingClientFactory()

    monkeypatch.setattr(
        trace_exporter, "CloudTraceSpanExporter", FakeCloudTraceSpanExporter
    )
    monkeypatch.setattr(
        metric_exporter,
        "CloudMonitoringMetricsExporter",
        FakeCloudMonitoringMetricsExporter,
    )
    monkeypatch.setattr(log_exporter, "Client", factory)

    yield FakeGcp(logging_clients=factory)


@pytest.fixture
def logging_client() -> FakeLoggingClient:
    """Provide a FakeLoggingClient bound to 'test-project'."""
    return FakeLoggingClient(project="test-project")


@pytest.fixture
def valid_config_content() -> str:
    """Return valid YAML config content for tests."""
    return """service:
  name: test-service
  version: "1.0.0"

gcp:
  project_id: test-project
  metric_export_interval_ms: 5000

validation:
  mode: permissive
"""


@pytest.fixture
def valid_config_file(tmp_path: "Path", valid_config_content: str) -> "Path":
    """Create a valid config file and return its path."""
    config_path = tmp_path / "gcpotel.yaml"
    config_path.write_text(valid_config_content)
    return config_path
