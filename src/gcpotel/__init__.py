"""OpenTelemetry exporters for Google Cloud.

Send spans to Cloud Trace, metrics to Cloud Monitoring and log records to
Cloud Logging, either by wiring the exporters into your own providers:

    from gcpotel import GcpLogExporter
    processor = BatchLogRecordProcessor(GcpLogExporter("my-project"))

or by letting the SDK build and install the providers:

    import gcpotel
    gcpotel.init("/path/to/gcpotel.yaml")
"""

from __future__ import annotations

from gcpotel.api import (
    Config,
    GcpConfig,
    ServiceConfig,
    ValidationConfig,
    init,
    is_configured,
    shutdown,
)
from gcpotel.exceptions import ConfigurationError
from gcpotel.exporters.result import ExportResult, ExportResultCode

__version__ = "0.1.0"

# Exporters import the Google client libraries, so load them on first use
_LAZY_EXPORTS = {
    "GcpTraceExporter": "gcpotel.exporters.gcp.trace_exporter",
    "GcpMetricExporter": "gcpotel.exporters.gcp.metric_exporter",
    "GcpLogExporter": "gcpotel.exporters.gcp.log_exporter",
    "map_severity": "gcpotel.exporters.gcp.log_exporter",
    "LOG_NAME": "gcpotel.exporters.gcp.log_exporter",
}

__all__ = [
    "Config",
    "ConfigurationError",
    "ExportResult",
    "ExportResultCode",
    "GcpConfig",
    "ServiceConfig",
    "ValidationConfig",
    "__version__",
    "init",
    "is_configured",
    "shutdown",
    *_LAZY_EXPORTS,
]


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        import importlib

        module = importlib.import_module(_LAZY_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'gcpotel' has no attribute '{name}'")


def __dir__() -> list[str]:
    return sorted(__all__)
