"""
gcpotel demo - send a span, a metric and a log record to Google Cloud.

Run:
    export GOOGLE_CLOUD_PROJECT=my-project
    gcloud auth application-default login
    python examples/basic/main.py

View telemetry:
    Cloud Trace, Metrics Explorer and Logs Explorer (log name "gcpotel")
"""

from __future__ import annotations

import logging
from pathlib import Path

from opentelemetry import _logs, metrics, trace
from opentelemetry.sdk._logs import LoggingHandler

import gcpotel


def main() -> None:
    gcpotel.init(Path(__file__).parent / "gcpotel.yaml")

    # Route stdlib logging through the OTel logger provider
    handler = LoggingHandler(logger_provider=_logs.get_logger_provider())
    app_logger = logging.getLogger("demo")
    app_logger.addHandler(handler)
    app_logger.setLevel(logging.INFO)

    tracer = trace.get_tracer("demo")
    requests = metrics.get_meter("demo").create_counter("demo.requests")

    with tracer.start_as_current_span("handle-request"):
        requests.add(1, {"route": "/checkout"})
        app_logger.warning("checkout slow", extra={"session.id": "demo-session"})

    gcpotel.shutdown()


if __name__ == "__main__":
    main()
