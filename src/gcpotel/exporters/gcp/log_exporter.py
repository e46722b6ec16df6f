"""Cloud Logging exporter for OpenTelemetry log records.

Each OTel log record becomes one structured Cloud Logging entry written to
a single, fixed log. The whole batch is written in one API call; a record
that cannot be converted fails the batch before anything is written.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Optional

from google.cloud.logging import Client, Resource, StructEntry
from opentelemetry.sdk._logs.export import LogExporter, LogExportResult

from gcpotel._internal.logging import log_internal_error
from gcpotel.exporters.result import ExportCallback, ExportResult

if TYPE_CHECKING:
    from opentelemetry.sdk._logs import LogData

logger = logging.getLogger(__name__)

# Name of the Cloud Logging log every entry is written to. In Logs Explorer
# the entries appear under logName="projects/<project>/logs/gcpotel".
LOG_NAME = "gcpotel"

# Record attribute stored under an underscored key in the payload
SESSION_ID_ATTRIBUTE = "session.id"
SESSION_ID_FIELD = "session_id"

_INVALID_TRACE_ID = 0
_INVALID_SPAN_ID = 0
_SAMPLED_FLAG = 0x01


def map_severity(severity_number: Any) -> str:
    """Map an OpenTelemetry severity number to a Cloud Logging severity.

    OTel severity numbers come in bands of four (TRACE 1-4, DEBUG 5-8,
    INFO 9-12, WARN 13-16, ERROR 17-20, FATAL 21-24). Anything at or above
    21 is CRITICAL; unset, zero and TRACE levels are DEFAULT.

    Args:
        severity_number: A ``SeverityNumber`` member, a plain int, or None.

    Returns:
        The Cloud Logging severity label.
    """
    if severity_number is None:
        return "DEFAULT"
    number = int(getattr(severity_number, "value", severity_number))
    if number >= 21:
        return "CRITICAL"
    if number >= 17:
        return "ERROR"
    if number >= 13:
        return "WARNING"
    if number >= 9:
        return "INFO"
    if number >= 5:
        return "DEBUG"
    return "DEFAULT"


class GcpLogExporter(LogExporter):
    """LogExporter that writes OTel log records to Google Cloud Logging.

    Args:
        project_id: Google Cloud project to write to. When None the client
            library resolves the project from the environment.
        client: Pre-built ``google.cloud.logging.Client``. Mainly useful
            for tests and for sharing credentials with other clients.

    Example:
        >>> from opentelemetry.sdk._logs import LoggerProvider
        >>> from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
        >>> provider = LoggerProvider()
        >>> provider.add_log_record_processor(
        ...     BatchLogRecordProcessor(GcpLogExporter("my-project"))
        ... )
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        *,
        client: Optional[Client] = None,
    ) -> None:
        self._client = client if client is not None else Client(project=project_id)
        self._project_id = project_id or self._client.project
        self._resource = Resource(
            type="global",
            labels={"project_id": self._project_id},
        )
        # An explicit resource stops the logger probing the metadata server
        self._log = self._client.logger(LOG_NAME, resource=self._resource)

    @property
    def project_id(self) -> str:
        """Project id used in every entry's resource descriptor."""
        return self._project_id

    def export(
        self,
        batch: Sequence["LogData"],
        callback: Optional[ExportCallback] = None,
    ) -> LogExportResult:
        """Convert and write a batch of log records.

        Args:
            batch: Log records handed over by the log record processor.
            callback: Optional callable that receives the ``ExportResult``.
                It is invoked exactly once per call.

        Returns:
            ``LogExportResult.SUCCESS`` if every entry was written,
            ``LogExportResult.FAILURE`` otherwise.
        """
        result = self._export(batch)
        if callback is not None:
            try:
                callback(result)
            except Exception as exc:
                log_internal_error("export callback", exc)
        if result.is_success:
            return LogExportResult.SUCCESS
        return LogExportResult.FAILURE

    def _export(self, batch: Sequence["LogData"]) -> ExportResult:
        try:
            entries = [self._to_entry(item) for item in batch]
        except Exception as exc:
            log_internal_error(f"converting {len(batch)} records for {LOG_NAME}", exc)
            return ExportResult.failure(exc)

        if not entries:
            return ExportResult.success()

        try:
            self._write(entries)
        except Exception as exc:
            log_internal_error(f"writing {len(entries)} entries to {LOG_NAME}", exc)
            return ExportResult.failure(exc)

        logger.debug("Wrote %d entries to Cloud Logging log %s", len(entries), LOG_NAME)
        return ExportResult.success()

    def _write(self, entries: list[StructEntry]) -> None:
        log_batch = self._log.batch()
        log_batch.entries.extend(entries)
        # One bad entry must fail the whole batch
        log_batch.commit(partial_success=False)

    def _to_entry(self, item: Any) -> StructEntry:
        # LogData wraps the record; newer SDKs pass the readable record directly
        record = getattr(item, "log_record", item)
        resource = getattr(item, "resource", None) or getattr(record, "resource", None)

        kwargs: dict[str, Any] = {
            "payload": _build_payload(record, resource),
            "severity": map_severity(getattr(record, "severity_number", None)),
            "timestamp": _to_datetime(
                getattr(record, "timestamp", None)
                or getattr(record, "observed_timestamp", None)
            ),
            "resource": self._resource,
        }
        kwargs.update(self._trace_fields(record))
        return StructEntry(**kwargs)

    def _trace_fields(self, record: Any) -> dict[str, Any]:
        trace_id = getattr(record, "trace_id", None) or _INVALID_TRACE_ID
        if trace_id == _INVALID_TRACE_ID:
            return {}

        fields: dict[str, Any] = {
            "trace": f"projects/{self._project_id}/traces/{trace_id:032x}",
        }
        span_id = getattr(record, "span_id", None) or _INVALID_SPAN_ID
        if span_id != _INVALID_SPAN_ID:
            fields["span_id"] = f"{span_id:016x}"
        trace_flags = getattr(record, "trace_flags", None)
        if trace_flags is not None:
            fields["trace_sampled"] = bool(int(trace_flags) & _SAMPLED_FLAG)
        return fields

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        """Nothing is buffered here; always succeeds."""
        return True

    def shutdown(self) -> None:
        """Nothing to release; the logging client is left to the caller."""


def _build_payload(record: Any, resource: Any) -> dict[str, Any]:
    """Flatten a record into the JSON payload of a Cloud Logging entry.

    Key order: ``message``, ``session_id``, record attributes, then
    resource attributes. A later source replaces an earlier key.
    """
    payload: dict[str, Any] = {"message": _stringify_body(getattr(record, "body", None))}

    attributes = dict(getattr(record, "attributes", None) or {})
    if SESSION_ID_ATTRIBUTE in attributes:
        payload[SESSION_ID_FIELD] = _to_json_value(attributes.pop(SESSION_ID_ATTRIBUTE))
    payload.update(_flatten(attributes))

    resource_attributes = getattr(resource, "attributes", None) or {}
    payload.update(_flatten(resource_attributes))
    return payload


def _flatten(attributes: Mapping[str, Any]) -> dict[str, Any]:
    return {key: _to_json_value(value) for key, value in attributes.items()}


def _to_json_value(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    # OTel stores sequence attributes as tuples
    if isinstance(value, (tuple, list)):
        return [_to_json_value(item) for item in value]
    return value


def _stringify_body(body: Any) -> str:
    if body is None:
        return ""
    if isinstance(body, str):
        return body
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    if isinstance(body, (Mapping, list, tuple)):
        return json.dumps(body, default=str)
    return str(body)


def _to_datetime(timestamp_ns: Optional[int]) -> Optional[datetime]:
    """Convert an OTel nanosecond timestamp to an aware UTC datetime."""
    if not timestamp_ns:
        return None
    seconds, nanos = divmod(int(timestamp_ns), 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(
        microsecond=nanos // 1000
    )
