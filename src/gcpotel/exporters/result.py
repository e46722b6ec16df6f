"""Export outcome reported to exporter callbacks.

The OpenTelemetry Python result enums (``LogExportResult`` and friends) say
whether an export worked but not why it failed. ``ExportResult`` carries the
original exception alongside the code so callers can inspect it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class ExportResultCode(Enum):
    """Outcome of a single export call."""

    SUCCESS = 0
    FAILED = 1


@dataclass(frozen=True)
class ExportResult:
    """Result of one export call, applied to the whole batch."""

    code: ExportResultCode
    error: Optional[BaseException] = None

    @classmethod
    def success(cls) -> "ExportResult":
        return cls(code=ExportResultCode.SUCCESS)

    @classmethod
    def failure(cls, error: BaseException) -> "ExportResult":
        return cls(code=ExportResultCode.FAILED, error=error)

    @property
    def is_success(self) -> bool:
        return self.code is ExportResultCode.SUCCESS


ExportCallback = Callable[[ExportResult], None]
