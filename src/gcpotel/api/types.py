"""Public configuration types for the gcpotel SDK.

These types are part of the stable public API and follow semver guarantees.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ServiceConfig:
    """Service identification configuration."""

    name: str
    version: str | None = None


@dataclass
class GcpConfig:
    """Google Cloud export configuration."""

    # None lets the Google client libraries resolve the project
    # (Application Default Credentials, GOOGLE_CLOUD_PROJECT)
    project_id: str | None = None
    # Signals to export
    traces: bool = True
    metrics: bool = True
    logs: bool = True
    # Interval between metric collections by PeriodicExportingMetricReader
    metric_export_interval_ms: int = 60000


@dataclass
class ValidationConfig:
    """Validation mode configuration."""

    mode: str = "permissive"  # "strict" | "permissive"


@dataclass
class Config:
    """Complete SDK configuration."""

    service: ServiceConfig
    gcp: GcpConfig = field(default_factory=GcpConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    @property
    def is_strict(self) -> bool:
        """Return True if validation mode is strict."""
        return self.validation.mode == "strict"
