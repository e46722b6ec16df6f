"""Public API for the gcpotel SDK.

This module re-exports the stable public interface:
- init() - Initialize the SDK
- shutdown() - Shutdown the SDK and flush telemetry
- is_configured() - Check if the SDK has been initialized
- Config and related types - Programmatic configuration
"""

from __future__ import annotations

from gcpotel.api._init import init, is_configured, shutdown
from gcpotel.api.types import (
    Config,
    GcpConfig,
    ServiceConfig,
    ValidationConfig,
)

__all__ = [
    "init",
    "shutdown",
    "is_configured",
    "Config",
    "ServiceConfig",
    "GcpConfig",
    "ValidationConfig",
]
