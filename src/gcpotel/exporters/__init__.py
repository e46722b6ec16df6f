"""Exporter modules for Google Cloud observability backends.

Vendor-specific code lives in its own subpackage to keep it at the edges
of the SDK.
"""

from gcpotel.exporters.result import ExportCallback, ExportResult, ExportResultCode

__all__ = ["ExportCallback", "ExportResult", "ExportResultCode"]
