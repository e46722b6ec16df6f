"""Google Cloud exporters for gcpotel."""

from gcpotel.exporters.gcp.exporter import check_dependencies, create_gcp_providers

__all__ = ["create_gcp_providers", "check_dependencies"]
