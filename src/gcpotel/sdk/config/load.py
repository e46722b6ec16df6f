"""Configuration loading, parsing, and validation for the gcpotel SDK."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from gcpotel.api.types import Config, GcpConfig, ServiceConfig, ValidationConfig
from gcpotel.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Pattern for environment variable substitution: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

DEFAULT_METRIC_EXPORT_INTERVAL_MS = 60000


def _substitute_env_vars(value: str, strict: bool) -> str:
    """Substitute ${VAR_NAME} patterns with environment variable values.

    Args:
        value: String potentially containing ${VAR_NAME} patterns.
        strict: If True, raise ConfigurationError for missing env vars.

    Returns:
        String with environment variables substituted.

    Raises:
        ConfigurationError: If strict=True and an env var is not set.
    """

    def replace_match(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            if strict:
                raise ConfigurationError(
                    f"Environment variable '{var_name}' is not set"
                )
            logger.warning(
                "Environment variable '%s' not set, using empty string", var_name
            )
            return ""
        return env_value

    return ENV_VAR_PATTERN.sub(replace_match, value)


def _substitute_env_vars_recursive(data: Any, strict: bool) -> Any:
    """Recursively substitute environment variables in a data structure."""
    if isinstance(data, dict):
        return {k: _substitute_env_vars_recursive(v, strict) for k, v in data.items()}
    elif isinstance(data, list):
        return [_substitute_env_vars_recursive(item, strict) for item in data]
    elif isinstance(data, str):
        return _substitute_env_vars(data, strict)
    else:
        return data


def _parse_service_config(data: dict[str, Any]) -> ServiceConfig:
    """Parse service configuration section."""
    version = data.get("version")
    return ServiceConfig(
        name=data.get("name", ""),
        version=str(version) if version is not None else None,
    )


def _parse_gcp_config(data: dict[str, Any]) -> GcpConfig:
    """Parse Google Cloud configuration section.

    An empty project_id (for example from an unset ${VAR} in permissive
    mode) is treated as not configured.
    """
    project_id = data.get("project_id") or None

    interval = data.get("metric_export_interval_ms", DEFAULT_METRIC_EXPORT_INTERVAL_MS)
    try:
        interval = int(interval)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid metric_export_interval_ms '%s', defaulting to %d",
            interval,
            DEFAULT_METRIC_EXPORT_INTERVAL_MS,
        )
        interval = DEFAULT_METRIC_EXPORT_INTERVAL_MS

    known_keys = {"project_id", "traces", "metrics", "logs", "metric_export_interval_ms"}
    unknown = [k for k in data if k not in known_keys]
    if unknown:
        logger.warning("Unknown gcp options ignored: %s", unknown)

    return GcpConfig(
        project_id=str(project_id) if project_id is not None else None,
        traces=bool(data.get("traces", True)),
        metrics=bool(data.get("metrics", True)),
        logs=bool(data.get("logs", True)),
        metric_export_interval_ms=interval,
    )


def _parse_validation_config(data: dict[str, Any]) -> ValidationConfig:
    """Parse validation configuration section."""
    mode = data.get("mode", "permissive")
    if mode not in ("strict", "permissive"):
        logger.warning("Unknown validation mode '%s', defaulting to permissive", mode)
        mode = "permissive"
    return ValidationConfig(mode=mode)


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of error messages.

    Args:
        config: Parsed configuration to validate.

    Returns:
        List of validation error messages. Empty if valid.
    """
    errors: list[str] = []

    if not config.service.name:
        errors.append("service.name is required")

    if config.gcp.metric_export_interval_ms <= 0:
        errors.append("gcp.metric_export_interval_ms must be positive")

    if not (config.gcp.traces or config.gcp.metrics or config.gcp.logs):
        errors.append("at least one of gcp.traces, gcp.metrics, gcp.logs must be enabled")

    return errors


def load_config(path: str | Path, strict: bool | None = None) -> Config:
    """Load and parse configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
        strict: Override validation mode. If None, use mode from config file.

    Returns:
        Parsed and validated Config.

    Raises:
        ConfigurationError: If file doesn't exist, YAML is invalid,
                           or validation fails in strict mode.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            raw_data = yaml.safe_load(f)
            if raw_data is None:
                raw_data = {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if not isinstance(raw_data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(raw_data).__name__}"
        )

    # Determine validation mode early (needed for env var substitution)
    validation_data = raw_data.get("validation") or {}
    validation_mode = validation_data.get("mode", "permissive")
    is_strict = strict if strict is not None else (validation_mode == "strict")

    data = _substitute_env_vars_recursive(raw_data, strict=is_strict)

    config = Config(
        service=_parse_service_config(data.get("service") or {}),
        gcp=_parse_gcp_config(data.get("gcp") or {}),
        validation=_parse_validation_config(data.get("validation") or {}),
    )

    # Override validation mode if specified
    if strict is not None:
        config.validation.mode = "strict" if strict else "permissive"

    errors = validate_config(config)
    if errors:
        if config.is_strict:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}"
            )
        for error in errors:
            logger.warning("Configuration problem ignored in permissive mode: %s", error)

    return config
