"""Main SDK entry points: init(), shutdown(), is_configured().

This module provides the primary public interface for the SDK.
"""

from __future__ import annotations

import atexit
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from gcpotel.exceptions import ConfigurationError
from gcpotel.sdk.config.load import load_config, validate_config
from gcpotel.sdk.lifecycle import (
    is_configured as _is_configured,
    set_configured,
    shutdown as _shutdown,
)
from gcpotel.sdk.pipeline import create_providers, install_providers

if TYPE_CHECKING:
    from gcpotel.api.types import Config

logger = logging.getLogger(__name__)

# Environment variable for config path fallback
GCPOTEL_CONFIG_PATH_ENV = "GCPOTEL_CONFIG_PATH"

_atexit_registered = False


def _resolve_config_path(config_path: str | Path | None) -> Path:
    """Resolve configuration file path from argument or environment.

    Args:
        config_path: Explicit path, or None to use environment variable.

    Returns:
        Resolved Path to configuration file.

    Raises:
        ConfigurationError: If no config path is provided and
                           GCPOTEL_CONFIG_PATH env var is not set.
    """
    if config_path is not None:
        return Path(config_path)

    env_path = os.environ.get(GCPOTEL_CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)

    raise ConfigurationError(
        f"No configuration path provided. Either pass a config path to init() "
        f"or set the {GCPOTEL_CONFIG_PATH_ENV} environment variable."
    )


def init(config: str | Path | Config | None = None) -> None:
    """Initialize the SDK and install Google Cloud exporters.

    Configuration can be provided as:
    - A path to a YAML config file (str or Path)
    - A Config object for programmatic configuration
    - None to use the GCPOTEL_CONFIG_PATH environment variable

    After initialization:
    - Tracer, meter and logger providers exporting to Google Cloud are
      installed as the OpenTelemetry globals (for enabled signals)
    - An atexit handler is registered for automatic shutdown
    - is_configured() returns True

    Raises:
        ConfigurationError: If configuration is invalid or missing
                           (in strict validation mode), or if exporter
                           dependencies are not installed.
    """
    from gcpotel.api.types import Config as ConfigType

    if isinstance(config, ConfigType):
        resolved_config = config
        errors = validate_config(resolved_config)
        if errors and resolved_config.is_strict:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}"
            )
    else:
        config_path = _resolve_config_path(config)
        resolved_config = load_config(config_path)

    try:
        providers = create_providers(resolved_config)
    except ImportError as e:
        raise ConfigurationError(str(e)) from e
    except Exception as e:
        if resolved_config.is_strict:
            raise ConfigurationError(f"SDK initialization failed: {e}") from e
        # Telemetry must not take the application down
        logger.warning("SDK initialization failed, telemetry disabled: %s", e)
        return

    install_providers(providers)
    set_configured(providers)
    _register_atexit()
    logger.debug(
        "SDK initialized for service '%s' (project=%s)",
        resolved_config.service.name,
        resolved_config.gcp.project_id or "<default>",
    )


def _register_atexit() -> None:
    global _atexit_registered
    if not _atexit_registered:
        atexit.register(_shutdown)
        _atexit_registered = True


def shutdown() -> None:
    """Shutdown the SDK and flush pending telemetry.

    This function:
    - Flushes pending spans, metrics and log records
    - Releases resources held by the providers
    - Resets is_configured() to return False

    It is idempotent and safe to call multiple times.
    """
    _shutdown()


def is_configured() -> bool:
    """Check if the SDK has been initialized.

    Returns:
        True if init() has been called successfully, False otherwise.
    """
    return _is_configured()
