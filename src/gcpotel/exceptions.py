"""Exception classes for the gcpotel SDK."""


class ConfigurationError(Exception):
    """Raised when SDK configuration is invalid.

    This exception is raised during init() when the configuration file is
    missing or unreadable, when exporter dependencies are not installed,
    or when validation fails in strict mode. In permissive mode, other
    setup failures leave telemetry disabled instead.
    """
