"""Security and connection-parameter helpers for birdsql."""

from .dsns import ConnectionParams, DSNConfig, build_connection_params, build_descriptor, parse_dsn
from .redaction import redact_params, redact_value

__all__ = [
    "ConnectionParams",
    "DSNConfig",
    "build_connection_params",
    "build_descriptor",
    "parse_dsn",
    "redact_params",
    "redact_value",
]
