"""
Adapter protocol definitions and connection configuration for birdsql.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence

from ..dialects.base import Dialect
from ..errors import BirdSQLError, MissingParameterError
from ..security.dsns import ConnectionParams, DSNConfig, build_connection_params, parse_dsn


class AdapterError(BirdSQLError, RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when establishing or using a connection fails."""


class AdapterExecutionError(AdapterError, ValueError):
    """Raised when SQL execution or parameter validation fails."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

# DSN query keys forwarded to the driver as booleans.
_BOOL_OPTIONS = ("no_gc", "no_db_triggers")


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise AdapterConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _pop_bool(query: dict[str, str], key: str) -> bool | None:
    if key not in query:
        return None
    return _parse_bool(query.pop(key), key=key)


def _parse_timeout(value: str, *, key: str) -> float:
    try:
        timeout = float(value)
    except ValueError as exc:
        raise AdapterConfigurationError(f"Invalid float value for '{key}': {value!r}") from exc
    if timeout < 0:
        raise AdapterConfigurationError(f"'{key}' must be non-negative: {value!r}")
    return timeout


def _pop_timeout(query: dict[str, str], key: str) -> float | None:
    if key not in query:
        return None
    return _parse_timeout(query.pop(key), key=key)


def _parse_option_values(query: dict[str, str]) -> dict[str, Any]:
    options: dict[str, Any] = {}
    for key, value in query.items():
        if key in _BOOL_OPTIONS:
            options[key] = _parse_bool(value, key=key)
        else:
            options[key] = value
    return options


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for adapters.

    ``autocommit`` is the mode the connection starts in. Once a transaction
    scope has opened and closed, the coordinator leaves autocommit on.

    ``timeout`` (seconds) becomes the session statement timeout.
    """

    params: ConnectionParams
    autocommit: bool = True
    timeout: float | None = None
    options: dict[str, Any] | None = None
    dsn: DSNConfig | None = None
    source: str | None = None

    @classmethod
    def from_params(cls, params: Mapping[str, Any], **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from a ``database``/``user``/``host``... mapping.
        """

        return cls(params=build_connection_params(params), **kwargs)

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing the DSN string.
        """

        try:
            parsed = parse_dsn(dsn)
        except MissingParameterError:
            raise
        except ValueError as exc:
            raise AdapterConfigurationError(str(exc)) from exc
        query = dict(parsed.query)

        parsed_autocommit = _pop_bool(query, "autocommit")
        parsed_timeout = _pop_timeout(query, "timeout")
        options = _parse_option_values(query)
        passed_options = kwargs.pop("options", None) or {}
        options.update(passed_options)

        autocommit = kwargs.pop("autocommit", parsed_autocommit)
        if autocommit is None:
            autocommit = True
        timeout = kwargs.pop("timeout", parsed_timeout)

        return cls(
            params=parsed.params,
            dsn=parsed,
            autocommit=autocommit,
            timeout=timeout,
            options=options or None,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    @property
    def descriptor(self) -> str:
        return self.params.descriptor

    def redacted_dsn(self) -> str:
        """
        Return a DSN safe for logging (credentials removed).
        """

        if self.dsn:
            return self.dsn.redacted()
        return self.params.redacted()

    def descriptive_label(self) -> str:
        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


class DatabaseAdapter(Protocol):
    """
    Backend connector consumed by the session and transaction layers.

    Transaction calls map one-to-one onto the single physical transaction the
    backend supports; driver errors surface unchanged.
    """

    dialect: Dialect
    slow_query_ms: int

    @property
    def autocommit(self) -> bool: ...

    def connect(self, config: ConnectionConfig) -> Any:
        """
        Establish a connection handle using the supplied configuration.
        """

    def close(self) -> None:
        """
        Close underlying resources. Implementations should be idempotent.
        """

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        """
        Execute a single SQL statement returning a cursor-like object.
        """

    def executemany(self, sql: str, seq_of_params: Sequence[Sequence[Any]]) -> Any: ...

    def begin(self) -> None:
        """
        Start the physical transaction.
        """

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

    def set_autocommit(self, enabled: bool) -> None:
        """
        Switch statement-level autocommit on or off.
        """
