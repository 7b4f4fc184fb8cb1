"""
Firebird database adapter implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from ..dialects.firebird import FirebirdDialect
from ..security.redaction import redact_mapping, redact_params
from ..utils import get_logger, resolve_slow_query_ms, time_call
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterExecutionError,
    ConnectionConfig,
    DatabaseAdapter,
)


def _load_driver():
    try:
        import firebird.driver

        return firebird.driver
    except ImportError:
        return None


@dataclass
class FirebirdConnectionState:
    connection: Any
    config: ConnectionConfig
    driver: Any


class FirebirdAdapter(DatabaseAdapter):
    """
    Adapter wrapping the ``firebird-driver`` DB-API module.

    The driver has no autocommit switch, so autocommit is emulated: while it
    is on and no explicit transaction is open, each statement is followed by
    a retaining commit (cursors stay open for fetching).
    """

    def __init__(self, slow_query_ms: int | None = None) -> None:
        self.dialect = FirebirdDialect()
        self._state: FirebirdConnectionState | None = None
        self._autocommit = True
        self._in_transaction = False
        self._retained = False
        self.logger = get_logger("adapters.firebird")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)

    @property
    def autocommit(self) -> bool:
        return self._autocommit

    @property
    def in_transaction(self) -> bool:
        return self._in_transaction

    # ------------------------------------------------------------------ #
    # Connection management
    # ------------------------------------------------------------------ #
    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError("firebird-driver is required to use FirebirdAdapter.")

        params = config.params
        options = dict(config.options or {})
        self.logger.info(
            "Connecting to Firebird %s (autocommit=%s)",
            config.descriptive_label(),
            config.autocommit,
        )
        if options:
            self.logger.debug("Firebird driver options: %s", redact_mapping(options))

        try:
            connection = driver.connect(
                params.address,
                user=params.user,
                password=params.password,
                charset=params.charset,
                **options,
            )
        except Exception as exc:
            raise AdapterConnectionError("Failed to connect to Firebird.") from exc

        if config.timeout:
            self._apply_statement_timeout(connection, config.timeout)

        self._state = FirebirdConnectionState(connection, config, driver)
        self._autocommit = bool(config.autocommit)
        self._in_transaction = False
        self._retained = False
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None
                self._in_transaction = False
                self._retained = False

    def _ensure_connection(self):
        if not self._state:
            raise AdapterConnectionError("FirebirdAdapter is not connected.")
        conn = self._state.connection
        if conn.is_closed():
            self.logger.warning("Firebird connection closed; reconnecting.")
            conn = self.connect(self._state.config)
        return conn

    # ------------------------------------------------------------------ #
    # Execution helpers
    # ------------------------------------------------------------------ #
    def execute(self, sql: str, params: Sequence[Any] | None = None):
        connection = self._ensure_connection()
        cursor = connection.cursor()
        params = params or ()
        self._validate_params(sql, params)
        with time_call(
            "firebird.execute",
            self.logger,
            sql=sql,
            params=redact_params(params),
            threshold_ms=self.slow_query_ms,
        ):
            cursor.execute(sql, params)
        self._autocommit_statement(connection)
        return cursor

    def executemany(
        self,
        sql: str,
        seq_of_params: Sequence[Sequence[Any]] | Iterable[Sequence[Any]],
    ):
        connection = self._ensure_connection()
        cursor = connection.cursor()
        seq = list(seq_of_params)
        for params in seq:
            self._validate_params(sql, params)
        with time_call(
            "firebird.executemany",
            self.logger,
            sql=sql,
            params="bulk",
            threshold_ms=self.slow_query_ms,
        ):
            cursor.executemany(sql, seq)
        self._autocommit_statement(connection)
        return cursor

    def _autocommit_statement(self, connection: Any) -> None:
        if self._in_transaction:
            return
        if self._autocommit:
            connection.commit(retaining=True)
            self._retained = True
        else:
            # Uncommitted work now shares the open driver transaction.
            self._retained = False

    def _apply_statement_timeout(self, connection: Any, timeout: float) -> None:
        timeout_ms = int(timeout * 1000)
        try:
            connection.execute_immediate(f"SET STATEMENT TIMEOUT {timeout_ms} MILLISECOND")
            connection.commit()
        except Exception as exc:
            raise AdapterConnectionError("Failed to apply Firebird statement timeout.") from exc
        self.logger.debug("Firebird statement timeout set to %sms", timeout_ms)

    # ------------------------------------------------------------------ #
    # Transactions
    # ------------------------------------------------------------------ #
    def begin(self) -> None:
        connection = self._ensure_connection()
        if connection.is_active():
            if self._retained:
                # Only retaining autocommits ran in this context; nothing is pending.
                connection.commit()
                connection.begin()
            else:
                self.logger.debug("Pending statements join the new Firebird transaction.")
        else:
            connection.begin()
        self._retained = False
        self._in_transaction = True

    def commit(self) -> None:
        connection = self._ensure_connection()
        try:
            connection.commit()
        finally:
            self._in_transaction = False
            self._retained = False

    def rollback(self) -> None:
        connection = self._ensure_connection()
        try:
            connection.rollback()
        finally:
            self._in_transaction = False
            self._retained = False

    def set_autocommit(self, enabled: bool) -> None:
        self._ensure_connection()
        self._autocommit = bool(enabled)
        self.logger.debug("Firebird autocommit set to %s", self._autocommit)

    # ------------------------------------------------------------------ #
    @staticmethod
    def _count_placeholders(sql: str) -> int:
        count = 0
        in_literal = False
        for char in sql:
            if char == "'":
                in_literal = not in_literal
            elif char == "?" and not in_literal:
                count += 1
        return count

    def _validate_params(self, sql: str, params: Sequence[Any]) -> None:
        placeholder_count = self._count_placeholders(sql)
        if placeholder_count == 0:
            if params:
                raise AdapterExecutionError(
                    "Parameters provided but SQL statement has no placeholders."
                )
            return
        if placeholder_count != len(params):
            raise AdapterExecutionError(
                f"Parameter count mismatch: expected {placeholder_count}, received {len(params)}."
            )
