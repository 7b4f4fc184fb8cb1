"""
Session coordinating an adapter, its transaction scopes and query factories.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterable, Mapping, Optional

from ..adapters.base import ConnectionConfig, DatabaseAdapter
from ..dialects.base import Dialect, ExpressionDialect
from ..dialects.firebird import FirebirdExpressions
from ..errors import TransactionRolledBackError
from ..query.select import PaginatedSelectQuery
from ..security.redaction import redact_params
from ..utils import get_logger, time_call
from .transaction import TransactionCoordinator


class Session:
    """
    Entry point for application code working against one connection.
    """

    def __init__(
        self,
        adapter: DatabaseAdapter,
        *,
        connection_config: Optional[ConnectionConfig] = None,
        dsn: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        expressions: Optional[ExpressionDialect] = None,
    ) -> None:
        supplied = [value for value in (connection_config, dsn, params) if value is not None]
        if len(supplied) != 1:
            raise ValueError("Provide exactly one of connection_config, dsn or params.")
        if dsn is not None:
            connection_config = ConnectionConfig.from_dsn(dsn)
        elif params is not None:
            connection_config = ConnectionConfig.from_params(params)

        self.adapter = adapter
        self.dialect: Dialect = adapter.dialect
        self.expressions: ExpressionDialect = expressions or FirebirdExpressions()
        self.connection_config: ConnectionConfig = connection_config
        self.transactions = TransactionCoordinator(adapter)
        self.logger = get_logger("persistence.session")
        self.adapter.connect(self.connection_config)

    # ------------------------------------------------------------------ #
    # Context management
    # ------------------------------------------------------------------ #
    def __enter__(self) -> "Session":
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type:
                self.rollback()
            elif not self.commit():
                raise TransactionRolledBackError(
                    "Session transaction rolled back because an inner scope failed."
                )
        finally:
            self.close()

    # ------------------------------------------------------------------ #
    def begin(self) -> None:
        self.transactions.begin()

    def commit(self) -> bool:
        return self.transactions.commit()

    def rollback(self) -> bool:
        return self.transactions.rollback()

    @contextmanager
    def transaction(self):
        """
        Nested transaction scope; an exception rolls back this scope and re-raises.

        Raises TransactionRolledBackError when the outermost scope is rolled back
        on exit because an inner scope failed.
        """

        with self.transactions.transaction():
            yield self

    def close(self) -> None:
        if self.transactions.in_transaction:
            self.logger.warning(
                "Closing session with %s open transaction scope(s).", self.transactions.depth
            )
        self.adapter.close()

    # ------------------------------------------------------------------ #
    def execute(self, sql: str, params: Iterable[Any] | None = None):
        param_list = list(params or [])
        with time_call(
            "session.execute",
            self.logger,
            sql=sql,
            params=redact_params(param_list),
            threshold_ms=self.adapter.slow_query_ms,
        ):
            return self.adapter.execute(sql, param_list)

    def create_select_query(self) -> PaginatedSelectQuery:
        return PaginatedSelectQuery(self.dialect)

    def create_expression(self) -> ExpressionDialect:
        return self.expressions
