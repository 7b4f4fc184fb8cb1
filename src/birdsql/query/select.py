"""
SELECT statement assembly and row-window pagination.
"""

from __future__ import annotations

from typing import Any, List

from ..dialects.base import Dialect
from ..dialects.firebird import FirebirdDialect
from ..errors import QueryBuildError


class SelectQuery:
    """
    Minimal SELECT assembly.

    Column, table and condition strings are emitted verbatim; quote them with
    ``dialect.quote_identifier`` beforehand where needed.
    """

    def __init__(self, dialect: Dialect | None = None) -> None:
        self.dialect: Dialect = dialect or FirebirdDialect()
        self.reset()

    def reset(self) -> None:
        self._columns: List[str] = []
        self._tables: List[str] = []
        self._conditions: List[str] = []
        self._ordering: List[str] = []
        self._distinct = False

    # Builders ---------------------------------------------------------
    def select(self, *columns: Any) -> "SelectQuery":
        self._columns.extend(_flatten(columns))
        return self

    def select_distinct(self, *columns: Any) -> "SelectQuery":
        self._distinct = True
        return self.select(*columns)

    def from_(self, *tables: Any) -> "SelectQuery":
        self._tables.extend(_flatten(tables))
        return self

    def where(self, *conditions: Any) -> "SelectQuery":
        self._conditions.extend(_flatten(conditions))
        return self

    def order_by(self, column: str, *, descending: bool = False) -> "SelectQuery":
        self._ordering.append(f"{column} DESC" if descending else column)
        return self

    # Rendering --------------------------------------------------------
    def get_query(self) -> str:
        if not self._columns:
            raise QueryBuildError("select() was not called before get_query().")
        if not self._tables:
            raise QueryBuildError("from_() was not called before get_query().")

        keyword = "SELECT DISTINCT" if self._distinct else "SELECT"
        sql_parts: List[str] = [f"{keyword} {', '.join(self._columns)}", "FROM", ", ".join(self._tables)]
        if self._conditions:
            sql_parts.append("WHERE")
            sql_parts.append(" AND ".join(self._conditions))
        if self._ordering:
            sql_parts.append("ORDER BY")
            sql_parts.append(", ".join(self._ordering))
        return " ".join(sql_parts)

    def __str__(self) -> str:
        return self.get_query()


class PaginatedSelectQuery(SelectQuery):
    """
    SELECT assembly with a dialect row window (``ROWS m TO n`` on Firebird).
    """

    def reset(self) -> None:
        self.has_limit = False
        self.limit_count = 0
        self.offset = 0
        super().reset()

    def limit(self, count: int, offset: int = 0) -> "PaginatedSelectQuery":
        self.has_limit = True
        self.limit_count = count
        self.offset = offset
        return self

    def get_query(self) -> str:
        query = super().get_query()
        if not self.has_limit:
            return query
        clause = self.dialect.limit_clause(self.limit_count, self.offset)
        if clause:
            query = f"{query} {clause}"
        return query


def _flatten(values: Any) -> List[str]:
    flat: List[str] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(str(item) for item in value)
        else:
            flat.append(str(value))
    return flat
