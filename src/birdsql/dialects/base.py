"""
Dialect strategy interfaces describing SQL rendering behaviors.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol


class IntervalUnit(str, Enum):
    """
    Portable interval units understood by every expression dialect.
    """

    SECOND = "SECOND"
    MINUTE = "MINUTE"
    HOUR = "HOUR"
    DAY = "DAY"
    MONTH = "MONTH"
    YEAR = "YEAR"


class Dialect(Protocol):
    """
    Strategy interface consumed by the query and adapter layers.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...


class ExpressionDialect(Protocol):
    """
    Renders portable expression calls as backend SQL fragments.

    Arguments are already-resolved column names, literals or sub-expressions.
    """

    def length(self, column: str) -> str: ...

    def now(self) -> str: ...

    def concat(self, *parts: Any) -> str: ...

    def position(self, substr: str, value: str, start_position: int = 0) -> str: ...

    def ceil(self, number: str) -> str: ...

    def unix_timestamp(self, column: str) -> str: ...

    def date_add(self, column: str, amount: Any, unit: IntervalUnit | str) -> str: ...

    def date_sub(self, column: str, amount: Any, unit: IntervalUnit | str) -> str: ...

    def date_extract(self, column: str, unit: IntervalUnit | str) -> str: ...
