"""
Error hierarchy for birdsql.

All of these signal programming errors in the caller and are raised
immediately; none of them is retried.
"""

from __future__ import annotations

from typing import Any


class BirdSQLError(Exception):
    """Base error for birdsql."""


class MissingParameterError(BirdSQLError, ValueError):
    """Raised when a required connection parameter is absent."""

    def __init__(self, parameter: str, source: str = "params") -> None:
        self.parameter = parameter
        self.source = source
        super().__init__(f"The parameter '{parameter}' is missing from '{source}'.")


class InvalidParameterError(BirdSQLError, ValueError):
    """Raised when a connection parameter has an unusable value."""


class TransactionStateError(BirdSQLError, RuntimeError):
    """Raised when commit or rollback is called without an open scope."""


class ArityError(BirdSQLError, TypeError):
    """Raised when a SQL function is called with too few arguments."""

    def __init__(self, function: str, *, got: int, minimum: int) -> None:
        self.function = function
        self.got = got
        self.minimum = minimum
        super().__init__(
            f"{function}() expects at least {minimum} argument(s), received {got}."
        )


class UnknownIntervalUnitError(BirdSQLError, ValueError):
    def __init__(self, unit: Any) -> None:
        self.unit = unit
        super().__init__(f"Unknown interval unit {unit!r}.")


class QueryBuildError(BirdSQLError, ValueError):
    """Raised when a query is rendered before its required parts are set."""


class TransactionRolledBackError(BirdSQLError, RuntimeError):
    """Raised when a transaction block ends but an inner scope forced a rollback."""
