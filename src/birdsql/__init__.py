"""
birdsql public package initialization.
"""

from .adapters import ConnectionConfig, FirebirdAdapter  # noqa: F401
from .dialects import FirebirdDialect, FirebirdExpressions, IntervalUnit  # noqa: F401
from .errors import (  # noqa: F401
    ArityError,
    BirdSQLError,
    InvalidParameterError,
    MissingParameterError,
    QueryBuildError,
    TransactionRolledBackError,
    TransactionStateError,
    UnknownIntervalUnitError,
)
from .persistence import Session, TransactionCoordinator  # noqa: F401
from .query import PaginatedSelectQuery, SelectQuery  # noqa: F401
from .security import build_descriptor  # noqa: F401

__all__ = [
    "ConnectionConfig",
    "FirebirdAdapter",
    "FirebirdDialect",
    "FirebirdExpressions",
    "IntervalUnit",
    "BirdSQLError",
    "MissingParameterError",
    "InvalidParameterError",
    "TransactionStateError",
    "TransactionRolledBackError",
    "ArityError",
    "UnknownIntervalUnitError",
    "QueryBuildError",
    "Session",
    "TransactionCoordinator",
    "SelectQuery",
    "PaginatedSelectQuery",
    "build_descriptor",
]
