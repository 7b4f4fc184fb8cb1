"""
Dialect strategies.
"""

from .base import Dialect, ExpressionDialect, IntervalUnit
from .firebird import INTERVAL_UNITS, FirebirdDialect, FirebirdExpressions

__all__ = [
    "Dialect",
    "ExpressionDialect",
    "IntervalUnit",
    "INTERVAL_UNITS",
    "FirebirdDialect",
    "FirebirdExpressions",
]
