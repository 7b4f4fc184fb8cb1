"""
Query construction APIs for birdsql.
"""

from .select import PaginatedSelectQuery, SelectQuery

__all__ = ["PaginatedSelectQuery", "SelectQuery"]
