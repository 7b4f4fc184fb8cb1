"""
Persistence layer components: session and transaction coordination.
"""

from .session import Session
from .transaction import TransactionCoordinator, TransactionState

__all__ = ["Session", "TransactionCoordinator", "TransactionState"]
