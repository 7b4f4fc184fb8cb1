"""
Transaction coordinator flattening nested scopes onto one physical transaction.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Generator

from ..adapters.base import DatabaseAdapter
from ..errors import TransactionRolledBackError, TransactionStateError
from ..utils import get_logger


@dataclass
class TransactionState:
    nesting_level: int = 0
    error_flag: bool = False


class TransactionCoordinator:
    """
    Coordinates logical begin/commit/rollback scopes over a backend that can
    only run one physical transaction at a time.

    Only the outermost scope talks to the backend. An inner ``rollback()``
    marks the physical transaction as failed, so the outermost ``commit()``
    rolls back instead and returns ``False``. Autocommit is switched off when
    the outermost scope opens and always switched back on when it closes.

    Not thread-safe: use one coordinator per connection.
    """

    def __init__(self, adapter: DatabaseAdapter) -> None:
        self.adapter = adapter
        self._state = TransactionState()
        self.logger = get_logger("persistence.transaction")

    @property
    def depth(self) -> int:
        return self._state.nesting_level

    @property
    def in_transaction(self) -> bool:
        return self._state.nesting_level > 0

    @property
    def state(self) -> TransactionState:
        return replace(self._state)

    def begin(self) -> None:
        if self._state.nesting_level == 0:
            self.adapter.set_autocommit(False)
            try:
                self.adapter.begin()
            except Exception:
                self.adapter.set_autocommit(True)
                raise
        self._state.nesting_level += 1
        self.logger.debug("Transaction scope opened (depth=%s)", self._state.nesting_level)

    def commit(self) -> bool:
        """
        Close the innermost scope.

        Returns ``False`` when the outermost scope closes but an inner scope
        had rolled back, in which case the physical transaction is rolled back.
        """

        if self._state.nesting_level == 0:
            raise TransactionStateError("commit without begin")

        self._state.nesting_level -= 1
        if self._state.nesting_level > 0:
            self.logger.debug("Inner transaction scope committed (depth=%s)", self._state.nesting_level)
            return True

        failed = self._state.error_flag
        self._state.error_flag = False
        try:
            if failed:
                self.logger.warning("Inner transaction scope failed; rolling back on outer commit.")
                self.adapter.rollback()
            else:
                self.adapter.commit()
        finally:
            self.adapter.set_autocommit(True)
        return not failed

    def rollback(self) -> bool:
        if self._state.nesting_level == 0:
            raise TransactionStateError("rollback without begin")

        self._state.nesting_level -= 1
        if self._state.nesting_level > 0:
            self._state.error_flag = True
            self.logger.debug(
                "Inner transaction scope rolled back (depth=%s); outer commit will roll back.",
                self._state.nesting_level,
            )
            return True

        self._state.error_flag = False
        try:
            self.adapter.rollback()
        finally:
            self.adapter.set_autocommit(True)
        return True

    @contextmanager
    def transaction(self) -> Generator["TransactionCoordinator", None, None]:
        """
        Run a block as one scope.

        An exception rolls the scope back and re-raises. When the block ends
        normally but the outermost commit has to roll back because an inner
        scope failed, ``TransactionRolledBackError`` is raised.
        """

        self.begin()
        try:
            yield self
        except Exception:
            self.rollback()
            raise
        else:
            if not self.commit():
                raise TransactionRolledBackError(
                    "Transaction rolled back because an inner scope failed."
                )
