"""
Runtime borrow flag enforcing single-writer-or-many-readers access.
"""

from growable.models.exceptions import (
    AlreadyBorrowedError,
    AlreadyMutablyBorrowedError,
    ConsumedError,
)

UNUSED = 0
EXCLUSIVE = -1


class BorrowFlag:
    """
    Borrow state of one collection.

    States:
    - 0: no borrow alive
    - n > 0: n shared borrows alive
    - -1: one exclusive borrow alive
    A consumed collection refuses everything, whatever the count says.
    """

    def __init__(self) -> None:
        self._state: int = UNUSED
        self._consumed: bool = False

    @property
    def readers(self) -> int:
        return self._state if self._state > 0 else 0

    @property
    def exclusive(self) -> bool:
        return self._state == EXCLUSIVE

    @property
    def consumed(self) -> bool:
        return self._consumed

    def describe(self) -> str:
        if self._consumed:
            return "consumed"
        if self.exclusive:
            return "exclusive"
        if self._state > 0:
            return f"shared({self._state})"
        return "unused"

    def check_readable(self, operation: str) -> None:
        """Fail unless a shared observer could be admitted right now."""
        if self._consumed:
            raise ConsumedError(operation)
        if self.exclusive:
            raise AlreadyMutablyBorrowedError(operation)

    def check_writable(self, operation: str) -> None:
        """Fail unless no borrow of any kind is alive."""
        self.check_readable(operation)
        if self._state > 0:
            raise AlreadyBorrowedError(self._state, operation)

    def acquire_shared(self, operation: str = "borrow") -> None:
        self.check_readable(operation)
        self._state += 1

    def release_shared(self) -> None:
        if self._state <= 0:
            raise RuntimeError(f"no shared borrow to release (state {self._state})")
        self._state -= 1

    def acquire_exclusive(self, operation: str = "borrow mutably") -> None:
        self.check_writable(operation)
        self._state = EXCLUSIVE

    def release_exclusive(self) -> None:
        if self._state != EXCLUSIVE:
            raise RuntimeError(
                f"no exclusive borrow to release (state {self._state})"
            )
        self._state = UNUSED

    def consume(self, operation: str = "consume") -> None:
        """Mark the collection as moved out. Requires no live borrow."""
        self.check_writable(operation)
        self._consumed = True
