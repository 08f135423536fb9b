"""
Read-only view of a BackingStore, handed out under a shared borrow.
"""

from typing import Any

from growable.interfaces.backing_store import BackingStore
from growable.models.exceptions import BorrowError


class StoreView:
    """
    Exposes the read side of a store and nothing else.

    Writers (append, store, take, reserve) are not part of the view, so a
    shared borrow cannot be used to modify the collection. The view stops
    working once the borrow that produced it ends.
    """

    __slots__ = ("_store", "_open")

    def __init__(self, store: BackingStore) -> None:
        self._store = store
        self._open = True

    def close(self) -> None:
        self._open = False

    def size(self) -> int:
        return self._checked().size()

    def capacity(self) -> int:
        return self._checked().capacity()

    def reallocations(self) -> int:
        return self._checked().reallocations()

    def first(self) -> int | None:
        return self._checked().first()

    def successor(self, handle: int) -> int | None:
        return self._checked().successor(handle)

    def locate(self, index: int) -> int | None:
        return self._checked().locate(index)

    def load(self, handle: int) -> Any:
        return self._checked().load(handle)

    def _checked(self) -> BackingStore:
        if not self._open:
            raise BorrowError("store view used after its shared borrow ended")
        return self._store
