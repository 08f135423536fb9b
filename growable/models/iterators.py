"""
The three traversal variants of a GrowableList.

- SharedIterator: read-only, any number may coexist
- MutableIterator: exclusive, yields writable slots
- OwningIterator: takes the storage and yields the elements themselves

Each variant holds its access right from construction until it is
exhausted, closed, leaves a with block, or is garbage collected.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from growable.interfaces.backing_store import BackingStore
from growable.interfaces.pull_source import PullSource
from growable.models.borrow import BorrowFlag
from growable.models.cursor import Cursor
from growable.models.exceptions import ExpiredViewError

T = TypeVar("T")


class SharedIterator(PullSource[T]):
    """Iterator yielding the elements of a collection under a shared borrow."""

    def __init__(
        self,
        flag: BorrowFlag,
        store: BackingStore,
        start: int = 0,
        stop: int | None = None,
    ) -> None:
        self._held = False
        flag.acquire_shared("iterate")
        self._held = True

        self._flag = flag
        self._store = store
        self._cursor = Cursor(store, start, stop)

    def __next__(self) -> T:
        handle = self._cursor.advance()
        if handle is None:
            self._release()
            raise StopIteration
        return self._store.load(handle)

    def remaining(self) -> tuple[int, int | None]:
        return self._cursor.size_hint()

    def __len__(self) -> int:
        return self._cursor.size_hint()[0]

    @property
    def active(self) -> bool:
        """True while the shared borrow is held."""
        return self._held

    def close(self) -> None:
        self._cursor.finish()
        self._release()

    def _release(self) -> None:
        if self._held:
            self._held = False
            self._flag.release_shared()

    def __del__(self) -> None:
        if getattr(self, "_held", False):
            logging.debug("Shared borrow released by garbage collection")
            self._release()


class MutSlot:
    """
    Writable view of one element, handed out by MutableIterator.

    The view is usable only while the iterator that produced it still holds
    the exclusive borrow; afterwards every access raises ExpiredViewError.
    """

    __slots__ = ("_owner", "_handle", "_position")

    def __init__(self, owner: "MutableIterator", handle: int, position: int) -> None:
        self._owner = owner
        self._handle = handle
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    @property
    def value(self) -> Any:
        return self._checked_store().load(self._handle)

    @value.setter
    def value(self, item: Any) -> None:
        self._checked_store().store(self._handle, item)

    def get(self) -> Any:
        return self.value

    def set(self, item: Any) -> None:
        self.value = item

    def replace(self, item: Any) -> Any:
        """Store item and return the element it replaced."""
        store = self._checked_store()
        old = store.load(self._handle)
        store.store(self._handle, item)
        return old

    def update(self, fn: Callable[[Any], Any]) -> Any:
        """Replace the element with fn(element) and return the new value."""
        store = self._checked_store()
        new = fn(store.load(self._handle))
        store.store(self._handle, new)
        return new

    def _checked_store(self) -> BackingStore:
        return self._owner.store_for(self._position)

    def __repr__(self) -> str:
        if not self._owner.active:
            return f"MutSlot(position={self._position}, expired)"
        return f"MutSlot(position={self._position}, value={self.value!r})"


class MutableIterator(PullSource[MutSlot]):
    """Iterator yielding writable slots under an exclusive borrow."""

    def __init__(
        self,
        flag: BorrowFlag,
        store: BackingStore,
        start: int = 0,
        stop: int | None = None,
    ) -> None:
        self._held = False
        flag.acquire_exclusive("iterate mutably")
        self._held = True

        self._flag = flag
        self._store = store
        self._cursor = Cursor(store, start, stop)

    def __next__(self) -> MutSlot:
        position = self._cursor.position
        handle = self._cursor.advance()
        if handle is None:
            self._release()
            raise StopIteration
        return MutSlot(self, handle, position)

    def remaining(self) -> tuple[int, int | None]:
        return self._cursor.size_hint()

    def __len__(self) -> int:
        return self._cursor.size_hint()[0]

    @property
    def active(self) -> bool:
        """True while the exclusive borrow is held."""
        return self._held

    def store_for(self, position: int) -> BackingStore:
        """
        Return the store a slot at `position` writes through.

        Raises:
            ExpiredViewError: If the exclusive borrow has been released.
        """
        if not self._held:
            raise ExpiredViewError(position)
        return self._store

    def close(self) -> None:
        self._cursor.finish()
        self._release()

    def _release(self) -> None:
        if self._held:
            self._held = False
            self._flag.release_exclusive()

    def __del__(self) -> None:
        if getattr(self, "_held", False):
            logging.debug("Exclusive borrow released by garbage collection")
            self._release()


class OwningIterator(PullSource[T]):
    """
    Iterator that owns a detached store and moves elements out of it.

    Every element leaves the store exactly once: either yielded by
    __next__ or destroyed by close(). The optional dropper is called with
    each element destroyed without being yielded.
    """

    def __init__(
        self,
        store: BackingStore,
        dropper: Callable[[Any], None] | None = None,
    ) -> None:
        """
        Initialize owning iterator.

        Args:
            store: Storage detached from a consumed collection.
            dropper: Called once with each element that is never yielded.
        """
        self._store: BackingStore | None = store
        self._dropper = dropper
        self._cursor = Cursor(store)

    def __next__(self) -> T:
        handle = self._cursor.advance()
        if handle is None:
            self._store = None
            raise StopIteration
        return self._store.take(handle)

    def remaining(self) -> tuple[int, int | None]:
        return self._cursor.size_hint()

    def __len__(self) -> int:
        return self._cursor.size_hint()[0]

    def as_list(self) -> list[T]:
        """Return the elements not yet yielded, leaving them in place."""
        if self._store is None:
            return []
        return [self._store.load(handle) for handle in self._cursor.pending()]

    def close(self) -> None:
        """Destroy all elements that were not yielded. Idempotent."""
        if self._store is None:
            return

        dropped = 0
        handle = self._cursor.advance()
        while handle is not None:
            item = self._store.take(handle)
            dropped += 1
            if self._dropper is not None:
                self._dropper(item)
            del item
            handle = self._cursor.advance()

        self._store = None
        if dropped:
            logging.debug(f"Owning iterator closed early, dropped {dropped} elements")

    def __del__(self) -> None:
        if getattr(self, "_store", None) is not None:
            self.close()
