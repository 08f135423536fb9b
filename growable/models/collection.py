"""
GrowableList - a growable sequence with borrow-checked traversal.
"""

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from growable.interfaces.backing_store import BackingStore
from growable.models.borrow import BorrowFlag
from growable.models.cursor import Cursor
from growable.models.iterators import MutableIterator, OwningIterator, SharedIterator
from growable.models.stores import ArrayStore
from growable.models.store_view import StoreView
from growable.protocol import bulk


class GrowableList:
    """
    Ordered, growable collection backed by a BackingStore.

    Traversal comes in three kinds:
    - iter(): shared, read-only; many may be alive at once
    - iter_mut(): exclusive; yields writable MutSlot views
    - into_iter(): owning; consumes the collection

    A BorrowFlag checks every access against the live iterators. Reads fail
    while an exclusive borrow is alive, writes fail while any borrow is
    alive, and everything fails once the collection has been consumed.
    """

    def __init__(
        self,
        store: BackingStore | None = None,
        *,
        dropper: Callable[[Any], None] | None = None,
    ) -> None:
        """
        Initialize GrowableList.

        Args:
            store: The backing storage. Must be empty. Defaults to an ArrayStore.
            dropper: Called once with each element that an owning iterator
                     destroys without yielding it.
        """
        if store is None:
            store = ArrayStore()
        elif store.size() != 0:
            raise ValueError(
                f"store must be empty, got {store.size()} elements. "
                f"Use from_iter() to build from existing data."
            )

        self._store: BackingStore | None = store
        self._dropper = dropper
        self._flag = BorrowFlag()

    @classmethod
    def from_iter(
        cls,
        source: Iterable[Any],
        *,
        store: BackingStore | None = None,
        dropper: Callable[[Any], None] | None = None,
    ) -> "GrowableList":
        """
        Build a new collection from the elements of source, in order.

        Args:
            source: Any iterable. Must be finite.
            store: Empty backing storage to fill. Defaults to an ArrayStore.
            dropper: See __init__.

        Returns:
            The new collection. Empty if source yields nothing.
        """
        return bulk.collect(cls(store, dropper=dropper), source)

    @property
    def is_consumed(self) -> bool:
        return self._flag.consumed

    @property
    def borrow_state(self) -> str:
        """One of "unused", "shared(n)", "exclusive", "consumed"."""
        return self._flag.describe()

    def push(self, item: Any) -> None:
        """Append one element."""
        self._flag.check_writable("push")
        self._store.append(item)

    def extend(self, source: Iterable[Any]) -> int:
        """
        Append the elements of source after the existing ones.

        Returns:
            Number of elements appended.
        """
        return bulk.extend(self, source)

    def reserve(self, additional: int) -> None:
        self._flag.check_writable("reserve")
        self._store.reserve(additional)

    def capacity(self) -> int:
        self._flag.check_readable("query capacity")
        return self._store.capacity()

    def __len__(self) -> int:
        self._flag.check_readable("query length")
        return self._store.size()

    def __getitem__(self, index: int) -> Any:
        self._flag.check_readable("index")
        return self._store.load(self._locate(index))

    def __setitem__(self, index: int, item: Any) -> None:
        self._flag.check_writable("assign")
        self._store.store(self._locate(index), item)

    def iter(self, start: int | None = None, stop: int | None = None) -> SharedIterator:
        """
        Borrow the collection and iterate over it read-only.

        Args:
            start: First index to visit (inclusive). Defaults to 0.
            stop: Index to stop before (exclusive). Defaults to the end.

        Raises:
            AlreadyMutablyBorrowedError: If a mutable borrow is alive.
            ConsumedError: If the collection was consumed.
        """
        self._flag.check_readable("iterate")
        start, stop = self._window(start, stop)
        return SharedIterator(self._flag, self._store, start, stop)

    def iter_mut(
        self, start: int | None = None, stop: int | None = None
    ) -> MutableIterator:
        """
        Borrow the collection exclusively and iterate over writable slots.

        Raises:
            AlreadyBorrowedError: If shared borrows are alive.
            AlreadyMutablyBorrowedError: If a mutable borrow is alive.
            ConsumedError: If the collection was consumed.
        """
        self._flag.check_writable("iterate mutably")
        start, stop = self._window(start, stop)
        return MutableIterator(self._flag, self._store, start, stop)

    def into_iter(self) -> OwningIterator:
        """
        Consume the collection, handing its storage to an owning iterator.

        After this call every use of the collection raises ConsumedError.
        """
        self._flag.consume("consume")
        store, self._store = self._store, None
        return OwningIterator(store, self._dropper)

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    @contextmanager
    def borrow(self) -> Iterator[StoreView]:
        """
        Hold a shared borrow for the duration of a with block.

        Yields a read-only StoreView; writes need borrow_mut().
        """
        self._flag.acquire_shared("borrow")
        view = StoreView(self._store)
        try:
            yield view
        finally:
            view.close()
            self._flag.release_shared()

    @contextmanager
    def borrow_mut(self) -> Iterator[BackingStore]:
        """Hold the exclusive borrow for the duration of a with block."""
        self._flag.acquire_exclusive("borrow mutably")
        try:
            yield self._store
        finally:
            self._flag.release_exclusive()

    def _locate(self, index: int) -> int:
        """Translate a list-style index into a store handle."""
        if not isinstance(index, int):
            raise TypeError(
                f"indices must be integers, not {type(index).__name__}"
            )

        size = self._store.size()
        position = index + size if index < 0 else index
        handle = self._store.locate(position) if position >= 0 else None
        if handle is None:
            raise IndexError(f"index {index} out of range for length {size}")
        return handle

    def _window(self, start: int | None, stop: int | None) -> tuple[int, int | None]:
        start = 0 if start is None else start
        if start < 0 or (stop is not None and stop < 0):
            raise ValueError(f"bounds must be non-negative, got [{start}, {stop})")
        return start, stop

    def __repr__(self) -> str:
        state = self._flag.describe()
        if state in ("consumed", "exclusive"):
            return f"GrowableList(<{state}>)"
        items = [self._store.load(handle) for handle in Cursor(self._store).pending()]
        return f"GrowableList({items!r})"

