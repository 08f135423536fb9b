"""
Cursor over a BackingStore: a handle plus a remaining count.
"""

from collections.abc import Iterator

from growable.interfaces.backing_store import BackingStore


class Cursor:
    """
    Forward-only position within a half-open window of a store.

    advance() hands out each handle of the window once, in order. After
    the first None it keeps returning None.
    """

    def __init__(self, store: BackingStore, start: int = 0, stop: int | None = None) -> None:
        """
        Initialize cursor.

        Args:
            store: The store to walk.
            start: Index of the first element (inclusive).
            stop: Index to stop before (exclusive). None walks to the end.
        """
        size = store.size()
        stop = size if stop is None else min(stop, size)

        self._store = store
        self._remaining = max(0, stop - start)
        self._next: int | None = store.locate(start) if self._remaining else None
        self._position = start

    @property
    def position(self) -> int:
        """Index of the element the next advance() will return."""
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._remaining == 0

    def advance(self) -> int | None:
        """Return the next handle, or None once the window is used up."""
        if self._remaining == 0:
            return None

        handle = self._next
        self._remaining -= 1
        self._position += 1
        self._next = self._store.successor(handle) if self._remaining else None
        return handle

    def finish(self) -> None:
        """Jump to exhaustion without visiting the rest of the window."""
        self._remaining = 0
        self._next = None

    def size_hint(self) -> tuple[int, int | None]:
        return (self._remaining, self._remaining)

    def pending(self) -> Iterator[int]:
        """Yield the handles advance() has yet to return, without advancing."""
        handle = self._next
        for _ in range(self._remaining):
            yield handle
            handle = self._store.successor(handle)
