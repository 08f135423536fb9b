"""
Contiguous slot array with explicit capacity and geometric growth.
"""

from typing import Any

from growable.interfaces.backing_store import BackingStore

# Marks a slot that holds no element (never allocated, or moved out).
_VACANT = object()


class ArrayStore(BackingStore):
    """
    Array-backed implementation of BackingStore.

    Slots are preallocated up to the current capacity; when an append
    finds no free slot the capacity is multiplied by GROWTH_FACTOR.
    Handles are plain indices.
    """

    DEFAULT_CAPACITY = 4

    GROWTH_FACTOR = 2

    MAX_CAPACITY = 2**31 - 1

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize an empty array store.

        Args:
            initial_capacity: Number of slots to allocate up front.
        """
        if initial_capacity < 0:
            raise ValueError(
                f"initial_capacity must be >= 0, got {initial_capacity}"
            )
        if initial_capacity > self.MAX_CAPACITY:
            raise ValueError(
                f"initial_capacity too large: {initial_capacity}. "
                f"Maximum {self.MAX_CAPACITY}."
            )

        self._slots: list[Any] = [_VACANT] * initial_capacity
        self._size: int = 0
        self._reallocations: int = 0

    def append(self, item: Any) -> None:
        """Store item in the next free slot, growing if full. Amortized O(1)"""
        if self._size == len(self._slots):
            self._grow(max(1, len(self._slots) * self.GROWTH_FACTOR))

        self._slots[self._size] = item
        self._size += 1

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._slots)

    def reserve(self, additional: int) -> None:
        if additional < 0:
            raise ValueError(f"additional must be >= 0, got {additional}")

        required = self._size + additional
        if required <= len(self._slots):
            return

        # Never grow by less than the geometric step
        self._grow(max(required, len(self._slots) * self.GROWTH_FACTOR))

    def reallocations(self) -> int:
        return self._reallocations

    def first(self) -> int | None:
        return 0 if self._size > 0 else None

    def successor(self, handle: int) -> int | None:
        following = handle + 1
        return following if following < self._size else None

    def locate(self, index: int) -> int | None:
        return index if 0 <= index < self._size else None

    def load(self, handle: int) -> Any:
        item = self._slots[self._check(handle)]
        if item is _VACANT:
            raise LookupError(f"slot {handle} has been moved out")
        return item

    def store(self, handle: int, item: Any) -> None:
        self._slots[self._check(handle)] = item

    def take(self, handle: int) -> Any:
        item = self.load(handle)
        self._slots[handle] = _VACANT
        return item

    def _check(self, handle: int) -> int:
        """Validate that handle addresses an occupied position."""
        if not 0 <= handle < self._size:
            raise IndexError(f"handle {handle} out of range for size {self._size}")
        return handle

    def _grow(self, new_capacity: int) -> None:
        """Reallocate the slot array with room for new_capacity elements."""
        if new_capacity > self.MAX_CAPACITY:
            raise MemoryError(
                f"cannot grow to {new_capacity} slots. Maximum {self.MAX_CAPACITY}."
            )

        slots = [_VACANT] * new_capacity
        slots[: self._size] = self._slots[: self._size]
        self._slots = slots
        self._reallocations += 1
