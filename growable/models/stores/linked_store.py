"""
Singly linked list stored in a node arena.
"""

from dataclasses import dataclass
from typing import Any

from growable.interfaces.backing_store import BackingStore

# Marks a node whose element has been moved out.
_VACANT = object()


@dataclass
class Node:
    """Node in the arena. `next` is the arena index of the successor."""

    value: Any
    next: int | None = None


class LinkedStore(BackingStore):
    """
    Node-based implementation of BackingStore.

    Nodes live in a flat arena and link to each other by arena index, so a
    handle stays valid for as long as the store does. Appends go through
    the tail pointer in O(1).
    """

    def __init__(self) -> None:
        self._arena: list[Node] = []
        self._head: int | None = None
        self._tail: int | None = None
        self._reserved: int = 0
        self._reallocations: int = 0

    def append(self, item: Any) -> None:
        """Link a new node after the tail. O(1)"""
        if len(self._arena) == self.capacity():
            self._reallocations += 1

        handle = len(self._arena)
        self._arena.append(Node(value=item))

        if self._tail is None:
            self._head = handle
        else:
            self._arena[self._tail].next = handle
        self._tail = handle

    def size(self) -> int:
        return len(self._arena)

    def capacity(self) -> int:
        return max(self._reserved, len(self._arena))

    def reserve(self, additional: int) -> None:
        if additional < 0:
            raise ValueError(f"additional must be >= 0, got {additional}")
        self._reserved = max(self._reserved, len(self._arena) + additional)

    def reallocations(self) -> int:
        return self._reallocations

    def first(self) -> int | None:
        return self._head

    def successor(self, handle: int) -> int | None:
        return self._node(handle).next

    def locate(self, index: int) -> int | None:
        """Walk the links from the head. O(N)"""
        if not 0 <= index < len(self._arena):
            return None

        handle = self._head
        for _ in range(index):
            handle = self._arena[handle].next
        return handle

    def load(self, handle: int) -> Any:
        value = self._node(handle).value
        if value is _VACANT:
            raise LookupError(f"node {handle} has been moved out")
        return value

    def store(self, handle: int, item: Any) -> None:
        self._node(handle).value = item

    def take(self, handle: int) -> Any:
        value = self.load(handle)
        self._arena[handle].value = _VACANT
        return value

    def _node(self, handle: int) -> Node:
        if not 0 <= handle < len(self._arena):
            raise IndexError(
                f"handle {handle} out of range for arena of {len(self._arena)}"
            )
        return self._arena[handle]
