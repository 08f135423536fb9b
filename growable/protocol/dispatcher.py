"""
Traversal dispatch: pick the iterator variant from how a collection is held.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from growable.models.collection import GrowableList


class Access(IntEnum):
    """How a traversal request holds its collection."""

    VALUE = 0  # Moved in; traversal consumes it
    SHARED = 1  # Read-only reference
    EXCLUSIVE = 2  # Sole read/write reference


# Entry point on GrowableList for each access kind.
_ENTRY_POINTS = {
    Access.VALUE: "into_iter",
    Access.SHARED: "iter",
    Access.EXCLUSIVE: "iter_mut",
}


@dataclass(frozen=True)
class TraversalRequest:
    """
    A collection paired with the access a loop over it should use.

    Iterating a request goes through traverse(), so
    `for slot in by_mut(items):` is the mutable loop and
    `for item in by_value(items):` is the consuming one.
    """

    collection: "GrowableList"
    access: Access

    def __iter__(self) -> Iterator[Any]:
        return traverse(self)


def by_value(collection: "GrowableList") -> TraversalRequest:
    return TraversalRequest(collection, Access.VALUE)


def by_ref(collection: "GrowableList") -> TraversalRequest:
    return TraversalRequest(collection, Access.SHARED)


def by_mut(collection: "GrowableList") -> TraversalRequest:
    return TraversalRequest(collection, Access.EXCLUSIVE)


def traverse(request: TraversalRequest) -> Iterator[Any]:
    """
    Produce the iterator matching the request's access kind.

    Args:
        request: Collection and access kind.

    Returns:
        OwningIterator for VALUE, SharedIterator for SHARED,
        MutableIterator for EXCLUSIVE.

    Raises:
        ValueError: If the access kind is not one of Access.
        BorrowError: If the collection cannot grant that access right now.
    """
    try:
        entry_point = _ENTRY_POINTS[request.access]
    except KeyError:
        raise ValueError(f"unknown access kind: {request.access!r}") from None

    return getattr(request.collection, entry_point)()
