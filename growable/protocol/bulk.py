"""
Bulk construction and extension from arbitrary iterables.
"""

import operator
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from growable.models.collection import GrowableList

# Upper bound on how much a length hint may reserve up front. Hints are
# advisory; anything beyond this is reached by normal growth.
MAX_HINT_RESERVE = 1 << 16


def extend(target: "GrowableList", source: Iterable[Any]) -> int:
    """
    Append every element of source to target, in source order.

    The target is exclusively borrowed for the whole call, so a source that
    still borrows the target is refused before anything is appended.

    Args:
        target: The collection to grow.
        source: Any iterable. Its length hint, when it has one, is used to
                reserve room before the first append, capped at
                MAX_HINT_RESERVE since hints may overstate the length.

    Returns:
        Number of elements appended.

    Raises:
        AlreadyBorrowedError: If target is borrowed (e.g. by source).
        AlreadyMutablyBorrowedError: If target is mutably borrowed.
        ConsumedError: If target was consumed by into_iter().
    """
    with target.borrow_mut() as store:
        hint = min(operator.length_hint(source), MAX_HINT_RESERVE)
        if hint > 0:
            store.reserve(hint)

        appended = 0
        for item in source:
            store.append(item)
            appended += 1

    return appended


def collect(target: "GrowableList", source: Iterable[Any]) -> "GrowableList":
    """
    Fill a freshly created, empty collection from source.

    Args:
        target: An empty collection.
        source: Any iterable.

    Returns:
        target, now holding the elements of source in order.

    Raises:
        ValueError: If target already holds elements.
    """
    if len(target) != 0:
        raise ValueError(f"collect() needs an empty target, got {len(target)} elements")

    extend(target, source)
    return target
