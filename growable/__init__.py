"""
Growable collection with borrow-checked traversal.

This package provides an ordered, growable collection with:
- iter() - shared read-only traversal, any number at once
- iter_mut() - exclusive traversal over writable slots
- into_iter() - owning traversal that consumes the collection
- from_iter(source) / extend(source) - bulk construction and append

Aliasing violations raise BorrowError subclasses instead of corrupting state.
"""

from growable.models.collection import GrowableList
from growable.models.exceptions import (
    AlreadyBorrowedError,
    AlreadyMutablyBorrowedError,
    BorrowError,
    ConsumedError,
    ExpiredViewError,
)
from growable.protocol import Access, by_mut, by_ref, by_value, traverse

__all__ = [
    "Access",
    "AlreadyBorrowedError",
    "AlreadyMutablyBorrowedError",
    "BorrowError",
    "ConsumedError",
    "ExpiredViewError",
    "GrowableList",
    "by_mut",
    "by_ref",
    "by_value",
    "traverse",
]
