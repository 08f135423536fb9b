"""
Data models for the collection layer.
"""

from growable.models.borrow import BorrowFlag
from growable.models.collection import GrowableList
from growable.models.cursor import Cursor
from growable.models.iterators import (
    MutableIterator,
    MutSlot,
    OwningIterator,
    SharedIterator,
)
from growable.models.store_view import StoreView

__all__ = [
    "BorrowFlag",
    "Cursor",
    "GrowableList",
    "MutSlot",
    "MutableIterator",
    "OwningIterator",
    "SharedIterator",
    "StoreView",
]
