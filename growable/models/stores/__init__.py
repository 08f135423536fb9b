"""
Backing store implementations for GrowableList.
"""

from growable.models.stores.array_store import ArrayStore
from growable.models.stores.linked_store import LinkedStore

__all__ = ["ArrayStore", "LinkedStore"]
