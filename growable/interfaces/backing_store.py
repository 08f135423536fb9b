"""
BackingStore abstract base class for positional element storage.
"""

from abc import ABC, abstractmethod
from typing import Any


class BackingStore(ABC):
    """
    Abstract base class for the storage a GrowableList traverses.

    Elements are addressed through integer handles. A handle is valid until
    the store is discarded; None marks the end of the sequence.

    Implementations:
    - ArrayStore: contiguous slots, handle is an index
    - LinkedStore: node arena, handle is an arena index
    """

    @abstractmethod
    def append(self, item: Any) -> None:
        """
        Add an element after the current last element.

        Args:
            item: The element to store.

        Time complexity: amortized O(1)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored elements.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def capacity(self) -> int:
        """Return how many elements fit before the store must grow."""
        pass

    @abstractmethod
    def reserve(self, additional: int) -> None:
        """
        Make room for at least `additional` more elements.

        Args:
            additional: Number of elements about to be appended.

        Raises:
            ValueError: If additional is negative.
        """
        pass

    @abstractmethod
    def reallocations(self) -> int:
        """Return how many times the store had to grow past its reserved capacity."""
        pass

    @abstractmethod
    def first(self) -> int | None:
        """Return the handle of the first element, or None if empty."""
        pass

    @abstractmethod
    def successor(self, handle: int) -> int | None:
        """Return the handle following `handle`, or None at the end."""
        pass

    @abstractmethod
    def locate(self, index: int) -> int | None:
        """
        Return the handle of the element at position `index`.

        Returns:
            The handle, or None if index is past the end.

        Time complexity: O(1) for arrays, O(N) for linked storage
        """
        pass

    @abstractmethod
    def load(self, handle: int) -> Any:
        """Return the element at `handle`."""
        pass

    @abstractmethod
    def store(self, handle: int, item: Any) -> None:
        """Overwrite the element at `handle`."""
        pass

    @abstractmethod
    def take(self, handle: int) -> Any:
        """
        Move the element at `handle` out of the store.

        The slot is left vacant; taking it again raises LookupError.
        """
        pass
