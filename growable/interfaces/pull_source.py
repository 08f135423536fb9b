"""
PullSource protocol for iterators that report how much is left.
"""

from abc import abstractmethod
from collections.abc import Iterator
from typing import TypeVar

T = TypeVar("T")


class PullSource(Iterator[T]):
    """
    Protocol for single-pass iterators over a collection.

    Implementations must support:
    - Pull-based iteration via __next__ (StopIteration signals exhaustion)
    - A size hint via remaining() and __length_hint__
    - Early release via close() and the context manager protocol

    Once exhausted, __next__ keeps raising StopIteration.
    """

    def __iter__(self) -> "PullSource[T]":
        return self

    @abstractmethod
    def __next__(self) -> T:
        """Return the next element or raise StopIteration."""
        pass

    @abstractmethod
    def remaining(self) -> tuple[int, int | None]:
        """
        Return bounds on the number of elements still to be yielded.

        Returns:
            (lower, upper) where upper is None when unknown.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Stop iterating and release whatever the iterator holds."""
        pass

    def __length_hint__(self) -> int:
        return self.remaining()[0]

    def __enter__(self) -> "PullSource[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
