"""
Shared pytest fixtures for collection and iterator tests.
"""

import pytest

from growable.models.collection import GrowableList
from growable.models.stores import ArrayStore, LinkedStore


class Tracked:
    """Element that records its own destruction in a shared log."""

    def __init__(self, name, log: list) -> None:
        self.name = name
        self._log = log

    def __del__(self) -> None:
        self._log.append(self.name)

    def __repr__(self) -> str:
        return f"Tracked({self.name!r})"


@pytest.fixture(params=["array", "linked"])
def store_factory(request):
    """Provide a factory for each backing store implementation."""
    if request.param == "array":
        return ArrayStore
    return LinkedStore


@pytest.fixture
def make_list(store_factory):
    """Provide a builder for a GrowableList over each store kind."""

    def build(items=(), **kwargs) -> GrowableList:
        return GrowableList.from_iter(items, store=store_factory(), **kwargs)

    return build


@pytest.fixture
def sample_items():
    """Provide sample elements in insertion order."""
    return ["a", "b", "c", "d", "e"]


@pytest.fixture
def drop_log():
    """Provide a log that Tracked elements append to when destroyed."""
    return []


@pytest.fixture
def tracked(drop_log):
    """Provide a factory for Tracked elements sharing drop_log."""

    def build(names):
        return [Tracked(name, drop_log) for name in names]

    return build
