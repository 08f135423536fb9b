"""
Tests for the GrowableList surface.
"""

import pytest

from growable.models.collection import GrowableList
from growable.models.exceptions import (
    AlreadyBorrowedError,
    AlreadyMutablyBorrowedError,
    BorrowError,
)
from growable.models.stores import ArrayStore, LinkedStore


class TestGrowableList:
    """Tests for storage access through GrowableList."""

    def test_empty(self):
        """Test a new list is empty and iterates nothing."""
        items = GrowableList()

        assert len(items) == 0
        assert list(items) == []
        assert items.borrow_state == "unused"

    def test_push_and_index(self, store_factory):
        """Test push then indexing, including negative indices."""
        items = GrowableList(store_factory())
        for item in ["x", "y", "z"]:
            items.push(item)

        assert items[0] == "x"
        assert items[-1] == "z"
        with pytest.raises(IndexError):
            items[3]
        with pytest.raises(IndexError):
            items[-4]
        with pytest.raises(TypeError):
            items["0"]

    def test_setitem(self, make_list):
        """Test overwriting by index."""
        items = make_list([1, 2, 3])
        items[1] = 20
        items[-1] = 30

        assert list(items) == [1, 20, 30]

    def test_native_loop_is_shared(self, make_list):
        """Test a plain for loop takes a shared borrow."""
        items = make_list([1, 2])

        for item in items:
            assert items.borrow_state == "shared(1)"
            with pytest.raises(AlreadyBorrowedError):
                items.push(item)

        assert items.borrow_state == "unused"

    def test_reserve_and_capacity(self):
        """Test reserve grows capacity ahead of pushes."""
        items = GrowableList(ArrayStore(initial_capacity=0))
        items.reserve(10)

        assert items.capacity() >= 10

    def test_rejects_non_empty_store(self):
        """Test the constructor only adopts empty storage."""
        store = LinkedStore()
        store.append(1)

        with pytest.raises(ValueError):
            GrowableList(store)

    def test_borrow_context_managers(self, make_list):
        """Test scoped borrows apply the same rules as iterators."""
        items = make_list([1, 2])

        with items.borrow() as store:
            assert store.size() == 2
            with pytest.raises(AlreadyBorrowedError):
                items.push(3)

        with items.borrow_mut() as store:
            store.append(3)
            with pytest.raises(AlreadyMutablyBorrowedError):
                len(items)

        assert list(items) == [1, 2, 3]

    def test_shared_borrow_refuses_writes(self, make_list):
        """Test the view from borrow() cannot modify the collection."""
        items = make_list(["a", "b", "c"])
        reader = items.iter()

        with items.borrow() as view:
            assert view.load(view.first()) == "a"
            assert view.size() == 3
            for write in ("store", "append", "take", "reserve"):
                assert not hasattr(view, write)
            with pytest.raises(AttributeError):
                view.store(0, "MUTATED")

        assert next(reader) == "a"
        reader.close()
        assert list(items) == ["a", "b", "c"]

    def test_shared_view_expires_with_borrow(self, make_list):
        """Test a view kept past its with block cannot read."""
        items = make_list([1, 2])
        with items.borrow() as view:
            pass

        with items.iter_mut():
            with pytest.raises(BorrowError):
                view.load(0)

    def test_borrow_released_on_error(self, make_list):
        """Test an exception inside a scoped borrow still releases it."""
        items = make_list([1])

        with pytest.raises(KeyError):
            with items.borrow_mut():
                raise KeyError("boom")

        assert items.borrow_state == "unused"

    def test_repr(self, make_list):
        """Test repr in each borrow state."""
        items = make_list([1, 2])
        assert repr(items) == "GrowableList([1, 2])"

        with items.iter_mut():
            assert repr(items) == "GrowableList(<exclusive>)"

        with items.iter():
            assert repr(items) == "GrowableList([1, 2])"
