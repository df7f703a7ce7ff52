"""Unit tests for the SequentialList exception hierarchy."""

import pytest
from sequential_list import (
    EmptyListError,
    ListIndexError,
    SequentialList,
    SequentialListError,
)


def test_index_error_is_builtin_index_error():
    lst = SequentialList.from_values(1, 2)
    with pytest.raises(IndexError):
        lst.get(5)


def test_errors_share_base_class():
    assert issubclass(ListIndexError, SequentialListError)
    assert issubclass(EmptyListError, SequentialListError)
    assert not issubclass(EmptyListError, IndexError)


def test_index_error_message_names_operation_and_index():
    lst = SequentialList.from_values("A", "B")
    with pytest.raises(ListIndexError, match=r"remove_at: index 7 out of range"):
        lst.remove_at(7)


def test_last_on_empty_raises_base_class():
    with pytest.raises(SequentialListError, match="empty"):
        SequentialList().last()
