"""Unit tests for ListConfig and list rendering."""

from sequential_list import ListConfig, SequentialList


def test_default_config():
    config = ListConfig()
    assert config.repr_max_items == 10
    assert config.repr_separator == " -> "
    assert SequentialList().config == config


def test_repr_empty():
    assert repr(SequentialList()) == "[Head] [Tail]"


def test_repr_many():
    lst = SequentialList.from_values("A", "B", "C")
    assert repr(lst) == "[Head] A -> B -> C [Tail]"


def test_repr_truncates_after_max_items():
    lst = SequentialList.from_iterable(range(5), config=ListConfig(repr_max_items=3))
    assert repr(lst) == "[Head] 0 -> 1 -> 2 -> ... [Tail]"


def test_repr_exactly_max_items_not_truncated():
    lst = SequentialList.from_values(1, 2, config=ListConfig(repr_max_items=2))
    assert repr(lst) == "[Head] 1 -> 2 [Tail]"


def test_repr_custom_separator():
    lst = SequentialList.from_values(1, 2, 3, config=ListConfig(repr_separator=", "))
    assert repr(lst) == "[Head] 1, 2, 3 [Tail]"
