"""SequentialList - a generic singly-linked list in Python."""

from .config import ListConfig
from .errors import EmptyListError, ListIndexError, SequentialListError
from .linkedlist import Node, SequentialList

__all__ = [
    "ListConfig",
    "SequentialListError",
    "ListIndexError",
    "EmptyListError",
    "Node",
    "SequentialList",
]
