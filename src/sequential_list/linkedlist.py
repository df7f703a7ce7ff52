"""
A singly-linked sequential container.

Time Complexity:
Prepend: O(1)
Add/Insert/Get/Remove/RemoveAt/Last: O(n), since the list is walked from head
Count: O(1), the size is tracked on every mutation
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
from typing import Generic, Iterable, Optional, TypeVar

from .config import ListConfig
from .errors import EmptyListError, ListIndexError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Node(Generic[T]):
    """
    A node is a container which holds a value of type T
    and the next node it is linked to.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional[Node[T]] = None) -> None:
        self.value: T = value
        self.next: Optional[Node[T]] = next

    def __repr__(self) -> str:
        return f"[Node] {self.value!r}"


class SequentialList(Generic[T]):
    """
    SequentialList implements a singly-linked list of values of type T.

    Each node is owned by exactly one predecessor (or by the list, for the
    head). Indices are zero-based and negative indices are never valid.
    """

    def __init__(self, config: Optional[ListConfig] = None) -> None:
        self.config = config or ListConfig()
        self._head: Optional[Node[T]] = None
        self._size: int = 0

    @classmethod
    def from_values(
        cls, *values: T, config: Optional[ListConfig] = None
    ) -> SequentialList[T]:
        """Builds a list holding values in the order given."""
        return cls.from_iterable(values, config=config)

    @classmethod
    def from_iterable(
        cls, values: Iterable[T], config: Optional[ListConfig] = None
    ) -> SequentialList[T]:
        """
        Builds a list whose traversal order equals the order of values.
        Same result as calling add() for each value, but links each node
        to a locally tracked tail instead of walking the chain every time.
        """
        lst: SequentialList[T] = cls(config=config)
        tail: Optional[Node[T]] = None
        for value in values:
            node = Node(value)
            if tail is None:
                lst._head = node
            else:
                tail.next = node
            tail = node
            lst._size += 1
        logger.debug(f"Built list with {lst._size} values")
        return lst

    # -------------------------------
    # Internal helpers
    # -------------------------------
    def _check_index(self, index: int, bound: int, operation: str) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(
                f"list indices must be integers, not {type(index).__name__}"
            )
        # valid range is [0, bound)
        if index < 0 or index >= bound:
            raise ListIndexError(
                f"{operation}: index {index} out of range for list of size {self._size}"
            )

    def _node_at(self, index: int) -> Node[T]:
        """Walks index links from head. The caller has checked the bound."""
        current = self._head
        for _ in range(index):
            assert current is not None
            current = current.next
        assert current is not None
        return current

    # -------------------------------
    # Mutation
    # -------------------------------
    def prepend(self, value: T) -> None:
        """Links a new node holding value in front of the current head."""
        self._head = Node(value, next=self._head)
        self._size += 1
        logger.debug(f"Prepended {value!r}, size={self._size}")

    def add(self, value: T) -> None:
        """Appends value after the last node. O(n), there is no tail pointer."""
        new_node = Node(value)
        if self._head is None:
            self._head = new_node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = new_node
        self._size += 1
        logger.debug(f"Added {value!r}, size={self._size}")

    def insert(self, index: int, value: T) -> None:
        """
        Inserts value so that get(index) returns it afterwards, shifting
        the following values right by one.

        Valid indices are 0 <= index <= count(). An index equal to count()
        (including 0 on an empty list) leaves the list unchanged; it does
        not append.
        """
        self._check_index(index, self._size + 1, "insert")

        if index == self._size:
            # TODO: decide whether insert at count() should append; callers
            # currently get a no-op here and must use add() instead.
            logger.warning(
                f"insert at index {index} equals list size, nothing inserted"
            )
            return

        if index == 0:
            self._head = Node(value, next=self._head)
        else:
            prior = self._node_at(index - 1)
            prior.next = Node(value, next=prior.next)
        self._size += 1
        logger.debug(f"Inserted {value!r} at index {index}, size={self._size}")

    def remove(self, value: T) -> bool:
        """
        Unlinks the first node whose value equals value.
        Returns False, leaving the list untouched, if there is no match.
        """
        prior: Optional[Node[T]] = None
        current = self._head
        while current is not None:
            if current.value == value:
                if prior is None:
                    self._head = current.next
                else:
                    prior.next = current.next
                current.next = None
                self._size -= 1
                logger.debug(f"Removed {value!r}, size={self._size}")
                return True
            prior, current = current, current.next
        return False

    def remove_at(self, index: int) -> None:
        """Unlinks the node at index and closes the gap."""
        self._check_index(index, self._size, "remove_at")

        if index == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            prior = self._node_at(index - 1)
            removed = prior.next
            assert removed is not None
            prior.next = removed.next
        removed.next = None
        self._size -= 1
        logger.debug(f"Removed index {index}, size={self._size}")

    # -------------------------------
    # Access
    # -------------------------------
    def get(self, index: int) -> T:
        """Returns the value at index, raising ListIndexError when out of range."""
        self._check_index(index, self._size, "get")
        return self._node_at(index).value

    def count(self) -> int:
        return self._size

    def last(self) -> T:
        if self._head is None:
            raise EmptyListError("last: list is empty")
        current = self._head
        while current.next is not None:
            current = current.next
        return current.value

    def to_array(self) -> list[T]:
        """Returns a new list of the values in traversal order."""
        values: list[T] = []
        current = self._head
        while current is not None:
            values.append(current.value)
            current = current.next
        return values

    # -------------------------------
    # Protocol support
    # -------------------------------
    def __len__(self) -> int:
        return self._size

    # indexing must not enable the legacy sequence iteration fallback
    __iter__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __repr__(self) -> str:
        if self._head is None:
            return "[Head] [Tail]"

        limit = self.config.repr_max_items
        nodes: list[str] = []
        current = self._head
        while current is not None and len(nodes) < limit:
            nodes.append(str(current.value))
            current = current.next
        if current is not None:
            nodes.append("...")

        return "[Head] " + self.config.repr_separator.join(nodes) + " [Tail]"
