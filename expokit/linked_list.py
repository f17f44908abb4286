"""A doubly linked list of integers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A list node holding an item and links to its neighbours."""

    item: int
    next: Optional[Node] = field(default=None, repr=False)
    previous: Optional[Node] = field(default=None, repr=False)


class DoubleLinkedList:
    """A doubly linked list with references to its first and last nodes."""

    def __init__(self) -> None:
        self.first: Optional[Node] = None
        self.last: Optional[Node] = None

    @classmethod
    def from_iterable(cls, iterable: Iterable[int]) -> DoubleLinkedList:
        """Build a list by appending every item of an iterable in order."""
        result = cls()
        for item in iterable:
            result.push_back(item)
        return result

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self.first is None

    def has_one_element(self) -> bool:
        """Return True when the list holds exactly one node."""
        return not self.is_empty() and self.first is self.last

    def push_back(self, item: int) -> None:
        """Append an item at the end of the list."""
        if self.last is None:
            node = Node(item)
            self.first = self.last = node
            return
        node = Node(item, previous=self.last)
        self.last.next = node
        self.last = node

    def push_front(self, item: int) -> None:
        """Insert an item at the start of the list."""
        if self.first is None:
            node = Node(item)
            self.first = self.last = node
            return
        node = Node(item, next=self.first)
        self.first.previous = node
        self.first = node

    def remove_last(self) -> Optional[int]:
        """Remove and return the last item, or None if the list is empty."""
        if self.last is None:
            return None
        item = self.last.item
        if self.has_one_element():
            self.first = self.last = None
            return item
        self.last = self.last.previous
        self.last.next = None
        return item

    def remove_first(self) -> Optional[int]:
        """Remove and return the first item, or None if the list is empty."""
        if self.first is None:
            return None
        item = self.first.item
        if self.has_one_element():
            self.first = self.last = None
            return item
        self.first = self.first.next
        self.first.previous = None
        return item

    def _nodes(self) -> Iterator[Node]:
        node = self.first
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.item

    def update(self, func: Callable[[int], int]) -> None:
        """Replace every item in place with the result of func applied to it."""
        for node in self._nodes():
            node.item = func(node.item)

    def drain(self) -> Iterator[int]:
        """Yield the items from first to last, removing each as it goes."""
        while not self.is_empty():
            yield self.remove_first()

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"