"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert a new node holding content before the first node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append a new node holding content after the last node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every value to delete, front to back, and empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            self.head = following
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every value, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any], delete: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list of func applied to every value.

        If func raises, the values already produced are passed to delete
        and the exception propagates; the original list is left unchanged.
        """
        result = LinkedList()
        try:
            for node in self._nodes():
                result.add_back(func(node.content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"