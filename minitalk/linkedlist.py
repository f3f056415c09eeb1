"""Singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that keeps track of its head, tail and length."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front; return its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the end; return its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def clear(self, release: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each content to *release* if given."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call *func* on each content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for each content.

        If *func* raises, the contents already produced are passed to
        *release* and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(release)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"