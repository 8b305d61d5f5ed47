"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], object]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the following node."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list; iteration yields contents from head to tail."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the tail and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the tail node, or None when the list is empty."""
        return self._tail

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every content, head first."""
        for content in self:
            func(content)

    def clear(self, delete: Optional[Deleter] = None) -> None:
        """Empty the list, passing each content to ``delete`` when given."""
        contents = list(self)
        self.head = None
        self._tail = None
        self._size = 0
        if delete is not None:
            for content in contents:
                delete(content)

    def map(
        self, func: Callable[[Any], Any], delete: Optional[Deleter] = None
    ) -> LinkedList:
        """Return a new list of ``func`` applied to every content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result