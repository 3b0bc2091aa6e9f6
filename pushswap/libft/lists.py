"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a :class:`LinkedList`."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps track of its head, tail and size."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append ``content`` at the tail and return its node."""
        node: Node[T] = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Empty the list, handing each content to ``delete`` first if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on every content, head to tail."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of ``f`` applied to each content.

        If ``f`` raises, the contents built so far are handed to ``delete``
        and the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result