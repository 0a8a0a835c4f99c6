"""A singly linked list with callback-driven clearing, iteration and mapping."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a list: its content and the next node."""

    content: T
    next: Node[T] | None = None


class LinkedList(Generic[T]):
    """Singly linked list of contents, iterated from front to back."""

    def __init__(self, contents: Any = ()) -> None:
        self.head: Node[T] | None = None
        for content in contents:
            self.push_back(content)

    def __iter__(self) -> Iterator[T]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the front and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: T) -> Node[T]:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node[T] | None:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[T], Any] | None) -> None:
        """Pass every content to ``delete`` from front to back, then empty the list.

        Without a ``delete`` callback the list is left untouched.
        """
        if delete is None:
            return
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            delete(node.content)

    def iterate(self, func: Callable[[T], Any] | None) -> None:
        """Call ``func`` on every content from front to back."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U] | None,
        delete: Callable[[U], Any] | None = None,
    ) -> LinkedList[U]:
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.  Without ``func`` an empty
        list is returned.
        """
        result: LinkedList[U] = LinkedList()
        if func is None:
            return result
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result