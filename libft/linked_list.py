"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class Node:
    """One list cell holding ``content`` and a link to the next cell."""

    def __init__(self, content: Any) -> None:
        self.content = content
        self.next: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


class LinkedList:
    """A singly linked list whose first cell is ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; its old ``next`` link is replaced."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Link ``node`` after the current last cell, or make it the head."""
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """The last cell, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every cell, passing each content to ``delete`` if given."""
        for node in list(self._nodes()):
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of ``f(content)`` for each content.

        If ``f`` raises, the contents already produced are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result