"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list element holding ``content`` and a link to the next node."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)


def delete_node(node: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
    """Pass the node's content to ``delete`` and detach the node.

    Nothing happens when either ``node`` or ``delete`` is missing.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


class LinkedList:
    """A chain of :class:`Node` objects reachable from ``head``."""

    def __init__(self, head: Optional[Node] = None) -> None:
        self.head = head

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Node) -> None:
        """Make ``node`` the new head of the list."""
        if self.head is not None:
            node.next = self.head
        self.head = node

    def add_back(self, node: Node) -> None:
        """Link ``node`` after the current last node."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pass every content to ``delete`` in order and empty the list.

        Without a ``delete`` callable the list is left untouched.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete_node(node, delete)
            node = following
        self.head = None

    def apply(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on each content in order."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Optional[Callable[[Any], Any]],
        delete: Optional[Callable[[Any], Any]],
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for each content.

        If ``func`` raises, the contents built so far are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        if func is None:
            return result
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result