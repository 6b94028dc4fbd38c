"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that hands out its nodes.

    Iterating over the list yields the contents of its nodes in order.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end and return its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to delete in order when given."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def remove_node(self, node: Node, delete: Callable[[Any], Any] | None = None) -> None:
        """Unlink node from the list and pass its content to delete when given.

        Raises ValueError when node does not belong to this list.
        """
        previous: Node | None = None
        for current in self._nodes():
            if current is node:
                break
            previous = current
        else:
            raise ValueError("node is not part of this list")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        if self._tail is node:
            self._tail = previous
        self._size -= 1
        node.next = None
        if delete is not None:
            delete(node.content)

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on the content of every node, front to back."""
        for content in self:
            f(content)

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        return self._tail

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any] | None = None
    ) -> LinkedList:
        """A new list holding f applied to each content.

        If f raises, the contents already produced are passed to delete and
        the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"