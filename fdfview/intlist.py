"""A singly linked list of integers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

Deleter = Callable[[int], object]


@dataclass
class Node:
    """One list cell holding an integer value and bookkeeping fields."""

    content: int
    next: Node | None = None
    index: int = 0
    operations_a: int = 0
    operations_b: int = 0
    if_min_element: int = 0


def delete_node(node: Node, on_delete: Deleter | None = None) -> None:
    """Release ``node``, passing its value to ``on_delete`` first."""
    if on_delete is not None:
        on_delete(node.content)
    node.next = None


class IntList:
    """A singly linked list of integers with head insertion and append."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: int) -> Node:
        """Insert ``value`` at the head and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: int) -> Node:
        """Append ``value`` at the tail and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The tail node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, on_delete: Deleter | None = None) -> None:
        """Remove every node, head first, handing each value to ``on_delete``."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            delete_node(node, on_delete)
            node = following

    def for_each(self, func: Callable[[int], object]) -> None:
        """Call ``func`` on every value from head to tail."""
        for value in self:
            func(value)

    def map(
        self, func: Callable[[int], int], on_delete: Deleter | None = None
    ) -> IntList:
        """A new list of ``func(value)`` for each value.

        If ``func`` fails, the nodes built so far are cleared through
        ``on_delete`` and the error propagates.
        """
        result = IntList()
        try:
            for value in self:
                result.push_back(func(value))
        except Exception:
            result.clear(on_delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.content for node in self._nodes())