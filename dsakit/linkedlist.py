"""Singly linked list nodes and the usual operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _nodes(self))


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a list holding ``values`` in order; return its head, or None if empty."""
    head: Node | None = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return [node.data for node in _nodes(head)]


def format_list(head: Node | None) -> str:
    """Return the values separated by single spaces."""
    return " ".join(str(value) for value in to_list(head))


def push_front(head: Node | None, value: Any) -> Node:
    """Put ``value`` in front of the list and return the new head."""
    return Node(value, head)


def length(head: Node | None) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def middle(head: Node | None) -> Node | None:
    """Return the node at index ``length // 2``, or None for an empty list."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return its new head."""
    previous: Node | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def sort_list(head: Node | None) -> Node | None:
    """Return a new list holding the same values in ascending order."""
    return from_iterable(sorted(to_list(head)))


def remove_self_linked(head: Node | None) -> Node | None:
    """Drop a node whose ``next`` points back at itself, ending the list before it."""
    previous: Node | None = None
    node = head
    while node is not None:
        if node.next is node:
            if previous is None:
                return None
            previous.next = None
            break
        previous, node = node, node.next
    return head