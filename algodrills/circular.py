"""Circular singly linked lists kept in sorted order."""

from __future__ import annotations

from typing import Iterator, Optional

from algodrills.linked import Node


def _cycle(head: Optional[Node]) -> Iterator[Node]:
    if head is None:
        return
    node = head
    while True:
        yield node
        node = node.next  # type: ignore[assignment]
        if node is head or node is None:
            return


def make_circular(head: Optional[Node]) -> Optional[Node]:
    """Link the last node of a plain list back to ``head`` and return ``head``."""
    if head is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    return head


def sorted_insert(head: Optional[Node], value: int) -> Node:
    """Insert ``value`` into a sorted circular list and return the (possibly new) head."""
    node = Node(value)
    if head is None:
        node.next = node
        return node
    if value <= head.data:
        tail = head
        while tail.next is not head:
            tail = tail.next  # type: ignore[assignment]
        tail.next = node
        node.next = head
        return node
    current = head
    while current.next is not head and current.next.data < value:  # type: ignore[union-attr]
        current = current.next  # type: ignore[assignment]
    node.next = current.next
    current.next = node
    return head


def circular_values(head: Optional[Node]) -> list[int]:
    """Return the values once around the circle, starting at ``head``."""
    return [node.data for node in _cycle(head)]