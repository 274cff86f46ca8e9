"""Doubly linked lists: deletion, reversal and a XOR-linked variant."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    data: int
    left: Optional["DNode"] = field(default=None, repr=False)
    right: Optional["DNode"] = field(default=None, repr=False)


def from_values(values: Iterable[int]) -> Optional[DNode]:
    """Build a doubly linked list from ``values`` and return its head."""
    head: Optional[DNode] = None
    tail: Optional[DNode] = None
    for value in values:
        node = DNode(value, left=tail)
        if tail is None:
            head = node
        else:
            tail.right = node
        tail = node
    return head


def to_values(head: Optional[DNode]) -> list[int]:
    """Return the values from ``head`` following right links."""
    values = []
    while head is not None:
        values.append(head.data)
        head = head.right
    return values


def to_values_backward(tail: Optional[DNode]) -> list[int]:
    """Return the values from ``tail`` following left links."""
    values = []
    while tail is not None:
        values.append(tail.data)
        tail = tail.left
    return values


def delete_value(head: Optional[DNode], data: int) -> Optional[DNode]:
    """Delete the first node holding ``data`` and return the head."""
    if head is None:
        return None
    node = head
    while node is not None and node.data != data:
        node = node.right
    if node is None:
        raise ValueError(f"element {data} not in list")
    if node.right is None:
        if node.left is None:
            return None
        node.left.right = None
        return head
    successor = node.right
    node.data = successor.data
    node.right = successor.right
    if node.right is not None:
        node.right.left = node
    return head


def reverse(head: Optional[DNode]) -> Optional[DNode]:
    """Reverse the list in place and return the new head."""
    new_head = None
    while head is not None:
        head.left, head.right = head.right, head.left
        new_head = head
        head = head.left
    return new_head


@dataclass
class _XorNode:
    data: int
    link: int = 0


class XorList:
    """A doubly linked list that stores one XOR of neighbour handles per node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: dict[int, _XorNode] = {}
        self._head = 0
        self._tail = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        handle = len(self._nodes) + 1
        self._nodes[handle] = _XorNode(value, self._tail)
        if self._tail:
            self._nodes[self._tail].link ^= handle
        else:
            self._head = handle
        self._tail = handle

    def _walk(self, start: int) -> Iterator[int]:
        previous, current = 0, start
        while current:
            node = self._nodes[current]
            yield node.data
            previous, current = current, node.link ^ previous

    def __iter__(self) -> Iterator[int]:
        return self._walk(self._head)

    def __reversed__(self) -> Iterator[int]:
        return self._walk(self._tail)

    def __len__(self) -> int:
        return len(self._nodes)