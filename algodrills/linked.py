"""Singly linked list basics: building, indexing, middle and node deletion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: int
    next: Optional["Node"] = field(default=None, repr=False)


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[Node]:
    """Build a linked list holding ``values`` in order and return its head."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[Node]) -> list[int]:
    """Return the data of every node from ``head`` to the end."""
    return [node.data for node in _nodes(head)]


def create_linked_list(size: int) -> Optional[Node]:
    """Build the list 1, 2, ..., size; ``None`` when size is below 1."""
    return from_values(range(1, size + 1))


class LinkedList:
    """A singly linked list that keeps track of its head and its size."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head = from_values(values)
        self.size = sum(1 for _ in _nodes(self.head))

    def __iter__(self) -> Iterator[int]:
        for node in _nodes(self.head):
            yield node.data

    def __len__(self) -> int:
        return self.size

    def clear(self) -> None:
        """Drop every node."""
        self.head = None
        self.size = 0

    def get_nth(self, index: int) -> int:
        """Return the value at 1-based position ``index``."""
        if self.head is None:
            raise IndexError("list is empty")
        if index > self.size:
            raise IndexError("index should be less than size")
        if index < 1:
            raise IndexError("index must be at least 1")
        for position, node in enumerate(_nodes(self.head), start=1):
            if position == index:
                return node.data
        raise IndexError("index out of range")


def nth_from_last(head: Optional[Node], index: int) -> int:
    """Return the value ``index`` places from the end, using two pointers."""
    if head is None:
        raise ValueError("list is empty")
    if index < 1:
        raise IndexError("index must be at least 1")
    ref: Optional[Node] = head
    for _ in range(index):
        if ref is None:
            raise IndexError("index larger than list length")
        ref = ref.next
    main = head
    while ref is not None:
        ref = ref.next
        main = main.next  # type: ignore[assignment]
    return main.data


def nth_from_last_recursive(head: Optional[Node], index: int) -> int:
    """Return the value ``index`` places from the end, counting on the way back."""

    def walk(node: Optional[Node]) -> tuple[int, Optional[Node]]:
        if node is None:
            return 0, None
        count, found = walk(node.next)
        count += 1
        if found is None and count == index:
            found = node
        return count, found

    _, found = walk(head)
    if found is None:
        raise IndexError("index out of range")
    return found.data


def middle(head: Optional[Node]) -> int:
    """Return the middle value; the first of the two middles for even lengths."""
    if head is None:
        raise ValueError("list is empty")
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
    return slow.data


def delete_node(node: Optional[Node]) -> None:
    """Delete ``node`` given only a reference to it, by taking over its successor."""
    if node is None:
        return
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node this way")
    node.data = successor.data
    node.next = successor.next