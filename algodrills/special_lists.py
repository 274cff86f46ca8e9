"""Lists with extra links: random-pointer cloning and flattening of a list of lists."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class RandomNode:
    """A list node with a ``next`` link and an arbitrary ``arbit`` link."""

    data: int
    next: Optional["RandomNode"] = field(default=None, repr=False)
    arbit: Optional["RandomNode"] = field(default=None, repr=False)


@dataclass(eq=False)
class GridNode:
    """A node with a ``next`` link across and a ``down`` link to its sorted column."""

    data: int
    next: Optional["GridNode"] = field(default=None, repr=False)
    down: Optional["GridNode"] = field(default=None, repr=False)


def clone_with_arbit(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Copy a list with arbitrary links, weaving copies between originals."""
    if head is None:
        return None
    node: Optional[RandomNode] = head
    while node is not None:
        node.next = RandomNode(node.data, next=node.next)
        node = node.next.next

    node = head
    while node is not None:
        copy = node.next
        copy.arbit = node.arbit.next if node.arbit is not None else None  # type: ignore[union-attr]
        node = copy.next  # type: ignore[union-attr]

    clone = head.next
    node = head
    while node is not None:
        copy = node.next
        node.next = copy.next  # type: ignore[union-attr]
        copy.next = node.next.next if node.next is not None else None  # type: ignore[union-attr]
        node = node.next
    return clone


def _across(node: Optional[GridNode]) -> Iterator[GridNode]:
    while node is not None:
        yield node
        node = node.next


def _down(node: Optional[GridNode]) -> Iterator[int]:
    while node is not None:
        yield node.data
        node = node.down


def _chain(values: Iterable[int]) -> Optional[GridNode]:
    head: Optional[GridNode] = None
    tail: Optional[GridNode] = None
    for value in values:
        node = GridNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def sorted_merge(a: Optional[GridNode], b: Optional[GridNode]) -> Optional[GridNode]:
    """Merge ``a`` (read across) with ``b`` (read down) into a new list linked across."""
    return _chain(heapq.merge((node.data for node in _across(a)), _down(b)))


def flatten(head: Optional[GridNode]) -> Optional[GridNode]:
    """Flatten a list of sorted columns into one sorted list linked across."""
    if head is None:
        return None
    result: Optional[GridNode] = head
    for column in list(_across(head)):
        result = sorted_merge(result, column.down)
    return result