"""Operations on singly linked lists: reversal, arithmetic, splitting, pruning, loops."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterator, Optional

from algodrills.linked import Node, from_values, to_values


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return the new head."""
    previous: Optional[Node] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def add_numbers(head1: Optional[Node], head2: Optional[Node]) -> Optional[Node]:
    """Add two numbers stored most significant digit first; return the sum as a new list."""
    if head1 is None or head2 is None:
        return None
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(to_values(head1)), reversed(to_values(head2)), fillvalue=0):
        total = a + b + carry
        digits.append(total % 10)
        carry = total // 10
    if carry > 0:
        digits.append(carry)
    return from_values(reversed(digits))


def alternate_split(head: Optional[Node]) -> tuple[Optional[Node], Optional[Node]]:
    """Split into the nodes at odd and at even positions; return both heads."""
    if head is None or head.next is None:
        return head, None
    nodes = list(_nodes(head))
    firsts, seconds = nodes[::2], nodes[1::2]
    for group in (firsts, seconds):
        for current, following in zip(group, group[1:]):
            current.next = following
        group[-1].next = None
    return firsts[0], seconds[0]


def intersection_value(head1: Optional[Node], head2: Optional[Node]) -> Optional[int]:
    """Return the first value of the second list that also occurs in the first, or ``None``."""
    if head1 is None or head2 is None:
        return None
    seen = set(to_values(head1))
    return next((node.data for node in _nodes(head2) if node.data in seen), None)


def delete_n_after_m(head: Optional[Node], m: int, n: int) -> Optional[Node]:
    """Repeatedly keep ``m`` nodes then drop the next ``n``; return the head."""
    if m < 1 or n < 0:
        raise ValueError("m must be at least 1 and n must not be negative")
    if head is None or head.next is None:
        return head
    current: Optional[Node] = head
    while current is not None:
        last_kept = current
        for _ in range(m - 1):
            if last_kept.next is None:
                return head
            last_kept = last_kept.next
        after = last_kept.next
        for _ in range(n):
            if after is None:
                break
            after = after.next
        last_kept.next = after
        current = after
    return head


def delete_greater_right(head: Optional[Node]) -> Optional[Node]:
    """Drop every node that has a greater value somewhere to its right; return the head."""
    if head is None or head.next is None:
        return head
    head = reverse(head)
    best = head.data
    kept = head
    node = head.next
    while node is not None:
        if node.data < best:
            kept.next = node.next
        else:
            best = node.data
            kept = node
        node = kept.next
    return reverse(head)


def delete_greater_right_in_place(head: Optional[Node]) -> Optional[Node]:
    """Same pruning done without reversal, by pulling greater values forward."""
    if head is None or head.next is None:
        return head
    for node in _nodes(head):
        probe = node.next
        while probe is not None:
            if probe.data > node.data:
                node.data = probe.data
                node.next = probe.next
            probe = probe.next
    return head


def detect_and_remove_loop(head: Optional[Node]) -> bool:
    """Find a cycle with slow and fast pointers, break it, and report whether one existed."""
    if head is None or head.next is None:
        return False
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
        if fast is slow:
            _remove_loop(head, slow)
            return True
    return False


def _remove_loop(head: Node, meeting: Node) -> None:
    loop_length = 1
    probe = meeting
    while probe.next is not meeting:
        probe = probe.next  # type: ignore[assignment]
        loop_length += 1
    ahead = head
    for _ in range(loop_length):
        ahead = ahead.next  # type: ignore[assignment]
    start = head
    while start is not ahead:
        start = start.next  # type: ignore[assignment]
        ahead = ahead.next  # type: ignore[assignment]
    last = start
    while last.next is not start:
        last = last.next  # type: ignore[assignment]
    last.next = None