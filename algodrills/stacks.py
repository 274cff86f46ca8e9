"""Stacks: several fixed-size stacks sharing one array, and a stack that tracks its minimum."""

from __future__ import annotations

from typing import NamedTuple


class MultiStack:
    """``stack_count`` stacks of ``stack_size`` slots each, stored in a single buffer."""

    def __init__(self, stack_count: int, stack_size: int) -> None:
        if stack_count < 1 or stack_size < 1:
            raise ValueError("stack count and size must be positive")
        self.stack_count = stack_count
        self.stack_size = stack_size
        self._buffer = [0] * (stack_count * stack_size)
        self._tops = [0] * stack_count

    def _check(self, stack_num: int) -> None:
        if not 0 <= stack_num < self.stack_count:
            raise IndexError(f"no stack number {stack_num}")

    def push(self, stack_num: int, value: int) -> None:
        """Push ``value`` onto stack ``stack_num``."""
        self._check(stack_num)
        top = self._tops[stack_num]
        if top >= self.stack_size:
            raise OverflowError("stack overflow")
        self._buffer[stack_num * self.stack_size + top] = value
        self._tops[stack_num] = top + 1

    def pop(self, stack_num: int) -> int:
        """Remove and return the top of stack ``stack_num``."""
        self._check(stack_num)
        if self._tops[stack_num] < 1:
            raise IndexError("stack underflow")
        self._tops[stack_num] -= 1
        index = stack_num * self.stack_size + self._tops[stack_num]
        value = self._buffer[index]
        self._buffer[index] = 0
        return value

    def peek(self, stack_num: int) -> int:
        """Return the top of stack ``stack_num`` without removing it."""
        self._check(stack_num)
        if self._tops[stack_num] < 1:
            raise IndexError("stack is empty")
        return self._buffer[stack_num * self.stack_size + self._tops[stack_num] - 1]

    def is_empty(self, stack_num: int) -> bool:
        """Whether stack ``stack_num`` holds nothing."""
        self._check(stack_num)
        return self._tops[stack_num] == 0


class _Entry(NamedTuple):
    value: int
    min_beneath: int


class MinStack:
    """A stack whose every entry remembers the minimum at or below it."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def push(self, value: int) -> None:
        """Push ``value``."""
        smallest = value if not self._entries else min(self._entries[-1].min_beneath, value)
        self._entries.append(_Entry(value, smallest))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._entries:
            raise IndexError("stack underflow")
        return self._entries.pop().value

    def peek(self) -> int:
        """Return the top value."""
        if not self._entries:
            raise IndexError("stack is empty")
        return self._entries[-1].value

    def min(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._entries:
            raise IndexError("stack is empty")
        return self._entries[-1].min_beneath

    def is_empty(self) -> bool:
        """Whether the stack holds nothing."""
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)