"""In-place array transformations and merges of sorted arrays."""

from __future__ import annotations

from typing import MutableSequence, Optional, Sequence


def _swap_range(values: MutableSequence[int], beg: int, end: int) -> None:
    while beg < end:
        values[beg], values[end] = values[end], values[beg]
        beg += 1
        end -= 1


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place by swapping from both ends."""
    _swap_range(values, 0, len(values) - 1)


def reverse_recursive(
    values: MutableSequence[int], beg: int = 0, end: Optional[int] = None
) -> None:
    """Reverse ``values[beg..end]`` (inclusive) in place, recursively."""
    if end is None:
        end = len(values) - 1
    if beg >= end:
        return
    values[beg], values[end] = values[end], values[beg]
    reverse_recursive(values, beg + 1, end - 1)


def _normalised_shift(values: Sequence[int], d: int) -> int:
    if d < 0:
        raise ValueError("rotation must not be negative")
    return d % len(values)


def rotate_left(values: MutableSequence[int], d: int) -> None:
    """Rotate ``values`` left by ``d`` places in place, using three reversals."""
    if not values:
        return
    n = len(values)
    d = _normalised_shift(values, d)
    _swap_range(values, 0, d - 1)
    _swap_range(values, d, n - 1)
    _swap_range(values, 0, n - 1)


def rotate_right(values: MutableSequence[int], d: int) -> None:
    """Rotate ``values`` right by ``d`` places in place, using three reversals."""
    if not values:
        return
    n = len(values)
    d = _normalised_shift(values, d)
    _swap_range(values, n - d, n - 1)
    _swap_range(values, 0, n - d - 1)
    _swap_range(values, 0, n - 1)


def rotate_matrix_90(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return ``matrix`` turned 90 degrees clockwise."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*reversed(matrix))]


def segregate_zeros_ones(values: MutableSequence[int]) -> None:
    """Move all 0s before all 1s in place, in one pass from both ends."""
    if any(value not in (0, 1) for value in values):
        raise ValueError("values must be 0 or 1")
    left, right = 0, len(values) - 1
    while left < right:
        while left < right and values[left] == 0:
            left += 1
        while left < right and values[right] == 1:
            right -= 1
        if left < right:
            values[left] = 0
            values[right] = 1
        left += 1
        right -= 1


def merge_into(m_plus_n: MutableSequence[Optional[int]], n_values: Sequence[int]) -> None:
    """Merge sorted ``n_values`` into ``m_plus_n``, whose free slots hold ``None``.

    The filled slots of ``m_plus_n`` must be sorted, and the number of free slots
    must equal ``len(n_values)``.
    """
    known = [value for value in m_plus_n if value is not None]
    if len(m_plus_n) - len(known) != len(n_values):
        raise ValueError("number of free slots must equal the number of values to merge")
    merged: list[int] = []
    i = j = 0
    while i < len(known) and j < len(n_values):
        if known[i] < n_values[j]:
            merged.append(known[i])
            i += 1
        else:
            merged.append(n_values[j])
            j += 1
    merged.extend(known[i:])
    merged.extend(n_values[j:])
    m_plus_n[:] = merged


def union_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the union of two sorted arrays, common values once."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        elif second[j] < first[i]:
            result.append(second[j])
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def intersection_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the values common to two sorted arrays."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    return result