"""Searching and selection in arrays and sorted matrices."""

from __future__ import annotations

import heapq
from functools import reduce
from operator import xor
from typing import Optional, Sequence


def search_rotated(values: Sequence[int], target: int) -> Optional[int]:
    """Find ``target`` in a sorted array rotated at some pivot; return its index or ``None``."""
    beg, end = 0, len(values) - 1
    while beg <= end:
        mid = (beg + end) // 2
        if values[mid] == target:
            return mid
        if values[mid] <= values[end]:
            if values[mid] < target <= values[end]:
                beg = mid + 1
            else:
                end = mid - 1
        elif values[beg] <= target < values[mid]:
            end = mid - 1
        else:
            beg = mid + 1
    return None


def first_occurrence(values: Sequence[int], x: int) -> Optional[int]:
    """Return the index of the first ``x`` in a sorted array, or ``None``."""
    beg, end = 0, len(values) - 1
    while beg <= end:
        mid = (beg + end) // 2
        if values[mid] == x and (mid == 0 or x > values[mid - 1]):
            return mid
        if x > values[mid]:
            beg = mid + 1
        else:
            end = mid - 1
    return None


def is_majority(values: Sequence[int], x: int) -> bool:
    """Whether ``x`` fills more than half of a sorted array."""
    n = len(values)
    if n == 0 or values[n // 2] != x:
        return False
    first = first_occurrence(values, x)
    if first is None:
        return False
    last = first + n // 2
    return last < n and values[last] == x


def search_sorted_matrix(matrix: Sequence[Sequence[int]], x: int) -> Optional[tuple[int, int]]:
    """Find ``x`` in a matrix sorted by rows and columns; return ``(row, col)`` or ``None``."""
    if not matrix:
        return None
    rows, cols = len(matrix), len(matrix[0])
    i, j = 0, cols - 1
    while i < rows and j >= 0:
        current = matrix[i][j]
        if current == x:
            return i, j
        if x > current:
            i += 1
        else:
            j -= 1
    return None


def two_smallest(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest value and the smallest value strictly above it."""
    if len(values) < 2:
        raise ValueError("need at least two values")
    small, second = sorted(values[:2])
    for value in values[2:]:
        if value < small:
            small, second = value, small
        elif small < value < second:
            second = value
    return small, second


def k_largest(values: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` largest values, largest first, drawn from a max-heap."""
    if not 0 <= k <= len(values):
        raise ValueError("k must lie between 0 and the number of values")
    heap = [-value for value in values]
    heapq.heapify(heap)
    return [-heapq.heappop(heap) for _ in range(k)]


def leaders(values: Sequence[int]) -> list[int]:
    """Return the values greater than all values to their right, scanning from the right."""
    found: list[int] = []
    for value in reversed(values):
        if not found or value > found[-1]:
            found.append(value)
    return found


def leaders_quadratic(values: Sequence[int]) -> list[int]:
    """Return the leaders left to right, checking each against everything after it."""
    return [
        value
        for index, value in enumerate(values)
        if all(value > other for other in values[index + 1:])
    ]


def repeated_elements(values: Sequence[int]) -> list[int]:
    """Return, in increasing order, the values that occur more than once.

    Every value must lie in 0..n-1 for an array of length n.
    """
    n = len(values)
    if any(not 0 <= value < n for value in values):
        raise ValueError("values must lie between 0 and len(values) - 1")
    marks = list(values)
    for value in values:
        marks[value] += n
    return [index for index, mark in enumerate(marks) if mark // n > 1]


def odd_occurrence(values: Sequence[int]) -> int:
    """Return the value that occurs an odd number of times, all others occurring evenly."""
    return reduce(xor, values, 0)


def pairs_with_sum(values: Sequence[int], total: int) -> list[tuple[int, int]]:
    """Return pairs ``(earlier, later)`` of elements adding to ``total``, in discovery order."""
    seen: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for value in values:
        complement = total - value
        if complement in seen:
            pairs.append((complement, value))
        else:
            seen.add(value)
    return pairs


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the median of two sorted arrays; the truncated mean of the middles for even sizes."""
    size = len(first) + len(second)
    if size == 0:
        raise ValueError("both arrays are empty")
    half = size // 2
    merged = list(heapq.merge(first, second))[: half + 1]
    if size % 2:
        return merged[half]
    return int((merged[half - 1] + merged[half]) / 2)