"""Measures over arrays: products, balance points, inversions, differences and sums."""

from __future__ import annotations

from math import prod
from typing import Optional, Sequence


def product_array(values: Sequence[int]) -> list[int]:
    """Return, for each index, the product of all other values, using prefix and suffix products."""
    n = len(values)
    result = [1] * n
    running = 1
    for i in range(n):
        result[i] = running
        running *= values[i]
    running = 1
    for i in reversed(range(n)):
        result[i] *= running
        running *= values[i]
    return result


def product_array_quadratic(values: Sequence[int]) -> list[int]:
    """Return, for each index, the product of all other values, multiplying directly."""
    return [
        prod(value for j, value in enumerate(values) if j != i) for i in range(len(values))
    ]


def equilibrium_indices(values: Sequence[int]) -> list[int]:
    """Return the indices whose left sum equals their right sum, in one pass."""
    right = sum(values)
    left = 0
    found: list[int] = []
    for index, value in enumerate(values):
        right -= value
        if left == right:
            found.append(index)
        left += value
    return found


def equilibrium_indices_quadratic(values: Sequence[int]) -> list[int]:
    """Return the equilibrium indices, summing both sides afresh for each index."""
    return [
        index
        for index in range(len(values))
        if sum(values[:index]) == sum(values[index + 1:])
    ]


def _sort_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_count(values[:mid])
    right, right_count = _sort_count(values[mid:])
    merged: list[int] = []
    cross = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            cross += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, left_count + right_count + cross


def inversion_count(values: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]`` by merge sort."""
    return _sort_count(list(values))[1]


def inversion_count_quadratic(values: Sequence[int]) -> int:
    """Count inversions by checking every pair."""
    return sum(
        1
        for i, earlier in enumerate(values)
        for later in values[i + 1:]
        if earlier > later
    )


def max_difference(values: Sequence[int]) -> int:
    """Return the largest ``values[j] - values[i]`` with ``i < j``; may be negative."""
    if len(values) < 2:
        raise ValueError("need at least two values")
    smallest = values[0]
    best = values[1] - values[0]
    for value in values:
        best = max(best, value - smallest)
        smallest = min(smallest, value)
    return best


def max_difference_quadratic(values: Sequence[int]) -> int:
    """Return the largest positive ``values[j] - values[i]`` with ``i < j``, or 0."""
    best = 0
    for i, earlier in enumerate(values):
        for later in values[i + 1:]:
            best = max(best, later - earlier)
    return best


def max_square_submatrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the largest square block of 1s in a 0/1 matrix; empty if there is none."""
    if not matrix:
        return []
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    sizes = [list(row) for row in matrix]
    for i in range(1, len(matrix)):
        for j in range(1, cols):
            if matrix[i][j] == 1:
                sizes[i][j] = min(sizes[i - 1][j], sizes[i][j - 1], sizes[i - 1][j - 1]) + 1
            else:
                sizes[i][j] = 0
    best, best_i, best_j = 0, 0, 0
    for i, row in enumerate(sizes):
        for j, size in enumerate(row):
            if size > best:
                best, best_i, best_j = size, i, j
    return [
        list(matrix[i][best_j - best + 1: best_j + 1])
        for i in range(best_i - best + 1, best_i + 1)
    ]


def max_sum_non_adjacent(values: Sequence[int]) -> int:
    """Return the largest sum of elements no two of which are adjacent."""
    if not values:
        raise ValueError("need at least one value")
    incl, excl = values[0], 0
    for value in values[1:]:
        incl, excl = excl + value, max(incl, excl)
    return max(incl, excl)


def min_sum_pair(values: Sequence[int]) -> tuple[int, int]:
    """Return two elements whose sum is closest to zero, smaller first, after sorting."""
    if len(values) < 2:
        raise ValueError("need at least two values")
    ordered = sorted(values)
    i, j = 0, len(ordered) - 1
    best = (ordered[i], ordered[j])
    while i < j:
        total = ordered[i] + ordered[j]
        if abs(total) < abs(sum(best)):
            best = (ordered[i], ordered[j])
        if total < 0:
            i += 1
        elif total > 0:
            j -= 1
        else:
            break
    return best


def min_sum_pair_quadratic(values: Sequence[int]) -> tuple[int, int]:
    """Return the first pair, in index order, whose sum is closest to zero."""
    if len(values) < 2:
        raise ValueError("need at least two values")
    best = (values[0], values[1])
    for i, earlier in enumerate(values):
        for later in values[i + 1:]:
            if abs(earlier + later) < abs(sum(best)):
                best = (earlier, later)
    return best


def unsorted_subarray(values: Sequence[int]) -> Optional[tuple[int, int]]:
    """Return ``(start, end)`` of the shortest block whose sorting sorts everything, or ``None``."""
    n = len(values)
    start = next((i for i in range(n - 1) if values[i] > values[i + 1]), None)
    if start is None:
        return None
    end = next(i for i in range(n - 1, 0, -1) if values[i - 1] > values[i])
    block = values[start: end + 1]
    low, high = min(block), max(block)
    start = next((i for i in range(start) if values[i] > low), start)
    end = next((i for i in range(n - 1, end, -1) if values[i] < high), end)
    return start, end