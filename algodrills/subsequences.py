"""Subsequence and substring problems: increasing sums, palindromes, unique runs, max subarrays."""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple, Sequence


class SubarrayResult(NamedTuple):
    """The sum of a contiguous block and its inclusive 0-based bounds."""

    total: int
    start: int
    end: int


def max_increasing_subsequence_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence."""
    if not values:
        raise ValueError("need at least one value")
    best = list(values)
    for i, value in enumerate(values):
        for j in range(i):
            if value > values[j] and best[j] + value > best[i]:
                best[i] = best[j] + value
    return max(best)


def longest_palindromic_subsequence(text: str) -> int:
    """Return the length of the longest palindromic subsequence, by bottom-up tables."""
    n = len(text)
    if n == 0:
        return 0
    length = [[0] * n for _ in range(n)]
    for i in range(n):
        length[i][i] = 1
    for span in range(2, n + 1):
        for i in range(n - span + 1):
            j = i + span - 1
            if text[i] == text[j]:
                length[i][j] = 2 + (length[i + 1][j - 1] if span > 2 else 0)
            else:
                length[i][j] = max(length[i][j - 1], length[i + 1][j])
    return length[0][n - 1]


def longest_palindromic_subsequence_naive(text: str) -> int:
    """Return the length of the longest palindromic subsequence, by plain recursion."""
    if not text:
        return 0

    @lru_cache(maxsize=None)
    def solve(i: int, j: int) -> int:
        if i == j:
            return 1
        if j == i + 1:
            return 2 if text[i] == text[j] else 1
        if text[i] == text[j]:
            return 2 + solve(i + 1, j - 1)
        return max(solve(i, j - 1), solve(i + 1, j))

    return solve(0, len(text) - 1)


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    best = 0
    window_start = 0
    for index, char in enumerate(text):
        previous = last_seen.get(char)
        if previous is not None and previous >= window_start:
            window_start = previous + 1
        last_seen[char] = index
        best = max(best, index - window_start + 1)
    return best


def max_subarray(values: Sequence[int]) -> SubarrayResult:
    """Return the largest-sum contiguous block; works when every value is negative."""
    if not values:
        raise ValueError("need at least one value")
    current = best = values[0]
    current_start = best_start = best_end = 0
    for index in range(1, len(values)):
        value = values[index]
        if value >= current + value:
            current = value
            current_start = index
        else:
            current += value
        if current > best:
            best, best_start, best_end = current, current_start, index
    return SubarrayResult(best, best_start, best_end)


def max_subarray_nonnegative(values: Sequence[int]) -> SubarrayResult:
    """Kadane's scan that resets at negative running sums; the total is never below 0.

    When no block has a positive sum the result is a zero total at index 0.
    """
    current = best = 0
    current_start = best_start = best_end = 0
    for index, value in enumerate(values):
        current += value
        if current < 0:
            current = 0
            current_start = index + 1
        elif current > best:
            best, best_start, best_end = current, current_start, index
    return SubarrayResult(best, best_start, best_end)