"""Dynamic-programming optimisation problems with their plain recursive counterparts."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence


class RodCut(NamedTuple):
    """Best revenue for a rod and the piece lengths that reach it."""

    revenue: int
    cuts: list[int]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (0/1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0 or any(weight < 0 for weight in weights):
        raise ValueError("capacity and weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def count_coin_change(coins: Sequence[int], amount: int) -> int:
    """Count the ways to make ``amount`` from unlimited coins of the given values."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def _check_eggs(eggs: int, floors: int) -> None:
    if eggs < 1:
        raise ValueError("need at least one egg")
    if floors < 0:
        raise ValueError("floors must not be negative")


def egg_drop(eggs: int, floors: int) -> int:
    """Return the fewest drops that find the critical floor in the worst case."""
    _check_eggs(eggs, floors)
    trials = [list(range(floors + 1))]
    for _ in range(2, eggs + 1):
        fewer = trials[-1]
        row = [0] * (floors + 1)
        if floors >= 1:
            row[1] = 1
        for j in range(2, floors + 1):
            row[j] = 1 + min(max(fewer[x - 1], row[j - x]) for x in range(1, j + 1))
        trials.append(row)
    return trials[-1][floors]


def egg_drop_naive(eggs: int, floors: int) -> int:
    """Return the fewest worst-case drops by trying every first floor recursively."""
    _check_eggs(eggs, floors)
    if floors <= 1 or eggs == 1:
        return floors
    return 1 + min(
        max(egg_drop_naive(eggs - 1, x - 1), egg_drop_naive(eggs, floors - x))
        for x in range(1, floors + 1)
    )


def _check_dims(dims: Sequence[int]) -> None:
    if len(dims) < 2:
        raise ValueError("need at least two dimensions")


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications for the chain whose i-th matrix is dims[i-1] x dims[i]."""
    _check_dims(dims)
    n = len(dims)
    cost = [[0] * n for _ in range(n)]
    for span in range(2, n):
        for i in range(1, n - span + 1):
            j = i + span - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][n - 1]


def matrix_chain_cost_naive(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications by trying every split recursively."""
    _check_dims(dims)

    def solve(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            solve(i, k) + solve(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return solve(1, len(dims) - 1)


def _check_cell(cost: Sequence[Sequence[int]], m: int, n: int) -> None:
    if not cost or not 0 <= m < len(cost) or not 0 <= n < len(cost[m]):
        raise IndexError("target cell outside the cost matrix")


def min_cost_path(cost: Sequence[Sequence[int]], m: int, n: int) -> int:
    """Return the cheapest path cost from (0, 0) to (m, n) moving right, down or diagonally."""
    _check_cell(cost, m, n)
    total = [[0] * (n + 1) for _ in range(m + 1)]
    total[0][0] = cost[0][0]
    for i in range(1, m + 1):
        total[i][0] = total[i - 1][0] + cost[i][0]
    for j in range(1, n + 1):
        total[0][j] = total[0][j - 1] + cost[0][j]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            total[i][j] = cost[i][j] + min(
                total[i - 1][j], total[i - 1][j - 1], total[i][j - 1]
            )
    return total[m][n]


def min_cost_path_naive(cost: Sequence[Sequence[int]], m: int, n: int) -> int:
    """Return the cheapest path cost by plain recursion over the three moves."""
    _check_cell(cost, m, n)

    def solve(i: int, j: int) -> float:
        if i < 0 or j < 0:
            return math.inf
        if i == 0 and j == 0:
            return cost[0][0]
        return cost[i][j] + min(solve(i - 1, j), solve(i - 1, j - 1), solve(i, j - 1))

    return int(solve(m, n))


def optimal_bst_cost(freq: Sequence[int]) -> int:
    """Return the least total search cost of a BST over keys with these access counts."""
    n = len(freq)
    if n == 0:
        return 0
    prefix = [0]
    for count in freq:
        prefix.append(prefix[-1] + count)
    cost = [[0] * n for _ in range(n)]
    for i in range(n):
        cost[i][i] = freq[i]
    for span in range(2, n + 1):
        for i in range(n - span + 1):
            j = i + span - 1
            weight = prefix[j + 1] - prefix[i]
            cost[i][j] = weight + min(
                (cost[i][r - 1] if r > i else 0) + (cost[r + 1][j] if r < j else 0)
                for r in range(i, j + 1)
            )
    return cost[0][n - 1]


def _check_rod(prices: Sequence[int], length: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if length >= len(prices):
        raise ValueError("prices must cover every piece length up to the rod length")


def rod_cutting(prices: Sequence[int], length: int) -> RodCut:
    """Return the best revenue for a rod of ``length`` and its pieces; ``prices[i]`` prices length i."""
    _check_rod(prices, length)
    revenue = [0] * (length + 1)
    first_cut = [0] * (length + 1)
    for j in range(1, length + 1):
        best = -math.inf
        for i in range(1, j + 1):
            candidate = prices[i] + revenue[j - i]
            if candidate > best:
                best = candidate
                first_cut[j] = i
        revenue[j] = int(best)
    cuts: list[int] = []
    remaining = length
    while remaining > 0:
        cuts.append(first_cut[remaining])
        remaining -= first_cut[remaining]
    return RodCut(revenue[length], cuts)


def rod_cutting_naive(prices: Sequence[int], length: int) -> int:
    """Return the best revenue by trying every first piece recursively."""
    _check_rod(prices, length)
    if length == 0:
        return 0
    return max(prices[i] + rod_cutting_naive(prices, length - i) for i in range(1, length + 1))