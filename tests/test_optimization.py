import pytest

from algodrills.optimization import (
    count_coin_change,
    egg_drop,
    egg_drop_naive,
    knapsack,
    matrix_chain_cost,
    matrix_chain_cost_naive,
    min_cost_path,
    min_cost_path_naive,
    optimal_bst_cost,
    rod_cutting,
    rod_cutting_naive,
)

PRICES = [0, 1, 5, 8, 9, 10, 17, 17, 20, 24, 30]
COST = [[1, 2, 3], [4, 8, 2], [1, 5, 3]]


def test_knapsack_example():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_everything_fits():
    weights, values = [10, 20, 30], [60, 100, 120]
    assert knapsack(sum(weights), weights, values) == sum(values)


def test_knapsack_single_item_too_heavy():
    assert knapsack(5, [6], [100]) == knapsack(5, [], [])


def test_knapsack_errors():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])
    with pytest.raises(ValueError):
        knapsack(-1, [1], [1])


def test_coin_change_example():
    assert count_coin_change([2, 5, 3, 6], 10) == 5


def test_coin_change_single_unit_coin():
    assert count_coin_change([1], 37) == count_coin_change([1], 0)


def test_coin_change_order_does_not_matter():
    assert count_coin_change([2, 5, 3, 6], 23) == count_coin_change([6, 5, 3, 2], 23)


def test_coin_change_errors():
    with pytest.raises(ValueError):
        count_coin_change([0, 1], 5)
    with pytest.raises(ValueError):
        count_coin_change([1], -1)


def test_egg_drop_example():
    assert egg_drop(2, 10) == 4


@pytest.mark.parametrize("eggs", [1, 2, 3])
@pytest.mark.parametrize("floors", [0, 1, 2, 5, 7])
def test_egg_drop_naive_agrees(eggs, floors):
    assert egg_drop_naive(eggs, floors) == egg_drop(eggs, floors)


def test_egg_drop_one_egg_tries_every_floor():
    assert egg_drop(1, 12) == 12


def test_egg_drop_errors():
    with pytest.raises(ValueError):
        egg_drop(0, 5)
    with pytest.raises(ValueError):
        egg_drop_naive(2, -1)


@pytest.mark.parametrize("dims", [[40, 20, 30, 10, 30], [10, 20, 30], [1, 2, 3, 4, 3], [5, 7]])
def test_matrix_chain_naive_agrees(dims):
    assert matrix_chain_cost_naive(dims) == matrix_chain_cost(dims)


def test_matrix_chain_two_matrices():
    a, b, c = 10, 20, 30
    assert matrix_chain_cost([a, b, c]) == a * b * c


def test_matrix_chain_errors():
    with pytest.raises(ValueError):
        matrix_chain_cost([5])


@pytest.mark.parametrize("m,n", [(0, 0), (2, 2), (1, 2), (2, 0)])
def test_min_cost_path_naive_agrees(m, n):
    assert min_cost_path_naive(COST, m, n) == min_cost_path(COST, m, n)


def test_min_cost_path_origin_and_bound():
    assert min_cost_path(COST, 0, 0) == COST[0][0]
    assert min_cost_path(COST, 2, 2) <= COST[0][0] + COST[1][1] + COST[2][2]


def test_min_cost_path_errors():
    with pytest.raises(IndexError):
        min_cost_path(COST, 3, 0)


def test_optimal_bst_single_key():
    assert optimal_bst_cost([34]) == 34


def test_optimal_bst_at_least_total_frequency():
    freq = [34, 8, 50]
    cost = optimal_bst_cost(freq)
    assert cost >= sum(freq)
    assert cost <= sum(freq) * len(freq)


def test_optimal_bst_empty():
    assert optimal_bst_cost([]) == optimal_bst_cost([0])


@pytest.mark.parametrize("length", [0, 1, 4, 7, 10])
def test_rod_cutting_naive_agrees(length):
    assert rod_cutting_naive(PRICES, length) == rod_cutting(PRICES, length).revenue


@pytest.mark.parametrize("length", [1, 4, 7, 10])
def test_rod_cutting_cuts_are_consistent(length):
    result = rod_cutting(PRICES, length)
    assert sum(result.cuts) == length
    assert sum(PRICES[piece] for piece in result.cuts) == result.revenue
    assert result.revenue >= PRICES[length]


def test_rod_cutting_errors():
    with pytest.raises(ValueError):
        rod_cutting(PRICES, len(PRICES))
    with pytest.raises(ValueError):
        rod_cutting_naive(PRICES, -1)