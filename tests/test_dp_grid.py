import math
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.dp_grid import (
    climb_stairs,
    coin_change,
    knapsack,
    knapsack_full,
    min_cost_climbing,
    min_path_sum,
    min_path_sum_compact,
    rob_circular,
    unique_paths,
    unique_paths_binomial,
    unique_paths_compact,
)

SOURCE_ITEMS = [(2, 10), (4, 5), (1, 4)]

item_lists = st.lists(st.tuples(st.integers(1, 6), st.integers(0, 20)), max_size=6)
grids = st.integers(1, 4).flatmap(
    lambda width: st.lists(
        st.lists(st.integers(0, 9), min_size=width, max_size=width),
        min_size=1,
        max_size=4,
    )
)


def _subsets(items):
    return (c for r in range(len(items) + 1) for c in combinations(items, r))


def test_knapsack_source_example():
    assert knapsack(5, SOURCE_ITEMS) == 14
    assert knapsack_full(5, SOURCE_ITEMS) == 9


@given(st.integers(0, 12), item_lists)
def test_knapsack_matches_subset_search(capacity, items):
    best = max(
        sum(v for _, v in chosen)
        for chosen in _subsets(items)
        if sum(w for w, _ in chosen) <= capacity
    )
    assert knapsack(capacity, items) == best


@given(st.integers(0, 12), item_lists)
def test_knapsack_full_matches_subset_search(capacity, items):
    exact = [
        sum(v for _, v in chosen)
        for chosen in _subsets(items)
        if sum(w for w, _ in chosen) == capacity
    ]
    assert knapsack_full(capacity, items) == max(exact, default=0)
    assert knapsack_full(capacity, items) <= knapsack(capacity, items)


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(-1, SOURCE_ITEMS)


def test_coin_change_beats_greedy():
    assert coin_change([1, 3, 4], 6) == 2


def test_coin_change_edges():
    assert coin_change([1, 2], 0) == 0
    assert coin_change([2], 3) == -1


@given(st.lists(st.integers(1, 10), min_size=1, max_size=4))
def test_coin_change_single_coin(coins):
    for c in coins:
        assert coin_change(coins, c) == 1


def test_coin_change_rejects_negative_amount():
    with pytest.raises(ValueError):
        coin_change([1], -3)


@given(grids)
def test_min_path_sum_variants_agree(grid):
    result = min_path_sum(grid)
    assert result == min_path_sum_compact(grid)
    assert result <= sum(grid[0]) + sum(row[-1] for row in grid[1:])


@given(st.lists(st.integers(0, 9), min_size=1, max_size=6))
def test_min_path_sum_single_line(values):
    assert min_path_sum([values]) == sum(values)
    assert min_path_sum_compact([[x] for x in values]) == sum(values)


def test_min_path_sum_rejects_empty():
    with pytest.raises(ValueError):
        min_path_sum([])


@given(st.lists(st.integers(0, 20), min_size=3, max_size=8))
def test_rob_circular_matches_search(nums):
    n = len(nums)
    best = 0
    for mask in range(1 << n):
        chosen = [i for i in range(n) if mask >> i & 1]
        if any((i + 1) % n in chosen for i in chosen):
            continue
        best = max(best, sum(nums[i] for i in chosen))
    assert rob_circular(nums) == best


def test_rob_circular_short_inputs():
    assert rob_circular([]) == 0
    assert rob_circular([7]) == 7
    assert rob_circular([-3, -5]) == -3


def test_climb_stairs_base():
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


@given(st.integers(3, 40))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


@given(st.lists(st.integers(0, 50), max_size=10))
def test_min_cost_bounded_by_fixed_strides(cost):
    result = min_cost_climbing(cost)
    assert 0 <= result <= sum(cost[0::2])
    assert result <= sum(cost[1::2])


def test_min_cost_free_steps():
    assert min_cost_climbing([0, 0, 0, 0]) == 0


@given(st.integers(1, 12), st.integers(1, 12))
def test_unique_paths_variants_agree(m, n):
    expected = math.comb(m + n - 2, m - 1)
    assert unique_paths(m, n) == expected
    assert unique_paths_compact(m, n) == expected
    assert unique_paths_binomial(m, n) == expected


@pytest.mark.parametrize(
    "func", [unique_paths, unique_paths_compact, unique_paths_binomial]
)
def test_unique_paths_rejects_empty_grid(func):
    with pytest.raises(ValueError):
        func(0, 3)