"""Dynamic programming on knapsacks, coins, grids, stairs and houses in a circle."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Optional


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Best total value of (volume, value) items, each used at most once, within capacity.

    Raises ValueError for a negative capacity or volume.
    """
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for volume, value in items:
        if volume < 0:
            raise ValueError("volume must not be negative")
        for v in range(capacity, volume - 1, -1):
            best[v] = max(best[v], best[v - volume] + value)
    return best[-1]


def knapsack_full(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Best total value of items filling capacity exactly; 0 when it cannot be filled.

    Raises ValueError for a negative capacity or volume.
    """
    _check_capacity(capacity)
    best: list[Optional[int]] = [None] * (capacity + 1)
    best[0] = 0
    for volume, value in items:
        if volume < 0:
            raise ValueError("volume must not be negative")
        for v in range(capacity, volume - 1, -1):
            base = best[v - volume]
            if base is None:
                continue
            current = best[v]
            if current is None or base + value > current:
                best[v] = base + value
    return best[-1] if best[-1] is not None else 0


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins (unlimited of each) summing exactly to amount, or -1 if impossible.

    Raises ValueError for a negative amount or coin.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(c < 0 for c in coins):
        raise ValueError("coins must not be negative")
    fewest: list[float] = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        fewest[total] = min(
            (fewest[total - c] + 1 for c in coins if c <= total), default=math.inf
        )
    return -1 if fewest[amount] == math.inf else int(fewest[amount])


def _check_grid(grid: Sequence[Sequence[int]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top left to bottom right moving right or down.

    Raises ValueError for an empty grid.
    """
    _check_grid(grid)
    previous = list(accumulate(grid[0]))
    for row in grid[1:]:
        current: list[int] = []
        for j, x in enumerate(row):
            came_from = previous[j] if j == 0 else min(previous[j], current[j - 1])
            current.append(came_from + x)
        previous = current
    return previous[-1]


def min_path_sum_compact(grid: Sequence[Sequence[int]]) -> int:
    """Minimum path sum keeping a single row of partial results."""
    _check_grid(grid)
    best = list(accumulate(grid[0]))
    for row in grid[1:]:
        best[0] += row[0]
        for j in range(1, len(best)):
            best[j] = min(best[j], best[j - 1]) + row[j]
    return best[-1]


def _rob_line(values: Iterable[int]) -> int:
    two_back, one_back = 0, 0
    for x in values:
        two_back, one_back = one_back, max(one_back, two_back + x)
    return one_back


def rob_circular(nums: Sequence[int]) -> int:
    """Best haul from houses in a circle where no two neighbours are both robbed."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums)
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def climb_stairs(n: int) -> int:
    """Ways to climb n steps taking one or two at a time; n itself when n <= 2."""
    if n <= 2:
        return n
    before, last = 1, 2
    for _ in range(3, n + 1):
        before, last = last, before + last
    return last


def min_cost_climbing(cost: Sequence[int]) -> int:
    """Cheapest way past the top step, paying cost[i] to leave step i, from step 0 or 1."""
    before, last = 0, 0
    for two_down, one_down in zip(cost, cost[1:]):
        before, last = last, min(last + one_down, before + two_down)
    return last


def _check_size(m: int, n: int) -> None:
    if m < 1 or n < 1:
        raise ValueError("grid sides must be positive")


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an m-by-n grid, with a full table."""
    _check_size(m, n)
    table = [[1] * n for _ in range(m)]
    for i in range(1, m):
        for j in range(1, n):
            table[i][j] = table[i - 1][j] + table[i][j - 1]
    return table[-1][-1]


def unique_paths_compact(m: int, n: int) -> int:
    """Number of right/down paths keeping a single row."""
    _check_size(m, n)
    row = [1] * n
    for _ in range(m - 1):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_binomial(m: int, n: int) -> int:
    """Number of right/down paths as the binomial coefficient C(m+n-2, m-1)."""
    _check_size(m, n)
    k = min(m - 1, n - 1)
    total = m + n - 2
    ans = 1
    for i in range(1, k + 1):
        ans = ans * (total - k + i) // i
    return ans