"""Difference arrays and prefix-sum subarray problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def apply_range_additions(
    values: Sequence[int], operations: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Apply (l, r, k) operations, each adding k to positions l..r (1-based, inclusive).

    A right end past the last position is clamped. Raises ValueError when l is
    outside 1..len(values) or r is less than l.
    """
    n = len(values)
    diff = [values[0], *(b - a for a, b in pairwise(values))] if values else []
    for left, right, amount in operations:
        if not 1 <= left <= n:
            raise ValueError(f"left end {left} outside 1..{n}")
        if right < left:
            raise ValueError(f"right end {right} before left end {left}")
        diff[left - 1] += amount
        if right < n:
            diff[right] -= amount
    return list(accumulate(diff))


def max_subarray_sum_at_least(nums: Sequence[int], k: int) -> int:
    """Largest sum of a contiguous subarray of length at least k.

    Raises ValueError when k is negative or larger than len(nums).
    """
    n = len(nums)
    if not 0 <= k <= n:
        raise ValueError(f"length bound {k} outside 0..{n}")
    prefix = list(accumulate(nums, initial=0))
    min_prefix = 0
    best = None
    for i in range(k, n + 1):
        min_prefix = min(min_prefix, prefix[i - k])
        candidate = prefix[i] - min_prefix
        if best is None or candidate > best:
            best = candidate
    assert best is not None
    return best