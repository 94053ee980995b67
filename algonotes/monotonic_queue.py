"""Sliding-window extremes and subarray sums solved with monotonic deques."""

from __future__ import annotations

import math
import operator
from collections import deque
from collections.abc import Callable, Sequence
from itertools import accumulate


def _check_window(k: int) -> None:
    if k < 1:
        raise ValueError("window size must be positive")


def _window_extremes(
    nums: Sequence[int], k: int, dominates: Callable[[int, int], bool]
) -> list[int]:
    _check_window(k)
    window: deque[int] = deque()
    result: list[int] = []
    for i, x in enumerate(nums):
        while window and window[0] <= i - k:
            window.popleft()
        while window and dominates(x, nums[window[-1]]):
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def sliding_window_max(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of k consecutive values.

    Raises ValueError when k < 1.
    """
    return _window_extremes(nums, k, operator.ge)


def sliding_window_min(nums: Sequence[int], k: int) -> list[int]:
    """Minimum of every window of k consecutive values.

    Raises ValueError when k < 1.
    """
    return _window_extremes(nums, k, operator.le)


def row_window_max(grid: Sequence[Sequence[int]], b: int) -> list[list[int]]:
    """For each row, the maxima of its windows of width b."""
    return [sliding_window_max(row, b) for row in grid]


def col_window_max(grid: Sequence[Sequence[int]], a: int) -> list[list[int]]:
    """For each column, the maxima of its windows of height a, laid out as rows."""
    columns = [sliding_window_max(column, a) for column in zip(*grid)]
    return [list(row) for row in zip(*columns)]


def shortest_subarray(nums: Sequence[int], k: int) -> int:
    """Length of the shortest non-empty subarray summing to at least k, or -1."""
    prefix = [0, *accumulate(nums)]
    candidates: deque[int] = deque([0])
    best = math.inf
    for i in range(1, len(prefix)):
        while candidates and prefix[i] - prefix[candidates[0]] >= k:
            best = min(best, i - candidates.popleft())
        while candidates and prefix[candidates[-1]] >= prefix[i]:
            candidates.pop()
        candidates.append(i)
    return -1 if best == math.inf else int(best)


def longest_subarray_within_limit(nums: Sequence[int], limit: int) -> int:
    """Length of the longest subarray whose largest and smallest differ by at most limit."""
    lows: deque[int] = deque()
    highs: deque[int] = deque()
    best = 0
    left = 0
    for right, x in enumerate(nums):
        while lows and nums[lows[-1]] >= x:
            lows.pop()
        while highs and nums[highs[-1]] <= x:
            highs.pop()
        lows.append(right)
        highs.append(right)
        if abs(nums[lows[0]] - nums[highs[0]]) > limit:
            while lows and lows[0] <= left:
                lows.popleft()
            while highs and highs[0] <= left:
                highs.popleft()
            left += 1
        else:
            best = max(best, right - left + 1)
    return best


def max_subarray_sum_at_most(nums: Sequence[int], m: int) -> int:
    """Largest sum of a non-empty subarray of length at most m.

    Raises ValueError for empty nums or m < 1.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    _check_window(m)
    prefix = [0, *accumulate(nums)]
    starts: deque[int] = deque([0])
    best = -math.inf
    for i in range(1, len(prefix)):
        while starts and starts[0] < i - m:
            starts.popleft()
        best = max(best, prefix[i] - prefix[starts[0]])
        while starts and prefix[starts[-1]] > prefix[i]:
            starts.pop()
        starts.append(i)
    return int(best)