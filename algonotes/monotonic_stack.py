"""Next/previous greater and smaller elements and problems built on monotonic stacks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def next_greater_indices(nums: Sequence[int]) -> list[int]:
    """Index of the first strictly greater element to the right of each, or -1."""
    ans = [-1] * len(nums)
    stack: list[int] = []
    for i, x in enumerate(nums):
        while stack and x > nums[stack[-1]]:
            ans[stack.pop()] = i
        stack.append(i)
    return ans


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a strictly warmer day, or -1 when none comes."""
    ans = [-1] * len(temperatures)
    stack: list[int] = []
    for i, t in enumerate(temperatures):
        while stack and temperatures[stack[-1]] < t:
            j = stack.pop()
            ans[j] = i - j
        stack.append(i)
    return ans


def next_greater_circular(nums: Sequence[int]) -> list[int]:
    """Value of the next strictly greater element, wrapping around, or -1."""
    n = len(nums)
    ans = [-1] * n
    stack: list[int] = []
    for i in range(2 * n):
        x = nums[i % n]
        while stack and nums[stack[-1]] < x:
            ans[stack.pop()] = x
        if i < n:
            stack.append(i)
    return ans


def next_smaller_indices(nums: Sequence[int]) -> list[int]:
    """Index of the first strictly smaller element to the right of each, or -1."""
    ans = [-1] * len(nums)
    stack: list[int] = []
    for i, x in enumerate(nums):
        while stack and nums[stack[-1]] > x:
            ans[stack.pop()] = i
        stack.append(i)
    return ans


def remove_k_digits(num: str, k: int) -> str:
    """Smallest number left after deleting k digits, without leading zeros."""
    stack: list[str] = []
    for c in num:
        while stack and k > 0 and stack[-1] > c:
            stack.pop()
            k -= 1
        stack.append(c)
    if k > 0:
        del stack[-k:]
    return "".join(stack).lstrip("0") or "0"


def remove_duplicate_letters(s: str) -> str:
    """Lexicographically smallest subsequence holding every distinct letter once."""
    remaining = Counter(s)
    stack: list[str] = []
    in_stack: set[str] = set()
    for c in s:
        remaining[c] -= 1
        if c in in_stack:
            continue
        while stack and stack[-1] > c and remaining[stack[-1]] > 0:
            in_stack.discard(stack.pop())
        stack.append(c)
        in_stack.add(c)
    return "".join(stack)


def prev_greater_indices(nums: Sequence[int]) -> list[int]:
    """Index of the nearest strictly greater element to the left of each, or -1."""
    ans = [-1] * len(nums)
    stack: list[int] = []
    for i, x in enumerate(nums):
        while stack and nums[stack[-1]] <= x:
            stack.pop()
        if stack:
            ans[i] = stack[-1]
        stack.append(i)
    return ans


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, the run of consecutive days ending there with price <= that day's."""
    ans = [1] * len(prices)
    stack: list[int] = []
    for i, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            ans[i] += ans[stack.pop()]
        stack.append(i)
    return ans


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    total = 0
    stack: list[int] = []
    for i, h in enumerate(height):
        while stack and h > height[stack[-1]]:
            bottom = stack.pop()
            if not stack:
                break
            left = stack[-1]
            width = i - left - 1
            total += width * (min(height[left], h) - height[bottom])
        stack.append(i)
    return total


def prev_smaller_indices(nums: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller element to the left of each, or -1."""
    ans = [-1] * len(nums)
    stack: list[int] = []
    for i, x in enumerate(nums):
        while stack and nums[stack[-1]] >= x:
            stack.pop()
        if stack:
            ans[i] = stack[-1]
        stack.append(i)
    return ans


def largest_rectangle_areas(heights: Sequence[int]) -> list[int]:
    """For each bar, the area of the widest rectangle using that bar's height."""
    n = len(heights)
    right = [n] * n
    stack: list[int] = []
    for i in reversed(range(n)):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        right[i] = stack[-1] if stack else n
        stack.append(i)
    left = [-1] * n
    stack = []
    for i in range(n):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        left[i] = stack[-1] if stack else -1
        stack.append(i)
    return [(r - lo - 1) * h for h, lo, r in zip(heights, left, right)]