"""Two-pointer techniques: version comparison, distinct windows and k-sum searches."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import zip_longest


def _revision(part: str) -> int:
    if not part:
        return 0
    if not (part.isascii() and part.isdigit()):
        raise ValueError(f"bad revision {part!r}")
    return int(part)


def compare_version(version1: str, version2: str) -> int:
    """1, -1 or 0 as version1 is newer, older or equal; missing parts count as 0.

    Raises ValueError on a part that is not made of digits.
    """
    for a, b in zip_longest(version1.split("."), version2.split("."), fillvalue=""):
        x, y = _revision(a), _revision(b)
        if x != y:
            return 1 if x > y else -1
    return 0


def longest_distinct_subarrays(values: Sequence[int]) -> list[tuple[int, int]]:
    """1-based inclusive (start, end) of every longest run with no repeated value."""
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    windows: list[tuple[int, int]] = []
    for right, x in enumerate(values):
        counts[x] += 1
        while counts[x] > 1:
            counts[values[left]] -= 1
            left += 1
        length = right - left + 1
        if length > best:
            best = length
            windows = [(left + 1, right + 1)]
        elif length == best:
            windows.append((left + 1, right + 1))
    return windows


def _pairs(nums: Sequence[int], left: int, right: int, target: int) -> Iterator[tuple[int, int]]:
    """Distinct value pairs from sorted nums[left..right] summing to target."""
    while left < right:
        total = nums[left] + nums[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            yield nums[left], nums[right]
            left += 1
            right -= 1
            while left < right and nums[left] == nums[left - 1]:
                left += 1
            while left < right and nums[right] == nums[right + 1]:
                right -= 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct sorted triple of values summing to zero."""
    values = sorted(nums)
    if not values or values[-1] < 0:
        return []
    ans: list[list[int]] = []
    for i in range(len(values) - 2):
        x = values[i]
        if x > 0:
            break
        if i > 0 and x == values[i - 1]:
            continue
        ans.extend([x, a, b] for a, b in _pairs(values, i + 1, len(values) - 1, -x))
    return ans


def three_sum_target(nums: Sequence[int], target: int) -> list[list[int]]:
    """Every distinct sorted triple of values summing to target."""
    values = sorted(nums)
    ans: list[list[int]] = []
    for i in range(len(values) - 2):
        x = values[i]
        if i > 0 and x == values[i - 1]:
            continue
        ans.extend([x, a, b] for a, b in _pairs(values, i + 1, len(values) - 1, target - x))
    return ans


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three values closest to target.

    Raises ValueError when there are fewer than three values.
    """
    if len(nums) < 3:
        raise ValueError("need at least three numbers")
    values = sorted(nums)
    n = len(values)
    best = values[0] + values[1] + values[2]
    for i in range(n - 2):
        left, right = i + 1, n - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if abs(total - target) < abs(best - target):
                best = total
            if total < target:
                left += 1
            elif total > target:
                right -= 1
            else:
                return target
    return best


def n_sum(nums: Sequence[int], n: int, start: int, target: int) -> list[list[int]]:
    """Distinct n-tuples from sorted nums[start:] summing to target.

    nums must already be sorted; n below 2 gives no tuples.
    """
    size = len(nums)
    if n < 2 or size - start < n:
        return []
    if not sum(nums[start:start + n]) <= target <= sum(nums[size - n:]):
        return []
    if n == 2:
        return [[a, b] for a, b in _pairs(nums, start, size - 1, target)]
    ans: list[list[int]] = []
    for i in range(start, size - n + 1):
        if i > start and nums[i] == nums[i - 1]:
            continue
        ans.extend([nums[i], *sub] for sub in n_sum(nums, n - 1, i + 1, target - nums[i]))
    return ans


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Every distinct sorted quadruple of values summing to target."""
    return n_sum(sorted(nums), 4, 0, target)