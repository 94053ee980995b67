"""Binary search on sorted, rotated and implicit (answer-space) sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence


def _first_true(lo: int, hi: int, ok: Callable[[int], bool]) -> int:
    """Smallest value in [lo, hi] for which the monotone predicate holds, else hi."""
    while lo < hi:
        mid = (lo + hi) // 2
        if ok(mid):
            hi = mid
        else:
            lo = mid + 1
    return lo


def int_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed x (0 for negative x)."""
    lo, hi, ans = 0, x, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if mid * mid <= x:
            ans = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return ans


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Smallest eating speed that finishes all piles within h hours."""

    def fast_enough(k: int) -> bool:
        return sum(-(-pile // k) for pile in piles) <= h

    return _first_true(1, max(piles), fast_enough)


def _fits_in_groups(values: Sequence[int], groups: int, limit: int) -> bool:
    needed, current = 1, 0
    for value in values:
        if current + value > limit:
            needed += 1
            if needed > groups:
                return False
            current = value
        else:
            current += value
    return True


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that carries the weights, in order, within the given days."""
    return _first_true(
        max(weights), sum(weights), lambda cap: _fits_in_groups(weights, days, cap)
    )


def split_array(nums: Sequence[int], k: int) -> int:
    """Minimal largest sum when nums is split into at most k contiguous parts."""
    return _first_true(max(nums), sum(nums), lambda limit: _fits_in_groups(nums, k, limit))


def find_radius(houses: Sequence[int], heaters: Sequence[int]) -> int:
    """Minimal common heater radius that warms every house."""
    houses = sorted(houses)
    heaters = sorted(heaters)

    def covers(radius: int) -> bool:
        j, m = 0, len(heaters)
        for house in houses:
            while j < m and heaters[j] + radius < house:
                j += 1
            if j == m or heaters[j] - radius > house:
                return False
        return True

    hi = max(abs(houses[-1] - heaters[0]), abs(heaters[-1] - houses[0]))
    return _first_true(0, hi, covers)


def smallest_distance_pair(nums: Sequence[int], k: int) -> int:
    """The k-th smallest absolute difference among all pairs of nums."""
    nums = sorted(nums)

    def pairs_within(dist: int) -> int:
        total = left = 0
        for right, x in enumerate(nums):
            while x - nums[left] > dist:
                left += 1
            total += right - left
        return total

    return _first_true(0, nums[-1] - nums[0], lambda d: pairs_within(d) >= k)


def find_kth_number(m: int, n: int, k: int) -> int:
    """The k-th smallest entry of the m by n multiplication table."""

    def enough(bound: int) -> bool:
        count = 0
        for row in range(1, m + 1):
            count += min(n, bound // row)
            if count >= k:
                return True
        return False

    return _first_true(1, m * n, enough)


def lower_bound(nums: Sequence[int], target: int) -> int:
    """Index of the first element >= target, or len(nums)."""
    return bisect_left(nums, target)


def upper_bound_minus_one(nums: Sequence[int], target: int) -> int:
    """Index of the last element <= target, or -1."""
    return bisect_right(nums, target) - 1


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of target in sorted nums, or [-1, -1]."""
    left = lower_bound(nums, target)
    right = upper_bound_minus_one(nums, target)
    if left > right:
        return [-1, -1]
    return [left, right]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Position at which target is, or would be inserted into, sorted nums."""
    return bisect_left(nums, target)


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of some element greater than its neighbours."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < nums[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def search(nums: Sequence[int], target: int) -> int:
    """Index of target in sorted nums, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether target is in a matrix whose rows, read in order, are sorted."""
    if not matrix:
        return False
    width = len(matrix[-1])
    lo, hi = 0, len(matrix) * width - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        x = matrix[mid // width][mid % width]
        if x == target:
            return True
        if x < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of target in a rotated sorted array of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        x = nums[mid]
        if x == target:
            return mid
        if nums[lo] <= x:
            if nums[lo] <= target < x:
                hi = mid - 1
            else:
                lo = mid + 1
        else:
            if x < target <= nums[hi]:
                lo = mid + 1
            else:
                hi = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Whether target is in a rotated sorted array that may hold duplicates."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[lo] == nums[mid] == nums[hi]:
            lo += 1
            hi -= 1
        elif nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        else:
            if nums[mid] < target <= nums[hi]:
                lo = mid + 1
            else:
                hi = mid - 1
    return False


def find_min_rotated(nums: Sequence[int]) -> int:
    """Minimum of a rotated sorted array of distinct values."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return nums[lo]


def find_min_index_with_duplicates(nums: Sequence[int]) -> int:
    """Index of a minimum in a rotated sorted array that may hold duplicates."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] == nums[hi]:
            hi -= 1
        elif nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return lo