"""Counting and lookup problems solved with hashing and bit tricks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Optional


def single_numbers_xor(nums: Sequence[int]) -> list[int]:
    """The two values that occur once when every other value occurs twice (XOR split)."""
    xor_sum = 0
    for num in nums:
        xor_sum ^= num
    low_bit = xor_sum & -xor_sum
    a = b = 0
    for x in nums:
        if x & low_bit:
            a ^= x
        else:
            b ^= x
    return [a, b]


def single_numbers_set(nums: Sequence[int]) -> list[int]:
    """The values that occur an odd number of times, in ascending order."""
    seen: set[int] = set()
    for num in nums:
        seen ^= {num}
    return sorted(seen)


def first_missing_positive(nums: Sequence[int]) -> int:
    """Smallest positive integer absent from nums, found by in-place placement on a copy."""
    slots = list(nums)
    n = len(slots)
    for i in range(n):
        while 1 <= slots[i] <= n and slots[slots[i] - 1] != slots[i]:
            j = slots[i] - 1
            slots[i], slots[j] = slots[j], slots[i]
    return next((i + 1 for i, x in enumerate(slots) if x != i + 1), n + 1)


def more_than_half(numbers: Sequence[int]) -> int:
    """First value whose running count reaches half the length (rounded up), else -1."""
    threshold = (len(numbers) + 1) // 2
    count: Counter[int] = Counter()
    for x in numbers:
        count[x] += 1
        if count[x] >= threshold:
            return x
    return -1


def majority_element(nums: Sequence[int]) -> int:
    """Majority candidate by pairwise cancellation (Boyer-Moore voting)."""
    candidate, count = 0, 0
    for num in nums:
        if count == 0:
            candidate, count = num, 1
        elif num == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def two_sum(numbers: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """1-based indices of two entries summing to target, or None."""
    seen: dict[int, int] = {}
    for i, x in enumerate(numbers):
        need = target - x
        if need in seen:
            return seen[need] + 1, i + 1
        seen[x] = i
    return None