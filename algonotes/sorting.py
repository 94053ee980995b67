"""Merge sort on lists, inversion counting, and selecting the smallest or k-th largest."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from typing import Optional

from algonotes.linked_list import merge_sort_list
from algonotes.nodes import ListNode


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list by merge sort; return the new head."""
    return merge_sort_list(head)


def count_inversions(nums: Sequence[int]) -> int:
    """Number of pairs i < j with nums[i] > nums[j], counted during a merge sort."""

    def sort_count(values: list[int]) -> tuple[list[int], int]:
        if len(values) <= 1:
            return values, 0
        mid = len(values) // 2
        left, left_count = sort_count(values[:mid])
        right, right_count = sort_count(values[mid:])
        merged: list[int] = []
        inversions = left_count + right_count
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                inversions += len(left) - i
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged, inversions

    return sort_count(list(nums))[1]


def least_k_heap(arr: Sequence[int], k: int) -> list[int]:
    """The k smallest values, largest first, kept in a bounded max-heap.

    With k <= 0 the result is empty; with k >= len(arr) it is arr unchanged.
    """
    if k <= 0:
        return []
    if k >= len(arr):
        return list(arr)
    heap = [-x for x in arr[:k]]
    heapq.heapify(heap)
    for x in arr[k:]:
        if x < -heap[0]:
            heapq.heapreplace(heap, -x)
    return sorted((-x for x in heap), reverse=True)


def _partition(values: list[int], lo: int, hi: int) -> int:
    mid = (lo + hi) // 2
    values[lo], values[mid] = values[mid], values[lo]
    pivot = values[lo]
    i, j = lo, hi
    while i < j:
        while i < j and values[j] >= pivot:
            j -= 1
        while i < j and values[i] <= pivot:
            i += 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[lo], values[i] = values[i], values[lo]
    return i


def least_k_quickselect(arr: Sequence[int], k: int) -> list[int]:
    """The k smallest values in no particular order, found by quickselect.

    With k <= 0 the result is empty; with k >= len(arr) it is arr unchanged.
    """
    if k <= 0:
        return []
    if k >= len(arr):
        return list(arr)
    values = list(arr)
    lo, hi = 0, len(values) - 1
    while lo < hi:
        pivot = _partition(values, lo, hi)
        if pivot == k - 1:
            break
        if pivot > k - 1:
            hi = pivot - 1
        else:
            lo = pivot + 1
    return values[:k]


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The k-th largest value (1-based) by quickselect.

    Raises ValueError unless 1 <= k <= len(nums).
    """
    if not 1 <= k <= len(nums):
        raise ValueError(f"k={k} outside 1..{len(nums)}")
    values = list(nums)
    target = len(values) - k
    lo, hi = 0, len(values) - 1
    while lo != hi:
        pivot = _partition(values, lo, hi)
        if pivot == target:
            return values[pivot]
        if pivot > target:
            hi = pivot - 1
        else:
            lo = pivot + 1
    return values[lo]