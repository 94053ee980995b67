"""Linked list arithmetic, copying, deletion, sorting, merging and partitioning."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import count
from typing import Optional

from algonotes.nodes import ListNode, linked_list_values


@dataclass(eq=False)
class RandomNode:
    """A list node with an extra pointer to any node of the same list, or None."""

    val: int = 0
    next: Optional[RandomNode] = field(default=None, repr=False)
    random: Optional[RandomNode] = field(default=None, repr=False)


def _walk(head: Optional[RandomNode]) -> Iterator[RandomNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Sum of two numbers stored least significant digit first, in the same form."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def add_two_numbers_msb_first(
    head1: Optional[ListNode], head2: Optional[ListNode]
) -> Optional[ListNode]:
    """Sum of two numbers stored most significant digit first, in the same form."""
    digits1 = linked_list_values(head1)
    digits2 = linked_list_values(head2)
    head: Optional[ListNode] = None
    carry = 0
    while digits1 or digits2 or carry:
        total = carry
        if digits1:
            total += digits1.pop()
        if digits2:
            total += digits2.pop()
        carry, digit = divmod(total, 10)
        head = ListNode(digit, head)
    return head


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep copy of a list with random pointers, using a map from old to new nodes."""
    if head is None:
        return None
    copies = {node: RandomNode(node.val) for node in _walk(head)}
    for old, new in copies.items():
        new.next = copies[old.next] if old.next is not None else None
        new.random = copies[old.random] if old.random is not None else None
    return copies[head]


def copy_random_list_interleaved(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep copy of a list with random pointers by weaving copies between the originals."""
    if head is None:
        return None
    cur: Optional[RandomNode] = head
    while cur is not None:
        cur.next = RandomNode(cur.val, cur.next)
        cur = cur.next.next

    cur = head
    while cur is not None:
        copy = cur.next
        assert copy is not None
        if cur.random is not None:
            copy.random = cur.random.next
        cur = copy.next

    new_head = head.next
    cur = head
    while cur is not None:
        copy = cur.next
        assert copy is not None
        cur.next = copy.next
        if copy.next is not None:
            copy.next = copy.next.next
        cur = cur.next
    return new_head


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Drop every node holding val; return the new head."""
    dummy = ListNode(0, head)
    cur = dummy
    while cur.next is not None:
        if cur.next.val == val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Keep one node of each run of equal values in a sorted list."""
    cur = head
    while cur is not None and cur.next is not None:
        if cur.val == cur.next.val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return head


def delete_all_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(0, head)
    pre = dummy
    while pre.next is not None and pre.next.next is not None:
        if pre.next.val == pre.next.next.val:
            repeated = pre.next.val
            while pre.next is not None and pre.next.val == repeated:
                pre.next = pre.next.next
        else:
            pre = pre.next
    return dummy.next


def insertion_sort(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by inserting each node into a growing sorted list."""
    dummy = ListNode()
    cur = head
    while cur is not None:
        following = cur.next
        prev = dummy
        while prev.next is not None and prev.next.val < cur.val:
            prev = prev.next
        cur.next = prev.next
        prev.next = cur
        cur = following
    return dummy.next


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one; ties take the node from l1 first."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next = l1
            l1 = l1.next
        else:
            tail.next = l2
            l2 = l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_two_lists_recursive(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one (recursive)."""
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    if l1.val <= l2.val:
        l1.next = merge_two_lists_recursive(l1.next, l2)
        return l1
    l2.next = merge_two_lists_recursive(l1, l2.next)
    return l2


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Splice any number of sorted lists into one using a min-heap of heads."""
    order = count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    return dummy.next


def merge_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by splitting at the middle and merging the sorted halves."""
    if head is None or head.next is None:
        return head
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    mid = slow.next
    slow.next = None
    return merge_two_lists(merge_sort_list(head), merge_sort_list(mid))


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Move nodes below x ahead of the rest, keeping relative order in both parts."""
    small_dummy = ListNode()
    big_dummy = ListNode()
    small = small_dummy
    big = big_dummy
    while head is not None:
        if head.val < x:
            small.next = head
            small = head
        else:
            big.next = head
            big = head
        head = head.next
    big.next = None
    small.next = big_dummy.next
    return small_dummy.next