"""Pointer manipulation on singly linked lists: reversal, rearranging and two pointers."""

from __future__ import annotations

from itertools import islice
from typing import Optional

from algonotes.nodes import ListNode


def _length(head: Optional[ListNode]) -> int:
    return sum(1 for _ in head) if head is not None else 0


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes; return the new head."""
    dummy = ListNode(0, head)
    cur = dummy
    while cur.next is not None and cur.next.next is not None:
        first = cur.next
        second = cur.next.next
        first.next = second.next
        second.next = first
        cur.next = second
        cur = first
    return dummy.next


def reorder_list(head: Optional[ListNode]) -> None:
    """Rearrange l0, l1, ..., ln in place into l0, ln, l1, ln-1, ..."""
    if head is None or head.next is None:
        return
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]

    second = reverse_list(slow.next)
    slow.next = None

    first: Optional[ListNode] = head
    while second is not None:
        assert first is not None
        after_first = first.next
        after_second = second.next
        first.next = second
        second.next = after_first
        first = after_first
        second = after_second


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Put nodes at even 0-based positions first, then the rest, keeping order."""
    if head is None or head.next is None:
        return head
    odd = head
    even: Optional[ListNode] = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place; return the new head."""
    prev: Optional[ListNode] = None
    cur = head
    while cur is not None:
        following = cur.next
        cur.next = prev
        prev = cur
        cur = following
    return prev


def reverse_between(head: Optional[ListNode], left: int, right: int) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions left..right.

    Raises ValueError unless 1 <= left <= right <= length.
    """
    if head is None or left == right:
        return head
    if not 1 <= left <= right <= _length(head):
        raise ValueError(f"range {left}..{right} outside the list")
    dummy = ListNode(0, head)
    pre = dummy
    for _ in range(left - 1):
        pre = pre.next  # type: ignore[assignment]
    cur = pre.next
    assert cur is not None
    for _ in range(right - left):
        moved = cur.next
        assert moved is not None
        cur.next = moved.next
        moved.next = pre.next
        pre.next = moved
    return dummy.next


def reverse_first_n(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Reverse the first n nodes and reattach the rest.

    Raises ValueError unless 1 <= n <= length.
    """
    if n < 1 or head is None or sum(1 for _ in islice(head, n)) < n:
        raise ValueError(f"cannot reverse the first {n} nodes")
    prev: Optional[ListNode] = None
    cur: Optional[ListNode] = head
    for _ in range(n):
        assert cur is not None
        following = cur.next
        cur.next = prev
        prev = cur
        cur = following
    head.next = cur
    return prev


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full group of k nodes; a short tail group is left as is.

    Raises ValueError when k < 1.
    """
    if k < 1:
        raise ValueError("group size must be positive")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: Optional[ListNode] = group_prev
        for _ in range(k):
            if kth is None:
                break
            kth = kth.next
        if kth is None:
            break
        group_next = kth.next
        cur = group_prev.next
        prev = group_next
        while cur is not group_next:
            assert cur is not None
            following = cur.next
            cur.next = prev
            prev = cur
            cur = following
        group_tail = group_prev.next
        group_prev.next = kth
        assert group_tail is not None
        group_prev = group_tail
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list k places to the right; return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    n = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        n += 1
    k %= n
    if k == 0:
        return head
    tail.next = head
    new_tail = head
    for _ in range(n - k - 1):
        new_tail = new_tail.next  # type: ignore[assignment]
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Middle node; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def has_cycle(head: Optional[ListNode]) -> bool:
    """Whether following next pointers ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """First node of the cycle, or None when the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            entry = head
            while entry is not slow:
                entry = entry.next  # type: ignore[union-attr]
                slow = slow.next  # type: ignore[union-attr]
            return entry
    return None


def kth_from_end(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """The k-th node from the end (1 is the last); None for k == 0.

    Raises ValueError when k is negative or longer than the list.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    fast = head
    for _ in range(k):
        if fast is None:
            raise ValueError(f"list is shorter than {k}")
        fast = fast.next
    slow = head
    while fast is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next
    return slow


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Drop the n-th node from the end; return the new head.

    Raises ValueError unless 1 <= n <= length.
    """
    if not 1 <= n <= _length(head):
        raise ValueError(f"no node {n} from the end")
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n + 1):
        fast = fast.next  # type: ignore[union-attr]
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next  # type: ignore[assignment]
    slow.next = slow.next.next  # type: ignore[union-attr]
    return dummy.next


def intersection_node(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    """First node shared by both lists, or None."""
    pa, pb = a, b
    while pa is not pb:
        pa = b if pa is None else pa.next
        pb = a if pb is None else pb.next
    return pa


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Whether the values read the same both ways; the list is left as it was."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = reverse_list(slow.next)
    result = True
    p1: Optional[ListNode] = head
    p2 = second
    while p2 is not None:
        assert p1 is not None
        if p1.val != p2.val:
            result = False
            break
        p1 = p1.next
        p2 = p2.next
    slow.next = reverse_list(second)
    return result