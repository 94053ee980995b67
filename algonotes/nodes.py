"""Node types for binary trees and linked lists, plus builders for tests and examples."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class ListNode:
    """A singly linked list node. Nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class DoublyListNode:
    """A doubly linked list node. Nodes compare by identity."""

    val: int = 0
    prev: Optional[DoublyListNode] = field(default=None, repr=False)
    next: Optional[DoublyListNode] = field(default=None, repr=False)


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order values of a tree, None for gaps, trailing gaps trimmed."""
    out: list[Optional[int]] = []
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            out.append(None)
            continue
        out.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while out and out[-1] is None:
        out.pop()
    return out


def linked_list_from(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding the given values; None when there are none."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def linked_list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a list."""
    return list(head) if head is not None else []