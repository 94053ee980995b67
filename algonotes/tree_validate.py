"""Structural checks on binary trees: equality, symmetry, balance, BST, completeness."""

from __future__ import annotations

import math
from collections import deque
from typing import Optional

from algonotes.nodes import TreeNode
from algonotes.tree_props import count_nodes, max_depth


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and values (recursive)."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def is_same_tree_bfs(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and values, compared level by level."""
    queue: deque[tuple[Optional[TreeNode], Optional[TreeNode]]] = deque([(p, q)])
    while queue:
        a, b = queue.popleft()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        queue.append((a.left, b.left))
        queue.append((a.right, b.right))
    return True


def _mirrors(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return _mirrors(p.left, q.right) and _mirrors(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a mirror image of itself (recursive)."""
    return root is None or _mirrors(root.left, root.right)


def is_symmetric_bfs(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a mirror image of itself, checked with a queue."""
    if root is None:
        return True
    queue: deque[tuple[Optional[TreeNode], Optional[TreeNode]]] = deque(
        [(root.left, root.right)]
    )
    while queue:
        left, right = queue.popleft()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        queue.append((left.left, right.right))
        queue.append((left.right, right.left))
    return True


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtree heights differ by at most one."""

    def height(node: Optional[TreeNode]) -> int:
        if node is None:
            return 0
        left = height(node.left)
        if left < 0:
            return -1
        right = height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return max(left, right) + 1

    return height(root) >= 0


def is_balanced_iterative(root: Optional[TreeNode]) -> bool:
    """Balance check computing heights in postorder with explicit stacks."""
    if root is None:
        return True
    pending = [root]
    order: list[TreeNode] = []
    while pending:
        node = pending.pop()
        order.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    heights: dict[TreeNode, int] = {}
    for node in reversed(order):
        left = heights.get(node.left, 0) if node.left is not None else 0
        right = heights.get(node.right, 0) if node.right is not None else 0
        if abs(left - right) > 1:
            return False
        heights[node] = max(left, right) + 1
    return True


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a binary search tree with strictly increasing inorder values."""

    def within(node: Optional[TreeNode], low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, -math.inf, math.inf)


def is_valid_bst_iterative(root: Optional[TreeNode]) -> bool:
    """BST check by an inorder walk that compares each value with its predecessor."""
    stack: list[TreeNode] = []
    cur = root
    prev: Optional[int] = None
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        if prev is not None and prev >= cur.val:
            return False
        prev = cur.val
        cur = cur.right
    return True


def is_complete_tree(root: Optional[TreeNode]) -> bool:
    """Whether every level is full except the last, which is filled from the left."""
    queue: deque[Optional[TreeNode]] = deque([root])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
        elif seen_gap:
            return False
        else:
            queue.append(node.left)
            queue.append(node.right)
    return True


def is_complete_tree_recursive(root: Optional[TreeNode]) -> bool:
    """Completeness check: heap-style positions must all lie within 1..node count."""
    total = count_nodes(root)

    def fits(node: Optional[TreeNode], index: int) -> bool:
        if node is None:
            return True
        if index > total:
            return False
        return fits(node.left, 2 * index) and fits(node.right, 2 * index + 1)

    return fits(root, 1)


def is_full_tree(root: Optional[TreeNode]) -> bool:
    """Whether the tree is perfect: a tree of height h holding 2**h - 1 nodes."""
    return count_nodes(root) == (1 << max_depth(root)) - 1


def is_full_tree_by_parts(root: Optional[TreeNode]) -> bool:
    """Perfect-tree check: both subtrees perfect and of equal height."""

    def walk(node: Optional[TreeNode]) -> tuple[bool, int]:
        if node is None:
            return True, 0
        left_full, left_height = walk(node.left)
        right_full, right_height = walk(node.right)
        full = left_full and right_full and left_height == right_height
        return full, max(left_height, right_height) + 1

    return walk(root)[0]