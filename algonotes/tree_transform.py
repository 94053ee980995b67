"""Mirroring and merging binary trees, in place or into new trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from algonotes.nodes import TreeNode


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place (recursive) and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def invert_tree_iterative(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place, breadth first, and return its root."""
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return root


def inverted_copy(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """A new tree that mirrors the given one (recursive)."""
    if root is None:
        return None
    return TreeNode(root.val, inverted_copy(root.right), inverted_copy(root.left))


def inverted_copy_iterative(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """A new tree that mirrors the given one, built breadth first."""
    if root is None:
        return None
    new_root = TreeNode(root.val)
    queue = deque([(root, new_root)])
    while queue:
        old, new = queue.popleft()
        if old.left is not None:
            new.right = TreeNode(old.left.val)
            queue.append((old.left, new.right))
        if old.right is not None:
            new.left = TreeNode(old.right.val)
            queue.append((old.right, new.left))
    return new_root


def merge_trees(
    root1: Optional[TreeNode], root2: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Overlay root2 onto root1, summing overlapping values; reuses root1's nodes."""
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    root1.val += root2.val
    root1.left = merge_trees(root1.left, root2.left)
    root1.right = merge_trees(root1.right, root2.right)
    return root1


def merge_trees_iterative(
    root1: Optional[TreeNode], root2: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Overlay root2 onto root1 breadth first; reuses root1's nodes."""
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    queue = deque([(root1, root2)])
    while queue:
        node1, node2 = queue.popleft()
        node1.val += node2.val
        if node1.left is not None and node2.left is not None:
            queue.append((node1.left, node2.left))
        elif node1.left is None:
            node1.left = node2.left
        if node1.right is not None and node2.right is not None:
            queue.append((node1.right, node2.right))
        elif node1.right is None:
            node1.right = node2.right
    return root1


def _sum_of(a: Optional[TreeNode], b: Optional[TreeNode]) -> int:
    return (a.val if a is not None else 0) + (b.val if b is not None else 0)


def merged_copy(
    root1: Optional[TreeNode], root2: Optional[TreeNode]
) -> Optional[TreeNode]:
    """A new tree overlaying both inputs, summing overlapping values (recursive)."""
    if root1 is None and root2 is None:
        return None
    return TreeNode(
        _sum_of(root1, root2),
        merged_copy(root1.left if root1 else None, root2.left if root2 else None),
        merged_copy(root1.right if root1 else None, root2.right if root2 else None),
    )


def merged_copy_iterative(
    root1: Optional[TreeNode], root2: Optional[TreeNode]
) -> Optional[TreeNode]:
    """A new tree overlaying both inputs, built breadth first."""
    if root1 is None and root2 is None:
        return None
    root = TreeNode(_sum_of(root1, root2))
    queue = deque([(root, root1, root2)])
    while queue:
        cur, node1, node2 = queue.popleft()
        left1 = node1.left if node1 else None
        left2 = node2.left if node2 else None
        if left1 is not None or left2 is not None:
            cur.left = TreeNode(_sum_of(left1, left2))
            queue.append((cur.left, left1, left2))
        right1 = node1.right if node1 else None
        right2 = node2.right if node2 else None
        if right1 is not None or right2 is not None:
            cur.right = TreeNode(_sum_of(right1, right2))
            queue.append((cur.right, right1, right2))
    return root