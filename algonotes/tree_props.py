"""Node counts and depths of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from algonotes.nodes import TreeNode


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes (recursive)."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def count_nodes_bfs(root: Optional[TreeNode]) -> int:
    """Number of nodes, counted breadth first."""
    if root is None:
        return 0
    queue = deque([root])
    count = 0
    while queue:
        node = queue.popleft()
        count += 1
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return count


def count_nodes_dfs(root: Optional[TreeNode]) -> int:
    """Number of nodes, counted with an explicit stack."""
    if root is None:
        return 0
    stack = [root]
    count = 0
    while stack:
        node = stack.pop()
        count += 1
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return count


def left_height(node: Optional[TreeNode]) -> int:
    """Number of nodes on the path that always goes left."""
    height = 0
    while node is not None:
        height += 1
        node = node.left
    return height


def right_height(node: Optional[TreeNode]) -> int:
    """Number of nodes on the path that always goes right."""
    height = 0
    while node is not None:
        height += 1
        node = node.right
    return height


def count_complete_nodes(root: Optional[TreeNode]) -> int:
    """Node count of a complete tree, skipping perfect subtrees."""
    if root is None:
        return 0
    lh = left_height(root)
    if lh == right_height(root):
        return (1 << lh) - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path (recursive)."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def max_depth_bfs(root: Optional[TreeNode]) -> int:
    """Maximum depth, counted level by level."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return depth


def max_depth_dfs(root: Optional[TreeNode]) -> int:
    """Maximum depth, using a stack of (node, depth) pairs."""
    if root is None:
        return 0
    stack = [(root, 1)]
    best = 0
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return best


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path (recursive)."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.left), min_depth(root.right))


def min_depth_bfs(root: Optional[TreeNode]) -> int:
    """Minimum depth: the level of the first leaf met breadth first."""
    if root is None:
        return 0
    level = [root]
    depth = 1
    while level:
        if any(node.left is None and node.right is None for node in level):
            return depth
        level = [child for node in level for child in (node.left, node.right) if child]
        depth += 1
    return depth