"""Path problems on binary trees: path sums, root-to-leaf paths, diameter and robbery."""

from __future__ import annotations

from collections import Counter, deque
from typing import Optional

from algonotes.nodes import TreeNode


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def has_path_sum(root: Optional[TreeNode], target: int) -> bool:
    """Whether some root-to-leaf path sums to target (recursive)."""
    if root is None:
        return False
    if _is_leaf(root):
        return root.val == target
    rest = target - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def has_path_sum_dfs(root: Optional[TreeNode], target: int) -> bool:
    """Whether some root-to-leaf path sums to target, using an explicit stack."""
    if root is None:
        return False
    stack = [(root, root.val)]
    while stack:
        node, total = stack.pop()
        if _is_leaf(node) and total == target:
            return True
        if node.right is not None:
            stack.append((node.right, total + node.right.val))
        if node.left is not None:
            stack.append((node.left, total + node.left.val))
    return False


def has_path_sum_bfs(root: Optional[TreeNode], target: int) -> bool:
    """Whether some root-to-leaf path sums to target, using a queue."""
    if root is None:
        return False
    queue = deque([(root, root.val)])
    while queue:
        node, total = queue.popleft()
        if _is_leaf(node) and total == target:
            return True
        if node.left is not None:
            queue.append((node.left, total + node.left.val))
        if node.right is not None:
            queue.append((node.right, total + node.right.val))
    return False


def path_sum(root: Optional[TreeNode], target: int) -> list[list[int]]:
    """All root-to-leaf paths whose values sum to target, left paths first."""
    found: list[list[int]] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode], remain: int) -> None:
        if node is None:
            return
        path.append(node.val)
        if _is_leaf(node):
            if remain == node.val:
                found.append(list(path))
        else:
            walk(node.left, remain - node.val)
            walk(node.right, remain - node.val)
        path.pop()

    walk(root, target)
    return found


def _count_from(node: Optional[TreeNode], remain: int) -> int:
    if node is None:
        return 0
    hits = 1 if node.val == remain else 0
    rest = remain - node.val
    return hits + _count_from(node.left, rest) + _count_from(node.right, rest)


def path_sum_count(root: Optional[TreeNode], target: int) -> int:
    """Number of downward paths (any start, any end) summing to target, by brute force."""
    if root is None:
        return 0
    return (
        _count_from(root, target)
        + path_sum_count(root.left, target)
        + path_sum_count(root.right, target)
    )


def path_sum_count_prefix(root: Optional[TreeNode], target: int) -> int:
    """Number of downward paths summing to target, using prefix sums along the root path."""
    seen: Counter[int] = Counter({0: 1})

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        found = seen[running - target]
        seen[running] += 1
        found += walk(node.left, running) + walk(node.right, running)
        seen[running] -= 1
        return found

    return walk(root, 0)


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Every root-to-leaf path written as 'a->b->c', left paths first."""
    found: list[str] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        path.append(node.val)
        if _is_leaf(node):
            found.append("->".join(map(str, path)))
        else:
            walk(node.left)
            walk(node.right)
        path.pop()

    walk(root)
    return found


def binary_tree_paths_dfs(root: Optional[TreeNode]) -> list[str]:
    """Root-to-leaf paths found with an explicit stack, left paths first."""
    if root is None:
        return []
    found: list[str] = []
    stack = [(root, str(root.val))]
    while stack:
        node, path = stack.pop()
        if _is_leaf(node):
            found.append(path)
            continue
        if node.right is not None:
            stack.append((node.right, f"{path}->{node.right.val}"))
        if node.left is not None:
            stack.append((node.left, f"{path}->{node.left.val}"))
    return found


def binary_tree_paths_bfs(root: Optional[TreeNode]) -> list[str]:
    """Root-to-leaf paths found breadth first, shorter paths first."""
    if root is None:
        return []
    found: list[str] = []
    queue = deque([(root, str(root.val))])
    while queue:
        node, path = queue.popleft()
        if _is_leaf(node):
            found.append(path)
            continue
        if node.left is not None:
            queue.append((node.left, f"{path}->{node.left.val}"))
        if node.right is not None:
            queue.append((node.right, f"{path}->{node.right.val}"))
    return found


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of values along any path between two nodes.

    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("empty tree has no paths")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def rob(root: Optional[TreeNode]) -> int:
    """Largest total of node values with no parent and child both taken."""

    def walk(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        take_left, skip_left = walk(node.left)
        take_right, skip_right = walk(node.right)
        take = node.val + skip_left + skip_right
        skip = max(take_left, skip_left) + max(take_right, skip_right)
        return take, skip

    return max(walk(root))