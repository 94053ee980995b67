"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Optional

from algonotes.nodes import TreeNode


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.val


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order (recursive)."""
    return list(_preorder(root))


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order using an explicit stack."""
    if root is None:
        return []
    out: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        out.append(node.val)
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)
    return out


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order (recursive)."""
    return list(_inorder(root))


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order using an explicit stack."""
    out: list[int] = []
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        out.append(cur.val)
        cur = cur.right
    return out


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order (recursive)."""
    return list(_postorder(root))


def postorder_two_stacks(root: Optional[TreeNode]) -> list[int]:
    """Postorder by reversing a root, right, left walk."""
    if root is None:
        return []
    pending = [root]
    reversed_order: list[int] = []
    while pending:
        node = pending.pop()
        reversed_order.append(node.val)
        if node.left:
            pending.append(node.left)
        if node.right:
            pending.append(node.right)
    return reversed_order[::-1]


def postorder_one_stack(root: Optional[TreeNode]) -> list[int]:
    """Postorder with a single stack and a record of the last visited node."""
    out: list[int] = []
    stack: list[TreeNode] = []
    cur = root
    prev: Optional[TreeNode] = None
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack[-1]
        if cur.right is not None and prev is not cur.right:
            cur = cur.right
        else:
            out.append(cur.val)
            stack.pop()
            prev = cur
            cur = None
    return out


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Values in breadth-first order."""
    if root is None:
        return []
    out: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        out.append(node.val)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return out


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order_by_level(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, each level left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, alternating left-to-right and right-to-left."""
    result = []
    for depth, level in enumerate(_levels(root)):
        values = [node.val for node in level]
        result.append(values if depth % 2 == 0 else values[::-1])
    return result


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The last value of each level."""
    return [level[-1].val for level in _levels(root)]


def right_side_view_from_pre_in(preorder: Sequence[int], inorder: Sequence[int]) -> list[int]:
    """Right side view of the tree given by its preorder and inorder values."""
    pos = {value: i for i, value in enumerate(inorder)}
    view: list[int] = []

    def walk(pre_l: int, pre_r: int, in_l: int, in_r: int, depth: int) -> None:
        if pre_l > pre_r or in_l > in_r:
            return
        root_val = preorder[pre_l]
        if depth == len(view):
            view.append(root_val)
        k = pos[root_val]
        left_size = k - in_l
        walk(pre_l + left_size + 1, pre_r, k + 1, in_r, depth + 1)
        walk(pre_l + 1, pre_l + left_size, in_l, k - 1, depth + 1)

    n = len(preorder)
    walk(0, n - 1, 0, n - 1, 0)
    return view


def right_side_view_from_in_post(inorder: Sequence[int], postorder: Sequence[int]) -> list[int]:
    """Right side view of the tree given by its inorder and postorder values."""
    pos = {value: i for i, value in enumerate(inorder)}
    view: list[int] = []

    def walk(in_l: int, in_r: int, post_l: int, post_r: int, depth: int) -> None:
        if in_l > in_r or post_l > post_r:
            return
        root_val = postorder[post_r]
        if depth == len(view):
            view.append(root_val)
        k = pos[root_val]
        left_size = k - in_l
        walk(k + 1, in_r, post_l + left_size, post_r - 1, depth + 1)
        walk(in_l, k - 1, post_l, post_l + left_size - 1, depth + 1)

    n = len(inorder)
    walk(0, n - 1, 0, n - 1, 0)
    return view