"""Rebuilding binary trees from pairs of traversal orders."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from algonotes.nodes import TreeNode


def _positions(inorder: Sequence[int], other: Sequence[int]) -> dict[int, int]:
    if len(inorder) != len(other):
        raise ValueError("traversals differ in length")
    pos = {value: i for i, value in enumerate(inorder)}
    if set(other) != pos.keys():
        raise ValueError("traversals hold different values")
    return pos


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder values.

    Raises ValueError when the two sequences do not describe the same values.
    """
    pos = _positions(inorder, preorder)

    def build(pre_l: int, pre_r: int, in_l: int, in_r: int) -> Optional[TreeNode]:
        if pre_l > pre_r or in_l > in_r:
            return None
        root_val = preorder[pre_l]
        root = TreeNode(root_val)
        k = pos[root_val]
        left_size = k - in_l
        root.left = build(pre_l + 1, pre_l + left_size, in_l, k - 1)
        root.right = build(pre_l + left_size + 1, pre_r, k + 1, in_r)
        return root

    n = len(preorder)
    return build(0, n - 1, 0, n - 1)


def build_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and postorder values.

    Raises ValueError when the two sequences do not describe the same values.
    """
    pos = _positions(inorder, postorder)

    def build(in_l: int, in_r: int, post_l: int, post_r: int) -> Optional[TreeNode]:
        if in_l > in_r or post_l > post_r:
            return None
        root_val = postorder[post_r]
        root = TreeNode(root_val)
        k = pos[root_val]
        left_size = k - in_l
        root.left = build(in_l, k - 1, post_l, post_l + left_size - 1)
        root.right = build(k + 1, in_r, post_l + left_size, post_r - 1)
        return root

    n = len(inorder)
    return build(0, n - 1, 0, n - 1)