"""Lowest common ancestor in general binary trees and binary search trees."""

from __future__ import annotations

from typing import Optional

from algonotes.nodes import TreeNode


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both p and q in its subtree (recursive)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def lowest_common_ancestor_iterative(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> TreeNode:
    """Lowest common ancestor via a parent map.

    Raises ValueError if p or q is not in the tree.
    """
    if root is None:
        raise ValueError("empty tree")
    parent: dict[TreeNode, Optional[TreeNode]] = {root: None}
    stack = [root]
    while p not in parent or q not in parent:
        if not stack:
            raise ValueError("node not in tree")
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                parent[child] = node
                stack.append(child)

    ancestors: set[TreeNode] = set()
    walker: Optional[TreeNode] = p
    while walker is not None:
        ancestors.add(walker)
        walker = parent[walker]

    found = q
    while found not in ancestors:
        found = parent[found]
    return found


def lca_bst(root: Optional[TreeNode], p: TreeNode, q: TreeNode) -> Optional[TreeNode]:
    """Lowest common ancestor in a binary search tree (recursive)."""
    if root is None:
        return None
    if p.val < root.val and q.val < root.val:
        return lca_bst(root.left, p, q)
    if p.val > root.val and q.val > root.val:
        return lca_bst(root.right, p, q)
    return root


def lca_bst_iterative(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Lowest common ancestor in a binary search tree, walking down from the root."""
    cur = root
    while cur is not None:
        if p.val < cur.val and q.val < cur.val:
            cur = cur.left
        elif p.val > cur.val and q.val > cur.val:
            cur = cur.right
        else:
            return cur
    return None