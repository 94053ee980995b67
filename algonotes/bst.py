"""Binary search tree operations: search, insert, delete, build, rank and flattening."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Optional

from algonotes.nodes import DoublyListNode, TreeNode


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Node holding val, or None (recursive)."""
    if root is None or root.val == val:
        return root
    if val < root.val:
        return search_bst(root.left, val)
    return search_bst(root.right, val)


def search_bst_iterative(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Node holding val, or None, walking down from the root."""
    cur = root
    while cur is not None:
        if cur.val == val:
            return cur
        cur = cur.left if val < cur.val else cur.right
    return None


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert val unless present (recursive); return the root."""
    if root is None:
        return TreeNode(val)
    if val < root.val:
        root.left = insert_into_bst(root.left, val)
    elif val > root.val:
        root.right = insert_into_bst(root.right, val)
    return root


def insert_into_bst_iterative(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert val unless present, walking down to its slot; return the root."""
    if root is None:
        return TreeNode(val)
    cur: Optional[TreeNode] = root
    parent = root
    while cur is not None:
        parent = cur
        if val == cur.val:
            return root
        cur = cur.left if val < cur.val else cur.right
    if val < parent.val:
        parent.left = TreeNode(val)
    else:
        parent.right = TreeNode(val)
    return root


def min_node(node: TreeNode) -> TreeNode:
    """Leftmost node of the subtree rooted at node."""
    while node.left is not None:
        node = node.left
    return node


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove key if present; return the root of the resulting tree."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
    elif key > root.val:
        root.right = delete_node(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right)
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def sorted_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Height-balanced BST from sorted values, middle element as root (recursive)."""

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        mid = (lo + hi) // 2
        return TreeNode(nums[mid], build(lo, mid - 1), build(mid + 1, hi))

    return build(0, len(nums) - 1)


def sorted_to_bst_iterative(nums: Sequence[int]) -> Optional[TreeNode]:
    """Height-balanced BST from sorted values, built breadth first."""
    if not nums:
        return None
    root = TreeNode()
    queue = deque([(root, 0, len(nums) - 1)])
    while queue:
        node, lo, hi = queue.popleft()
        mid = (lo + hi) // 2
        node.val = nums[mid]
        if lo <= mid - 1:
            node.left = TreeNode()
            queue.append((node.left, lo, mid - 1))
        if mid + 1 <= hi:
            node.right = TreeNode()
            queue.append((node.right, mid + 1, hi))
    return root


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """The k-th smallest value (1-based) by a recursive inorder walk, or -1."""
    remaining = k

    def walk(node: Optional[TreeNode]) -> Optional[int]:
        nonlocal remaining
        if node is None:
            return None
        found = walk(node.left)
        if found is not None:
            return found
        remaining -= 1
        if remaining == 0:
            return node.val
        return walk(node.right)

    found = walk(root)
    return -1 if found is None else found


def kth_smallest_iterative(root: Optional[TreeNode], k: int) -> int:
    """The k-th smallest value (1-based) by an inorder walk with a stack, or -1."""
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        k -= 1
        if k == 0:
            return cur.val
        cur = cur.right
    return -1


def bst_to_doubly_list(root: Optional[TreeNode]) -> Optional[DoublyListNode]:
    """New sorted doubly linked list of the tree's values (recursive)."""
    head: Optional[DoublyListNode] = None
    prev: Optional[DoublyListNode] = None

    def walk(node: Optional[TreeNode]) -> None:
        nonlocal head, prev
        if node is None:
            return
        walk(node.left)
        cur = DoublyListNode(node.val)
        if head is None:
            head = cur
        if prev is not None:
            prev.next = cur
            cur.prev = prev
        prev = cur
        walk(node.right)

    walk(root)
    return head


def bst_to_doubly_list_iterative(root: Optional[TreeNode]) -> Optional[DoublyListNode]:
    """New sorted doubly linked list of the tree's values, via a stack."""
    head: Optional[DoublyListNode] = None
    prev: Optional[DoublyListNode] = None
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        node = DoublyListNode(cur.val)
        if head is None:
            head = node
        if prev is not None:
            prev.next = node
            node.prev = prev
        prev = node
        cur = cur.right
    return head


def bst_to_doubly_list_inplace(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree's nodes into a sorted list: left is previous, right is next."""
    head: Optional[TreeNode] = None
    prev: Optional[TreeNode] = None

    def walk(node: Optional[TreeNode]) -> None:
        nonlocal head, prev
        if node is None:
            return
        walk(node.left)
        right = node.right
        if head is None:
            head = node
        node.left = prev
        if prev is not None:
            prev.right = node
        prev = node
        walk(right)

    walk(root)
    return head


def bst_to_doubly_list_inplace_iterative(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree's nodes into a sorted list in place, via a stack."""
    head: Optional[TreeNode] = None
    prev: Optional[TreeNode] = None
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        if head is None:
            head = cur
        cur.left = prev
        if prev is not None:
            prev.right = cur
        prev = cur
        cur = cur.right
    return head