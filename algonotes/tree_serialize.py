"""Text encodings of binary trees, in preorder and in level order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from algonotes.nodes import TreeNode

_NULL = "#"


def split_tokens(data: str) -> list[str]:
    """Comma-terminated tokens of data; text after the last comma is dropped."""
    return data.split(",")[:-1]


def _encode_preorder(node: Optional[TreeNode]) -> Iterator[str]:
    if node is None:
        yield _NULL
        return
    yield str(node.val)
    yield from _encode_preorder(node.left)
    yield from _encode_preorder(node.right)


def serialize(root: Optional[TreeNode]) -> str:
    """Preorder encoding: each value or '#' for a gap, each followed by a comma."""
    return "".join(f"{token}," for token in _encode_preorder(root))


def deserialize(data: str) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder encoding.

    Raises ValueError when the encoding is truncated or holds a bad value.
    """
    tokens = iter(split_tokens(data))

    def build() -> Optional[TreeNode]:
        token = next(tokens, None)
        if token is None:
            raise ValueError("encoding ends too early")
        if token == _NULL:
            return None
        root = TreeNode(int(token))
        root.left = build()
        root.right = build()
        return root

    return build()


def serialize_level_order(root: Optional[TreeNode]) -> str:
    """Level-order encoding, gaps written as '#', every token followed by a comma."""
    if root is None:
        return f"{_NULL},"
    parts: list[str] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append(f"{_NULL},")
            continue
        parts.append(f"{node.val},")
        queue.append(node.left)
        queue.append(node.right)
    return "".join(parts)


def deserialize_level_order(data: str) -> Optional[TreeNode]:
    """Rebuild a tree from its level-order encoding; missing tail tokens mean gaps."""
    tokens = split_tokens(data)
    if not tokens or tokens[0] == _NULL:
        return None
    root = TreeNode(int(tokens[0]))
    queue = deque([root])
    rest = iter(tokens[1:])
    for left in rest:
        if not queue:
            break
        node = queue.popleft()
        if left != _NULL:
            node.left = TreeNode(int(left))
            queue.append(node.left)
        right = next(rest, _NULL)
        if right != _NULL:
            node.right = TreeNode(int(right))
            queue.append(node.right)
    return root