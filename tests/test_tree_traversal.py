from hypothesis import given
from hypothesis import strategies as st

from algonotes.nodes import TreeNode, tree_from_level_order, tree_to_level_order
from algonotes.tree_traversal import (
    inorder,
    inorder_iterative,
    level_order,
    level_order_by_level,
    postorder,
    postorder_one_stack,
    postorder_two_stacks,
    preorder,
    preorder_iterative,
    right_side_view,
    right_side_view_from_in_post,
    right_side_view_from_pre_in,
    zigzag_level_order,
)


def _bst(values):
    root = None
    for v in values:
        if root is None:
            root = TreeNode(v)
            continue
        node = root
        while True:
            if v < node.val:
                if node.left is None:
                    node.left = TreeNode(v)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(v)
                    break
                node = node.right
    return root


distinct = st.lists(st.integers(-100, 100), unique=True, max_size=30)


def test_small_tree_orders():
    root = tree_from_level_order([1, None, 2, 3])
    assert preorder(root) == [1, 2, 3]
    assert inorder(root) == [1, 3, 2]
    assert postorder(root) == [3, 2, 1]


def test_empty_tree_traversals():
    for fn in (
        preorder,
        preorder_iterative,
        inorder,
        inorder_iterative,
        postorder,
        postorder_two_stacks,
        postorder_one_stack,
        level_order,
        right_side_view,
    ):
        assert fn(None) == []
    assert level_order_by_level(None) == []
    assert zigzag_level_order(None) == []
    assert right_side_view_from_pre_in([], []) == []
    assert right_side_view_from_in_post([], []) == []


@given(distinct)
def test_depth_first_variants_agree(values):
    root = _bst(values)
    assert preorder_iterative(root) == preorder(root)
    assert inorder_iterative(root) == inorder(root)
    assert postorder_two_stacks(root) == postorder(root)
    assert postorder_one_stack(root) == postorder(root)


@given(distinct)
def test_inorder_of_bst_is_sorted(values):
    assert inorder(_bst(values)) == sorted(values)


@given(distinct)
def test_preorder_starts_and_postorder_ends_at_root(values):
    root = _bst(values)
    if values:
        assert preorder(root)[0] == values[0]
        assert postorder(root)[-1] == values[0]
    assert sorted(preorder(root)) == sorted(values)


@given(distinct)
def test_level_order_matches_level_serialization(values):
    root = _bst(values)
    flat = [v for v in tree_to_level_order(root) if v is not None]
    assert level_order(root) == flat
    assert [v for level in level_order_by_level(root) for v in level] == flat


@given(distinct)
def test_zigzag_alternates(values):
    root = _bst(values)
    levels = level_order_by_level(root)
    zig = zigzag_level_order(root)
    assert len(zig) == len(levels)
    for depth, (z, lv) in enumerate(zip(zig, levels)):
        assert z == (lv if depth % 2 == 0 else lv[::-1])


@given(distinct)
def test_right_side_view_is_last_of_each_level(values):
    root = _bst(values)
    assert right_side_view(root) == [lv[-1] for lv in level_order_by_level(root)]


def test_right_side_view_reaches_left_subtree():
    root = tree_from_level_order([1, 2, 3, None, 5, None, 4, 6])
    assert right_side_view(root) == [1, 3, 4, 6]


@given(distinct)
def test_right_side_view_from_orders(values):
    root = _bst(values)
    expected = right_side_view(root)
    assert right_side_view_from_pre_in(preorder(root), inorder(root)) == expected
    assert right_side_view_from_in_post(inorder(root), postorder(root)) == expected