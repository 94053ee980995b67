import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.nodes import TreeNode, tree_from_level_order
from algonotes.tree_paths import (
    binary_tree_paths,
    binary_tree_paths_bfs,
    binary_tree_paths_dfs,
    diameter,
    has_path_sum,
    has_path_sum_bfs,
    has_path_sum_dfs,
    max_path_sum,
    path_sum,
    path_sum_count,
    path_sum_count_prefix,
    rob,
)
from algonotes.tree_traversal import level_order, level_order_by_level

trees = st.lists(st.one_of(st.none(), st.integers(-5, 5)), max_size=25).map(
    tree_from_level_order
)
nonneg_trees = st.lists(st.one_of(st.none(), st.integers(0, 9)), max_size=25).map(
    tree_from_level_order
)
targets = st.integers(-15, 15)


def _leaves(node):
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves(node.left) + _leaves(node.right)


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


@given(trees, targets)
def test_has_path_sum_variants_agree(root, target):
    expected = has_path_sum(root, target)
    assert has_path_sum_dfs(root, target) == expected
    assert has_path_sum_bfs(root, target) == expected
    assert bool(path_sum(root, target)) == expected


@given(trees, targets)
def test_path_sum_paths_reach_target(root, target):
    paths = path_sum(root, target)
    every_path = binary_tree_paths(root)
    assert len(paths) <= len(every_path)
    for path in paths:
        assert sum(path) == target
        assert "->".join(map(str, path)) in every_path


def test_path_sum_worked_example():
    root = tree_from_level_order([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1])
    assert path_sum(root, 22) == [[5, 4, 11, 2], [5, 8, 4, 5]]
    assert has_path_sum(root, 22)


@given(trees, targets)
def test_path_sum_count_variants_agree(root, target):
    count = path_sum_count(root, target)
    assert path_sum_count_prefix(root, target) == count
    assert count >= len(path_sum(root, target))


@given(trees)
def test_binary_tree_paths_variants_agree(root):
    paths = binary_tree_paths(root)
    assert binary_tree_paths_dfs(root) == paths
    assert sorted(binary_tree_paths_bfs(root)) == sorted(paths)
    assert len(paths) == _leaves(root)


def test_binary_tree_paths_format():
    root = tree_from_level_order([1, 2, 3, None, 5])
    assert binary_tree_paths(root) == ["1->2->5", "1->3"]


@given(st.lists(st.integers(-5, 5), min_size=1, max_size=20))
def test_diameter_of_chain(values):
    assert diameter(_chain(values)) == len(values) - 1


@given(trees)
def test_diameter_bounds(root):
    depth = len(level_order_by_level(root))
    result = diameter(root)
    assert result >= max(depth - 1, 0)
    assert result <= max(len(level_order(root)) - 1, 0)


@given(st.lists(st.integers(1, 9), min_size=1, max_size=20))
def test_max_path_sum_positive_chain_takes_everything(values):
    assert max_path_sum(_chain(values)) == sum(values)


@given(trees.filter(lambda t: t is not None))
def test_max_path_sum_at_least_best_node(root):
    assert max_path_sum(root) >= max(level_order(root))


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_rob_worked_example():
    assert rob(tree_from_level_order([3, 2, 3, None, 3, None, 1])) == 7


@given(nonneg_trees)
def test_rob_beats_alternate_levels(root):
    levels = [sum(level) for level in level_order_by_level(root)]
    total = rob(root)
    assert total >= sum(levels[0::2])
    assert total >= sum(levels[1::2])
    assert total <= sum(levels)