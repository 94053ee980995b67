from hypothesis import given
from hypothesis import strategies as st

from algonotes.nodes import TreeNode, tree_from_level_order
from algonotes.tree_validate import (
    is_balanced,
    is_balanced_iterative,
    is_complete_tree,
    is_complete_tree_recursive,
    is_full_tree,
    is_full_tree_by_parts,
    is_same_tree,
    is_same_tree_bfs,
    is_symmetric,
    is_symmetric_bfs,
    is_valid_bst,
    is_valid_bst_iterative,
)

level_lists = st.lists(st.one_of(st.none(), st.integers(-3, 3)), max_size=25)
trees = level_lists.map(tree_from_level_order)


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


def _balanced_from_sorted(values):
    if not values:
        return None
    mid = len(values) // 2
    return TreeNode(
        values[mid],
        _balanced_from_sorted(values[:mid]),
        _balanced_from_sorted(values[mid + 1 :]),
    )


@given(level_lists)
def test_same_tree_on_identical_builds(values):
    a = tree_from_level_order(values)
    b = tree_from_level_order(values)
    assert is_same_tree(a, b)
    assert is_same_tree_bfs(a, b)


@given(trees, trees)
def test_same_tree_variants_agree(a, b):
    assert is_same_tree_bfs(a, b) == is_same_tree(a, b)


@given(st.lists(st.integers(-3, 3), min_size=1, max_size=15))
def test_same_tree_detects_changed_value(values):
    a = tree_from_level_order(values)
    b = tree_from_level_order(values)
    b.val += 1
    assert not is_same_tree(a, b)
    assert not is_same_tree_bfs(a, b)


@given(trees)
def test_mirrored_halves_are_symmetric(subtree):
    root = TreeNode(0, subtree, _mirror(subtree))
    assert is_symmetric(root)
    assert is_symmetric_bfs(root)


@given(trees)
def test_symmetric_variants_agree(root):
    assert is_symmetric_bfs(root) == is_symmetric(root)


def test_lopsided_tree_is_not_symmetric():
    root = tree_from_level_order([1, 2, 2, None, 3, None, 3])
    assert not is_symmetric(root)
    assert not is_symmetric_bfs(root)


def test_chain_is_not_balanced():
    chain = TreeNode(1, TreeNode(2, TreeNode(3)))
    assert not is_balanced(chain)
    assert not is_balanced_iterative(chain)


@given(st.integers(0, 40))
def test_complete_trees_are_balanced(n):
    root = tree_from_level_order(range(n))
    assert is_balanced(root)
    assert is_balanced_iterative(root)


@given(trees)
def test_balance_variants_agree(root):
    assert is_balanced_iterative(root) == is_balanced(root)


@given(st.sets(st.integers(-50, 50), max_size=30))
def test_sorted_build_is_valid_bst(values):
    root = _balanced_from_sorted(sorted(values))
    assert is_valid_bst(root)
    assert is_valid_bst_iterative(root)


def test_duplicates_and_misplaced_values_are_not_bst():
    duplicate = TreeNode(2, TreeNode(2))
    misplaced = tree_from_level_order([5, 1, 4, None, None, 3, 6])
    for root in (duplicate, misplaced):
        assert not is_valid_bst(root)
        assert not is_valid_bst_iterative(root)


@given(trees)
def test_bst_variants_agree(root):
    assert is_valid_bst_iterative(root) == is_valid_bst(root)


@given(st.integers(0, 40))
def test_gapless_level_order_is_complete(n):
    root = tree_from_level_order(range(n))
    assert is_complete_tree(root)
    assert is_complete_tree_recursive(root)


def test_gap_before_node_is_not_complete():
    root = tree_from_level_order([1, 2, 3, None, 5])
    assert not is_complete_tree(root)
    assert not is_complete_tree_recursive(root)


@given(trees)
def test_completeness_variants_agree(root):
    assert is_complete_tree_recursive(root) == is_complete_tree(root)


@given(st.integers(0, 5))
def test_perfect_trees_are_full(height):
    root = tree_from_level_order(range((1 << height) - 1))
    assert is_full_tree(root)
    assert is_full_tree_by_parts(root)


@given(st.integers(1, 40).filter(lambda n: (n + 1) & n != 0))
def test_other_sizes_are_not_full(n):
    root = tree_from_level_order(range(n))
    assert not is_full_tree(root)
    assert not is_full_tree_by_parts(root)


@given(trees)
def test_full_variants_agree(root):
    assert is_full_tree_by_parts(root) == is_full_tree(root)