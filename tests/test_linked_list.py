from hypothesis import given
from hypothesis import strategies as st

import pytest

from algonotes.linked_list import (
    RandomNode,
    add_two_numbers,
    add_two_numbers_msb_first,
    copy_random_list,
    copy_random_list_interleaved,
    delete_all_duplicates,
    delete_duplicates,
    insertion_sort,
    merge_k_lists,
    merge_sort_list,
    merge_two_lists,
    merge_two_lists_recursive,
    partition,
    remove_elements,
)
from algonotes.nodes import linked_list_from, linked_list_values

small_ints = st.lists(st.integers(-20, 20), max_size=30)


def _digits_lsb(n):
    return [int(c) for c in reversed(str(n))]


def _number_lsb(head):
    return int("".join(str(d) for d in reversed(linked_list_values(head))))


def test_add_two_numbers_worked_example():
    result = add_two_numbers(linked_list_from([2, 4, 3]), linked_list_from([5, 6, 4]))
    assert linked_list_values(result) == [7, 0, 8]


@given(st.integers(0, 10**12), st.integers(0, 10**12))
def test_add_two_numbers_matches_integer_sum(a, b):
    result = add_two_numbers(linked_list_from(_digits_lsb(a)), linked_list_from(_digits_lsb(b)))
    assert _number_lsb(result) == a + b


@given(st.integers(0, 10**12), st.integers(0, 10**12))
def test_add_msb_first_matches_integer_sum(a, b):
    l1 = linked_list_from(int(c) for c in str(a))
    l2 = linked_list_from(int(c) for c in str(b))
    result = add_two_numbers_msb_first(l1, l2)
    assert "".join(map(str, linked_list_values(result))) == str(a + b)


def test_add_two_empty_lists_gives_empty():
    assert add_two_numbers(None, None) is None
    assert add_two_numbers_msb_first(None, None) is None


def _random_list(values, randoms):
    nodes = [RandomNode(v) for v in values]
    for a, b in zip(nodes, nodes[1:]):
        a.next = b
    for node, target in zip(nodes, randoms):
        node.random = nodes[target] if target is not None else None
    return nodes


def _collect(head):
    out = []
    while head is not None:
        out.append(head)
        head = head.next
    return out


@pytest.mark.parametrize("copier", [copy_random_list, copy_random_list_interleaved])
@given(data=st.data())
def test_copy_random_list_preserves_structure(copier, data):
    values = data.draw(st.lists(st.integers(), min_size=1, max_size=12))
    randoms = data.draw(
        st.lists(
            st.one_of(st.none(), st.integers(0, len(values) - 1)),
            min_size=len(values),
            max_size=len(values),
        )
    )
    originals = _random_list(values, randoms)
    copy = _collect(copier(originals[0]))

    assert [n.val for n in copy] == values
    assert not any(c is o for c in copy for o in originals)
    index = {id(n): i for i, n in enumerate(copy)}
    assert [None if n.random is None else index[id(n.random)] for n in copy] == randoms
    assert _collect(originals[0]) == originals
    assert [n.random for n in originals] == [
        None if r is None else originals[r] for r in randoms
    ]


@pytest.mark.parametrize("copier", [copy_random_list, copy_random_list_interleaved])
def test_copy_of_empty_list_is_none(copier):
    assert copier(None) is None


@given(small_ints, st.integers(-3, 3))
def test_remove_elements(values, val):
    result = remove_elements(linked_list_from(values), val)
    assert linked_list_values(result) == [x for x in values if x != val]


@given(small_ints)
def test_delete_duplicates_keeps_one_of_each(values):
    result = delete_duplicates(linked_list_from(sorted(values)))
    assert linked_list_values(result) == sorted(set(values))


@given(st.lists(st.integers(0, 6), max_size=30))
def test_delete_all_duplicates_keeps_singletons(values):
    ordered = sorted(values)
    result = delete_all_duplicates(linked_list_from(ordered))
    assert linked_list_values(result) == [x for x in ordered if ordered.count(x) == 1]


@given(small_ints)
def test_insertion_sort(values):
    assert linked_list_values(insertion_sort(linked_list_from(values))) == sorted(values)


@pytest.mark.parametrize("merge", [merge_two_lists, merge_two_lists_recursive])
@given(a=small_ints, b=small_ints)
def test_merge_two_lists(merge, a, b):
    result = merge(linked_list_from(sorted(a)), linked_list_from(sorted(b)))
    assert linked_list_values(result) == sorted(a + b)


def test_merge_two_lists_reuses_nodes():
    first = linked_list_from([1, 3])
    second = linked_list_from([2])
    merged = merge_two_lists(first, second)
    assert merged is first
    assert merged.next is second


@given(st.lists(small_ints, max_size=6))
def test_merge_k_lists(groups):
    heads = [linked_list_from(sorted(g)) for g in groups] + [None]
    result = merge_k_lists(heads)
    assert linked_list_values(result) == sorted(x for g in groups for x in g)


@given(small_ints)
def test_merge_sort_list(values):
    assert linked_list_values(merge_sort_list(linked_list_from(values))) == sorted(values)


@given(small_ints, st.integers(-20, 20))
def test_partition_keeps_order(values, pivot):
    result = linked_list_values(partition(linked_list_from(values), pivot))
    assert result == [v for v in values if v < pivot] + [v for v in values if v >= pivot]