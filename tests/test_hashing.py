from itertools import count

from hypothesis import given
from hypothesis import strategies as st

from algonotes.hashing import (
    first_missing_positive,
    majority_element,
    more_than_half,
    single_numbers_set,
    single_numbers_xor,
    two_sum,
)


@st.composite
def pairs_with_two_singles(draw):
    values = draw(st.lists(st.integers(-1000, 1000), unique=True, min_size=2, max_size=12))
    a, b, *rest = values
    nums = [a, b] + rest + rest
    return draw(st.permutations(nums)), a, b


@given(pairs_with_two_singles())
def test_single_numbers_xor(case):
    nums, a, b = case
    assert sorted(single_numbers_xor(nums)) == sorted([a, b])


@given(pairs_with_two_singles())
def test_single_numbers_set(case):
    nums, a, b = case
    assert single_numbers_set(nums) == sorted([a, b])


@given(st.lists(st.integers(-5, 15), max_size=15))
def test_first_missing_positive(nums):
    original = list(nums)
    present = set(nums)
    expected = next(i for i in count(1) if i not in present)
    assert first_missing_positive(nums) == expected
    assert nums == original


def test_first_missing_positive_empty():
    assert first_missing_positive([]) == 1


@st.composite
def with_majority(draw):
    winner = draw(st.integers(-50, 50))
    others = draw(st.lists(st.integers(-50, 50).filter(lambda x: x != winner), max_size=8))
    nums = [winner] * (len(others) + 1) + others
    return draw(st.permutations(nums)), winner


@given(with_majority())
def test_majority_element(case):
    nums, winner = case
    assert majority_element(nums) == winner


@given(with_majority())
def test_more_than_half_returns_value_reaching_threshold(case):
    nums, winner = case
    result = more_than_half(nums)
    assert nums.count(result) >= (len(nums) + 1) // 2


def test_more_than_half_empty():
    assert more_than_half([]) == -1


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == (1, 2)


@given(st.lists(st.integers(-30, 30), max_size=15), st.integers(-60, 60))
def test_two_sum_invariant(numbers, target):
    result = two_sum(numbers, target)
    has_pair = any(
        numbers[i] + numbers[j] == target
        for i in range(len(numbers))
        for j in range(i + 1, len(numbers))
    )
    if result is None:
        assert not has_pair
    else:
        i, j = result
        assert 1 <= i < j <= len(numbers)
        assert numbers[i - 1] + numbers[j - 1] == target