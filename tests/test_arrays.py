from collections import Counter
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    max_profit,
    max_subarray_sum,
    missing_number,
    move_zeroes,
    next_greater_element,
    number_game,
    remove_duplicates,
    sort_by_bits,
    sort_colors,
    sorted_squares,
    three_consecutive_odds,
    three_sum,
    three_sum_closest,
    two_sum,
    xor_operation,
)

small_ints = st.integers(min_value=-50, max_value=50)


@given(st.lists(small_ints, max_size=30))
def test_max_profit_bounds_every_trade(prices):
    result = max_profit(prices)
    assert result >= 0
    diffs = [prices[j] - prices[i] for i, j in combinations(range(len(prices)), 2)]
    assert all(d <= result for d in diffs)
    assert result == 0 or result in diffs


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0


@given(st.lists(small_ints, min_size=1, max_size=30))
def test_max_subarray_sum_is_a_slice_sum(nums):
    result = max_subarray_sum(nums)
    assert result >= max(nums)
    assert result >= sum(nums)
    slices = {sum(nums[i:j]) for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)}
    assert result in slices


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@given(st.integers(min_value=0, max_value=40).flatmap(
    lambda n: st.tuples(st.just(n), st.integers(min_value=0, max_value=n), st.randoms())))
def test_missing_number_found(case):
    n, gone, rng = case
    nums = [x for x in range(n + 1) if x != gone]
    rng.shuffle(nums)
    assert missing_number(nums) == gone


@given(st.lists(st.integers(min_value=-3, max_value=3), max_size=30))
def test_move_zeroes_in_place(nums):
    original = list(nums)
    assert move_zeroes(nums) is None
    kept = [x for x in original if x != 0]
    assert nums[: len(kept)] == kept
    assert nums[len(kept):] == [0] * (len(original) - len(kept))


@given(st.lists(small_ints, max_size=30).map(sorted))
def test_remove_duplicates_compacts(nums):
    original = list(nums)
    k = remove_duplicates(nums)
    assert k == len(set(original))
    assert nums[:k] == sorted(set(original))
    assert len(nums) == len(original)


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == (0, 1)


@given(st.lists(small_ints, max_size=20), small_ints)
def test_two_sum_pairs_add_up(nums, target):
    result = two_sum(nums, target)
    if result is None:
        assert all(nums[i] + nums[j] != target for i, j in combinations(range(len(nums)), 2))
    else:
        i, j = result
        assert i < j and nums[i] + nums[j] == target


@given(st.lists(small_ints, max_size=30).map(sorted))
def test_sorted_squares_ordered_and_complete(nums):
    result = sorted_squares(nums)
    assert result == sorted(result)
    assert Counter(result) == Counter(x * x for x in nums)


@given(st.lists(st.integers(min_value=-20, max_value=20).map(lambda x: 2 * x), max_size=20))
def test_three_consecutive_odds(evens):
    assert three_consecutive_odds(evens) is False
    assert three_consecutive_odds(evens + [1, -3, 5]) is True
    assert three_consecutive_odds(evens + [1, 3, 2, 5]) is False


@given(st.lists(st.integers(min_value=-1000, max_value=10000), max_size=30))
def test_sort_by_bits_order(arr):
    result = sort_by_bits(arr)
    assert Counter(result) == Counter(arr)
    keys = [(bin(x & 0xFFFFFFFF).count("1"), x) for x in result]
    assert keys == sorted(keys)


@given(st.lists(small_ints, max_size=15).map(lambda xs: xs + xs[::-1]))
def test_number_game_swaps_pairs(nums):
    result = number_game(nums)
    rebuilt = []
    for high, low in zip(result[0::2], result[1::2]):
        rebuilt.extend((low, high))
    assert rebuilt == sorted(nums)


def test_number_game_odd_raises():
    with pytest.raises(ValueError):
        number_game([1, 2, 3])


@given(st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=1000))
def test_xor_operation_step(n, start):
    assert xor_operation(0, start) == 0
    assert xor_operation(1, start) == start
    assert xor_operation(n + 1, start) == xor_operation(n, start) ^ (start + 2 * n)


@given(st.lists(st.integers(min_value=0, max_value=100), unique=True, min_size=1, max_size=20),
       st.data())
def test_next_greater_element_properties(nums2, data):
    nums1 = data.draw(st.lists(st.sampled_from(nums2), unique=True))
    result = next_greater_element(nums1, nums2)
    assert len(result) == len(nums1)
    for value, found in zip(nums1, result):
        tail = nums2[nums2.index(value) + 1:]
        if found == -1:
            assert all(x <= value for x in tail)
        else:
            assert found > value and found in tail
            assert all(x <= value for x in tail[: tail.index(found)])


@given(st.lists(st.integers(min_value=0, max_value=2), max_size=40))
def test_sort_colors(nums):
    expected = sorted(nums)
    assert sort_colors(nums) is None
    assert nums == expected


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@given(st.lists(st.integers(min_value=-10, max_value=10), max_size=15))
def test_three_sum_triplets_valid(nums):
    result = three_sum(nums)
    assert len({tuple(t) for t in result}) == len(result)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
        assert not Counter(triplet) - Counter(nums)


@given(st.lists(small_ints, min_size=3, max_size=10), st.integers(min_value=-200, max_value=200))
def test_three_sum_closest_is_optimal(nums, target):
    result = three_sum_closest(nums, target)
    sums = {sum(c) for c in combinations(nums, 3)}
    assert result in sums
    assert all(abs(result - target) <= abs(s - target) for s in sums)


def test_three_sum_closest_too_short_raises():
    with pytest.raises(ValueError):
        three_sum_closest([1, 2], 3)