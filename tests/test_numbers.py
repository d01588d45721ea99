import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.numbers import (
    add_digits,
    count_dividing_digits,
    difference_of_sums,
    maximum_achievable,
    triangle_type,
)


@given(st.integers(min_value=1, max_value=10**12))
def test_add_digits_root(num):
    result = add_digits(num)
    assert 1 <= result <= 9
    assert (result - num) % 9 == 0
    assert add_digits(sum(int(d) for d in str(num))) == result


@pytest.mark.parametrize("digit", range(10))
def test_add_digits_single_digit(digit):
    assert add_digits(digit) == digit


def test_add_digits_negative_raises():
    with pytest.raises(ValueError):
        add_digits(-5)


def test_count_dividing_digits_example():
    assert count_dividing_digits(1248) == 4


@given(st.integers(min_value=1, max_value=10**9))
def test_count_dividing_digits_bounded(num):
    result = count_dividing_digits(num)
    assert 0 <= result <= len(str(num)) - str(num).count("0")
    assert count_dividing_digits(int("1" * len(str(num)))) == len(str(num))


@given(st.integers(min_value=-100, max_value=100), st.integers(min_value=0, max_value=50))
def test_maximum_achievable(num, t):
    assert maximum_achievable(num, 0) == num
    assert maximum_achievable(num, t + 1) - maximum_achievable(num, t) == 2


@given(st.integers(min_value=0, max_value=200), st.integers(min_value=1, max_value=50))
def test_difference_of_sums(n, m):
    total = sum(range(1, n + 1))
    assert difference_of_sums(n, 1) == -total
    assert difference_of_sums(n, n + 1) == total
    result = difference_of_sums(n, m)
    assert (total - result) % 2 == 0


@pytest.mark.parametrize(
    "sides, kind",
    [
        ([3, 3, 3], "equilateral"),
        ([3, 4, 5], "scalene"),
        ([5, 3, 3], "isosceles"),
        ([1, 2, 3], "none"),
    ],
)
def test_triangle_type(sides, kind):
    assert triangle_type(sides) == kind


def test_triangle_type_wrong_count_raises():
    with pytest.raises(ValueError):
        triangle_type([1, 2])