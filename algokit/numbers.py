"""Small number puzzles: digit roots, dividing digits, sums and triangles."""

from __future__ import annotations

from collections.abc import Sequence


def add_digits(num: int) -> int:
    """Repeatedly sum the digits of a non-negative number down to one digit."""
    if num < 0:
        raise ValueError("add_digits() needs a non-negative number")
    if num == 0:
        return 0
    return num % 9 or 9


def count_dividing_digits(num: int) -> int:
    """How many digits of ``num`` (with repetition) divide it evenly."""
    if num <= 0:
        return 0
    return sum(1 for char in str(num) if char != "0" and num % int(char) == 0)


def maximum_achievable(num: int, t: int) -> int:
    """Largest x that can equal ``num`` after ``t`` joint +/-1 steps."""
    return num + 2 * t


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by m minus the sum of those that are."""
    return sum(-i if i % m == 0 else i for i in range(1, n + 1))


def triangle_type(sides: Sequence[int]) -> str:
    """Classify three side lengths as none, equilateral, isosceles or scalene."""
    if len(sides) != 3:
        raise ValueError("triangle_type() needs exactly three sides")
    a, b, c = sorted(sides)
    if a + b <= c:
        return "none"
    distinct = len({a, b, c})
    if distinct == 1:
        return "equilateral"
    if distinct == 2:
        return "isosceles"
    return "scalene"