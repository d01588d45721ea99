"""Dynamic programming problems."""

from __future__ import annotations

from collections.abc import Sequence


def target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Number of +/- sign assignments to ``nums`` that sum to ``target``."""
    if any(value < 0 for value in nums):
        raise ValueError("target_sum_ways() needs non-negative numbers")
    total = sum(nums)
    if (total + target) % 2 or abs(target) > total:
        return 0
    goal = (total + target) // 2
    ways = [1] + [0] * goal
    for value in nums:
        for amount in range(goal, value - 1, -1):
            ways[amount] += ways[amount - value]
    return ways[goal]