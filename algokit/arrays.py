"""Array problems: profits, subarrays, in-place rearrangement and k-sum searches."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from functools import reduce
from itertools import groupby
from operator import xor


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from one buy followed by a later sell, or 0 if none is positive."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is not None:
            best = max(best, price - lowest)
        lowest = price if lowest is None else min(lowest, price)
    return best


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("max_subarray_sum() needs at least one number")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def missing_number(nums: Sequence[int]) -> int:
    """The one number of ``0..len(nums)`` that ``nums`` does not hold."""
    return reduce(xor, range(len(nums) + 1), 0) ^ reduce(xor, nums, 0)


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    unique = [key for key, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two items adding up to ``target``, or None when there are none."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return seen[partner], index
        seen[value] = index
    return None


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of a sorted sequence, in ascending order."""
    negatives = [value * value for value in nums if value < 0]
    non_negatives = [value * value for value in nums if value >= 0]
    negatives.reverse()
    return list(heapq.merge(non_negatives, negatives))


def three_consecutive_odds(arr: Sequence[int]) -> bool:
    """Whether three odd numbers stand next to each other."""
    run = 0
    for value in arr:
        if value % 2:
            run += 1
            if run == 3:
                return True
        else:
            run = 0
    return False


def _popcount32(value: int) -> int:
    return (value & 0xFFFFFFFF).bit_count()


def sort_by_bits(arr: Sequence[int]) -> list[int]:
    """Sort by number of set bits (32-bit), then by value."""
    return sorted(arr, key=lambda value: (_popcount32(value), value))


def number_game(nums: Sequence[int]) -> list[int]:
    """Sort, then emit each ascending pair in swapped order."""
    if len(nums) % 2:
        raise ValueError("number_game() needs an even number of items")
    ordered = sorted(nums)
    result: list[int] = []
    for low, high in zip(ordered[0::2], ordered[1::2]):
        result.extend((high, low))
    return result


def xor_operation(n: int, start: int) -> int:
    """XOR of ``start + 2*i`` for i in ``0..n-1``."""
    return reduce(xor, (start + 2 * i for i in range(n)), 0)


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each item of nums1, the first larger item to its right in nums2, else -1."""
    position = {value: index for index, value in enumerate(nums2)}
    answers: list[int] = []
    for value in nums1:
        if value not in position:
            answers.append(-1)
            continue
        tail = nums2[position[value] + 1:]
        answers.append(next((other for other in tail if other > value), -1))
    return answers


def sort_colors(nums: list[int]) -> None:
    """Sort 0s, 1s and everything else (as 2s) in place in one pass."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct ascending triplets that add up to zero."""
    ordered = sorted(nums)
    size = len(ordered)
    triplets: list[list[int]] = []
    for first in range(size):
        if first > 0 and ordered[first] == ordered[first - 1]:
            continue
        left, right = first + 1, size - 1
        while left < right:
            total = ordered[first] + ordered[left] + ordered[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                triplets.append([ordered[first], ordered[left], ordered[right]])
                left += 1
                right -= 1
                while left < right and ordered[left] == ordered[left - 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right + 1]:
                    right -= 1
    return triplets


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three items closest to ``target``; the first found wins ties."""
    if len(nums) < 3:
        raise ValueError("three_sum_closest() needs at least three numbers")
    ordered = sorted(nums)
    size = len(ordered)
    best: int | None = None
    best_gap: int | None = None
    for first in range(size - 2):
        left, right = first + 1, size - 1
        while left < right:
            total = ordered[first] + ordered[left] + ordered[right]
            gap = abs(total - target)
            if best_gap is None or gap < best_gap:
                best, best_gap = total, gap
            if total == target:
                left += 1
                right -= 1
            elif total < target:
                left += 1
            else:
                right -= 1
    assert best is not None
    return best