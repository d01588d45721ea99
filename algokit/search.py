"""Binary-search problems over sorted, rotated and two-dimensional data."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an item larger than its neighbours (edges count as -infinity)."""
    if not nums:
        raise ValueError("find_peak_element() needs at least one number")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[mid + 1]:
            high = mid
        else:
            low = mid + 1
    return high


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """First version in ``1..n`` for which the check holds, or 0 if none does."""
    low, high = 1, n
    found = 0
    while low <= high:
        mid = (low + high) // 2
        if is_bad_version(mid):
            found = mid
            high = mid - 1
        else:
            low = mid + 1
    return found


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct items, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[left]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in a sorted sequence, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target) - 1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or where it would be inserted."""
    return bisect_left(nums, target)


def kth_smallest(matrix: Sequence[Sequence[int]], k: int) -> int:
    """The k-th smallest value of a square matrix sorted along rows and columns."""
    size = sum(len(row) for row in matrix)
    if not 1 <= k <= size:
        raise ValueError("kth_smallest() needs 1 <= k <= number of items")
    low, high = matrix[0][0], matrix[-1][-1]
    while low < high:
        mid = (low + high) // 2
        count = sum(bisect_right(row, mid) for row in matrix)
        if count < k:
            low = mid + 1
        else:
            high = mid
    return low


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    low, high = 0, len(matrix) * width - 1
    while low <= high:
        mid = (low + high) // 2
        value = matrix[mid // width][mid % width]
        if value == target:
            return True
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return False


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Smallest eating speed that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("min_eating_speed() needs at least one pile")
    low, high = 1, max(piles)
    while low < high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= h:
            high = mid
        else:
            low = mid + 1
    return low