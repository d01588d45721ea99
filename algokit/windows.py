"""Sliding-window and prefix-sum problems over sequences and strings."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """Whether a run of two or more items sums to a multiple of ``k``.

    With ``k == 0`` this asks for a run of two or more items summing to zero.
    """
    first_seen = {0: -1}
    running = 0
    for index, value in enumerate(nums):
        running += value
        if k != 0:
            running %= k
        if running in first_seen:
            if index - first_seen[running] >= 2:
                return True
        else:
            first_seen[running] = index
    return False


def _count_runs_with_sum(values: Iterable[int], goal: int) -> int:
    """Number of contiguous runs of ``values`` whose sum equals ``goal``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    total = 0
    for value in values:
        running += value
        total += prefix_counts[running - goal]
        prefix_counts[running] += 1
    return total


def subarray_sum_count(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose sum equals ``k``."""
    return _count_runs_with_sum(nums, k)


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        length = 1
        while value + length in values:
            length += 1
        best = max(best, length)
    return best


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones in a binary sequence after flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("longest_ones() needs a non-negative k")
    zeros = 0
    left = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def number_of_nice_subarrays(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays holding exactly ``k`` odd numbers."""
    return _count_runs_with_sum((value % 2 for value in nums), k)


def substrings_with_all_three(s: str) -> int:
    """Number of substrings holding at least one each of 'a', 'b' and 'c'."""
    counts: Counter[str] = Counter()
    left = 0
    total = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while counts["a"] and counts["b"] and counts["c"]:
            total += len(s) - right
            counts[s[left]] -= 1
            left += 1
    return total


def max_card_score(card_points: Sequence[int], k: int) -> int:
    """Best total from taking ``k`` cards, each from either end of the row."""
    if not 0 <= k <= len(card_points):
        raise ValueError("max_card_score() needs 0 <= k <= number of cards")
    left_sum = sum(card_points[:k])
    right_sum = 0
    best = left_sum
    for dropped, taken in zip(reversed(card_points[:k]), reversed(card_points)):
        left_sum -= dropped
        right_sum += taken
        best = max(best, left_sum + right_sum)
    return best


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive items, left to right."""
    if k < 1:
        return []
    window: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            maxima.append(nums[window[0]])
    return maxima


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_index: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_index.get(char, -1) >= start:
            start = last_index[char] + 1
        last_index[char] = index
        best = max(best, index - start + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest run of one letter reachable by replacing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    start = 0
    most_common = 0
    best = 0
    for index, char in enumerate(s):
        counts[char] += 1
        most_common = max(most_common, counts[char])
        while (index - start + 1) - most_common > k:
            counts[s[start]] -= 1
            start += 1
        best = max(best, index - start + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t``, or ''."""
    if not t or len(s) < len(t):
        return ""
    needed = Counter(t)
    missing = len(t)
    left = 0
    best: tuple[int, int] | None = None
    for right, char in enumerate(s):
        if needed[char] > 0:
            missing -= 1
        needed[char] -= 1
        while missing == 0:
            length = right - left + 1
            if best is None or length < best[1]:
                best = (left, length)
            needed[s[left]] += 1
            if needed[s[left]] > 0:
                missing += 1
            left += 1
    if best is None:
        return ""
    start, length = best
    return s[start:start + length]


def binary_subarrays_with_sum(nums: Iterable[int], goal: int) -> int:
    """Number of contiguous subarrays of a binary sequence summing to ``goal``."""
    return _count_runs_with_sum(nums, goal)