"""Monotonic-stack and stack-machine problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def nearest_smaller_left(heights: Sequence[int]) -> list[int]:
    """For each index, the index of the nearest smaller item to its left, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for index, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(index)
    return result


def nearest_smaller_right(heights: Sequence[int]) -> list[int]:
    """For each index, the index of the nearest smaller item to its right, or len."""
    size = len(heights)
    stack: list[int] = []
    result = [size] * size
    for index in reversed(range(size)):
        while stack and heights[stack[-1]] >= heights[index]:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(index)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under the histogram."""
    lefts = nearest_smaller_left(heights)
    rights = nearest_smaller_right(heights)
    return max(
        ((right - left - 1) * height for left, right, height in zip(lefts, rights, heights)),
        default=0,
    )


def baseball_points(operations: Iterable[str]) -> int:
    """Total score after applying integer, "C", "D" and "+" operations."""
    scores: list[int] = []
    for operation in operations:
        if operation == "C":
            if not scores:
                raise ValueError("'C' with no score to cancel")
            scores.pop()
        elif operation == "D":
            if not scores:
                raise ValueError("'D' with no score to double")
            scores.append(2 * scores[-1])
        elif operation == "+":
            if len(scores) < 2:
                raise ValueError("'+' needs two previous scores")
            scores.append(scores[-1] + scores[-2])
        else:
            scores.append(int(operation))
    return sum(scores)