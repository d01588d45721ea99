"""Matrix traversals and in-place updates."""

from __future__ import annotations

from collections.abc import Sequence


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a rectangular matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while left <= right and top <= bottom:
        result.extend(matrix[top][left:right + 1])
        result.extend(matrix[row][right] for row in range(top + 1, bottom + 1))
        if top != bottom:
            result.extend(matrix[bottom][col] for col in range(right - 1, left - 1, -1))
        if left != right:
            result.extend(matrix[row][left] for row in range(bottom - 1, top, -1))
        top += 1
        left += 1
        bottom -= 1
        right -= 1
    return result


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0