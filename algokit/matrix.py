"""Traversal and rotation of rectangular matrices given as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Values read clockwise in a spiral, starting at the top-left corner."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        return []
    top, left = 0, 0
    bottom, right = len(rows) - 1, len(rows[0]) - 1
    result: list[Any] = []
    while top <= bottom and left <= right:
        result.extend(rows[top][left:right + 1])
        top += 1
        result.extend(rows[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(rows[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(rows[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result


def rotate_clockwise(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """A new matrix: the given one turned 90 degrees clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]