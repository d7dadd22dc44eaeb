"""Classic interview problems over integer sequences and interval lists."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if no gain is possible."""
    profit = 0
    lowest = math.inf
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def rearrange_by_sign(values: Iterable[int]) -> list[int]:
    """Interleave positive and non-positive values, starting with a positive one.

    Each group keeps its original order. Raises ValueError when the two groups
    differ in size.
    """
    items = list(values)
    positives = [value for value in items if value > 0]
    others = [value for value in items if value <= 0]
    if len(positives) != len(others):
        raise ValueError("rearrange_by_sign needs as many positive as non-positive values")
    return [value for pair in zip(positives, others) for value in pair]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    iterator = iter(values)
    try:
        current = best = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum needs at least one value") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def _check_grid(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")


def unique_paths(rows: int, cols: int) -> int:
    """Number of right/down paths across a rows x cols grid, by dynamic programming."""
    _check_grid(rows, cols)
    row = [1] * cols
    for _ in range(1, rows):
        for j in range(1, cols):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_combinatorial(rows: int, cols: int) -> int:
    """Number of right/down paths across a rows x cols grid, as a binomial coefficient."""
    _check_grid(rows, cols)
    return math.comb(rows + cols - 2, min(rows, cols) - 1)


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first num_rows rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for size in range(1, num_rows + 1):
        if triangle:
            previous = triangle[-1]
            inner = [a + b for a, b in zip(previous, previous[1:])]
            triangle.append([1, *inner, 1])
        else:
            triangle.append([1] * size)
    return triangle


def majority_element(values: Iterable[int]) -> int:
    """The candidate for the value filling more than half the sequence (Boyer-Moore vote)."""
    count = 0
    current = None
    for value in values:
        if count == 0:
            current = value
        count += 1 if value == current else -1
    if current is None:
        raise ValueError("majority_element needs at least one value")
    return current


def next_permutation(values: Sequence[int]) -> list[int]:
    """The next permutation in lexicographic order, wrapping the last to the first."""
    items = list(values)
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i >= 0:
        j = len(items) - 1
        while items[j] <= items[i]:
            j -= 1
        items[i], items[j] = items[j], items[i]
    items[i + 1:] = reversed(items[i + 1:])
    return items


def majority_elements(values: Sequence[int]) -> list[int]:
    """Every value appearing more than len(values) // 3 times (extended Boyer-Moore vote)."""
    items = list(values)
    first, second = 0, 1
    first_count = second_count = 0
    for value in items:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    threshold = len(items) // 3
    return [
        candidate
        for candidate in (first, second)
        if items.count(candidate) > threshold
    ]


def merge_sorted_into(target: list[int], m: int, source: Sequence[int], n: int) -> list[int]:
    """Merge the sorted source[:n] into the sorted target[:m], in place in target.

    target must have room for m + n values. Returns target for convenience.
    """
    if len(target) < m + n:
        raise ValueError(f"target holds {len(target)} slots, needs {m + n}")
    if len(source) < n:
        raise ValueError(f"source holds {len(source)} values, needs {n}")
    target[: m + n] = heapq.merge(target[:m], source[:n])
    return target


def longest_consecutive(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present among the values."""
    present = set(values)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching [start, end] intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted((list(interval) for interval in intervals)):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged