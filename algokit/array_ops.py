"""Everyday operations on integer sequences."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def is_sorted_rotated(values: Sequence[int]) -> bool:
    """Tell whether the sequence is a non-decreasing sequence rotated by some amount."""
    items = list(values)
    wrapped = items[1:] + items[:1]
    drops = sum(1 for current, following in zip(items, wrapped) if current > following)
    return drops <= 1


def max_consecutive_ones(values: Iterable[int]) -> int:
    """Length of the longest run of 1s."""
    best = run = 0
    for value in values:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, keeping the others' order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def rotate(values: Sequence[int], k: int) -> list[int]:
    """Return the values rotated k places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    return items[len(items) - k:] + items[: len(items) - k]


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def missing_number(values: Sequence[int]) -> int:
    """Find the one number of 0..n absent from n distinct values."""
    n = len(values)
    return n * (n + 1) // 2 - sum(values)


def single_number(values: Iterable[int]) -> int:
    """Find the value that appears once when every other appears twice."""
    return reduce(xor, values, 0)


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Union of two sorted sequences, sorted and without duplicates."""
    union: list[int] = []
    for value in heapq.merge(first, second):
        if not union or union[-1] != value:
            union.append(value)
    return union


def two_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices of two values adding up to target, or None if there is no such pair."""
    seen: dict[int, int] = {}
    for index, value in enumerate(values):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None


def h_index(citations: Iterable[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    h = 0
    for rank, count in enumerate(sorted(citations, reverse=True), start=1):
        if count < rank:
            break
        h = rank
    return h


def leaders(values: Sequence[int]) -> list[int]:
    """Values not smaller than every value to their right, in original order."""
    result: list[int] = []
    for value in reversed(values):
        if not result or value >= result[-1]:
            result.append(value)
    result.reverse()
    return result