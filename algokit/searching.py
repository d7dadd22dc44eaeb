"""Binary search and related searches over sorted or rotated sorted sequences."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import count, islice

NOT_FOUND = -1


def binary_search(values: Sequence[int], target: int) -> int:
    """Index of target in an ascending sequence, or NOT_FOUND."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        value = values[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND


def lower_bound(values: Sequence[int], target: int) -> int:
    """First index whose value is not less than target; len(values) if there is none."""
    low, high = 0, len(values)
    while low < high:
        mid = (low + high) // 2
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid
    return low


def floor_index(values: Sequence[int], k: int) -> int:
    """Last index whose value is not greater than k, or NOT_FOUND."""
    low, high = 0, len(values) - 1
    floor = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        if values[mid] <= k:
            floor = mid
            low = mid + 1
        else:
            high = mid - 1
    return floor


def _find_edge(values: Sequence[int], target: int, *, last: bool) -> int:
    low, high = 0, len(values) - 1
    found = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        value = values[mid]
        if value == target:
            found = mid
            if last:
                low = mid + 1
            else:
                high = mid - 1
        elif value < target:
            low = mid + 1
        else:
            high = mid - 1
    return found


def search_range(values: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of target in an ascending sequence, NOT_FOUND for both if absent."""
    return _find_edge(values, target, last=False), _find_edge(values, target, last=True)


def search_rotated(values: Sequence[int], target: int) -> int:
    """Index of target in a rotated ascending sequence of distinct values, or NOT_FOUND."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def search_rotated_with_duplicates(values: Sequence[int], target: int) -> bool:
    """Tell whether target occurs in a rotated non-decreasing sequence."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if values[low] == values[mid] == values[high]:
            low += 1
            high -= 1
            continue
        if values[low] <= values[mid]:
            if values[low] <= target < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def peak_element(values: Sequence[int]) -> int:
    """Index of a value not smaller than its neighbours, scanning from the left."""
    if not values:
        raise ValueError("peak_element needs at least one value")
    if len(values) == 1 or values[0] >= values[1]:
        return 0
    triples = zip(values, values[1:], values[2:])
    for index, (before, current, after) in enumerate(triples, start=1):
        if current > before and current >= after:
            return index
    return len(values) - 1


def kth_of_two_sorted(first: Sequence[int], second: Sequence[int], k: int) -> int:
    """The k-th smallest value (1-based) of two ascending sequences taken together."""
    total = len(first) + len(second)
    if not 1 <= k <= total:
        raise ValueError(f"k must lie between 1 and {total}, got {k}")
    return next(islice(heapq.merge(first, second), k - 1, None))


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    used, load = 1, 0
    for count_ in pages:
        if count_ > limit:
            return False
        if load + count_ > limit:
            used += 1
            load = count_
            if used > students:
                return False
        else:
            load += count_
    return True


def allocate_min_pages(pages: Iterable[int], students: int) -> int:
    """Smallest possible largest load when books are dealt out in order to the students.

    Every student gets at least one contiguous run of books. Raises ValueError
    when there are fewer books than students or no students at all.
    """
    items = list(pages)
    if students < 1 or students > len(items):
        raise ValueError(f"cannot share {len(items)} books among {students} students")
    low, high = min(items), sum(items)
    result = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(items, students, mid):
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def kth_missing(values: Iterable[int], k: int) -> int:
    """The k-th positive integer absent from an ascending sequence of positive integers."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    present = iter(values)
    upcoming = next(present, None)
    missing = 0
    for candidate in count(1):
        if upcoming == candidate:
            upcoming = next(present, None)
            continue
        missing += 1
        if missing == k:
            return candidate
    raise AssertionError("unreachable")