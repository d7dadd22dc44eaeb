from bisect import bisect_left, bisect_right

import pytest

from algokit.searching import (
    NOT_FOUND,
    allocate_min_pages,
    binary_search,
    floor_index,
    kth_missing,
    kth_of_two_sorted,
    lower_bound,
    peak_element,
    search_range,
    search_rotated,
    search_rotated_with_duplicates,
)

SORTED_INPUTS = [
    [],
    [5],
    list(range(1, 11)),
    [5, 7, 7, 8, 8, 10],
    [1, 1, 1, 2, 2, 3, 9, 9],
    [-4, -2, 0, 3, 3, 3, 11],
]


def _rotations(values):
    return [values[i:] + values[:i] for i in range(len(values))]


def test_binary_search_finds_every_value():
    values = list(range(1, 11))
    for target in values:
        assert values[binary_search(values, target)] == target


@pytest.mark.parametrize("target", [0, 11, -3])
def test_binary_search_missing(target):
    assert binary_search(list(range(1, 11)), target) == NOT_FOUND


def test_binary_search_empty():
    assert binary_search([], 4) == NOT_FOUND


@pytest.mark.parametrize("values", SORTED_INPUTS)
def test_lower_bound_matches_bisect_left(values):
    for target in range(-6, 14):
        assert lower_bound(values, target) == bisect_left(values, target)


@pytest.mark.parametrize("values", SORTED_INPUTS)
def test_floor_index_matches_bisect_right(values):
    for target in range(-6, 14):
        expected = bisect_right(values, target) - 1
        result = floor_index(values, target)
        if expected < 0:
            assert result == NOT_FOUND
        else:
            assert result == expected


@pytest.mark.parametrize("values", SORTED_INPUTS)
def test_search_range_against_bisect(values):
    for target in range(-6, 14):
        first, last = search_range(values, target)
        if target in values:
            assert (first, last) == (bisect_left(values, target), bisect_right(values, target) - 1)
        else:
            assert (first, last) == (NOT_FOUND, NOT_FOUND)


def test_search_range_source_example():
    values = [5, 7, 7, 8, 8, 10]
    first, last = search_range(values, 8)
    assert values[first] == values[last] == 8
    assert values[first - 1] != 8 and values[last + 1] != 8


@pytest.mark.parametrize("rotated", _rotations([0, 1, 2, 4, 5, 6, 7]))
def test_search_rotated_every_rotation(rotated):
    for target in range(-1, 9):
        index = search_rotated(rotated, target)
        if target in rotated:
            assert rotated[index] == target
        else:
            assert index == NOT_FOUND


def test_search_rotated_target_at_high_end():
    values = [5, 1, 3]
    assert values[search_rotated(values, 3)] == 3


def test_search_rotated_source_example():
    values = [4, 5, 6, 7, 0, 1, 2]
    assert values[search_rotated(values, 0)] == 0


def test_search_rotated_empty():
    assert search_rotated([], 1) == NOT_FOUND


@pytest.mark.parametrize("rotated", _rotations([1, 1, 2, 2, 2, 3, 4, 4]))
def test_search_rotated_with_duplicates_every_rotation(rotated):
    for target in range(0, 6):
        assert search_rotated_with_duplicates(rotated, target) is (target in rotated)


def test_search_rotated_with_duplicates_source_example():
    assert search_rotated_with_duplicates([4, 5, 6, 7, 0, 1, 2], 0) is True


def test_search_rotated_with_duplicates_flat_ends():
    assert search_rotated_with_duplicates([1, 0, 1, 1, 1], 0) is True
    assert search_rotated_with_duplicates([1, 0, 1, 1, 1], 2) is False


def _is_peak(values, index):
    left_ok = index == 0 or values[index] >= values[index - 1]
    right_ok = index == len(values) - 1 or values[index] >= values[index + 1]
    return left_ok and right_ok


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, 1, 5, 6, 4], [1], [5, 4, 3], [1, 2, 3], [2, 2, 2], [1, 3, 2, 4, 1]],
)
def test_peak_element_is_a_peak(values):
    index = peak_element(values)
    assert 0 <= index < len(values)
    assert _is_peak(values, index)


def test_peak_element_increasing_is_last():
    values = [1, 2, 3, 4]
    assert peak_element(values) == len(values) - 1


def test_peak_element_empty():
    with pytest.raises(ValueError):
        peak_element([])


@pytest.mark.parametrize(
    "first, second",
    [([1, 2, 3, 4, 5], [6, 7, 8, 9, 10]), ([2, 3, 6, 7, 9], [1, 4, 8, 10]), ([], [3, 4]), ([1, 1], [1])],
)
def test_kth_of_two_sorted_matches_merged(first, second):
    merged = sorted(first + second)
    for k in range(1, len(merged) + 1):
        assert kth_of_two_sorted(first, second, k) == merged[k - 1]


@pytest.mark.parametrize("k", [0, 11, -1])
def test_kth_of_two_sorted_out_of_range(k):
    with pytest.raises(ValueError):
        kth_of_two_sorted([1, 2, 3, 4, 5], [6, 7, 8, 9, 10], k)


def test_allocate_min_pages_source_example():
    assert allocate_min_pages(list(range(1, 11)), 3) == 21


def test_allocate_min_pages_two_students():
    assert allocate_min_pages([12, 34, 67, 90], 2) == 113


def test_allocate_min_pages_extremes():
    pages = [12, 34, 67, 90]
    assert allocate_min_pages(pages, 1) == sum(pages)
    assert allocate_min_pages(pages, len(pages)) == max(pages)


def test_allocate_min_pages_non_increasing():
    pages = [7, 2, 5, 10, 8, 1, 4]
    results = [allocate_min_pages(pages, s) for s in range(1, len(pages) + 1)]
    assert results == sorted(results, reverse=True)
    assert all(max(pages) <= r <= sum(pages) for r in results)


@pytest.mark.parametrize("students", [0, 5])
def test_allocate_min_pages_bad_student_count(students):
    with pytest.raises(ValueError):
        allocate_min_pages([12, 34, 67, 90], students)


def test_kth_missing_known_case():
    assert kth_missing([2, 3, 4, 7, 11], 5) == 9


def _check_kth_missing(values, k, result):
    assert result >= 1
    assert result not in values
    assert sum(1 for c in range(1, result) if c not in values) == k - 1


@pytest.mark.parametrize(
    "values, k",
    [(list(range(1, 11)), 3), ([2, 3, 4, 7, 11], 1), ([2, 3, 4, 7, 11], 7), ([], 4), ([1, 2, 3, 4], 2)],
)
def test_kth_missing_invariant(values, k):
    _check_kth_missing(values, k, kth_missing(values, k))


def test_kth_missing_bad_k():
    with pytest.raises(ValueError):
        kth_missing([1, 2, 3], 0)