from functools import lru_cache

import pytest
from hypothesis import given, strategies as st

from contestkit.cses import (
    count_subarrays_with_sum,
    find_three_sum,
    find_two_sum,
    max_subarray_sum,
    rectangle_cuts,
    removal_game_score,
)


def test_max_subarray_sum_worked_example():
    assert max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2]) == 9


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=12))
def test_max_subarray_sum_matches_all_slices(values):
    expected = max(
        sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)
    )
    assert max_subarray_sum(values) == expected


@given(st.lists(st.integers(-50, -1), min_size=1, max_size=10))
def test_max_subarray_sum_all_negative_is_largest_element(values):
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_rectangle_cuts_worked_example():
    assert rectangle_cuts(3, 5) == 3


@pytest.mark.parametrize("side", [1, 2, 7, 20])
def test_rectangle_cuts_square_needs_none(side):
    assert rectangle_cuts(side, side) == 0


@given(st.integers(1, 15), st.integers(1, 15))
def test_rectangle_cuts_symmetric(width, height):
    assert rectangle_cuts(width, height) == rectangle_cuts(height, width)


@pytest.mark.parametrize("height", [1, 2, 5, 9])
def test_rectangle_cuts_strip_of_unit_squares(height):
    assert rectangle_cuts(1, height) == height - 1


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_rectangle_cuts_invalid(width, height):
    with pytest.raises(ValueError):
        rectangle_cuts(width, height)


def _minimax(values):
    @lru_cache(maxsize=None)
    def best(i, j):
        if i > j:
            return 0
        total = sum(values[i : j + 1])
        return total - min(best(i + 1, j), best(i, j - 1))

    return best(0, len(values) - 1)


@given(st.lists(st.integers(-20, 20), min_size=1, max_size=9))
def test_removal_game_matches_minimax(values):
    assert removal_game_score(values) == _minimax(tuple(values))


def test_removal_game_single_value():
    assert removal_game_score([42]) == 42


def test_removal_game_two_values_takes_larger():
    assert removal_game_score([3, 11]) == 11


def test_removal_game_empty_raises():
    with pytest.raises(ValueError):
        removal_game_score([])


@given(st.lists(st.integers(1, 6), min_size=1, max_size=12), st.integers(1, 20))
def test_count_subarrays_matches_all_slices(values, target):
    expected = sum(
        1
        for i in range(len(values))
        for j in range(i + 1, len(values) + 1)
        if sum(values[i:j]) == target
    )
    assert count_subarrays_with_sum(values, target) == expected


def test_count_subarrays_none_found():
    assert count_subarrays_with_sum([5, 5, 5], 4) == 0


@given(st.lists(st.integers(1, 30), min_size=2, max_size=12), st.integers(2, 60))
def test_find_two_sum_result_is_valid(values, target):
    result = find_two_sum(values, target)
    possible = any(
        values[i] + values[j] == target
        for i in range(len(values))
        for j in range(i + 1, len(values))
    )
    if result is None:
        assert not possible
    else:
        first, second = result
        assert first != second
        assert values[first - 1] + values[second - 1] == target


def test_find_two_sum_impossible():
    assert find_two_sum([1, 2], 10) is None


@given(st.lists(st.integers(1, 30), min_size=3, max_size=10), st.integers(3, 90))
def test_find_three_sum_result_is_valid(values, target):
    result = find_three_sum(values, target)
    n = len(values)
    possible = any(
        values[i] + values[j] + values[k] == target
        for i in range(n)
        for j in range(i + 1, n)
        for k in range(j + 1, n)
    )
    if result is None:
        assert not possible
    else:
        assert len(set(result)) == 3
        assert sum(values[p - 1] for p in result) == target


def test_find_three_sum_too_short():
    assert find_three_sum([1, 2], 3) is None