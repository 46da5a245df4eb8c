from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algosuite.distances import (
    earliest_finish_time,
    max_distance_on_square,
    min_mirror_pair_distance,
    minimum_distance_three_equal,
    mirror_distance,
    reverse_digits,
    rotated_digits,
)

# rotated_digits


@pytest.mark.parametrize("n", [2, 5, 6, 9, 12, 25, 96])
def test_rotated_digits_good_number_adds_one(n):
    assert rotated_digits(n) - rotated_digits(n - 1) == 1


@pytest.mark.parametrize("n", [3, 4, 7, 10, 11, 18, 23, 80, 88, 100])
def test_rotated_digits_other_numbers_add_nothing(n):
    assert rotated_digits(n) == rotated_digits(n - 1)


@settings(max_examples=30)
@given(st.integers(1, 500))
def test_rotated_digits_steps_by_at_most_one(n):
    step = rotated_digits(n) - rotated_digits(n - 1)
    assert step in (0, 1)


# earliest_finish_time


def test_earliest_finish_time_worked_example():
    assert earliest_finish_time([2, 8], [4, 1], [6], [3]) == 9


rides = st.lists(
    st.tuples(st.integers(1, 100), st.integers(1, 100)), min_size=1, max_size=5
)


@given(rides, rides)
def test_earliest_finish_time_symmetric(land, water):
    ls, ld = zip(*land)
    ws, wd = zip(*water)
    assert earliest_finish_time(ls, ld, ws, wd) == earliest_finish_time(ws, wd, ls, ld)


@given(rides, rides, st.tuples(st.integers(1, 100), st.integers(1, 100)))
def test_earliest_finish_time_extra_ride_never_hurts(land, water, extra):
    ls, ld = zip(*land)
    ws, wd = zip(*water)
    base = earliest_finish_time(ls, ld, ws, wd)
    more = earliest_finish_time([*ls, extra[0]], [*ld, extra[1]], ws, wd)
    assert more <= base


@given(rides, rides)
def test_earliest_finish_time_lower_bound(land, water):
    ls, ld = zip(*land)
    ws, wd = zip(*water)
    result = earliest_finish_time(ls, ld, ws, wd)
    assert result >= min(min(ls), min(ws)) + min(ld) + min(wd)


def test_earliest_finish_time_requires_rides():
    with pytest.raises(ValueError):
        earliest_finish_time([], [], [1], [1])


# minimum_distance_three_equal


def test_minimum_distance_three_equal_worked_example():
    assert minimum_distance_three_equal([1, 2, 1, 1, 3]) == 6


def test_minimum_distance_three_equal_none():
    assert minimum_distance_three_equal([1, 2, 1, 2]) == -1


@given(st.lists(st.integers(0, 4), max_size=15))
def test_minimum_distance_three_equal_invariants(nums):
    result = minimum_distance_three_equal(nums)
    has_triple = any(c >= 3 for c in Counter(nums).values())
    if has_triple:
        assert result >= 4
        assert result % 2 == 0
        assert result <= 2 * (len(nums) - 1)
    else:
        assert result == -1


@given(st.integers(0, 100), st.integers(0, 5))
def test_minimum_distance_three_equal_adjacent(value, padding):
    nums = [value + 1 + i for i in range(padding)] + [value] * 3
    assert minimum_distance_three_equal(nums) == 4


# reverse_digits and mirror_distance


def test_reverse_digits_drops_leading_zeros():
    assert reverse_digits(120) == 21


@pytest.mark.parametrize("n", [0, -5])
def test_reverse_digits_non_positive(n):
    assert reverse_digits(n) == 0


@given(st.integers(1, 10**9).filter(lambda n: n % 10 != 0))
def test_reverse_digits_round_trip(n):
    assert reverse_digits(reverse_digits(n)) == n


@given(st.integers(1, 10**9))
def test_mirror_distance_divisible_by_nine(n):
    assert mirror_distance(n) % 9 == 0


@given(st.integers(1, 10**9).filter(lambda n: n % 10 != 0))
def test_mirror_distance_symmetric(n):
    assert mirror_distance(n) == mirror_distance(reverse_digits(n))


@pytest.mark.parametrize("n", [7, 121, 4444, 12321])
def test_mirror_distance_palindrome(n):
    assert mirror_distance(n) == 0


# min_mirror_pair_distance


@given(st.integers(1, 10**6))
def test_min_mirror_pair_adjacent(x):
    assert min_mirror_pair_distance([x, reverse_digits(x)]) == 1


def test_min_mirror_pair_none():
    assert min_mirror_pair_distance([12, 34, 56]) == -1


@given(st.lists(st.integers(1, 200), max_size=12))
def test_min_mirror_pair_bounds(nums):
    result = min_mirror_pair_distance(nums)
    assert result == -1 or 1 <= result <= len(nums) - 1


# max_distance_on_square


def _corners(side):
    return [[0, 0], [0, side], [side, side], [side, 0]]


@given(st.integers(1, 10**4))
def test_max_distance_on_square_corners(side):
    assert max_distance_on_square(side, _corners(side), 4) == side


@st.composite
def boundary_points(draw):
    side = draw(st.integers(1, 12))
    raw = draw(
        st.lists(
            st.tuples(st.integers(0, 3), st.integers(0, side)),
            min_size=1,
            max_size=6,
        )
    )
    points = set()
    for edge, t in raw:
        points.add(((0, t), (t, side), (side, t), (t, 0))[edge])
    return side, [list(p) for p in points]


@settings(max_examples=60)
@given(boundary_points())
def test_max_distance_on_square_extra_points_with_corners(data):
    side, extra = data
    points = {tuple(p) for p in _corners(side)} | {tuple(p) for p in extra}
    assert max_distance_on_square(side, [list(p) for p in points], 4) == side


@settings(max_examples=60)
@given(boundary_points())
def test_max_distance_on_square_monotone_in_k(data):
    side, extra = data
    points = [list(p) for p in {tuple(p) for p in _corners(side)} | {tuple(p) for p in extra}]
    for k in range(4, len(points)):
        assert max_distance_on_square(side, points, k + 1) <= max_distance_on_square(
            side, points, k
        )
    assert 0 <= max_distance_on_square(side, points, len(points)) <= side