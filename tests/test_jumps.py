import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algosuite.jumps import (
    can_reach_end,
    can_reach_zero,
    max_jumps,
    max_reachable_values,
    maximum_jumps,
    min_prime_jumps,
)


def test_can_reach_zero_reachable():
    assert can_reach_zero([4, 2, 3, 0, 3, 1, 2], 5) is True
    assert can_reach_zero([4, 2, 3, 0, 3, 1, 2], 0) is True


def test_can_reach_zero_unreachable():
    assert can_reach_zero([3, 0, 2, 1, 2], 2) is False


def test_can_reach_zero_start_on_zero():
    assert can_reach_zero([0, 5, 5], 0) is True


@given(st.lists(st.integers(min_value=1, max_value=10), min_size=1, max_size=20), st.data())
def test_can_reach_zero_without_zero_is_false(arr, data):
    start = data.draw(st.integers(min_value=0, max_value=len(arr) - 1))
    assert can_reach_zero(arr, start) is False


def test_can_reach_end_examples():
    assert can_reach_end("011010", 2, 3) is True
    assert can_reach_end("01101110", 2, 3) is False


def test_can_reach_end_empty_raises():
    with pytest.raises(ValueError):
        can_reach_end("", 1, 1)


@given(st.text(alphabet="01", max_size=15))
def test_can_reach_end_blocked_last_cell(prefix):
    s = "0" + prefix + "1"
    assert can_reach_end(s, 1, len(s)) is False


@given(st.integers(min_value=1, max_value=30))
def test_can_reach_end_all_zeros(length):
    assert can_reach_end("0" * length, 1, 1) is True


def test_max_jumps_constant_heights():
    assert max_jumps([3, 3, 3, 3, 3], 3) == 1


@given(st.integers(min_value=1, max_value=30))
def test_max_jumps_strictly_decreasing_visits_all(n):
    heights = list(range(n, 0, -1))
    assert max_jumps(heights, 1) == n


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=1, max_size=25),
       st.integers(min_value=1, max_value=25))
def test_max_jumps_bounds(heights, d):
    result = max_jumps(heights, d)
    assert 1 <= result <= len(set(heights))


def test_max_jumps_empty_raises():
    with pytest.raises(ValueError):
        max_jumps([], 1)


def test_maximum_jumps_example():
    assert maximum_jumps([1, 3, 6, 4, 1, 2], 2) == 3


def test_maximum_jumps_single_element():
    assert maximum_jumps([7], 0) == 0


@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=2, max_size=20))
def test_maximum_jumps_unbounded_target_uses_every_index(nums):
    assert maximum_jumps(nums, 100) == len(nums) - 1


@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=2, max_size=20))
def test_maximum_jumps_negative_target_impossible(nums):
    assert maximum_jumps(nums, -1) == -1


def test_maximum_jumps_empty_raises():
    with pytest.raises(ValueError):
        maximum_jumps([], 1)


def test_min_prime_jumps_teleport():
    assert min_prime_jumps([2, 1, 1, 1, 6]) == 1


@given(st.integers(min_value=1, max_value=40))
def test_min_prime_jumps_without_primes_walks(n):
    assert min_prime_jumps([1] * n) == n - 1


@settings(max_examples=50)
@given(st.lists(st.integers(min_value=1, max_value=100), min_size=1, max_size=30))
def test_min_prime_jumps_bounds(nums):
    assert 0 <= min_prime_jumps(nums) <= len(nums) - 1


def test_min_prime_jumps_empty_raises():
    with pytest.raises(ValueError):
        min_prime_jumps([])


def test_max_reachable_values_empty():
    assert max_reachable_values([]) == []


@given(st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=20, unique=True))
def test_max_reachable_values_increasing_is_identity(values):
    nums = sorted(values)
    assert max_reachable_values(nums) == nums


@given(st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=20, unique=True))
def test_max_reachable_values_decreasing_reaches_max(values):
    nums = sorted(values, reverse=True)
    assert max_reachable_values(nums) == [nums[0]] * len(nums)


@given(st.lists(st.integers(min_value=1, max_value=50), min_size=1, max_size=25))
def test_max_reachable_values_bounds(nums):
    result = max_reachable_values(nums)
    assert len(result) == len(nums)
    assert all(value <= best <= max(nums) for value, best in zip(nums, result))