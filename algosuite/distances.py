"""Digit tricks and shortest/longest distance problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import defaultdict
from collections.abc import Sequence

_SAME_DIGITS = frozenset("018")
_CHANGED_DIGITS = frozenset("2569")


def rotated_digits(n: int) -> int:
    """Count integers in [1, n] that become a different valid number rotated."""
    count = 0
    for value in range(1, n + 1):
        digits = set(str(value))
        if digits <= _SAME_DIGITS | _CHANGED_DIGITS and digits & _CHANGED_DIGITS:
            count += 1
    return count


def earliest_finish_time(
    land_start: Sequence[int],
    land_duration: Sequence[int],
    water_start: Sequence[int],
    water_duration: Sequence[int],
) -> int:
    """Earliest time to finish one land ride and one water ride, in either order."""
    lands = list(zip(land_start, land_duration))
    waters = list(zip(water_start, water_duration))
    if not lands or not waters:
        raise ValueError("there must be at least one ride of each kind")
    land_end = min(s + d for s, d in lands)
    water_end = min(s + d for s, d in waters)
    land_first = min(max(land_end, s) + d for s, d in waters)
    water_first = min(max(water_end, s) + d for s, d in lands)
    return min(land_first, water_first)


def minimum_distance_three_equal(nums: Sequence[int]) -> int:
    """Smallest tour length over three equal elements, or -1 if none exist."""
    positions: dict[int, list[int]] = defaultdict(list)
    for i, value in enumerate(nums):
        positions[value].append(i)
    best = min(
        (third - first for p in positions.values() for first, third in zip(p, p[2:])),
        default=None,
    )
    return -1 if best is None else 2 * best


def reverse_digits(n: int) -> int:
    """Digits of n in reverse order; 0 for non-positive n."""
    return int(str(n)[::-1]) if n > 0 else 0


def min_mirror_pair_distance(nums: Sequence[int]) -> int:
    """Smallest j - i with reverse(nums[i]) == nums[j], or -1."""
    last_seen: dict[int, int] = {}
    best: int | None = None
    for i, value in enumerate(nums):
        if value in last_seen:
            gap = i - last_seen[value]
            best = gap if best is None else min(best, gap)
        last_seen[reverse_digits(value)] = i
    return -1 if best is None else best


def mirror_distance(n: int) -> int:
    """Absolute difference between n and its digit reversal."""
    return abs(n - reverse_digits(n))


def max_distance_on_square(side: int, points: Sequence[Sequence[int]], k: int) -> int:
    """Largest minimum Manhattan distance when choosing k boundary points."""
    perimeter = 4 * side
    positions = []
    for x, y in points:
        if x == 0:
            positions.append(y)
        elif y == side:
            positions.append(side + x)
        elif x == side:
            positions.append(3 * side - y)
        else:
            positions.append(perimeter - x)
    positions.sort()

    def feasible(limit: int) -> bool:
        for start in positions:
            end = start + perimeter - limit
            current = start
            for _ in range(k - 1):
                idx = bisect_left(positions, current + limit)
                if idx == len(positions) or positions[idx] > end:
                    break
                current = positions[idx]
            else:
                return True
        return False

    lo, hi, best = 1, side, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if feasible(mid):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best