"""Searching, sorting and counting problems over integer arrays."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return two indices whose values add to target, or [] if none do."""
    ordered = sorted((value, index) for index, value in enumerate(nums))
    left, right = 0, len(ordered) - 1
    while left < right:
        total = ordered[left][0] + ordered[right][0]
        if total == target:
            return [ordered[left][1], ordered[right][1]]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of target in a rotated sorted array of distinct values, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[left]:
            if nums[left] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] <= target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def find_min_rotated(nums: Sequence[int]) -> int:
    """Minimum of a rotated sorted array of distinct values."""
    if not nums:
        raise ValueError("nums must not be empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return nums[lo]


def find_min_rotated_with_duplicates(nums: Sequence[int]) -> int:
    """Minimum of a rotated sorted array that may hold duplicates."""
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums) - 1
    last = nums[n]
    left, right = 0, n
    while left < n and nums[left] == last:
        left += 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > last:
            left = mid + 1
        else:
            right = mid
    return nums[left]


def max_rotate_function(nums: Sequence[int]) -> int:
    """Maximum over rotations of sum(i * value)."""
    n = len(nums)
    total = sum(nums)
    f = sum(i * value for i, value in enumerate(nums))
    best = f
    for value in reversed(nums[1:]):
        f += total - n * value
        best = max(best, f)
    return best


def sort_array(nums: Sequence[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(nums)


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """True if nums is a non-decreasing array rotated by some amount."""
    descents = sum(a > b for a, b in zip(nums, [*nums[1:], *nums[:1]]))
    return descents <= 1


def min_distance_to_target(nums: Sequence[int], target: int, start: int) -> int:
    """Smallest |i - start| with nums[i] == target; len(nums) if absent."""
    return min(
        (abs(i - start) for i, value in enumerate(nums) if value == target),
        default=len(nums),
    )


def max_distance_non_increasing(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest j - i with i <= j and a[i] <= b[j], both arrays non-increasing."""
    i, j = 0, 1
    while i < len(a) and j < len(b):
        if a[i] > b[j]:
            i += 1
        j += 1
    return j - i - 1


def max_distance_different_colors(colors: Sequence[int]) -> int:
    """Largest index distance between two houses of different colours."""
    if not colors:
        return 0
    first, last = colors[0], colors[-1]
    n = len(colors)
    from_first = max((j for j, c in enumerate(colors) if c != first), default=0)
    to_last = max((n - 1 - i for i, c in enumerate(colors) if c != last), default=0)
    return max(from_first, to_last)


def minimum_candy_cost(cost: Sequence[int]) -> int:
    """Total paid when every third candy, cheapest of each trio, is free."""
    ordered = sorted(cost, reverse=True)
    return sum(price for i, price in enumerate(ordered) if i % 3 != 2)


def is_good_array(nums: Sequence[int]) -> bool:
    """True if nums is a permutation of [1, 2, ..., n-1, n-1]."""
    if not nums:
        return False
    ordered = sorted(nums)
    n = len(ordered) - 1
    return ordered[:n] == list(range(1, n + 1)) and ordered[n] == n


def separate_digits(nums: Sequence[int]) -> list[int]:
    """Digits of each positive number, in order."""
    return [int(digit) for value in nums if value > 0 for digit in str(value)]


def min_digit_sum_element(nums: Sequence[int]) -> int:
    """Smallest digit sum among the numbers (37 for an empty sequence)."""
    return min((sum(int(d) for d in str(value)) for value in nums), default=37)


def min_moves_complementary(nums: Sequence[int], limit: int) -> int:
    """Fewest changes so that nums[i] + nums[n-1-i] is the same for all i."""
    n = len(nums)
    diff = [0] * (2 * limit + 2)
    for i in range(n // 2):
        a, b = sorted((nums[i], nums[n - 1 - i]))
        diff[2] += 2
        diff[a + 1] -= 1
        diff[a + b] -= 1
        diff[a + b + 1] += 1
        diff[b + limit + 1] += 1

    best = n
    current = 0
    for c in range(2, 2 * limit + 1):
        current += diff[c]
        best = min(best, current)
    return best


def minimum_initial_energy(tasks: Sequence[Sequence[int]]) -> int:
    """Least starting energy to finish all [actual, minimum] tasks."""
    energy = 0
    for actual, minimum in sorted(tasks, key=lambda t: t[1] - t[0]):
        energy = max(energy + actual, minimum)
    return energy


def asteroids_destroyed(mass: int, asteroids: Sequence[int]) -> bool:
    """True if a planet of this mass can absorb every asteroid."""
    for asteroid in sorted(asteroids):
        if mass < asteroid:
            return False
        mass += asteroid
    return True


def closest_target(words: Sequence[str], target: str, start_index: int) -> int:
    """Shortest circular distance from start_index to target, or -1."""
    n = len(words)
    best = n
    for i, word in enumerate(words):
        if word == target:
            dist = abs(i - start_index)
            best = min(best, dist, n - dist)
    return best if best < n else -1