"""Batched query problems: range maxima, range products, suffixes, prefixes."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right, insort
from collections import Counter, defaultdict
from collections.abc import Sequence
from functools import reduce
from operator import xor

_MODULUS = 10**9 + 7
_MAX_POSITION = 50000


class MaxSegmentTree:
    """Point-assign, range-maximum tree over indices 0..size; cells start at 0."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._leaves = size + 1
        self._tree = [0] * (2 * self._leaves)

    def _check(self, index: int) -> None:
        if not 0 <= index < self._leaves:
            raise IndexError(f"index {index} out of range")

    def update(self, index: int, value: int) -> None:
        """Set the cell at index to value."""
        self._check(index)
        node = index + self._leaves
        self._tree[node] = value
        node //= 2
        while node:
            self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2

    def query(self, left: int, right: int) -> int:
        """Maximum over cells left..right inclusive, never below 0."""
        self._check(left)
        self._check(right)
        if left > right:
            raise ValueError("left must not exceed right")
        result = 0
        lo, hi = left + self._leaves, right + self._leaves + 1
        while lo < hi:
            if lo & 1:
                result = max(result, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result = max(result, self._tree[hi])
            lo //= 2
            hi //= 2
        return result


def block_placement_results(queries: Sequence[Sequence[int]]) -> list[bool]:
    """Answer obstacle and block-fit queries on the line [0, 50000].

    [1, x] places an obstacle at x; [2, x, size] asks whether a block of
    that size fits between obstacles somewhere in [0, x].
    """
    gaps = MaxSegmentTree(_MAX_POSITION)
    barriers = [0, _MAX_POSITION]
    gaps.update(_MAX_POSITION, _MAX_POSITION)
    answers: list[bool] = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            pos = query[1]
            if not 0 < pos < _MAX_POSITION:
                raise ValueError(f"obstacle position {pos} out of range")
            idx = bisect_right(barriers, pos)
            right, left = barriers[idx], barriers[idx - 1]
            gaps.update(pos, pos - left)
            gaps.update(right, right - pos)
            insort(barriers, pos)
        elif kind == 2:
            x, size = query[1], query[2]
            if not 0 <= x <= _MAX_POSITION:
                raise ValueError(f"position {x} out of range")
            last = barriers[bisect_right(barriers, x) - 1]
            largest = max(gaps.query(0, last), x - last)
            answers.append(largest >= size)
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def _check_step(step: int) -> None:
    if step < 1:
        raise ValueError("step must be positive")


def xor_after_queries(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """XOR of nums after each [l, r, k, v] multiplies nums[l::k] up to r by v."""
    values = list(nums)
    for left, right, step, factor in queries:
        _check_step(step)
        for i in range(left, right + 1, step):
            values[i] = values[i] * factor % _MODULUS
    return reduce(xor, values, 0)


def xor_after_queries_batched(
    nums: Sequence[int], queries: Sequence[Sequence[int]]
) -> int:
    """Same result as xor_after_queries, grouping small steps for speed."""
    values = list(nums)
    n = len(values)
    threshold = math.isqrt(n)
    small_steps: dict[int, list[tuple[int, int, int]]] = defaultdict(list)
    for left, right, step, factor in queries:
        _check_step(step)
        if step >= threshold:
            for i in range(left, right + 1, step):
                values[i] = values[i] * factor % _MODULUS
        else:
            small_steps[step].append((left, right, factor))

    for step, group in small_steps.items():
        multipliers = [1] * (n + step + 1)
        for left, right, factor in group:
            multipliers[left] = multipliers[left] * factor % _MODULUS
            stop = ((right - left) // step + 1) * step + left
            inverse = pow(factor, _MODULUS - 2, _MODULUS)
            multipliers[stop] = multipliers[stop] * inverse % _MODULUS
        for i in range(step, n):
            multipliers[i] = multipliers[i] * multipliers[i - step] % _MODULUS
        values = [value * m % _MODULUS for value, m in zip(values, multipliers)]
    return reduce(xor, values, 0)


def closest_equal_queries(nums: Sequence[int], queries: Sequence[int]) -> list[int]:
    """Circular distance from each queried index to the nearest equal value, or -1."""
    n = len(nums)
    positions: dict[int, list[int]] = defaultdict(list)
    for i, value in enumerate(nums):
        positions[value].append(i)
    padded = {
        value: [found[-1] - n, *found, found[0] + n]
        for value, found in positions.items()
    }
    answers = []
    for index in queries:
        found = padded[nums[index]]
        if len(found) == 3:
            answers.append(-1)
            continue
        k = bisect_left(found, index)
        answers.append(min(found[k + 1] - found[k], found[k] - found[k - 1]))
    return answers


class _SuffixNode:
    __slots__ = ("children", "best_length", "best_index")

    def __init__(self) -> None:
        self.children: dict[str, _SuffixNode] = {}
        self.best_length = math.inf
        self.best_index = -1

    def offer(self, length: int, index: int) -> None:
        # Words arrive in index order, so only a strictly shorter one wins.
        if length < self.best_length:
            self.best_length = length
            self.best_index = index


def string_indices(
    words_container: Sequence[str], words_query: Sequence[str]
) -> list[int]:
    """For each query, the index of the container word sharing its longest suffix.

    Ties go to the shortest word, then to the earliest one.
    """
    if not words_container:
        raise ValueError("words_container must not be empty")
    root = _SuffixNode()
    for index, word in enumerate(words_container):
        length = len(word)
        node = root
        node.offer(length, index)
        for ch in reversed(word):
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = _SuffixNode()
            node = child
            node.offer(length, index)

    answers = []
    for query in words_query:
        node = root
        for ch in reversed(query):
            child = node.children.get(ch)
            if child is None:
                break
            node = child
        answers.append(node.best_index)
    return answers


def longest_common_prefix(arr1: Sequence[int], arr2: Sequence[int]) -> int:
    """Length of the longest decimal prefix shared by numbers from both arrays."""
    prefixes: set[int] = set()
    for value in arr1:
        while value > 0 and value not in prefixes:
            prefixes.add(value)
            value //= 10
    best = 0
    for value in arr2:
        while value > 0 and value not in prefixes:
            value //= 10
        if value > 0:
            best = max(best, len(str(value)))
    return best


def sum_of_distances(nums: Sequence[int]) -> list[int]:
    """For each index, the sum of |i - j| over other indices j with equal value."""
    groups: dict[int, list[int]] = defaultdict(list)
    for i, value in enumerate(nums):
        groups[value].append(i)
    result = [0] * len(nums)
    for indices in groups.values():
        total = sum(indices)
        count = len(indices)
        before = 0
        for k, i in enumerate(indices):
            result[i] = total - 2 * before + i * (2 * k - count)
            before += i
    return result


def prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, how many entries of a's prefix occur in b's prefix."""
    seen_in_a: Counter[int] = Counter()
    seen_in_b: set[int] = set()
    common = 0
    result = []
    for x, y in zip(a, b):
        seen_in_a[x] += 1
        if x in seen_in_b:
            common += 1
        if y not in seen_in_b:
            seen_in_b.add(y)
            common += seen_in_a[y]
        result.append(common)
    return result