"""Jump-game reachability and longest/shortest jump sequences."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from collections.abc import Sequence
from functools import lru_cache


def can_reach_zero(arr: Sequence[int], start: int) -> bool:
    """True if jumping +/- arr[i] from start can land on a cell holding 0."""
    n = len(arr)
    visited = [False] * n
    queue = deque([start])
    while queue:
        i = queue.popleft()
        if not 0 <= i < n or visited[i]:
            continue
        if arr[i] == 0:
            return True
        visited[i] = True
        queue.append(i + arr[i])
        queue.append(i - arr[i])
    return False


def can_reach_end(s: str, min_jump: int, max_jump: int) -> bool:
    """True if the last index is reachable, landing only on '0' cells."""
    n = len(s)
    if n == 0:
        raise ValueError("s must not be empty")
    reachable = [False] * n
    reachable[0] = True
    # prefix[i]: number of reachable cells among indices [0, i).
    prefix = [0] * (n + 1)
    prefix[1] = 1
    for i in range(1, n):
        if s[i] == "0":
            low = max(0, i - max_jump)
            high = i - min_jump
            if high >= 0 and prefix[high + 1] - prefix[low] > 0:
                reachable[i] = True
        prefix[i + 1] = prefix[i] + reachable[i]
    return reachable[n - 1]


def max_jumps(heights: Sequence[int], d: int) -> int:
    """Most cells visited jumping at most d to strictly lower, unblocked cells."""
    n = len(heights)
    if n == 0:
        raise ValueError("heights must not be empty")
    successors: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n

    def link(lower: int, higher: int) -> None:
        successors[lower].append(higher)
        indegree[higher] += 1

    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] < height:
            j = stack.pop()
            if i - j <= d:
                link(j, i)
        stack.append(i)

    stack = []
    for i in reversed(range(n)):
        while stack and heights[stack[-1]] < heights[i]:
            j = stack.pop()
            if j - i <= d:
                link(j, i)
        stack.append(i)

    best = [1] * n
    queue = deque(i for i in range(n) if indegree[i] == 0)
    while queue:
        u = queue.popleft()
        for v in successors[u]:
            best[v] = max(best[v], best[u] + 1)
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return max(best)


def maximum_jumps(nums: Sequence[int], target: int) -> int:
    """Most forward jumps from the first to the last index, or -1.

    A jump from i to j > i is allowed when |nums[i] - nums[j]| <= target.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("nums must not be empty")
    best: list[int | None] = [None] * n
    best[n - 1] = 0
    for i in range(n - 2, -1, -1):
        options = [
            jumps + 1
            for j, jumps in enumerate(best[i + 1 :], start=i + 1)
            if jumps is not None and abs(nums[i] - nums[j]) <= target
        ]
        best[i] = max(options, default=None)
    return -1 if best[0] is None else best[0]


@lru_cache(maxsize=None)
def _prime_factors(value: int) -> tuple[int, ...]:
    """Distinct prime factors of value in ascending order."""
    factors = []
    remaining = value
    candidate = 2
    while candidate * candidate <= remaining:
        if remaining % candidate == 0:
            factors.append(candidate)
            while remaining % candidate == 0:
                remaining //= candidate
        candidate += 1
    if remaining > 1:
        factors.append(remaining)
    return tuple(factors)


def min_prime_jumps(nums: Sequence[int]) -> int:
    """Fewest moves from index 0 to the last index.

    A move steps to an adjacent index, or teleports from a cell holding a
    prime p to any cell whose value is divisible by p.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("nums must not be empty")
    portals: dict[int, list[int]] = defaultdict(list)
    for i, value in enumerate(nums):
        if _prime_factors(value) == (value,):
            portals[value].append(i)

    # Search backwards from the last index; teleports are followed in reverse.
    seen = [False] * n
    seen[n - 1] = True
    frontier = [n - 1]
    jumps = 0
    while True:
        following: list[int] = []

        def visit(j: int) -> None:
            if not seen[j]:
                seen[j] = True
                following.append(j)

        for i in frontier:
            if i == 0:
                return jumps
            if i > 0:
                visit(i - 1)
            if i < n - 1:
                visit(i + 1)
            for prime in _prime_factors(nums[i]):
                for j in portals.pop(prime, ()):
                    visit(j)
        frontier = following
        jumps += 1


def max_reachable_values(nums: Sequence[int]) -> list[int]:
    """For each index, the largest value reachable by allowed jumps.

    From i one may jump left to a larger value or right to a smaller one.
    """
    n = len(nums)
    result = [0] * n
    if n == 0:
        return result

    leaders: list[int] = []
    lead: int | None = None
    for i, value in enumerate(nums):
        if lead is None or value > nums[lead]:
            lead = i
        leaders.append(lead)

    right = n - 1
    right_min: float = math.inf
    right_max = 0
    while True:
        pivot = leaders[right]
        peak = nums[pivot]
        current = peak if peak <= right_min else right_max
        next_min = min(peak, right_min)
        for i in range(pivot, right + 1):
            result[i] = current
            next_min = min(next_min, nums[i])
        if pivot == 0:
            return result
        right, right_min, right_max = pivot - 1, next_min, current