"""Disjoint-set union and grid/graph connectivity problems."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence


class UnionFind:
    """Disjoint sets over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        """Return the representative of x's set."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._rank[x] < self._rank[y]:
            x, y = y, x
        self._parent[y] = x
        if self._rank[x] == self._rank[y]:
            self._rank[x] += 1
        return True


def minimum_hamming_distance(
    source: Sequence[int],
    target: Sequence[int],
    allowed_swaps: Sequence[Sequence[int]],
) -> int:
    """Smallest Hamming distance reachable by swapping along allowed pairs."""
    sets = UnionFind(len(source))
    for a, b in allowed_swaps:
        sets.union(a, b)

    pools: dict[int, Counter[int]] = defaultdict(Counter)
    for i, value in enumerate(source):
        pools[sets.find(i)][value] += 1

    mismatches = 0
    for i, value in enumerate(target):
        pool = pools[sets.find(i)]
        if pool[value] > 0:
            pool[value] -= 1
        else:
            mismatches += 1
    return mismatches


def contains_cycle(grid: Sequence[Sequence[str]]) -> bool:
    """True if some same-valued cells form a cycle of orthogonal moves."""
    rows = len(grid)
    cols = len(grid[0])
    sets = UnionFind(rows * cols)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            here = i * cols + j
            if i > 0 and cell == grid[i - 1][j]:
                if not sets.union(here, here - cols):
                    return True
            if j > 0 and cell == row[j - 1]:
                if not sets.union(here, here - 1):
                    return True
    return False


# Directions as (row delta, column delta).
_LEFT, _RIGHT, _UP, _DOWN = (0, -1), (0, 1), (-1, 0), (1, 0)
_OPPOSITE = {_LEFT: _RIGHT, _RIGHT: _LEFT, _UP: _DOWN, _DOWN: _UP}
_STREETS = {
    1: (_LEFT, _RIGHT),
    2: (_UP, _DOWN),
    3: (_LEFT, _DOWN),
    4: (_RIGHT, _DOWN),
    5: (_LEFT, _UP),
    6: (_RIGHT, _UP),
}


def has_valid_path(grid: Sequence[Sequence[int]]) -> bool:
    """True if streets connect the top-left cell to the bottom-right cell."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    sets = UnionFind(rows * cols)
    for x, row in enumerate(grid):
        for y, street in enumerate(row):
            for dx, dy in _STREETS.get(street, ()):
                nx, ny = x + dx, y + dy
                if not (0 <= nx < rows and 0 <= ny < cols):
                    continue
                if _OPPOSITE[(dx, dy)] in _STREETS.get(grid[nx][ny], ()):
                    sets.union(x * cols + y, nx * cols + ny)
    return sets.find(0) == sets.find(rows * cols - 1)