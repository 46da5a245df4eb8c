"""Rotations, gravity, and path-scoring dynamic programs on 2-D grids."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    k = n - 1
    for i in range(n // 2):
        for j in range(i, k - i):
            (
                matrix[i][j],
                matrix[k - j][i],
                matrix[k - i][k - j],
                matrix[j][k - i],
            ) = (
                matrix[k - j][i],
                matrix[k - i][k - j],
                matrix[j][k - i],
                matrix[i][j],
            )


def _settle(row: Sequence[str]) -> list[str]:
    """Slide every stone in a row as far right as obstacles allow."""
    settled: list[str] = []
    stones = empties = 0
    for cell in row:
        if cell == "*":
            settled.extend(["."] * empties + ["#"] * stones + ["*"])
            stones = empties = 0
        elif cell == "#":
            stones += 1
        else:
            empties += 1
    settled.extend(["."] * empties + ["#"] * stones)
    return settled


def rotate_the_box(box: Sequence[Sequence[str]]) -> list[list[str]]:
    """Rotate the box clockwise and let stones ('#') fall onto obstacles ('*')."""
    settled = [_settle(row) for row in box]
    return [list(column) for column in zip(*reversed(settled))]


def _ring(top: int, left: int, bottom: int, right: int) -> Iterator[tuple[int, int]]:
    """Cells of one layer, counter-clockwise from the top-left corner."""
    for col in range(left, right + 1):
        yield top, col
    for row in range(top + 1, bottom):
        yield row, right
    for col in range(right, left - 1, -1):
        yield bottom, col
    for row in range(bottom - 1, top, -1):
        yield row, left


def rotate_grid(grid: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Rotate every layer of the grid counter-clockwise by k places."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    result = [list(row) for row in grid]
    for layer in range(min(rows, cols) // 2):
        positions = list(_ring(layer, layer, rows - layer - 1, cols - layer - 1))
        values = [grid[r][c] for r, c in positions]
        shift = k % len(values)
        rotated = values[shift:] + values[:shift]
        for (r, c), value in zip(positions, rotated):
            result[r][c] = value
    return result


def min_operations_uni_value(grid: Sequence[Sequence[int]], x: int) -> int:
    """Fewest +/- x steps to make every cell equal, or -1 if impossible."""
    values = sorted(value for row in grid for value in row)
    if not values:
        raise ValueError("grid must not be empty")
    median = values[len(values) // 2]
    if any(value % x != median % x for value in values):
        return -1
    return sum(abs(median - value) // x for value in values)


def maximum_amount(coins: Sequence[Sequence[int]]) -> int:
    """Most coins collected moving right/down, neutralising up to two robbers."""
    rows, cols = len(coins), len(coins[0])
    below: list[list[float]] | None = None
    for i in reversed(range(rows)):
        current: list[list[float]] = [[] for _ in range(cols)]
        for j in reversed(range(cols)):
            x = coins[i][j]
            neighbours = []
            if below is not None:
                neighbours.append(below[j])
            if j + 1 < cols:
                neighbours.append(current[j + 1])
            if not neighbours:
                current[j] = [x, max(0, x), max(0, x)]
                continue
            cell: list[float] = []
            for k in range(3):
                best = max(nb[k] for nb in neighbours) + x
                if k > 0 and x < 0:
                    best = max(best, max(nb[k - 1] for nb in neighbours))
                cell.append(best)
            current[j] = cell
        below = current
    assert below is not None
    return int(below[0][2])


def max_path_score(grid: Sequence[Sequence[int]], k: int) -> int:
    """Best right/down path score using at most k non-zero cells, or -1."""
    rows, cols = len(grid), len(grid[0])
    dp: list[list[list[int | None]]] = [
        [[None] * (k + 1) for _ in range(cols)] for _ in range(rows)
    ]
    dp[0][0][0] = 0
    for i in range(rows):
        for j in range(cols):
            for spent, score in enumerate(dp[i][j]):
                if score is None:
                    continue
                for ni, nj in ((i + 1, j), (i, j + 1)):
                    if ni >= rows or nj >= cols:
                        continue
                    value = grid[ni][nj]
                    cost = spent + (value != 0)
                    if cost > k:
                        continue
                    known = dp[ni][nj][cost]
                    if known is None or score + value > known:
                        dp[ni][nj][cost] = score + value
    best = max((s for s in dp[-1][-1] if s is not None), default=-1)
    return best if best >= 0 else -1


def maximum_grid_score(grid: Sequence[Sequence[int]]) -> int:
    """Maximum score from blackening column prefixes of a square grid."""
    n = len(grid)
    col_sum = [[0] * (n + 1) for _ in range(n)]
    for c in range(n):
        running = 0
        for r, row in enumerate(grid, start=1):
            running += row[c]
            col_sum[c][r] = running

    size = n + 1
    prev_dp = [[0] * size for _ in range(size)]
    prev_max = [[0] * size for _ in range(size)]
    prev_suffix = [[0] * size for _ in range(size)]

    for col in range(1, n):
        here, left = col_sum[col], col_sum[col - 1]
        curr = [[0] * size for _ in range(size)]
        for curr_h in range(size):
            row = curr[curr_h]
            for prev_h in range(size):
                if curr_h <= prev_h:
                    row[prev_h] = prev_suffix[prev_h][0] + here[prev_h] - here[curr_h]
                else:
                    row[prev_h] = max(
                        prev_suffix[prev_h][curr_h],
                        prev_max[prev_h][curr_h] + left[curr_h] - left[prev_h],
                    )

        for curr_h in range(size):
            row = curr[curr_h]
            running_max = prev_max[curr_h]
            running_max[0] = row[0]
            for prev_h in range(1, size):
                penalty = here[prev_h] - here[curr_h] if prev_h > curr_h else 0
                running_max[prev_h] = max(running_max[prev_h - 1], row[prev_h] - penalty)
            suffix = prev_suffix[curr_h]
            suffix[n] = row[n]
            for prev_h in range(n - 1, -1, -1):
                suffix[prev_h] = max(suffix[prev_h + 1], row[prev_h])

        prev_dp = curr

    return max(0, *prev_dp[n], *prev_dp[0]) if n else 0