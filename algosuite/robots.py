"""Robot movement, collision and assignment problems."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence

# North, East, South, West as (dx, dy).
_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def judge_circle(moves: str) -> bool:
    """True if the moves bring the robot back to the origin."""
    ups, downs, rights = moves.count("U"), moves.count("D"), moves.count("R")
    lefts = len(moves) - ups - downs - rights
    return ups == downs and rights == lefts


def robot_sim(commands: Sequence[int], obstacles: Sequence[Sequence[int]]) -> int:
    """Largest squared distance from the origin reached while walking."""
    blocked = {(x, y) for x, y in obstacles}
    heading = 0
    x = y = 0
    best = 0
    for command in commands:
        if command == -1:
            heading = (heading + 1) % 4
        elif command == -2:
            heading = (heading + 3) % 4
        else:
            dx, dy = _HEADINGS[heading]
            for _ in range(command):
                if (x + dx, y + dy) in blocked:
                    break
                x += dx
                y += dy
                best = max(best, x * x + y * y)
    return best


class Robot:
    """A robot walking counter-clockwise around the border of a grid."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("width and height must be positive")
        track = [(i, 0, "East") for i in range(width)]
        track += [(width - 1, i, "North") for i in range(1, height)]
        track += [(i, height - 1, "West") for i in range(width - 2, -1, -1)]
        track += [(0, i, "South") for i in range(height - 2, 0, -1)]
        track[0] = (0, 0, "South")
        self._track = track
        self._index = 0
        self._moved = False

    def step(self, num: int) -> None:
        """Advance num cells along the border."""
        self._moved = True
        self._index = (self._index + num) % len(self._track)

    def position(self) -> tuple[int, int]:
        """Current (x, y) cell."""
        x, y, _ = self._track[self._index]
        return x, y

    def direction(self) -> str:
        """Current facing: East, North, West or South."""
        if not self._moved:
            return "East"
        return self._track[self._index][2]


def survived_robots_healths(
    positions: Sequence[int], healths: Sequence[int], directions: str
) -> list[int]:
    """Healths of the robots left after all collisions, in input order."""
    health = list(healths)
    moving_right: list[int] = []
    for i in sorted(range(len(positions)), key=lambda idx: positions[idx]):
        if directions[i] == "R":
            moving_right.append(i)
            continue
        while moving_right and health[i] > 0:
            j = moving_right.pop()
            if health[j] > health[i]:
                health[j] -= 1
                health[i] = 0
                moving_right.append(j)
            elif health[j] < health[i]:
                health[i] -= 1
                health[j] = 0
            else:
                health[i] = health[j] = 0
    return [h for h in health if h > 0]


def minimum_total_distance(
    robots: Sequence[int], factories: Sequence[Sequence[int]]
) -> int:
    """Least total travel to repair every robot at [position, limit] factories."""
    ordered = sorted(robots)
    n = len(ordered)
    # following[r]: cost of robots r.. using only the factories considered so far.
    following: list[float] = [math.inf] * n + [0]
    for position, limit in sorted((p, lim) for p, lim in factories)[::-1]:
        row = list(following)
        for r in range(n):
            travel = 0
            for k in range(min(limit, n - r)):
                travel += abs(ordered[r + k] - position)
                row[r] = min(row[r], travel + following[r + k + 1])
        following = row
    result = following[0]
    if math.isinf(result):
        raise ValueError("factories cannot repair every robot")
    return int(result)


def max_walls(
    robots: Sequence[int], distance: Sequence[int], walls: Sequence[int]
) -> int:
    """Most walls destroyed when each robot fires once, left or right."""
    if not robots:
        raise ValueError("there must be at least one robot")
    if len(robots) != len(distance):
        raise ValueError("robots and distance must have the same length")
    reach = dict(zip(robots, distance))
    spots = sorted(robots)
    ordered_walls = sorted(walls)
    n = len(spots)
    left = [0] * n
    right = [0] * n
    between = [0] * n
    for i, spot in enumerate(spots):
        through_spot = bisect_right(ordered_walls, spot)
        low = spot - reach[spot]
        if i > 0:
            low = max(low, spots[i - 1] + 1)
        left[i] = through_spot - bisect_left(ordered_walls, low)

        high = spot + reach[spot]
        if i < n - 1:
            high = min(high, spots[i + 1] - 1)
        right[i] = bisect_right(ordered_walls, high) - bisect_left(ordered_walls, spot)

        if i > 0:
            between[i] = through_spot - bisect_left(ordered_walls, spots[i - 1])

    fire_left, fire_right = left[0], right[0]
    for i in range(1, n):
        fire_left, fire_right = (
            max(
                fire_left + left[i],
                fire_right - right[i - 1] + min(left[i] + right[i - 1], between[i]),
            ),
            max(fire_left + right[i], fire_right + right[i]),
        )
    return max(fire_left, fire_right)