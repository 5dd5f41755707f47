"""Wall map of a 16 by 16 maze, kept in step with the simulator display."""

from __future__ import annotations

from typing import Iterable

from .node import Direction
from .simulator import Simulator

SIZE = 16


def _as_direction(side: Direction | int | str) -> Direction:
    if isinstance(side, str):
        return Direction.from_letter(side)
    return Direction(side)


class Maze:
    """Known walls of every cell, seeded with the outer border."""

    def __init__(self, simulator: Simulator) -> None:
        self.simulator = simulator
        self.heading: Direction | None = None
        self._walls = {d: [[False] * SIZE for _ in range(SIZE)] for d in Direction}
        last = SIZE - 1
        for x in range(SIZE):
            for y in range(SIZE):
                if x == 0:
                    self._mark(x, y, Direction.WEST)
                if x == last:
                    self._mark(x, y, Direction.EAST)
                if y == 0:
                    self._mark(x, y, Direction.SOUTH)
                if y == last:
                    self._mark(x, y, Direction.NORTH)

    def _mark(self, x: int, y: int, side: Direction) -> None:
        self.simulator.set_wall(x, y, side.letter)
        self._walls[side][x][y] = True

    def has_wall(self, x: int, y: int, side: Direction | int | str) -> bool:
        """Whether cell (x, y) is known to have a wall on the given side."""
        return self._walls[_as_direction(side)][x][y]

    def read_walls(self, x: int, y: int, heading: Direction | int | str) -> None:
        """Record the walls the mouse senses at (x, y) while facing ``heading``."""
        facing = _as_direction(heading)
        self.heading = facing
        sensors = (
            (self.simulator.wall_front, facing),
            (self.simulator.wall_right, facing.turned_right()),
            (self.simulator.wall_left, facing.turned_left()),
        )
        for sense, side in sensors:
            if sense():
                self._mark(x, y, side)

    def color_path(self, path: Iterable[tuple[int, int]]) -> None:
        """Colour each (x, y) cell of a path green."""
        for x, y in path:
            self.simulator.set_color(x, y, "g")