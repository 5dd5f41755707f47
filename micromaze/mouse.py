"""Depth-first maze search and path following for a micromouse."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .maze import SIZE
from .node import Direction, Node
from .simulator import Simulator

Cell = tuple[int, int]

GOAL: Cell = (8, 8)

_OFFSETS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


class Mouse:
    """Plans a path to the goal cell by depth-first search and drives it.

    The mouse starts at (0, 0) facing north. ``maze[x][y]`` holds the walls
    known so far, seeded with the outer border.
    """

    def __init__(self, simulator: Simulator | None = None) -> None:
        self.simulator = simulator if simulator is not None else Simulator()
        self.goal: Cell = GOAL
        self.maze: list[list[Node]] = [[Node() for _ in range(SIZE)] for _ in range(SIZE)]
        last = SIZE - 1
        for x, column in enumerate(self.maze):
            for y, node in enumerate(column):
                node.set_wall(Direction.NORTH, y == last)
                node.set_wall(Direction.EAST, x == last)
                node.set_wall(Direction.SOUTH, y == 0)
                node.set_wall(Direction.WEST, x == 0)
        self._cords: Cell = (0, 0)
        self._heading = Direction.NORTH
        self._new_heading = Direction.NORTH
        self._stack: list[Cell] = []
        self._visited: list[Cell] = []
        self._backtracking = 0

    @property
    def position(self) -> Cell:
        """Cell the search currently stands on."""
        return self._cords

    @property
    def heading(self) -> Direction:
        """Direction the mouse faces."""
        return self._heading

    @property
    def path(self) -> list[Cell]:
        """Planned cells, bottom of the stack first."""
        return list(self._stack)

    def display_walls(self) -> None:
        """Show every known wall and each cell's wall count in the simulator."""
        for x, column in enumerate(self.maze):
            for y, node in enumerate(column):
                for side in Direction:
                    if node.is_wall(side):
                        self.simulator.set_wall(x, y, side.letter)
                self.simulator.set_text(x, y, str(node.compute_number_of_walls()))

    def move_forward(self) -> None:
        """Move one cell ahead in the simulator."""
        self.simulator.move_forward()

    def turn_left(self) -> None:
        """Rotate ninety degrees counter-clockwise in the simulator."""
        self.simulator.turn_left()

    def turn_right(self) -> None:
        """Rotate ninety degrees clockwise in the simulator."""
        self.simulator.turn_right()

    def _unexplored_neighbour(self) -> Cell | None:
        x, y = self._cords
        node = self.maze[x][y]
        for side, (dx, dy) in _OFFSETS.items():
            candidate = (x + dx, y + dy)
            if not node.is_wall(side) and candidate not in self._visited:
                return candidate
        return None

    def search_maze(self) -> bool:
        """Search from the current cell towards the goal; True when it is reached."""
        if self._cords != self.goal and not self._stack:
            self._stack.append(self._cords)
        while self._cords != self.goal:
            if self._cords not in self._visited:
                self._visited.append(self._cords)
            step = self._unexplored_neighbour()
            if step is not None:
                x, y = self._cords
                self.simulator.set_color(x, y, "w")
                self._cords = step
                self._stack.append(step)
                self._backtracking = 0
            else:
                index = len(self._visited) - 2 - self._backtracking
                if index < 0:
                    return False
                self._cords = self._visited[index]
                self._backtracking += 1
                self._stack.append(self._cords)
        gx, gy = self.goal
        self.simulator.set_color(gx, gy, "g")
        return True

    def _step_direction(self, current_node: Cell, next_node: Cell) -> Direction | None:
        cx, cy = current_node
        nx, ny = next_node
        node = self.maze[cx][cy]
        if cx == nx and cy < ny and not node.is_wall(Direction.NORTH):
            return Direction.NORTH
        if cx < nx and cy == ny and not node.is_wall(Direction.EAST):
            return Direction.EAST
        if cx == nx and cy > ny and not node.is_wall(Direction.SOUTH):
            return Direction.SOUTH
        if cx > nx and cy == ny and not node.is_wall(Direction.WEST):
            return Direction.WEST
        return None

    def change_direction(self, current_node: Cell, next_node: Cell) -> bool:
        """Record the heading needed to reach ``next_node``; False when it is blocked."""
        heading = self._step_direction(current_node, next_node)
        if heading is None:
            return False
        self._new_heading = heading
        return True

    def path_feasible(self, current_node: Cell, next_node: Cell) -> bool:
        """Whether the known walls allow moving from ``current_node`` towards ``next_node``."""
        return self._step_direction(current_node, next_node) is not None

    def _face(self, heading: Direction) -> None:
        quarter_turns = (heading - self._heading) % 4
        if quarter_turns == 1:
            self.turn_right()
        elif quarter_turns == 2:
            self.turn_right()
            self.turn_right()
        elif quarter_turns == 3:
            self.turn_left()

    def check_walls(self) -> None:
        """Sense the walls around the mouse and record them on the current cell."""
        if not self._stack:
            raise RuntimeError("no planned path to sense walls on")
        x, y = self._stack[-1]
        node = self.maze[x][y]
        front = self._new_heading
        sensors = (
            (self.simulator.wall_front, front),
            (self.simulator.wall_right, front.turned_right()),
            (self.simulator.wall_left, front.turned_left()),
        )
        for sense, side in sensors:
            if sense():
                node.set_wall(side, True)
                self.simulator.set_wall(x, y, side.letter)

    def empty_stack(self) -> None:
        """Drop the planned path, colouring each of its cells black."""
        while self._stack:
            x, y = self._stack.pop()
            self.simulator.set_color(x, y, "k")

    def follow_path(self) -> None:
        """Drive the planned path to the goal, replanning when a wall blocks it."""
        if not self._stack:
            if self._cords == self.goal:
                return
            raise RuntimeError("no path has been planned")
        self._stack.reverse()
        while self._stack[-1] != self.goal:
            self.check_walls()
            current = self._stack.pop()
            if not self._stack:
                raise RuntimeError("planned path does not reach the goal")
            following = self._stack[-1]
            if self.path_feasible(current, following):
                if self.change_direction(current, following):
                    if self._heading != self._new_heading:
                        self._face(self._new_heading)
                        self._heading = self._new_heading
                    self.move_forward()
            else:
                self.empty_stack()
                self._visited.clear()
                self._cords = current
                if not self.search_maze():
                    raise RuntimeError(f"no path to the goal from {current}")
                self._stack.reverse()


def main(argv: Sequence[str] | None = None) -> int:
    """Search the maze in the simulator on standard streams, then drive to the goal."""
    parser = argparse.ArgumentParser(
        prog="micromaze-mouse",
        description="Depth-first micromouse that talks to the simulator on stdin/stdout.",
    )
    parser.parse_args(argv)
    simulator = Simulator()
    mouse = Mouse(simulator)
    mouse.display_walls()
    gx, gy = mouse.goal
    simulator.set_color(gx, gy, "r")
    simulator.set_text(gx, gy, "Goal")
    found = mouse.search_maze()
    print(int(found), file=sys.stderr)
    if not found:
        return 1
    mouse.follow_path()
    return 0