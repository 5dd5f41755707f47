"""Breadth-first route planning over (cell, heading) states for a land robot."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .maze import SIZE, Maze
from .node import Direction
from .robots import LandBasedRobot, LandBasedWheeled
from .simulator import Simulator

_log = logging.getLogger(__name__)

State = Tuple[int, int, Direction]

GOAL_CELLS = frozenset({(7, 7), (7, 8), (8, 8), (8, 7)})

# Neighbours are always tried in this order, whatever the heading.
_SEARCH_ORDER = (Direction.SOUTH, Direction.EAST, Direction.NORTH, Direction.WEST)

_OFFSETS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def _as_direction(heading: Direction | int | str) -> Direction:
    if isinstance(heading, str):
        return Direction.from_letter(heading)
    return Direction(heading)


@dataclass(frozen=True)
class Step:
    """A search state reached by moving ``heading`` into cell (x, y).

    ``parent`` is the state it was reached from; None for the start.
    """

    x: int
    y: int
    heading: Direction
    parent: Optional[State] = None

    @property
    def state(self) -> State:
        """The (x, y, heading) triple this step arrives at."""
        return self.x, self.y, self.heading


class BfsPlanner:
    """Plans a route to the centre of the maze and drives a robot along it.

    A state is a cell together with the heading the robot arrived with. From
    a state the robot may go to any open side except straight back; it turns
    back only out of a dead end.
    """

    def __init__(self) -> None:
        self.goal_flag = False
        self.queue: list[Step] = []
        self.valid: list[Step] = []
        self.path: list[State] = []
        self._explored: set[State] = set()

    def check_node(self, x: int, y: int, heading: Direction | int | str) -> bool:
        """Whether the state (x, y, heading) has already been queued."""
        return (x, y, _as_direction(heading)) in self._explored

    def valid_nodes(
        self, maze: Maze, x: int, y: int, heading: Direction | int | str
    ) -> list[Step]:
        """Steps that can be taken from (x, y) while facing ``heading``."""
        facing = _as_direction(heading)
        behind = Direction((facing + 2) % 4)
        steps: list[Step] = []
        for side in _SEARCH_ORDER:
            if side == behind:
                passable = all(maze.has_wall(x, y, s) for s in Direction if s != behind)
            else:
                passable = not maze.has_wall(x, y, side)
            if not passable:
                continue
            dx, dy = _OFFSETS[side]
            nx, ny = x + dx, y + dy
            if 0 <= nx < SIZE and 0 <= ny < SIZE:
                steps.append(Step(nx, ny, side, (x, y, facing)))
        self.valid = steps
        return steps

    def _enqueue(self, step: Step) -> None:
        self.queue.append(step)
        self._explored.add(step.state)

    def generate_sequence(self, maze: Maze, robot: LandBasedRobot) -> bool:
        """Search from the robot's pose to a goal cell with the walls known so far.

        On success ``path`` holds the states from the start to the goal and
        True is returned; otherwise ``path`` is emptied and False returned.
        """
        start: State = (robot.x, robot.y, robot.direction)
        maze.read_walls(*start)
        maze.simulator.clear_all_color()
        self.goal_flag = False
        self.queue = []
        self._explored = set()
        self._enqueue(Step(*start))

        frontier = deque(self.queue)
        goal: Optional[Step] = None
        while frontier and goal is None:
            current = frontier.popleft()
            for step in self.valid_nodes(maze, current.x, current.y, current.heading):
                if self.check_node(*step.state):
                    continue
                self._enqueue(step)
                frontier.append(step)
                if (step.x, step.y) in GOAL_CELLS:
                    goal = step
                    break

        if goal is None:
            self.path = []
            return False

        self.goal_flag = True
        parents = {step.state: step.parent for step in self.queue}
        route: list[State] = []
        state: Optional[State] = goal.state
        while state is not None:
            route.append(state)
            state = parents[state]
        route.reverse()
        self.path = route
        return True

    def move_robot(self, maze: Maze, robot: LandBasedRobot) -> None:
        """Drive along ``path``, stopping at the first step a sensed wall blocks."""
        maze.color_path((x, y) for x, y, _ in self.path)
        for x, y, heading in self.path[1:]:
            facing = robot.direction
            maze.read_walls(robot.x, robot.y, facing)
            if maze.has_wall(robot.x, robot.y, heading):
                break
            _log.debug(
                "Robot Current %d %d %s Next -> %d %d %s",
                robot.x, robot.y, facing.letter, x, y, heading.letter,
            )
            quarter_turns = (heading - facing) % 4
            if quarter_turns == 1:
                robot.turn_right()
            elif quarter_turns == 2:
                robot.turn_left()
                robot.turn_left()
            elif quarter_turns == 3:
                robot.turn_left()
            robot.move_forward()

    def solve_maze(self, maze: Maze, robot: LandBasedRobot) -> bool:
        """Plan and drive until the robot stands in a goal cell; False if no route exists."""
        while True:
            self.generate_sequence(maze, robot)
            self.move_robot(maze, robot)
            if not self.goal_flag:
                _log.warning("No Path Found !!")
                return False
            if robot.position in GOAL_CELLS:
                _log.info("Goal Reached")
                maze.simulator.clear_all_color()
                return True


def main(argv: Sequence[str] | None = None) -> int:
    """Drive a wheeled robot to the maze centre through the simulator on standard streams."""
    parser = argparse.ArgumentParser(
        prog="micromaze-bfs",
        description="Breadth-first maze solver that talks to the simulator on stdin/stdout.",
    )
    parser.parse_args(argv)
    simulator = Simulator()
    maze = Maze(simulator)
    robot = LandBasedWheeled(
        simulator,
        name="Husky",
        wheel_number=4,
        speed=34,
        width=22,
        length=34,
        height=34,
        capacity=45,
        x=0,
        y=0,
        direction=Direction.NORTH,
    )
    reached = BfsPlanner().solve_maze(maze, robot)
    print("Program ended", file=sys.stderr)
    return 0 if reached else 1