from collections import deque

import pytest

from micromaze.maze import SIZE
from micromaze.mouse import GOAL, Mouse, main
from micromaze.node import Direction
from micromaze.simulator import Simulator, SimulatorError

_STEPS = [(0, 1), (1, 0), (0, -1), (-1, 0)]


class World:
    """Stand-in for the external simulator: a true maze answering protocol lines."""

    def __init__(self, walls=()):
        self.x = 0
        self.y = 0
        self.heading = 0
        self.walls = set()
        self.log = []
        self._replies = deque()
        for x, y, letter in walls:
            self.add_wall(x, y, letter)

    def add_wall(self, x, y, letter):
        side = "nesw".index(letter)
        dx, dy = _STEPS[side]
        self.walls.add((x, y, side))
        self.walls.add((x + dx, y + dy, (side + 2) % 4))

    def _blocked(self, side):
        dx, dy = _STEPS[side]
        nx, ny = self.x + dx, self.y + dy
        inside = 0 <= nx < SIZE and 0 <= ny < SIZE
        return (self.x, self.y, side) in self.walls or not inside

    def write(self, text):
        for line in text.splitlines():
            self._handle(line)

    def flush(self):
        pass

    def readline(self):
        return self._replies.popleft() + "\n" if self._replies else ""

    def _reply(self, value):
        self._replies.append(value)

    def _handle(self, line):
        self.log.append(line)
        command = line.split()[0]
        if command == "wallFront":
            self._reply("true" if self._blocked(self.heading) else "false")
        elif command == "wallRight":
            self._reply("true" if self._blocked((self.heading + 1) % 4) else "false")
        elif command == "wallLeft":
            self._reply("true" if self._blocked((self.heading + 3) % 4) else "false")
        elif command == "moveForward":
            if self._blocked(self.heading):
                self._reply("crash")
            else:
                dx, dy = _STEPS[self.heading]
                self.x += dx
                self.y += dy
                self._reply("ack")
        elif command == "turnRight":
            self.heading = (self.heading + 1) % 4
            self._reply("ack")
        elif command == "turnLeft":
            self.heading = (self.heading + 3) % 4
            self._reply("ack")


def make_mouse(walls=()):
    world = World(walls)
    return world, Mouse(Simulator(world, world))


def _adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_display_walls_matches_wall_counts():
    world, mouse = make_mouse()
    mouse.display_walls()
    walls = [line for line in world.log if line.startswith("setWall")]
    texts = {}
    for line in world.log:
        if line.startswith("setText"):
            _, x, y, count = line.split()
            texts[(int(x), int(y))] = int(count)
    assert len(texts) == SIZE * SIZE
    assert sum(texts.values()) == len(walls)
    assert texts[(0, 0)] == 2
    assert "setWall 0 0 s" in walls
    assert "setWall 0 0 w" in walls
    assert max(texts.values()) <= texts[(0, 0)]


def test_search_open_maze_finds_contiguous_path():
    world, mouse = make_mouse()
    assert mouse.search_maze() is True
    path = mouse.path
    assert path[0] == (0, 0)
    assert path[-1] == GOAL
    assert len(set(path)) == len(path)
    assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))
    assert mouse.position == GOAL
    assert "setColor 8 8 g" in world.log
    assert "setColor 0 0 w" in world.log


def test_search_backtracks_out_of_dead_end():
    world, mouse = make_mouse()
    mouse.maze[0][3].set_wall(Direction.NORTH, True)
    mouse.maze[0][3].set_wall(Direction.EAST, True)
    assert mouse.search_maze() is True
    path = mouse.path
    assert path[0] == (0, 0)
    assert path[-1] == GOAL
    assert path.count((0, 2)) == 2
    assert (0, 4) not in path


def test_search_unreachable_goal_returns_false():
    world, mouse = make_mouse()
    gx, gy = GOAL
    for side in Direction:
        mouse.maze[gx][gy].set_wall(side, True)
    mouse.maze[gx][gy + 1].set_wall(Direction.SOUTH, True)
    mouse.maze[gx][gy - 1].set_wall(Direction.NORTH, True)
    mouse.maze[gx + 1][gy].set_wall(Direction.WEST, True)
    mouse.maze[gx - 1][gy].set_wall(Direction.EAST, True)
    assert mouse.search_maze() is False
    assert "setColor 8 8 g" not in world.log
    assert GOAL not in mouse.path


@pytest.mark.parametrize(
    "current, following, expected",
    [
        ((0, 0), (0, 1), True),
        ((0, 0), (1, 0), True),
        ((1, 0), (0, 0), True),
        ((0, 1), (0, 0), True),
        ((0, 0), (0, -1), False),
        ((0, 0), (-1, 0), False),
        ((0, 0), (1, 1), False),
        ((0, 0), (0, 0), False),
    ],
)
def test_path_feasible_and_change_direction_agree(current, following, expected):
    _, mouse = make_mouse()
    assert mouse.path_feasible(current, following) is expected
    assert mouse.change_direction(current, following) is expected


def test_known_wall_blocks_step():
    _, mouse = make_mouse()
    mouse.maze[0][0].set_wall(Direction.NORTH, True)
    assert mouse.path_feasible((0, 0), (0, 1)) is False
    assert mouse.change_direction((0, 0), (0, 1)) is False


def test_follow_path_in_open_maze_reaches_goal():
    world, mouse = make_mouse()
    assert mouse.search_maze()
    planned = mouse.path
    mouse.follow_path()
    assert (world.x, world.y) == GOAL
    moves = [line for line in world.log if line.startswith("moveForward")]
    assert len(moves) == len(planned) - 1
    assert mouse.path[-1] == GOAL
    assert world.heading == mouse.heading


def test_follow_path_replans_around_hidden_wall():
    world, mouse = make_mouse(walls=[(0, 5, "n")])
    assert mouse.search_maze()
    assert (0, 6) in mouse.path
    mouse.follow_path()
    assert (world.x, world.y) == GOAL
    assert mouse.maze[0][5].is_wall(Direction.NORTH)
    assert "setWall 0 5 n" in world.log
    assert "setColor 0 6 k" in world.log
    assert not any(line == "crash" for line in world.log)


def test_follow_path_without_plan_raises():
    _, mouse = make_mouse()
    with pytest.raises(RuntimeError):
        mouse.follow_path()


def test_check_walls_without_plan_raises():
    _, mouse = make_mouse()
    with pytest.raises(RuntimeError):
        mouse.check_walls()


def test_empty_stack_colours_every_cell():
    world, mouse = make_mouse()
    assert mouse.search_maze()
    planned = mouse.path
    world.log.clear()
    mouse.empty_stack()
    assert mouse.path == []
    black = [line for line in world.log if line.endswith(" k")]
    assert len(black) == len(planned)
    assert f"setColor {GOAL[0]} {GOAL[1]} k" in black


def test_turns_and_crash_into_border():
    world, mouse = make_mouse()
    mouse.turn_left()
    assert world.heading == Direction.WEST
    with pytest.raises(SimulatorError):
        mouse.move_forward()
    mouse.turn_right()
    mouse.turn_right()
    assert world.heading == Direction.EAST
    mouse.move_forward()
    assert (world.x, world.y) == (1, 0)


def test_main_drives_to_goal(monkeypatch):
    world = World()
    monkeypatch.setattr("sys.stdin", world)
    monkeypatch.setattr("sys.stdout", world)
    assert main([]) == 0
    assert (world.x, world.y) == GOAL
    assert "setText 8 8 Goal" in world.log
    assert "setColor 8 8 r" in world.log