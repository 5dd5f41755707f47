# micromaze

Two micromouse maze solvers for a 16 × 16 maze. Each drives a maze
simulator over a simple text protocol on standard input and output.

- **Depth-first mouse** (`micromaze-mouse`, `micromaze.mouse`): starts at
  (0, 0) facing north and searches depth-first for a path to the goal cell
  (8, 8) over the walls it knows. It then follows the path, sensing walls as
  it goes. When a newly sensed wall blocks the next step, it drops the
  planned path and searches again from the cell it is on.
- **Breadth-first robot** (`micromaze-bfs`, `micromaze.bfs`): a wheeled land
  robot that plans with a breadth-first search over (cell, heading) states.
  Its target is any of the four centre cells (7, 7), (7, 8), (8, 7) and
  (8, 8). It drives along the plan until a sensed wall blocks a step, then
  plans again. It stops when it reaches the centre or when no route is left.

## Installing

```
pip install .
```

No third-party libraries are needed at run time.

## Running in a simulator

Both commands speak the simulator's line protocol. Each command goes out as
one line on standard output, for example `wallFront`, `moveForward`,
`turnLeft`, `setWall 3 4 n` or `setColor 0 0 g`. Replies are read as
whitespace-separated words from standard input: `true`/`false`, `ack`, or a
number.

Configure your simulator to launch one of:

```
micromaze-mouse
micromaze-bfs
```

Both commands take no options apart from `--help`.

- `micromaze-mouse` first shows the border walls and the wall count of every
  cell. It then marks the goal cell red with the text `Goal` and runs the
  search. It writes `1` or `0` to standard error, depending on whether a path
  was found. When a path was found it drives the path and exits 0;
  otherwise it exits 1.
- `micromaze-bfs` shows the border walls and colours each planned route
  green. It exits 0 when the robot reaches the centre and 1 when no route is
  found. In both cases it ends by writing `Program ended` to standard error.

## Using the library

Each part works with any pair of text streams:

```python
import io

from micromaze.simulator import Simulator
from micromaze.node import Direction, Node

sim = Simulator(stdin=io.StringIO("false false false\n"), stdout=io.StringIO())
print(sim.wall_front())      # False

cell = Node()
cell.set_wall(Direction.NORTH, True)
print(cell.compute_number_of_walls())   # 1
```

- `micromaze.simulator.Simulator` wraps the protocol. It has one method per
  command, such as `wall_front`, `move_forward`, `turn_left`, `set_wall`,
  `set_color`, `set_text`, `maze_width` and `was_reset`. Without arguments
  it uses `sys.stdin` and `sys.stdout`. A `move_forward` that is not answered
  with `ack` raises `SimulatorError`.
- `micromaze.node.Direction` is the four compass directions, counted
  clockwise from north. It has `letter`, `from_letter`, `turned_left` and
  `turned_right`. `Node` holds the four walls of one cell. A side that is not
  a direction raises `ValueError`.
- `micromaze.maze.Maze` is the wall grid used by the breadth-first robot. It
  starts with the outer border in place and shows that border in the
  simulator. `read_walls(x, y, heading)` records the front, right and left
  walls the robot senses. `has_wall` looks a wall up. `color_path` colours a
  list of cells green.
- `micromaze.robots.LandBasedWheeled` and `LandBasedTracked` are robots that
  keep their own position and heading as they `move_forward`, `turn_left`
  and `turn_right`. The position changes only after the simulator
  acknowledges the move. `LandBasedWheeled.speed_up` sets the speed.
- `micromaze.mouse.Mouse` is the depth-first solver. It has `search_maze`,
  `follow_path`, `check_walls`, `display_walls`, and the planned `path`.
  `follow_path` raises `RuntimeError` when there is no path to follow or
  when replanning finds none.
- `micromaze.bfs.BfsPlanner` is the breadth-first solver.
  `generate_sequence` returns whether a route was found and leaves it in
  `path` as (x, y, heading) states. `move_robot` drives the route.
  `solve_maze` runs the whole plan, move and re-plan loop, and returns
  whether the centre was reached.

## What it does not do

- It is not a simulator. It needs an external maze simulator that speaks the
  protocol above.
- Both solvers assume a 16 × 16 maze. They do not ask the simulator for the
  maze size.
- Neither solver handles the simulator's reset request during a run.

## Tests

```
pip install ".[test]"
pytest
```