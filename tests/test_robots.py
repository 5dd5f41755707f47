import io

import pytest

from micromaze.node import Direction
from micromaze.robots import LandBasedRobot, LandBasedTracked, LandBasedWheeled
from micromaze.simulator import Simulator, SimulatorError


def make_sim(replies=""):
    out = io.StringIO()
    sim = Simulator(io.StringIO(replies), out)
    return sim, out


def test_wheeled_defaults():
    sim, _ = make_sim()
    robot = LandBasedWheeled(sim)
    assert robot.name == "Husky"
    assert robot.wheel_number == 4
    assert robot.position == (0, 0)
    assert robot.direction is Direction.NORTH


def test_tracked_defaults():
    sim, _ = make_sim()
    robot = LandBasedTracked(sim)
    assert robot.track_type == "Revolute"
    assert robot.position == (2, 3)
    assert robot.direction is Direction.NORTH


def test_base_defaults():
    sim, _ = make_sim()
    robot = LandBasedRobot(sim)
    assert robot.name == "Land Robot"
    assert robot.position == (0, 0)


def test_direction_letter_accepted():
    sim, _ = make_sim()
    robot = LandBasedWheeled(sim, direction="e")
    assert robot.direction is Direction.EAST


def test_bad_direction_letter_rejected():
    sim, _ = make_sim()
    with pytest.raises(ValueError):
        LandBasedWheeled(sim, direction="q")


@pytest.mark.parametrize(
    "heading, expected",
    [("n", (5, 6)), ("e", (6, 5)), ("s", (5, 4)), ("w", (4, 5))],
)
def test_move_forward_steps_in_heading(heading, expected):
    sim, out = make_sim("ack\n")
    robot = LandBasedWheeled(sim, x=5, y=5, direction=heading)
    robot.move_forward()
    assert robot.position == expected
    assert out.getvalue() == "moveForward\n"


def test_move_forward_failure_keeps_position():
    sim, _ = make_sim("crash\n")
    robot = LandBasedTracked(sim)
    with pytest.raises(SimulatorError):
        robot.move_forward()
    assert robot.position == (2, 3)


def test_turn_right_sequence():
    sim, out = make_sim("ack\n" * 4)
    robot = LandBasedWheeled(sim)
    seen = []
    for _ in range(4):
        robot.turn_right()
        seen.append(robot.direction)
    assert seen == [Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH]
    assert out.getvalue() == "turnRight\n" * 4


def test_turn_left_sequence():
    sim, out = make_sim("ack\n" * 4)
    robot = LandBasedTracked(sim)
    seen = []
    for _ in range(4):
        robot.turn_left()
        seen.append(robot.direction)
    assert seen == [Direction.WEST, Direction.SOUTH, Direction.EAST, Direction.NORTH]
    assert out.getvalue() == "turnLeft\n" * 4


def test_left_then_right_is_identity():
    sim, _ = make_sim("ack\nack\n")
    robot = LandBasedWheeled(sim, direction="s")
    robot.turn_left()
    robot.turn_right()
    assert robot.direction is Direction.SOUTH


def test_round_trip_returns_to_start():
    sim, _ = make_sim("ack\n" * 4)
    robot = LandBasedWheeled(sim, x=3, y=3)
    robot.move_forward()
    robot.turn_right()
    robot.turn_right()
    robot.move_forward()
    assert robot.position == (3, 3)
    assert robot.direction is Direction.SOUTH


def test_speed_up_sets_speed():
    sim, _ = make_sim()
    robot = LandBasedWheeled(sim)
    robot.speed_up(50)
    assert robot.speed == 50