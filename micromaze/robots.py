"""Land-based robots that move through the maze by driving the simulator."""

from __future__ import annotations

import logging

from .node import Direction
from .simulator import Simulator

_log = logging.getLogger(__name__)

_STEP = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def _as_direction(direction: Direction | int | str) -> Direction:
    if isinstance(direction, str):
        return Direction.from_letter(direction)
    return Direction(direction)


class LandBasedRobot:
    """A robot on the maze floor with a cell position and a compass heading."""

    def __init__(
        self,
        simulator: Simulator,
        *,
        name: str = "Land Robot",
        speed: float = 0.0,
        width: float = 2.0,
        length: float = 2.0,
        height: float = 2.0,
        capacity: float = 2.0,
        x: int = 0,
        y: int = 0,
        direction: Direction | int | str = Direction.NORTH,
    ) -> None:
        self.simulator = simulator
        self.name = name
        self.speed = speed
        self.width = width
        self.length = length
        self.height = height
        self.capacity = capacity
        self.x = x
        self.y = y
        self.direction = _as_direction(direction)

    @property
    def position(self) -> tuple[int, int]:
        """Current cell as (x, y)."""
        return self.x, self.y

    def move_forward(self) -> None:
        """Drive one cell ahead; the position changes only if the simulator acks."""
        _log.debug("%s moves forward from %s facing %s", self.name, self.position, self.direction.letter)
        self.simulator.move_forward()
        dx, dy = _STEP[self.direction]
        self.x += dx
        self.y += dy

    def turn_left(self) -> None:
        """Rotate ninety degrees counter-clockwise."""
        _log.debug("%s turns left", self.name)
        self.simulator.turn_left()
        self.direction = self.direction.turned_left()

    def turn_right(self) -> None:
        """Rotate ninety degrees clockwise."""
        _log.debug("%s turns right", self.name)
        self.simulator.turn_right()
        self.direction = self.direction.turned_right()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, x={self.x}, y={self.y}, "
            f"direction={self.direction.letter!r})"
        )


class LandBasedWheeled(LandBasedRobot):
    """A wheeled robot."""

    def __init__(
        self,
        simulator: Simulator,
        *,
        name: str = "Husky",
        wheel_number: int = 4,
        speed: float = 34.0,
        width: float = 22.0,
        length: float = 34.0,
        height: float = 34.0,
        capacity: float = 45.0,
        x: int = 0,
        y: int = 0,
        direction: Direction | int | str = Direction.NORTH,
    ) -> None:
        super().__init__(
            simulator,
            name=name,
            speed=speed,
            width=width,
            length=length,
            height=height,
            capacity=capacity,
            x=x,
            y=y,
            direction=direction,
        )
        self.wheel_number = wheel_number

    def speed_up(self, speed: float) -> None:
        """Set the driving speed."""
        _log.debug("%s speed set to %s", self.name, speed)
        self.speed = speed


class LandBasedTracked(LandBasedRobot):
    """A tracked robot."""

    def __init__(
        self,
        simulator: Simulator,
        *,
        name: str = "Husky",
        speed: float = 34.0,
        width: float = 22.0,
        track_type: str = "Revolute",
        length: float = 34.0,
        height: float = 34.0,
        capacity: float = 45.0,
        x: int = 2,
        y: int = 3,
        direction: Direction | int | str = Direction.NORTH,
    ) -> None:
        super().__init__(
            simulator,
            name=name,
            speed=speed,
            width=width,
            length=length,
            height=height,
            capacity=capacity,
            x=x,
            y=y,
            direction=direction,
        )
        self.track_type = track_type