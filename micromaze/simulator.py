"""Line protocol client for the micromouse simulator.

Commands go out as single lines on one stream and replies come back as
whitespace-separated tokens on another.
"""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SimulatorError(RuntimeError):
    """Raised when the simulator refuses a command."""


def _parse_int(text: str) -> int:
    """Read a leading integer the way C's atoi does; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Simulator:
    """Talks to a micromouse simulator over a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def _send(self, line: str) -> None:
        self._out.write(line + "\n")
        self._out.flush()

    def _receive(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                return ""
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _query(self, command: str) -> str:
        self._send(command)
        return self._receive()

    def maze_width(self) -> int:
        """Width of the maze in cells."""
        return _parse_int(self._query("mazeWidth"))

    def maze_height(self) -> int:
        """Height of the maze in cells."""
        return _parse_int(self._query("mazeHeight"))

    def wall_front(self) -> bool:
        """Whether there is a wall in front of the mouse."""
        return self._query("wallFront") == "true"

    def wall_right(self) -> bool:
        """Whether there is a wall to the right of the mouse."""
        return self._query("wallRight") == "true"

    def wall_left(self) -> bool:
        """Whether there is a wall to the left of the mouse."""
        return self._query("wallLeft") == "true"

    def move_forward(self, distance: int = 1) -> None:
        """Move the mouse forward; the distance is sent only when it is not 1."""
        command = "moveForward" if distance == 1 else f"moveForward {distance}"
        response = self._query(command)
        if response != "ack":
            raise SimulatorError(response or "no reply to moveForward")

    def turn_right(self) -> None:
        """Turn the mouse ninety degrees clockwise."""
        self._query("turnRight")

    def turn_left(self) -> None:
        """Turn the mouse ninety degrees counter-clockwise."""
        self._query("turnLeft")

    def set_wall(self, x: int, y: int, direction: str) -> None:
        """Show a wall on one side of a cell."""
        self._send(f"setWall {x} {y} {direction}")

    def clear_wall(self, x: int, y: int, direction: str) -> None:
        """Remove a shown wall from one side of a cell."""
        self._send(f"clearWall {x} {y} {direction}")

    def set_color(self, x: int, y: int, color: str) -> None:
        """Colour a cell."""
        self._send(f"setColor {x} {y} {color}")

    def clear_color(self, x: int, y: int) -> None:
        """Remove the colour of a cell."""
        self._send(f"clearColor {x} {y}")

    def clear_all_color(self) -> None:
        """Remove the colour of every cell."""
        self._send("clearAllColor")

    def set_text(self, x: int, y: int, text: str) -> None:
        """Write text into a cell."""
        self._send(f"setText {x} {y} {text}")

    def clear_text(self, x: int, y: int) -> None:
        """Remove the text of a cell."""
        self._send(f"clearText {x} {y}")

    def clear_all_text(self) -> None:
        """Remove the text of every cell."""
        self._send("clearAllText")

    def was_reset(self) -> bool:
        """Whether the simulator asked for a reset."""
        return self._query("wasReset") == "true"

    def ack_reset(self) -> None:
        """Acknowledge a reset."""
        self._query("ackReset")