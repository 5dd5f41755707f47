"""Compass directions and single maze cells."""

from __future__ import annotations

from enum import IntEnum

_LETTERS = "nesw"


class Direction(IntEnum):
    """Compass direction; values count clockwise from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def letter(self) -> str:
        """Single-letter name used by the simulator protocol."""
        return _LETTERS[self.value]

    @classmethod
    def from_letter(cls, letter: str) -> Direction:
        """Direction for a letter among 'n', 'e', 's', 'w'."""
        if len(letter) != 1 or letter not in _LETTERS:
            raise ValueError(f"not a direction letter: {letter!r}")
        return cls(_LETTERS.index(letter))

    def turned_right(self) -> Direction:
        """Direction after a quarter turn clockwise."""
        return Direction((self.value + 1) % 4)

    def turned_left(self) -> Direction:
        """Direction after a quarter turn counter-clockwise."""
        return Direction((self.value + 3) % 4)


class Node:
    """A maze cell with a wall flag on each of its four sides."""

    def __init__(self) -> None:
        self._walls = [False] * len(Direction)

    def set_wall(self, direction: int, is_wall: bool) -> None:
        """Set or clear the wall on one side; raises ValueError for a bad side."""
        self._walls[Direction(direction)] = bool(is_wall)

    def is_wall(self, direction: int) -> bool:
        """Whether the given side has a wall; raises ValueError for a bad side."""
        return self._walls[Direction(direction)]

    def compute_number_of_walls(self) -> int:
        """Number of sides that have a wall."""
        return sum(self._walls)

    def __repr__(self) -> str:
        sides = "".join(d.letter for d in Direction if self._walls[d])
        return f"Node(walls={sides!r})"