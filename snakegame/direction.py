"""Movement directions on the playing field."""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    """A heading on the grid, numbered clockwise from UP."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def clockwise(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        return Direction((self.value + 1) % 4)

    def counterclockwise(self) -> Direction:
        """The heading after a quarter turn counterclockwise."""
        return Direction((self.value - 1) % 4)

    def delta(self) -> tuple[int, int]:
        """The (row, column) offset of one step in this direction."""
        return _DELTAS[self]

    def __str__(self) -> str:
        return f"Direction {self.name}"


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}