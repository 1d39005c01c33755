"""Editing a level map cell by cell before saving it."""

from __future__ import annotations

from enum import Enum

from .board import Level
from .snake import Cell


class Brush(Enum):
    """What painting does to a cell: draw a wall or wash it away."""

    DRAW = "draw"
    WASH = "wash"


class LevelEditor:
    """A resizable grid of wall cells with a name and a current brush."""

    def __init__(self) -> None:
        self.name = ""
        self.brush = Brush.DRAW
        self.rows = 0
        self.cols = 0
        self._walls: set[Cell] = set()

    def resize(self, rows: int, cols: int) -> None:
        """Change the grid size; walls that fall outside are dropped."""
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._walls = {(r, c) for r, c in self._walls if r < rows and c < cols}

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")

    def paint(self, top: int, left: int, bottom: int, right: int) -> None:
        """Apply the current brush to every cell of the inclusive rectangle."""
        self._check(top, left)
        self._check(bottom, right)
        cells = {
            (row, col)
            for row in range(top, bottom + 1)
            for col in range(left, right + 1)
        }
        if self.brush is Brush.DRAW:
            self._walls |= cells
        else:
            self._walls -= cells

    def is_wall(self, row: int, col: int) -> bool:
        self._check(row, col)
        return (row, col) in self._walls

    @property
    def is_dirty(self) -> bool:
        """Whether there is anything worth offering to save."""
        return self.rows != 0 or self.cols != 0 or self.name != ""

    def to_level(self) -> Level:
        """The map as a level, walls in row-major order."""
        return Level(self.rows, self.cols, tuple(sorted(self._walls)))

    def reset(self) -> None:
        """Start over with an empty, unnamed, zero-sized grid."""
        self.name = ""
        self.rows = 0
        self.cols = 0
        self._walls.clear()