"""The playing field: a grid of cells holding walls, the snake and food."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from os import PathLike
from typing import Any, Union

from .direction import Direction
from .snake import Cell, Snake

# The starting heading is drawn from these three only.
_START_DIRECTIONS = (Direction.UP, Direction.RIGHT, Direction.DOWN)


class CellType(IntEnum):
    EMPTY = 0
    WALL = 1
    SNAKE = 2
    SNAKE_HEAD = 3
    FOOD = 4


class TurnResult(Enum):
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"


def _as_int(value: Any) -> int:
    """Read a JSON number as an integer, falling back to 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


@dataclass(frozen=True)
class Level:
    """A level map: its size and the cells that are walls."""

    rows: int
    cols: int
    walls: tuple[Cell, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("level dimensions must not be negative")
        object.__setattr__(self, "walls", tuple((int(r), int(c)) for r, c in self.walls))

    @classmethod
    def from_dict(cls, data: Any) -> Level:
        """Build a level from its JSON object form."""
        if not isinstance(data, dict):
            raise ValueError("level data must be a JSON object")
        wall_list = data.get("wall", [])
        if not isinstance(wall_list, list):
            wall_list = []
        walls = tuple(
            (_as_int(wall.get("row")), _as_int(wall.get("col")))
            for wall in wall_list
            if isinstance(wall, dict)
        )
        return cls(_as_int(data.get("row_card")), _as_int(data.get("col_card")), walls)

    def to_dict(self) -> dict[str, Any]:
        """The JSON object form of this level."""
        return {
            "col_card": self.cols,
            "row_card": self.rows,
            "wall": [{"col": col, "row": row} for row, col in self.walls],
        }

    @classmethod
    def load(cls, path: Union[str, PathLike]) -> Level:
        """Read a level from a JSON file."""
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        return cls.from_dict(data)


class Board:
    """A level in play, with a snake and a piece of food on it."""

    def __init__(self, level: Level, rng: random.Random | None = None) -> None:
        self.level = level
        self._rng = rng if rng is not None else random.Random()
        self._grid = [[CellType.EMPTY] * level.cols for _ in range(level.rows)]
        for row, col in level.walls:
            if self._inside(row, col):
                self._grid[row][col] = CellType.WALL
        self.snake = Snake()
        self.start_snake()
        self.place_food()

    @classmethod
    def from_file(cls, path: Union[str, PathLike], rng: random.Random | None = None) -> Board:
        return cls(Level.load(path), rng)

    @property
    def rows(self) -> int:
        return self.level.rows

    @property
    def cols(self) -> int:
        return self.level.cols

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> CellType:
        if not self._inside(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._grid[row][col]

    def set_cell(self, row: int, col: int, cell: CellType) -> None:
        if not self._inside(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        self._grid[row][col] = CellType(cell)

    def _open(self, row: int, col: int) -> bool:
        return self._inside(row, col) and self._grid[row][col] is not CellType.WALL

    def _fits(self, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.delta()
        needed = [(row + dr, col + dc)] + [(row - k * dr, col - k * dc) for k in (0, 1, 2)]
        return all(self._open(r, c) for r, c in needed)

    def start_snake(self) -> None:
        """Put a new three-cell snake at a random place where it fits."""
        candidates = [
            (row, col, direction)
            for row in range(self.rows - 1)
            for col in range(self.cols - 1)
            for direction in _START_DIRECTIONS
            if self._fits(row, col, direction)
        ]
        if not candidates:
            raise ValueError("no room on the board to place the snake")
        row, col, direction = self._rng.choice(candidates)
        self.snake.reset(row, col, direction)
        for r, c in self.snake:
            self._grid[r][c] = CellType.SNAKE
        self._grid[row][col] = CellType.SNAKE_HEAD

    def place_food(self) -> Cell | None:
        """Put food on a random free cell; return it, or None if there is no room."""
        candidates = [
            (row, col)
            for row in range(self.rows - 1)
            for col in range(self.cols - 1)
            if self._grid[row][col] in (CellType.EMPTY, CellType.FOOD)
        ]
        if not candidates:
            return None
        row, col = self._rng.choice(candidates)
        self._grid[row][col] = CellType.FOOD
        return row, col

    def clear(self) -> None:
        """Empty every cell that holds food or the snake; walls stay."""
        movable = (CellType.FOOD, CellType.SNAKE, CellType.SNAKE_HEAD)
        for line in self._grid:
            for col, kind in enumerate(line):
                if kind in movable:
                    line[col] = CellType.EMPTY

    def restart(self) -> None:
        self.snake.kill()
        self.clear()
        self.start_snake()
        self.place_food()

    def turn(self, direction: Direction) -> TurnResult:
        """Advance the snake one cell, steering towards ``direction`` unless that reverses it."""
        direction = Direction(direction)
        current = self.snake.direction
        if current in (direction.clockwise(), direction.counterclockwise(), direction):
            heading = direction
        else:
            heading = current

        old_head = self.snake.head
        row, col = self.snake.step(heading)
        if not self._inside(row, col) or self._grid[row][col] in (CellType.WALL, CellType.SNAKE):
            return TurnResult.DIED

        ate = self._grid[row][col] is CellType.FOOD
        if not ate:
            tail_row, tail_col = self.snake.tail
            self._grid[tail_row][tail_col] = CellType.EMPTY
            self.snake.drop_tail()
        self._grid[old_head[0]][old_head[1]] = CellType.SNAKE
        self._grid[row][col] = CellType.SNAKE_HEAD

        if ate:
            self.place_food()
            return TurnResult.ATE
        return TurnResult.MOVED