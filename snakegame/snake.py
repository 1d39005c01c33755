"""The snake's body as a queue of grid cells, tail first."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .direction import Direction

Cell = tuple[int, int]

_DEAD_HEAD: Cell = (8, 8)


class Snake:
    """A snake made of (row, column) cells, ordered from tail to head."""

    def __init__(self) -> None:
        self._body: deque[Cell] = deque()
        self.direction = Direction.DOWN
        self.kill()

    def reset(self, head_row: int, head_col: int, direction: Direction) -> None:
        """Lay out a fresh three-cell snake with its head at the given cell."""
        direction = Direction(direction)
        dr, dc = direction.delta()
        self._body = deque((head_row - k * dr, head_col - k * dc) for k in (2, 1, 0))
        self.direction = direction

    def kill(self) -> None:
        """Collapse the snake to its single-cell resting state."""
        self._body = deque([_DEAD_HEAD])
        self.direction = Direction.DOWN

    def step(self, direction: Direction) -> Cell:
        """Grow a new head one cell further in ``direction`` and return it."""
        direction = Direction(direction)
        self.direction = direction
        row, col = self.head
        dr, dc = direction.delta()
        new_head = (row + dr, col + dc)
        self._body.append(new_head)
        return new_head

    def drop_tail(self) -> Cell:
        """Remove and return the tail cell."""
        return self._body.popleft()

    @property
    def head(self) -> Cell:
        return self._body[-1]

    @property
    def tail(self) -> Cell:
        return self._body[0]

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._body)