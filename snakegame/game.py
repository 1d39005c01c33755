"""A game in progress: a board, a score and a running clock."""

from __future__ import annotations

from .board import Board, TurnResult
from .direction import Direction

TICK_MS = 200
"""Milliseconds between two steps of the snake."""


class GameSession:
    """Drives a board one tick at a time and keeps the score.

    Steering only takes effect while the game is running; the heading asked
    for is handed to the board on the next tick, and afterwards follows the
    heading the snake actually took.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.score = 0
        self.running = False
        self.game_over = False
        self.heading = board.direction

    def start(self) -> None:
        """Set the clock running; a finished game has to be restarted first."""
        if not self.game_over:
            self.running = True

    def pause(self) -> None:
        """Stop the clock."""
        self.running = False

    def steer(self, direction: Direction) -> None:
        """Ask for a new heading; ignored while the game is not running."""
        if self.running:
            self.heading = Direction(direction)

    def tick(self) -> TurnResult | None:
        """Move the snake one cell; return what happened, or None if stopped."""
        if not self.running:
            return None
        result = self.board.turn(self.heading)
        if result is TurnResult.DIED:
            self.running = False
            self.game_over = True
        elif result is TurnResult.ATE:
            self.score += 1
        self.heading = self.board.direction
        return result

    def restart(self) -> None:
        """Put a fresh snake and food on the board and reset the score."""
        self.board.restart()
        self.score = 0
        self.running = False
        self.game_over = False
        self.heading = self.board.direction