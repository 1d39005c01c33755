import random

import pytest

from snakegame.board import Board, CellType, Level, TurnResult
from snakegame.direction import Direction
from snakegame.game import GameSession


def _arrange(board, head, direction, food=None):
    board.clear()
    board.snake.reset(head[0], head[1], direction)
    for row, col in board.snake:
        board.set_cell(row, col, CellType.SNAKE)
    board.set_cell(head[0], head[1], CellType.SNAKE_HEAD)
    if food is not None:
        board.set_cell(food[0], food[1], CellType.FOOD)


@pytest.fixture
def board():
    return Board(Level(10, 10), random.Random(0))


def _session(board, head=(5, 5), direction=Direction.RIGHT, food=None):
    _arrange(board, head, direction, food)
    return GameSession(board)


def test_new_session_is_stopped_with_zero_score(board):
    session = GameSession(board)
    assert session.score == 0
    assert session.running is False
    assert session.game_over is False
    assert session.heading == board.direction


def test_tick_does_nothing_while_stopped(board):
    session = _session(board)
    assert session.tick() is None
    assert board.snake.head == (5, 5)


def test_steer_ignored_while_stopped(board):
    session = _session(board)
    session.steer(Direction.UP)
    assert session.heading == Direction.RIGHT


def test_tick_moves_forward(board):
    session = _session(board)
    session.start()
    assert session.tick() is TurnResult.MOVED
    assert board.snake.head == (5, 6)
    assert board.cell(5, 6) is CellType.SNAKE_HEAD
    assert len(board.snake) == 3


def test_eating_raises_score_and_grows(board):
    session = _session(board, food=(5, 6))
    session.start()
    assert session.tick() is TurnResult.ATE
    assert session.score == 1
    assert len(board.snake) == 4


def test_steer_turns_snake(board):
    session = _session(board)
    session.start()
    session.steer(Direction.UP)
    session.tick()
    assert board.snake.head == (4, 5)
    assert session.heading == Direction.UP


def test_reverse_is_ignored(board):
    session = _session(board)
    session.start()
    session.steer(Direction.LEFT)
    assert session.tick() is TurnResult.MOVED
    assert board.snake.head == (5, 6)
    assert session.heading == Direction.RIGHT


def test_hitting_edge_ends_game(board):
    session = _session(board, head=(5, 9))
    session.start()
    assert session.tick() is TurnResult.DIED
    assert session.game_over is True
    assert session.running is False
    assert session.tick() is None
    session.start()
    assert session.running is False


def test_restart_after_game_over(board):
    session = _session(board, head=(5, 9), food=(0, 0))
    session.start()
    session.tick()
    session.restart()
    assert session.score == 0
    assert session.game_over is False
    assert session.running is False
    assert len(board.snake) == 3
    assert session.heading == board.direction


def test_pause_stops_ticks(board):
    session = _session(board)
    session.start()
    session.pause()
    assert session.tick() is None
    assert board.snake.head == (5, 5)