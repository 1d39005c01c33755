import pytest

from snakegame.direction import Direction
from snakegame.snake import Snake


def test_new_snake_is_in_resting_state():
    snake = Snake()
    assert list(snake) == [(8, 8)]
    assert snake.direction is Direction.DOWN
    assert snake.head == snake.tail


def test_reset_up_lays_tail_below_head():
    snake = Snake()
    snake.reset(5, 5, Direction.UP)
    assert list(snake) == [(7, 5), (6, 5), (5, 5)]
    assert snake.direction is Direction.UP


@pytest.mark.parametrize("direction", list(Direction))
def test_reset_builds_straight_line_behind_head(direction):
    snake = Snake()
    snake.reset(10, 10, direction)
    cells = list(snake)
    assert len(snake) == 3
    assert snake.head == (10, 10)
    dr, dc = direction.delta()
    for behind, ahead in zip(cells, cells[1:]):
        assert (ahead[0] - behind[0], ahead[1] - behind[1]) == (dr, dc)


def test_reset_accepts_plain_int():
    snake = Snake()
    snake.reset(4, 4, 1)
    assert snake.direction is Direction.RIGHT
    assert snake.tail == (4, 2)


@pytest.mark.parametrize("direction", list(Direction))
def test_step_moves_head_and_grows(direction):
    snake = Snake()
    snake.reset(10, 10, Direction.UP)
    new_head = snake.step(direction)
    dr, dc = direction.delta()
    assert new_head == (10 + dr, 10 + dc)
    assert snake.head == new_head
    assert snake.direction is direction
    assert len(snake) == 4
    assert snake.tail == (12, 10)


def test_drop_tail_returns_oldest_cell():
    snake = Snake()
    snake.reset(5, 5, Direction.RIGHT)
    snake.step(Direction.RIGHT)
    dropped = snake.drop_tail()
    assert dropped == (5, 3)
    assert list(snake) == [(5, 4), (5, 5), (5, 6)]


def test_drop_tail_on_empty_raises():
    snake = Snake()
    snake.drop_tail()
    with pytest.raises(IndexError):
        snake.drop_tail()


def test_kill_after_reset_restores_resting_state():
    snake = Snake()
    snake.reset(3, 3, Direction.LEFT)
    snake.kill()
    assert list(snake) == [(8, 8)]
    assert snake.direction is Direction.DOWN