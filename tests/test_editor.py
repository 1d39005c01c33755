import pytest

from snakegame.board import Level
from snakegame.editor import Brush, LevelEditor


def make(rows=4, cols=5):
    editor = LevelEditor()
    editor.resize(rows, cols)
    return editor


def test_new_editor_is_clean():
    editor = LevelEditor()
    assert editor.is_dirty is False
    assert editor.brush is Brush.DRAW
    assert editor.to_level() == Level(0, 0)


def test_resize_makes_dirty():
    editor = make(1, 0)
    assert editor.is_dirty is True


def test_name_makes_dirty():
    editor = LevelEditor()
    editor.name = "first"
    assert editor.is_dirty is True


def test_paint_draws_rectangle():
    editor = make()
    editor.paint(1, 1, 2, 3)
    walls = {(r, c) for r in range(4) for c in range(5) if editor.is_wall(r, c)}
    assert walls == {(r, c) for r in (1, 2) for c in (1, 2, 3)}


def test_wash_removes_walls():
    editor = make()
    editor.paint(0, 0, 3, 4)
    editor.brush = Brush.WASH
    editor.paint(1, 1, 1, 1)
    assert editor.is_wall(1, 1) is False
    assert editor.is_wall(1, 2) is True


def test_paint_outside_raises():
    editor = make(2, 2)
    with pytest.raises(IndexError):
        editor.paint(0, 0, 2, 1)
    with pytest.raises(IndexError):
        editor.is_wall(-1, 0)


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        LevelEditor().resize(-1, 3)


def test_shrink_drops_walls_and_regrow_is_empty():
    editor = make()
    editor.paint(3, 4, 3, 4)
    editor.resize(2, 2)
    editor.resize(4, 5)
    assert editor.is_wall(3, 4) is False


def test_to_level_row_major():
    editor = make()
    editor.paint(2, 0, 2, 0)
    editor.paint(0, 3, 0, 3)
    editor.paint(0, 1, 0, 1)
    assert editor.to_level() == Level(4, 5, ((0, 1), (0, 3), (2, 0)))


def test_to_level_round_trips_through_dict():
    editor = make()
    editor.paint(1, 0, 3, 1)
    level = editor.to_level()
    assert Level.from_dict(level.to_dict()) == level


def test_reset_clears_everything():
    editor = make()
    editor.name = "x"
    editor.paint(0, 0, 1, 1)
    editor.reset()
    assert editor.is_dirty is False
    assert editor.to_level() == Level(0, 0)
    editor.resize(2, 2)
    assert editor.is_wall(0, 0) is False