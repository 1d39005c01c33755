import pytest

from snakegame.direction import Direction

ALL_VALUES = [0, 1, 2, 3]


def test_numbering_is_clockwise_from_up():
    assert [Direction(value) for value in ALL_VALUES] == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]


@pytest.mark.parametrize(
    "start, expected",
    [
        (Direction.UP, Direction.RIGHT),
        (Direction.RIGHT, Direction.DOWN),
        (Direction.DOWN, Direction.LEFT),
        (Direction.LEFT, Direction.UP),
    ],
)
def test_clockwise(start, expected):
    assert Direction.clockwise(start) is expected


@pytest.mark.parametrize(
    "start, expected",
    [
        (Direction.UP, Direction.LEFT),
        (Direction.LEFT, Direction.DOWN),
        (Direction.DOWN, Direction.RIGHT),
        (Direction.RIGHT, Direction.UP),
    ],
)
def test_counterclockwise(start, expected):
    assert Direction.counterclockwise(start) is expected


@pytest.mark.parametrize("value", ALL_VALUES)
def test_turns_are_inverse(value):
    direction = Direction(value)
    assert Direction.counterclockwise(Direction.clockwise(direction)) is direction
    assert Direction.clockwise(Direction.counterclockwise(direction)) is direction


@pytest.mark.parametrize("value", ALL_VALUES)
def test_four_turns_return_home(value):
    direction = Direction(value)
    current = direction
    for _ in range(4):
        current = Direction.clockwise(current)
    assert current is direction


@pytest.mark.parametrize("value", ALL_VALUES)
def test_opposite_deltas_cancel(value):
    direction = Direction(value)
    dr, dc = Direction.delta(direction)
    opposite = Direction.clockwise(Direction.clockwise(direction))
    odr, odc = Direction.delta(opposite)
    assert (dr + odr, dc + odc) == (0, 0)
    assert abs(dr) + abs(dc) == 1


def test_up_decreases_row():
    assert Direction.UP.delta() == (-1, 0)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "Direction UP"),
        (1, "Direction RIGHT"),
        (2, "Direction DOWN"),
        (3, "Direction LEFT"),
    ],
)
def test_str(value, expected):
    assert Direction.__str__(Direction(value)) == expected


def test_str_up():
    assert Direction.__str__(Direction.UP) == "Direction UP"