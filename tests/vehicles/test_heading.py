# tests/vehicles/test_heading.py
import pytest

from crucible.types import Position
from crucible.vehicles.heading import Direction, Heading

OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def test_rotations():
    assert Direction.NORTH.right() == Direction.EAST
    assert Direction.EAST.right() == Direction.SOUTH
    assert Direction.WEST.right() == Direction.NORTH
    assert Direction.NORTH.left() == Direction.WEST
    assert Direction.SOUTH.left() == Direction.EAST
    assert Direction.EAST.straight() == Direction.EAST


@pytest.mark.parametrize("direction", list(Direction))
def test_rotation_group_of_order_four(direction):
    d = direction
    for _ in range(4):
        d = d.right()
    assert d == direction
    assert direction.left().right() == direction


@pytest.mark.parametrize("direction", list(Direction))
def test_single_operation_never_reverses(direction):
    for op in (direction.left, direction.right, direction.straight):
        assert op() != OPPOSITE[direction]


def test_next_position_uses_downward_y():
    origin = Position(3, 3)
    assert Heading(Direction.NORTH, 1).next_position(origin) == Position(3, 2)
    assert Heading(Direction.EAST, 1).next_position(origin) == Position(4, 3)
    assert Heading(Direction.SOUTH, 1).next_position(origin) == Position(3, 4)
    assert Heading(Direction.WEST, 1).next_position(origin) == Position(2, 3)


def test_below_min_run_only_straight():
    heading = Heading(Direction.EAST, 2)
    assert heading.next_headings(4, 10) == [Heading(Direction.EAST, 3)]


def test_between_limits_three_options():
    heading = Heading(Direction.EAST, 4)
    assert heading.next_headings(4, 10) == [
        Heading(Direction.NORTH, 1),
        Heading(Direction.EAST, 5),
        Heading(Direction.SOUTH, 1),
    ]


def test_at_max_run_must_turn():
    heading = Heading(Direction.SOUTH, 3)
    assert heading.next_headings(0, 3) == [
        Heading(Direction.EAST, 1),
        Heading(Direction.WEST, 1),
    ]


@pytest.mark.parametrize("min_run, max_run", [(0, 1), (0, 3), (1, 1), (4, 10)])
@pytest.mark.parametrize("direction", list(Direction))
def test_next_headings_never_empty_never_reversal(min_run, max_run, direction):
    for run in range(0, max_run + 1):
        options = Heading(direction, run).next_headings(min_run, max_run)
        assert options
        assert all(h.direction != OPPOSITE[direction] for h in options)
        assert all(1 <= h.run_length <= max_run for h in options)


def test_can_stop():
    assert Heading(Direction.EAST, 0).can_stop(0)
    assert not Heading(Direction.EAST, 3).can_stop(4)
    assert Heading(Direction.EAST, 4).can_stop(4)


def test_heading_hash_distinguishes_run_length():
    assert Heading(Direction.EAST, 1) == Heading(Direction.EAST, 1)
    assert len({Heading(Direction.EAST, 1), Heading(Direction.EAST, 2)}) == 2
