import pytest

from labyrinth.environment.directions import Direction


def test_all_returns_canonical_order() -> None:
    assert Direction.all() == (
        Direction.NORTH,
        Direction.EAST,
        Direction.SOUTH,
        Direction.WEST,
    )


def test_directions_are_single_mask_bits() -> None:
    assert [int(d) for d in Direction.all()] == [1, 2, 4, 8]


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (Direction.NORTH, Direction.SOUTH),
        (Direction.EAST, Direction.WEST),
        (Direction.SOUTH, Direction.NORTH),
        (Direction.WEST, Direction.EAST),
    ],
)
def test_opposite(direction: Direction, expected: Direction) -> None:
    assert direction.opposite() == expected


def test_rotation_relations_hold() -> None:
    for direction in Direction.all():
        assert direction.opposite().opposite() == direction
        assert direction.rotate_clockwise().rotate_counter_clockwise() == direction
        assert direction.rotate_counter_clockwise().rotate_clockwise() == direction

        rotated = direction
        for _ in range(4):
            rotated = rotated.rotate_clockwise()
        assert rotated == direction

        assert direction.rotate_clockwise() == (
            direction.rotate_counter_clockwise().opposite()
        )


def test_rotate_clockwise_cycle() -> None:
    assert Direction.NORTH.rotate_clockwise() == Direction.EAST
    assert Direction.EAST.rotate_clockwise() == Direction.SOUTH
    assert Direction.SOUTH.rotate_clockwise() == Direction.WEST
    assert Direction.WEST.rotate_clockwise() == Direction.NORTH


def test_offsets_point_north_up() -> None:
    assert Direction.NORTH.offset == (0, 1)
    assert Direction.EAST.offset == (1, 0)
    assert Direction.SOUTH.offset == (0, -1)
    assert Direction.WEST.offset == (-1, 0)


def test_from_offset_inverts_offset() -> None:
    for direction in Direction.all():
        assert Direction.from_offset(*direction.offset) == direction


@pytest.mark.parametrize("offset", [(0, 0), (1, 1), (-1, 1), (2, 0), (0, -3)])
def test_from_offset_rejects_non_unit_steps(offset: tuple[int, int]) -> None:
    assert Direction.from_offset(*offset) is None


def test_displays_are_readable() -> None:
    assert str(Direction.NORTH) == "North"
    assert str(Direction.WEST) == "West"
    assert Direction.EAST.initial == "E"
