import numpy as np
import pytest

from labyrinth.environment import tile_types
from labyrinth.environment.directions import Direction
from labyrinth.environment.tile_types import ExitMask, Tile, TileStyle

NORTH, EAST, SOUTH, WEST = Direction.all()


@pytest.mark.parametrize(
    ("directions", "expected"),
    [
        ([], ExitMask.ZERO),
        ([NORTH], ExitMask.N),
        ([EAST], ExitMask.E),
        ([SOUTH, NORTH], ExitMask.NS),
        ([EAST, NORTH], ExitMask.NE),
        ([SOUTH, WEST], ExitMask.SW),
        ([NORTH, EAST, SOUTH], ExitMask.NES),
        ([NORTH, WEST, SOUTH], ExitMask.NSW),
        ([NORTH, EAST, SOUTH, WEST], ExitMask.NESW),
    ],
)
def test_from_directions_maps_known_tiles(
    directions: list[Direction], expected: ExitMask
) -> None:
    assert ExitMask.from_directions(directions) == expected
    assert ExitMask.from_directions(reversed(directions)) == expected


def test_from_directions_is_order_independent() -> None:
    assert ExitMask.from_directions([EAST, NORTH]) is ExitMask.NE
    assert ExitMask.from_directions([NORTH, EAST]) is ExitMask.NE
    assert ExitMask.from_directions({WEST, SOUTH, EAST}) is ExitMask.ESW


@pytest.mark.parametrize(
    "directions",
    [
        [NORTH, NORTH],
        [NORTH, EAST, NORTH],
        [WEST, WEST, WEST],
        [NORTH, EAST, SOUTH, WEST, NORTH],
        [NORTH, EAST, SOUTH, WEST, EAST, SOUTH],
    ],
)
def test_from_directions_rejects_invalid_inputs(directions: list[Direction]) -> None:
    assert ExitMask.from_directions(directions) is None


def test_from_directions_rejects_non_directions() -> None:
    with pytest.raises(TypeError, match="Expected a Direction"):
        ExitMask.from_directions([1, 2])  # type: ignore[list-item]


def test_from_directions_rejects_too_many_elements_of_any_kind() -> None:
    too_many = [1, 2, 4, 8, 1]
    assert ExitMask.from_directions(too_many) is None  # type: ignore[arg-type]
    assert ExitMask.from_directions(["N"] * 5) is None  # type: ignore[list-item]


def test_directions_return_canonical_order() -> None:
    assert ExitMask.NE.directions() == (NORTH, EAST)
    assert ExitMask.ESW.directions() == (EAST, SOUTH, WEST)
    assert ExitMask.NESW.directions() == (NORTH, EAST, SOUTH, WEST)
    assert ExitMask.ZERO.directions() == ()


def test_directions_and_from_directions_roundtrip() -> None:
    assert len(tile_types.ALL_EXIT_MASKS) == 16
    for mask in tile_types.ALL_EXIT_MASKS:
        assert ExitMask.from_directions(mask.directions()) is mask
        assert mask.exit_count == len(mask.directions())


def test_mask_values_are_bit_unions() -> None:
    assert {int(mask) for mask in tile_types.ALL_EXIT_MASKS} == set(range(16))
    assert ExitMask(3) is ExitMask.NE
    assert ExitMask(13) is ExitMask.NSW


def test_masks_work_as_lookup_keys() -> None:
    sprites = {ExitMask.NE: "corner"}
    assert sprites[ExitMask.from_directions([EAST, NORTH])] == "corner"
    assert sprites.get(ExitMask(3)) == "corner"


def test_displays_are_readable() -> None:
    assert str(ExitMask.ZERO) == "ZERO"
    assert str(ExitMask.NE) == "NE"
    assert str(ExitMask.NSW) == "NSW"


def test_has_exit() -> None:
    assert ExitMask.NS.has_exit(NORTH)
    assert ExitMask.NS.has_exit(SOUTH)
    assert not ExitMask.NS.has_exit(EAST)
    assert not ExitMask.ZERO.has_exit(WEST)


def test_tile_style_displays_correctly() -> None:
    assert str(TileStyle.ROOM) == "room"
    assert str(TileStyle.CORRIDOR) == "corridor"


def test_tile_directions_returns_mask_directions() -> None:
    room_tile = Tile(TileStyle.ROOM, ExitMask.NE)
    corridor_tile = Tile(TileStyle.CORRIDOR, ExitMask.ESW)

    assert room_tile.directions() == (NORTH, EAST)
    assert corridor_tile.directions() == (EAST, SOUTH, WEST)


def test_tile_is_an_immutable_value() -> None:
    tile1 = Tile(TileStyle.CORRIDOR, ExitMask.NS)
    tile2 = Tile(TileStyle.CORRIDOR, ExitMask.NS)

    assert tile1 == tile2
    assert hash(tile1) == hash(tile2)
    assert tile1 != Tile(TileStyle.ROOM, ExitMask.NS)
    with pytest.raises(AttributeError):
        tile1.exits = ExitMask.ZERO  # type: ignore[misc]


def test_tile_from_directions() -> None:
    tile = Tile.from_directions([WEST, EAST])
    assert tile == Tile(TileStyle.CORRIDOR, ExitMask.EW)
    assert Tile.from_directions([NORTH], style=TileStyle.ROOM) == Tile(
        TileStyle.ROOM, ExitMask.N
    )
    assert Tile.from_directions([EAST, EAST]) is None


def test_asset_name_is_derived_from_style_and_mask() -> None:
    assert Tile(TileStyle.ROOM, ExitMask.NE).asset_name == "map-room-3-NE.png"
    assert (
        Tile(TileStyle.CORRIDOR, ExitMask.ZERO).asset_name
        == "map-corridor-0-ZERO.png"
    )


def test_get_exit_mask_array() -> None:
    tiles = {
        (0, 0): Tile(TileStyle.ROOM, ExitMask.E),
        (1, 0): Tile(TileStyle.CORRIDOR, ExitMask.W),
        (5, 5): Tile(TileStyle.CORRIDOR, ExitMask.NESW),  # out of bounds
    }
    masks = tile_types.get_exit_mask_array(tiles, 2, 2)

    assert masks.dtype == np.uint8
    assert masks.shape == (2, 2)
    assert masks.tolist() == [[ExitMask.E, 0], [ExitMask.W, 0]]


def test_get_room_map() -> None:
    tiles = {
        (0, 0): Tile(TileStyle.ROOM, ExitMask.ZERO),
        (0, 1): Tile(TileStyle.CORRIDOR, ExitMask.ZERO),
    }
    rooms = tile_types.get_room_map(tiles, 1, 2)
    assert rooms.tolist() == [[True, False]]
