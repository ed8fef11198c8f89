"""
Tile types for exit-mask maps.

This module defines:
- `ExitMask`: the sixteen possible combinations of open exits for a tile, as an
  IntEnum whose value is the bitwise union of its `Direction` bits. Masks
  compare and hash by value, so they work as dictionary keys and as NumPy
  array values.
- `TileStyle`: a presentation-only tag (room or corridor). Styles never take
  part in movement rules.
- `Tile`: the immutable value stored per grid cell, pairing a style with an
  exit mask.
- Helper functions that turn a coordinate -> tile mapping into NumPy arrays for
  consumers that prefer whole-grid views.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import IntEnum, StrEnum

import numpy as np

from labyrinth import config
from labyrinth.environment.directions import Direction
from labyrinth.types import GridPos, TileCoord

MAX_EXITS = len(Direction)


class ExitMask(IntEnum):
    """Set of open exits of a tile, named by direction initials in N, E, S, W order."""

    ZERO = 0

    # single exit (4)
    N = Direction.NORTH
    E = Direction.EAST
    S = Direction.SOUTH
    W = Direction.WEST

    # double exit (6)
    NE = Direction.NORTH | Direction.EAST
    NS = Direction.NORTH | Direction.SOUTH
    NW = Direction.NORTH | Direction.WEST
    ES = Direction.EAST | Direction.SOUTH
    EW = Direction.EAST | Direction.WEST
    SW = Direction.SOUTH | Direction.WEST

    # triple exit (4)
    NES = Direction.NORTH | Direction.EAST | Direction.SOUTH
    NEW = Direction.NORTH | Direction.EAST | Direction.WEST
    NSW = Direction.NORTH | Direction.SOUTH | Direction.WEST
    ESW = Direction.EAST | Direction.SOUTH | Direction.WEST

    # all exits (1)
    NESW = Direction.NORTH | Direction.EAST | Direction.SOUTH | Direction.WEST

    @classmethod
    def from_directions(cls, directions: Iterable[Direction]) -> ExitMask | None:
        """Build a mask from zero to four distinct directions.

        Returns None if more than four elements are given, whatever they are,
        or if any direction repeats. Input order does not matter. An empty
        input gives `ZERO`.

        Raises:
            TypeError: If an element is not a `Direction`.
        """
        requested = list(directions)
        if len(requested) > MAX_EXITS:
            return None

        for direction in requested:
            if not isinstance(direction, Direction):
                raise TypeError(f"Expected a Direction, got {direction!r}")

        if len(set(requested)) != len(requested):
            return None

        bits = 0
        for direction in requested:
            bits |= direction
        return cls(bits)

    def directions(self) -> tuple[Direction, ...]:
        """Member directions in canonical North, East, South, West order."""
        return tuple(d for d in Direction.all() if self & d)

    def has_exit(self, direction: Direction) -> bool:
        return bool(self & direction)

    @property
    def exit_count(self) -> int:
        return self.value.bit_count()

    def __str__(self) -> str:
        return self.name


ALL_EXIT_MASKS: tuple[ExitMask, ...] = tuple(ExitMask)


class TileStyle(StrEnum):
    """Presentation category of a tile, orthogonal to its exits."""

    ROOM = "room"
    CORRIDOR = "corridor"


@dataclass(frozen=True, slots=True)
class Tile:
    """A generated map cell: its style and its open exits."""

    style: TileStyle
    exits: ExitMask

    @classmethod
    def from_directions(
        cls, directions: Iterable[Direction], style: TileStyle = TileStyle.CORRIDOR
    ) -> Tile | None:
        """Create a tile from directions, or None when they don't form a valid mask."""
        exits = ExitMask.from_directions(directions)
        if exits is None:
            return None
        return cls(style, exits)

    def directions(self) -> tuple[Direction, ...]:
        return self.exits.directions()

    def has_exit(self, direction: Direction) -> bool:
        return self.exits.has_exit(direction)

    @property
    def asset_name(self) -> str:
        """File name of the sprite for this tile, e.g. ``map-room-3-NE.png``."""
        return config.TILE_ASSET_NAME_FORMAT.format(
            style=self.style.value,
            mask=int(self.exits),
            encoding=str(self.exits),
        )

    def __str__(self) -> str:
        return f"{self.style.value}:{self.exits}"


def get_exit_mask_array(
    tiles: Mapping[GridPos, Tile], width: TileCoord, height: TileCoord
) -> np.ndarray:
    """Return a (width, height) uint8 array of exit masks.

    Cells without a tile, and tiles outside the given bounds, are left at
    `ExitMask.ZERO`.
    """
    masks = np.zeros((width, height), dtype=np.uint8, order="F")
    for (x, y), tile in tiles.items():
        if 0 <= x < width and 0 <= y < height:
            masks[x, y] = tile.exits
    return masks


def get_room_map(
    tiles: Mapping[GridPos, Tile], width: TileCoord, height: TileCoord
) -> np.ndarray:
    """Boolean array of shape (width, height) where True means the tile is a room."""
    rooms = np.full((width, height), fill_value=False, dtype=bool, order="F")
    for (x, y), tile in tiles.items():
        if 0 <= x < width and 0 <= y < height:
            rooms[x, y] = tile.style is TileStyle.ROOM
    return rooms
