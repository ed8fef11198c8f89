"""Compass directions and their algebra.

Directions are powers of two so that a set of them composes into an exit mask
with a plain bitwise OR (see `tile_types.ExitMask`).
"""

from __future__ import annotations

from enum import IntEnum

from labyrinth.types import Offset


class Direction(IntEnum):
    """One of the four cardinal directions, valued as a single mask bit."""

    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8

    @classmethod
    def all(cls) -> tuple[Direction, ...]:
        """All four directions in canonical North, East, South, West order."""
        return _CANONICAL_ORDER

    @classmethod
    def from_offset(cls, dx: int, dy: int) -> Direction | None:
        """Return the direction of a single unit step, or None for any other
        displacement (zero, diagonal or multi-tile)."""
        return _OFFSET_TO_DIRECTION.get((dx, dy))

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def rotate_clockwise(self) -> Direction:
        return _CLOCKWISE[self]

    def rotate_counter_clockwise(self) -> Direction:
        return _COUNTER_CLOCKWISE[self]

    @property
    def offset(self) -> Offset:
        """Grid step for this direction. Y grows northward."""
        return _OFFSETS[self]

    @property
    def initial(self) -> str:
        return self.name[0]

    def __str__(self) -> str:
        return self.name.capitalize()


_CANONICAL_ORDER: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

_CLOCKWISE: dict[Direction, Direction] = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}

_COUNTER_CLOCKWISE: dict[Direction, Direction] = {
    after: before for before, after in _CLOCKWISE.items()
}

_OFFSETS: dict[Direction, Offset] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

_OFFSET_TO_DIRECTION: dict[Offset, Direction] = {
    offset: direction for direction, offset in _OFFSETS.items()
}
