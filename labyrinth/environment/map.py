from __future__ import annotations

import logging
from collections.abc import Iterator
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from labyrinth.environment import tile_types
from labyrinth.environment.directions import Direction
from labyrinth.environment.tile_types import Tile, TileStyle
from labyrinth.types import GridPos, TileCoord
from labyrinth.util.coordinates import is_valid_grid_pos

if TYPE_CHECKING:
    from labyrinth.environment.generators import BaseTileGenerator

logger = logging.getLogger(__name__)


class TileMap:
    """A fixed-size grid of generated tiles.

    The whole grid is generated in the constructor. Afterwards the map is only
    read, so one instance can be shared by any number of readers.
    """

    def __init__(
        self, width: TileCoord, height: TileCoord, generator: BaseTileGenerator
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(
                f"Map dimensions must not be negative, got {width}x{height}"
            )

        self.width: TileCoord = width
        self.height: TileCoord = height
        self.generator = generator
        self.tiles: dict[GridPos, Tile] = {}

        # Cached property arrays, populated on demand.
        self._exit_mask_cache: np.ndarray | None = None
        self._room_map_cache: np.ndarray | None = None

        self._generate()

    @classmethod
    def square(cls, size: TileCoord, generator: BaseTileGenerator) -> TileMap:
        return cls(size, size, generator)

    def _generate(self) -> None:
        # The generator sees exactly the tiles that precede each cell in scan
        # order, through a live read-only view.
        generated = MappingProxyType(self.tiles)
        for pos in self.scan_order():
            self.tiles[pos] = self.generator.tile_at(generated, pos)

        rooms = sum(1 for tile in self.tiles.values() if tile.style is TileStyle.ROOM)
        logger.debug(
            "Generated %dx%d map with %r: %d room tiles, %d corridor tiles",
            self.width,
            self.height,
            self.generator,
            rooms,
            len(self.tiles) - rooms,
        )

    def scan_order(self) -> Iterator[GridPos]:
        """All in-bounds coordinates, x ascending in the outer loop, then y."""
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y)

    def in_bounds(self, pos: GridPos) -> bool:
        return is_valid_grid_pos(pos, self.width, self.height)

    def tile_at(self, pos: GridPos) -> Tile | None:
        return self.tiles.get(pos)

    def can_move(self, from_pos: GridPos, to_pos: GridPos) -> bool:
        """Whether a single step from `from_pos` to `to_pos` is allowed.

        Both tiles must agree the shared wall is open: the origin needs an exit
        in the direction of travel and the target the opposite one. Identical,
        out-of-bounds, diagonal and multi-tile moves are never allowed.
        """
        if not (self.in_bounds(from_pos) and self.in_bounds(to_pos)):
            return False

        direction = Direction.from_offset(
            to_pos[0] - from_pos[0], to_pos[1] - from_pos[1]
        )
        if direction is None:
            return False

        from_tile = self.tiles.get(from_pos)
        to_tile = self.tiles.get(to_pos)
        if from_tile is None or to_tile is None:
            return False

        return from_tile.has_exit(direction) and to_tile.has_exit(
            direction.opposite()
        )

    def iter_tiles(self) -> Iterator[tuple[GridPos, str]]:
        """Yield (position, asset name) pairs in scan order.

        Each call returns a fresh iterator. Cells without a tile are skipped.
        """
        for pos in self.scan_order():
            tile = self.tiles.get(pos)
            if tile is not None:
                yield pos, tile.asset_name

    def invalidate_caches(self) -> None:
        """Call this whenever `self.tiles` changes to clear cached arrays."""
        self._exit_mask_cache = None
        self._room_map_cache = None

    @property
    def exit_masks(self) -> np.ndarray:
        """Read-only uint8 array of shape (width, height) of each cell's exit mask."""
        if self._exit_mask_cache is None:
            self._exit_mask_cache = tile_types.get_exit_mask_array(
                self.tiles, self.width, self.height
            )
            self._exit_mask_cache.flags.writeable = False
        return self._exit_mask_cache

    @property
    def rooms(self) -> np.ndarray:
        """Read-only bool array of shape (width, height), True for room tiles."""
        if self._room_map_cache is None:
            self._room_map_cache = tile_types.get_room_map(
                self.tiles, self.width, self.height
            )
            self._room_map_cache.flags.writeable = False
        return self._room_map_cache

    def __repr__(self) -> str:
        return f"TileMap(width={self.width}, height={self.height})"
