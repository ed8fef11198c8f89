"""Conversion functions for dealing with coordinate systems."""

from __future__ import annotations

from labyrinth import config
from labyrinth.types import GridPos, PixelPos, TileCoord

# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_valid_grid_pos(
    pos: GridPos, map_width: TileCoord, map_height: TileCoord
) -> bool:
    """Check if grid position is within map bounds."""
    x, y = pos
    return 0 <= x < map_width and 0 <= y < map_height


class Screen:
    """Screen dimensions and tile sizing for placing a grid around the origin.

    Tile coordinates grow north and east; the grid is centered so that the
    middle tile of an odd-sized grid lands on (0, 0).
    """

    def __init__(
        self, dimensions: tuple[int, int], tile_size: float = config.TILE_SIZE
    ) -> None:
        """
        Args:
            dimensions: Number of tiles that fit horizontally and vertically.
            tile_size: Size in pixels of a single tile.
        """
        width, height = dimensions
        if width < 0 or height < 0:
            raise ValueError(f"Screen dimensions must not be negative: {dimensions}")
        if tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {tile_size}")

        self._dimensions = (width, height)
        self._tile_size = float(tile_size)
        self._center_offset = (
            (width - 1) / 2.0 * self._tile_size,
            (height - 1) / 2.0 * self._tile_size,
        )

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._dimensions

    @property
    def tile_size(self) -> float:
        return self._tile_size

    def pixel_position(self, tile_pos: GridPos) -> PixelPos:
        """Convert a tile coordinate into its centered pixel position."""
        x, y = tile_pos
        return (
            x * self._tile_size - self._center_offset[0],
            y * self._tile_size - self._center_offset[1],
        )

    def __repr__(self) -> str:
        return f"Screen(dimensions={self._dimensions}, tile_size={self._tile_size})"
