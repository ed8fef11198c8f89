"""Tile generators for Labyrinth maps.

A map asks its generator for one tile per cell, in a fixed scan order:
- BaseTileGenerator: the extension point, one abstract `tile_at` operation
- RandomExitTileGenerator: weighted random exits that always agree with
  neighbors generated earlier
"""

from .base import BaseTileGenerator, TileGenerationError
from .random_exits import RandomExitTileGenerator

__all__ = [
    "BaseTileGenerator",
    "RandomExitTileGenerator",
    "TileGenerationError",
]
