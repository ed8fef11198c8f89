"""Procedural exit-mask tile maps.

Every cell of a grid gets a set of open exits (North/East/South/West) that
always agrees with its neighbors, and `TileMap.can_move` answers whether a
single step between two cells is allowed.
"""

from labyrinth.environment.directions import Direction
from labyrinth.environment.generators import (
    BaseTileGenerator,
    RandomExitTileGenerator,
    TileGenerationError,
)
from labyrinth.environment.map import TileMap
from labyrinth.environment.tile_types import ExitMask, Tile, TileStyle

__all__ = [
    "BaseTileGenerator",
    "Direction",
    "ExitMask",
    "RandomExitTileGenerator",
    "Tile",
    "TileGenerationError",
    "TileMap",
    "TileStyle",
]
