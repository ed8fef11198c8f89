"""Base classes for tile generation."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from labyrinth.environment.tile_types import Tile
    from labyrinth.types import GridPos


class TileGenerationError(RuntimeError):
    """A generator produced an impossible tile. Always a bug, never recoverable."""


class BaseTileGenerator(abc.ABC):
    """Abstract base class for per-cell tile generation strategies.

    A map asks its generator for one tile at a time, in a fixed scan order.
    `tiles` holds only the cells generated earlier in that order and is
    read-only. Implementations must not depend on cells that are not in it.
    """

    @abc.abstractmethod
    def tile_at(self, tiles: Mapping[GridPos, Tile], location: GridPos) -> Tile:
        """Produce the tile for `location` given the already generated cells."""
        raise NotImplementedError
