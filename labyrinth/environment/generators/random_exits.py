"""Weighted random exits constrained by already placed neighbors."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING

from labyrinth import config
from labyrinth.environment.directions import Direction
from labyrinth.environment.tile_types import ExitMask, Tile, TileStyle
from labyrinth.util import rng

from .base import BaseTileGenerator, TileGenerationError

if TYPE_CHECKING:
    from labyrinth.types import GridPos, Probability, RandomSeed
    from labyrinth.util.rng import RNG

logger = logging.getLogger(__name__)


def _validate_probability(name: str, value: Probability) -> float:
    value = float(value)
    # Written this way round so NaN is rejected too.
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0.0, 1.0], got {value}")
    return value


class RandomExitTileGenerator(BaseTileGenerator):
    """Default tile generator.

    For every direction of the target cell:

    - If the neighbor in that direction was already generated, the exit is
      open only when the neighbor has the matching exit back. Two adjacent
      tiles therefore never disagree about their shared wall, and no exit
      ever leads into a wall.
    - Otherwise the exit is opened with `exit_probability`. The neighbor,
      once generated, is the one that has to agree.

    The style is drawn afterwards: ROOM with `room_probability`, else
    CORRIDOR.

    Randomness comes from, in order of preference, the given `rng_stream`, a private
    stream derived from `seed`, or the global ``map.tiles`` stream. All draws
    for one tile happen under a lock so an instance can be shared by threads.
    With an `RNGStream` that lock is the provider's, so separate generators
    on the same stream never interleave their draws either.
    """

    def __init__(
        self,
        exit_probability: Probability = config.TILE_EXIT_PROBABILITY,
        room_probability: Probability = config.ROOM_PROBABILITY,
        seed: RandomSeed = None,
        rng_stream: RNG | None = None,
    ) -> None:
        self.exit_probability = _validate_probability(
            "exit_probability", exit_probability
        )
        self.room_probability = _validate_probability(
            "room_probability", room_probability
        )

        if rng_stream is not None:
            self._rng = rng_stream
        elif seed is not None:
            self._rng = rng.RNGProvider(seed).get(config.TILE_RNG_DOMAIN)
        else:
            self._rng = rng.get(config.TILE_RNG_DOMAIN)

        # Generators drawing from one provider serialize on its lock, so each
        # tile still takes a contiguous block of the shared sequence.
        if isinstance(self._rng, rng.RNGStream):
            self._lock = self._rng.lock
        else:
            self._lock = threading.Lock()

    def _chance(self, probability: float) -> bool:
        return self._rng.random() < probability

    def tile_at(self, tiles: Mapping[GridPos, Tile], location: GridPos) -> Tile:
        x, y = location
        exits: list[Direction] = []

        with self._lock:
            for direction in Direction.all():
                dx, dy = direction.offset
                neighbor = tiles.get((x + dx, y + dy))
                if neighbor is not None:
                    if neighbor.has_exit(direction.opposite()):
                        exits.append(direction)
                elif self._chance(self.exit_probability):
                    exits.append(direction)

            style = (
                TileStyle.ROOM
                if self._chance(self.room_probability)
                else TileStyle.CORRIDOR
            )

        mask = ExitMask.from_directions(exits)
        if mask is None:
            raise TileGenerationError(
                f"Collected invalid exits {exits} for tile at {location}"
            )

        return Tile(style, mask)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(exit_probability={self.exit_probability}, "
            f"room_probability={self.room_probability})"
        )
