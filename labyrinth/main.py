"""Command line entry point: generate a map and print what a renderer would load."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from labyrinth import config
from labyrinth.environment.generators import RandomExitTileGenerator
from labyrinth.environment.map import TileMap
from labyrinth.util import rng

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Generate an exit-mask tile map and print its tiles.",
    )
    parser.add_argument("--width", type=int, default=config.DEFAULT_GRID_SIZE)
    parser.add_argument("--height", type=int, default=config.DEFAULT_GRID_SIZE)
    parser.add_argument(
        "--seed",
        default=config.RANDOM_SEED,
        help="Master seed; omit for a different map on every run",
    )
    parser.add_argument(
        "--exit-probability",
        type=float,
        default=config.TILE_EXIT_PROBABILITY,
        help="Chance of opening an exit towards an ungenerated neighbor",
    )
    parser.add_argument(
        "--room-probability",
        type=float,
        default=config.ROOM_PROBABILITY,
        help="Chance of a tile being styled as a room",
    )
    parser.add_argument(
        "--format",
        choices=("assets", "masks"),
        default="assets",
        help="assets: one 'x,y<TAB>asset' line per tile; masks: exit grid, north up",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def format_masks(tile_map: TileMap) -> list[str]:
    """One line per row, northernmost row first, exits as direction initials."""
    lines = []
    for y in reversed(range(tile_map.height)):
        cells = []
        for x in range(tile_map.width):
            tile = tile_map.tile_at((x, y))
            cells.append(f"{tile.exits!s:<4}" if tile is not None else "    ")
        lines.append(" ".join(cells).rstrip())
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.width < 0 or args.height < 0:
        parser.error("--width and --height must not be negative")

    rng.init(args.seed)
    try:
        generator = RandomExitTileGenerator(
            exit_probability=args.exit_probability,
            room_probability=args.room_probability,
        )
    except ValueError as e:
        parser.error(str(e))

    logger.info("Generating %dx%d map (seed=%r)", args.width, args.height, args.seed)
    tile_map = TileMap(args.width, args.height, generator)

    if args.format == "masks":
        for line in format_masks(tile_map):
            print(line)
    else:
        for (x, y), asset_name in tile_map.iter_tiles():
            print(f"{x},{y}\t{asset_name}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
