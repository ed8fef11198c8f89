"""
Configuration constants.

Centralizes the tunable values used by map generation and its consumers.
Organized by functional area for easy maintenance. Constructor arguments and
command line flags override these defaults.
"""

from labyrinth.types import Probability, RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# None draws from system entropy. Any other value makes maps reproducible.
RANDOM_SEED: RandomSeed = None

# Root log level used by the command line entry point.
LOG_LEVEL = "WARNING"

# =============================================================================
# MAP GENERATION
# =============================================================================

# Width and height used when no explicit dimensions are given.
DEFAULT_GRID_SIZE = 5

# Chance that a tile opens an exit towards a neighbor that does not exist yet.
TILE_EXIT_PROBABILITY: Probability = 0.5

# Chance that a generated tile is styled as a room rather than a corridor.
ROOM_PROBABILITY: Probability = 0.5

# RNG domain consumed by the default tile generator.
TILE_RNG_DOMAIN = "map.tiles"

# =============================================================================
# PRESENTATION
# =============================================================================

# Size in pixels of a single tile sprite.
TILE_SIZE = 64.0

# Asset file name for a tile, filled with style, numeric mask and encoding.
TILE_ASSET_NAME_FORMAT = "map-{style}-{mask}-{encoding}.png"
