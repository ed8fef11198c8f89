from __future__ import annotations

from typing import TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# Grid coordinates - absolute positions on the tile map
GridPos: TypeAlias = tuple[TileCoord, TileCoord]  # Example: (2, 3) = tile 2,3 on map

# Discrete grid steps
UnitStep: TypeAlias = int  # -1, 0 or 1 for cardinal moves
Offset: TypeAlias = tuple[UnitStep, UnitStep]  # Example: (0, 1) = one step north

# Pixel coordinates produced for presentation layers
PixelCoord: TypeAlias = float
PixelPos: TypeAlias = tuple[PixelCoord, PixelCoord]

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Chance in [0.0, 1.0] used for a single Bernoulli draw.
Probability: TypeAlias = float

# Master seed accepted by the RNG system; None means system entropy.
RandomSeed: TypeAlias = int | str | None
