"""Utility functions and constants for sectorgen."""

from .constants import (
    DEFAULT_COLS,
    DEFAULT_OTHER_WORLD_CHANCE,
    DEFAULT_POI_CHANCE,
    DEFAULT_ROWS,
    EXTRA_STARS,
    LEGACY_EXTRA_STARS,
    MAX_GRID_DIMENSION,
    MAX_NAME_ATTEMPTS,
    MAX_NAME_LENGTH,
    MAX_PLACEMENT_ATTEMPTS,
    MIN_NAME_LENGTH,
)
from .format import OutputType, header, table
from .rng import SectorRNG

__all__ = [
    "DEFAULT_COLS",
    "DEFAULT_OTHER_WORLD_CHANCE",
    "DEFAULT_POI_CHANCE",
    "DEFAULT_ROWS",
    "EXTRA_STARS",
    "LEGACY_EXTRA_STARS",
    "MAX_GRID_DIMENSION",
    "MAX_NAME_ATTEMPTS",
    "MAX_NAME_LENGTH",
    "MAX_PLACEMENT_ATTEMPTS",
    "MIN_NAME_LENGTH",
    "OutputType",
    "SectorRNG",
    "header",
    "table",
]
