"""Sector generation engine."""

from .errors import (
    NameExhaustedError,
    PlacementExhaustedError,
    SectorConfigError,
    SectorGenerationError,
)
from .naming import assign_system_name
from .sector_generator import generate_sector, roll_star_count, star_count_range
from .star_factory import new_star

__all__ = [
    "NameExhaustedError",
    "PlacementExhaustedError",
    "SectorConfigError",
    "SectorGenerationError",
    "assign_system_name",
    "generate_sector",
    "new_star",
    "roll_star_count",
    "star_count_range",
]
