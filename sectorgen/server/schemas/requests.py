"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field

from ...utils.constants import (
    DEFAULT_COLS,
    DEFAULT_OTHER_WORLD_CHANCE,
    DEFAULT_POI_CHANCE,
    DEFAULT_ROWS,
    MAX_GRID_DIMENSION,
)


class CreateSectorRequest(BaseModel):
    """Request to generate a new sector."""

    rows: int = Field(default=DEFAULT_ROWS, ge=1, le=MAX_GRID_DIMENSION, description="Grid rows")
    cols: int = Field(default=DEFAULT_COLS, ge=1, le=MAX_GRID_DIMENSION, description="Grid columns")
    excludeTags: list[str] = Field(  # noqa: N815
        default_factory=list, description="World tag names that must never be picked"
    )
    poiChance: int = Field(  # noqa: N815
        default=DEFAULT_POI_CHANCE, description="Percentage chance of a point of interest per star"
    )
    otherWorldChance: int = Field(  # noqa: N815
        default=DEFAULT_OTHER_WORLD_CHANCE,
        lt=100,
        description="Percentage chance of each additional world (cascading)",
    )
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
    legacyCount: bool = Field(  # noqa: N815
        default=False, description="Place one star beyond the rolled target, like older generators"
    )
