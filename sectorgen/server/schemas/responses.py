"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class TagResponse(BaseModel):
    """World tag."""

    name: str
    description: str


class WorldResponse(BaseModel):
    """World orbiting a star."""

    name: str
    culture: str
    primary: bool
    tags: list[TagResponse]
    atmosphere: str
    temperature: str
    biosphere: str
    population: str
    tech_level: str
    origin: str | None = None
    relationship: str | None = None
    contact_point: str | None = None


class PointOfInterestResponse(BaseModel):
    """Point of interest in a star system."""

    point: str
    occupied_by: str
    situation: str


class StarResponse(BaseModel):
    """Star system."""

    row: int
    col: int
    name: str
    culture: str
    worlds: list[WorldResponse]
    pois: list[PointOfInterestResponse] = Field(default_factory=list)


class SectorResponse(BaseModel):
    """Generated sector, stars in coordinate order."""

    seed: int | None
    rows: int
    cols: int
    stars: list[StarResponse]


class TagListResponse(BaseModel):
    """Available world tag names."""

    tags: list[str]
