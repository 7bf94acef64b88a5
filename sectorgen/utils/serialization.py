"""Sector serialization to/from JSON.

Saved sectors can be reloaded for display without regenerating them. Every
loaded star goes back through Sector.add_star, so a hand-edited file that
breaks the sector's invariants is rejected.
"""

import json
from pathlib import Path
from typing import Any

from ..models.culture import Culture
from ..models.poi import PointOfInterest
from ..models.sector import Sector
from ..models.star import Star
from ..models.world import World, WorldTag


def save_sector(sector: Sector, filepath: str | Path) -> None:
    """Save a sector to a JSON file.

    Args:
        sector: Sector to save
        filepath: Destination path; parent directories are created as needed
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(sector_to_dict(sector), f, indent=2)


def load_sector(filepath: str | Path) -> Sector:
    """Load a sector from a JSON file.

    Returns:
        Sealed Sector

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
    """
    with open(filepath) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid sector file {filepath}: {e}") from e

    return sector_from_dict(data)


def sector_to_dict(sector: Sector) -> dict[str, Any]:
    """Convert a Sector to a JSON-compatible dictionary."""
    return {
        "seed": sector.seed,
        "rows": sector.rows,
        "cols": sector.cols,
        "stars": [_serialize_star(s) for s in sector.stars],
    }


def sector_from_dict(data: dict[str, Any]) -> Sector:
    """Reconstruct a sealed Sector from a dictionary.

    Raises:
        ValueError: If required keys are missing or values are invalid
    """
    try:
        sector = Sector(rows=data["rows"], cols=data["cols"], seed=data.get("seed"))
        for star_data in data["stars"]:
            sector.add_star(_deserialize_star(star_data))
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed sector data: {e!r}") from e

    sector.seal()
    return sector


def _serialize_star(star: Star) -> dict[str, Any]:
    """Convert Star to dictionary."""
    return {
        "row": star.row,
        "col": star.col,
        "name": star.name,
        "culture": star.culture.value,
        "worlds": [_serialize_world(w) for w in star.worlds],
        "pois": [_serialize_poi(p) for p in star.pois],
    }


def _deserialize_star(data: dict[str, Any]) -> Star:
    """Reconstruct Star from dictionary."""
    return Star(
        row=data["row"],
        col=data["col"],
        name=data["name"],
        culture=Culture(data["culture"]),
        worlds=tuple(_deserialize_world(w) for w in data["worlds"]),
        pois=tuple(_deserialize_poi(p) for p in data.get("pois", [])),
    )


def _serialize_world(world: World) -> dict[str, Any]:
    """Convert World to dictionary."""
    data = {
        "name": world.name,
        "culture": world.culture.value,
        "primary": world.primary,
        "tags": [{"name": t.name, "description": t.description} for t in world.tags],
        "atmosphere": world.atmosphere,
        "temperature": world.temperature,
        "biosphere": world.biosphere,
        "population": world.population,
        "tech_level": world.tech_level,
    }
    if not world.primary:
        data["origin"] = world.origin
        data["relationship"] = world.relationship
        data["contact_point"] = world.contact_point
    return data


def _deserialize_world(data: dict[str, Any]) -> World:
    """Reconstruct World from dictionary."""
    return World(
        name=data["name"],
        culture=Culture(data["culture"]),
        primary=data["primary"],
        tags=tuple(WorldTag(t["name"], t["description"]) for t in data["tags"]),
        atmosphere=data["atmosphere"],
        temperature=data["temperature"],
        biosphere=data["biosphere"],
        population=data["population"],
        tech_level=data["tech_level"],
        origin=data.get("origin"),
        relationship=data.get("relationship"),
        contact_point=data.get("contact_point"),
    )


def _serialize_poi(poi: PointOfInterest) -> dict[str, Any]:
    """Convert PointOfInterest to dictionary."""
    return {
        "point": poi.point,
        "occupied_by": poi.occupied_by,
        "situation": poi.situation,
    }


def _deserialize_poi(data: dict[str, Any]) -> PointOfInterest:
    """Reconstruct PointOfInterest from dictionary."""
    return PointOfInterest(
        point=data["point"],
        occupied_by=data["occupied_by"],
        situation=data["situation"],
    )
