"""Star system composition."""

from typing import Iterable

from ..content.culture import random_culture
from ..content.poi import new_poi
from ..content.world import new_world
from ..models.star import Star
from ..utils.rng import SectorRNG
from .errors import SectorConfigError


def check_other_world_chance(other_world_chance: int) -> None:
    """Reject cascade chances that would add worlds forever.

    Raises:
        SectorConfigError: If other_world_chance >= 100
    """
    if other_world_chance >= 100:
        raise SectorConfigError(
            f"Invalid other world chance: {other_world_chance} (must be < 100, "
            "otherwise the world cascade never ends)"
        )


def excluded_tag_list(excluded_tags: str | Iterable[str]) -> list[str]:
    """Return excluded tag names as a list. A bare string is one tag name."""
    if isinstance(excluded_tags, str):
        return [excluded_tags]
    return list(excluded_tags)


def new_star(
    row: int,
    col: int,
    name: str,
    excluded_tags: str | Iterable[str],
    poi_chance: int,
    other_world_chance: int,
    rng: SectorRNG,
) -> Star:
    """Generate a star system at row, col.

    Composition:
    1. Pick a random culture and build the primary world under it
    2. Roll d100 (0-99); while the roll is below other_world_chance, add a
       secondary world under a newly picked culture (a cascade, so each extra
       world is less likely than the last)
    3. Roll d100 once; below poi_chance, attach one point of interest

    Chances are compared against the raw roll: values <= 0 never succeed.
    poi_chance >= 100 always succeeds.

    Args:
        row: Hex row
        col: Hex column
        name: System name, already unique within the sector
        excluded_tags: World tag names that must never be picked
        poi_chance: Percentage chance of a point of interest
        other_world_chance: Percentage chance of each additional world
        rng: Random number generator

    Returns:
        New Star

    Raises:
        SectorConfigError: If other_world_chance >= 100 (the cascade would
            never stop)
    """
    check_other_world_chance(other_world_chance)

    excluded = excluded_tag_list(excluded_tags)
    culture = random_culture(rng)
    worlds = [new_world(rng, culture, True, excluded)]

    while rng.intn(100) < other_world_chance:
        worlds.append(new_world(rng, random_culture(rng), False, excluded))

    pois = []
    if rng.intn(100) < poi_chance:
        pois.append(new_poi(rng))

    return Star(
        row=row,
        col=col,
        name=name,
        culture=culture,
        worlds=tuple(worlds),
        pois=tuple(pois),
    )
