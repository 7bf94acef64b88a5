"""Sector generation: how many stars, and where they go."""

import logging
from typing import Iterable

from ..models.sector import Sector
from ..utils.constants import EXTRA_STARS, MAX_PLACEMENT_ATTEMPTS
from ..utils.rng import SectorRNG
from .errors import PlacementExhaustedError, SectorConfigError
from .naming import assign_system_name
from .star_factory import check_other_world_chance, excluded_tag_list, new_star

logger = logging.getLogger(__name__)


def star_count_range(rows: int, cols: int, extra_stars: int = EXTRA_STARS) -> tuple[int, int]:
    """Return the inclusive (min, max) number of stars a grid receives.

    Examples:
        >>> star_count_range(4, 4)
        (4, 6)
        >>> star_count_range(10, 8)
        (20, 30)
    """
    base = (rows * cols) // 4
    return base + extra_stars, base + base // 2 + extra_stars


def roll_star_count(rows: int, cols: int, rng: SectorRNG, extra_stars: int = EXTRA_STARS) -> int:
    """Roll how many stars to place on a rows x cols grid.

    A quarter of the hexes, plus a random bonus of up to half that again,
    so 25-37.5% of the grid is occupied. extra_stars is added on top.
    """
    base = (rows * cols) // 4
    bonus = rng.randint(0, base // 2)
    return base + bonus + extra_stars


def generate_sector(
    rows: int,
    cols: int,
    excluded_tags: str | Iterable[str] = (),
    poi_chance: int = 0,
    other_world_chance: int = 0,
    rng: SectorRNG | None = None,
    extra_stars: int = EXTRA_STARS,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Sector:
    """Generate a sector of star systems.

    Algorithm:
    1. Roll the star count (see roll_star_count)
    2. Draw a random hex; if a star is already there, draw again
    3. Give the new star a sector-unique name and build it with the star factory
    4. Repeat until the star count is reached, then seal the sector

    Args:
        rows: Grid rows (>= 1)
        cols: Grid columns (>= 1)
        excluded_tags: World tag names that must never be picked
        poi_chance: Percentage chance of a point of interest per star
        other_world_chance: Percentage chance of each additional world
        rng: Random number generator; a time-seeded one when omitted
        extra_stars: Stars placed beyond the rolled target (LEGACY_EXTRA_STARS
            reproduces older generators, which placed one star too many)
        max_attempts: Coordinate draws allowed per star

    Returns:
        Sealed Sector

    Raises:
        SectorConfigError: If the grid is empty, the star count can't fit, or
            other_world_chance >= 100
        PlacementExhaustedError: If a free hex isn't found within max_attempts
        NameExhaustedError: If no unused name can be found for a star
    """
    if rows < 1 or cols < 1:
        raise SectorConfigError(f"Invalid grid size: {rows}x{cols} (both must be >= 1)")
    if extra_stars < 0:
        raise SectorConfigError(f"Invalid extra_stars: {extra_stars} (must be >= 0)")
    check_other_world_chance(other_world_chance)

    if rng is None:
        rng = SectorRNG()

    excluded = excluded_tag_list(excluded_tags)
    sector = Sector(rows=rows, cols=cols, seed=rng.seed)

    count = roll_star_count(rows, cols, rng, extra_stars)
    if count > sector.cells:
        raise SectorConfigError(
            f"Cannot place {count} stars on a {rows}x{cols} grid of {sector.cells} hexes"
        )
    logger.debug(f"Placing {count} stars on a {rows}x{cols} grid (seed {rng.seed})")

    while len(sector) < count:
        row, col = _find_free_hex(sector, rng, max_attempts)
        name = assign_system_name(sector, rng)
        star = new_star(row, col, name, excluded, poi_chance, other_world_chance, rng)
        sector.add_star(star)
        logger.debug(f"Placed {star.name} at {row},{col} with {len(star.worlds)} world(s)")

    sector.seal()
    logger.info(f"Generated {rows}x{cols} sector with {len(sector)} stars (seed {rng.seed})")
    return sector


def _find_free_hex(sector: Sector, rng: SectorRNG, max_attempts: int) -> tuple[int, int]:
    """Draw random hexes until an unoccupied one turns up.

    Raises:
        PlacementExhaustedError: If no unoccupied hex found after max attempts
    """
    for _ in range(max_attempts):
        row = rng.intn(sector.rows)
        col = rng.intn(sector.cols)
        if not sector.is_occupied(row, col):
            return row, col

    raise PlacementExhaustedError(max_attempts, sector.rows, sector.cols, len(sector))
