"""Sector-unique system names."""

import logging

from ..content.names import generate_name, roll_system_name
from ..models.sector import Sector
from ..utils.constants import MAX_NAME_ATTEMPTS, MAX_NAME_LENGTH, MIN_NAME_LENGTH
from ..utils.rng import SectorRNG
from .errors import NameExhaustedError

logger = logging.getLogger(__name__)


def assign_system_name(
    sector: Sector, rng: SectorRNG, max_attempts: int = MAX_NAME_ATTEMPTS
) -> str:
    """Return a system name no star in the sector uses yet.

    The themed system name table is tried once. If that name is taken, generic
    names of 3 to 6 letters are generated until an unused one turns up.
    Comparison is exact: "Vega" and "vega" are different names.

    Args:
        sector: Sector whose placed stars' names must be avoided
        rng: Random number generator
        max_attempts: Generic names to try before giving up

    Returns:
        Unused name

    Raises:
        NameExhaustedError: If every attempt produced a name already in use
    """
    name = roll_system_name(rng)
    if not sector.name_used(name):
        return name

    logger.debug(f"System name {name} already used, falling back to generated names")
    for _ in range(max_attempts):
        length = rng.intn(MAX_NAME_LENGTH - MIN_NAME_LENGTH + 1) + MIN_NAME_LENGTH
        name = generate_name(rng, length)
        if not sector.name_used(name):
            return name

    raise NameExhaustedError(max_attempts, len(sector))
