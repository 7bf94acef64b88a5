"""World generation.

Physical and social attributes are rolled on 2d6 tables, so results cluster
around the middle entries. Secondary worlds also roll how they were settled
and how they get along with the system's primary world.
"""

from typing import Iterable

from ..models.culture import Culture
from ..models.world import World
from ..utils.rng import SectorRNG
from .culture import place_name
from .tags import available_tags

TAGS_PER_WORLD = 2

# 2d6 tables as (highest roll, result), in ascending order
ATMOSPHERE = [
    (2, "Corrosive"),
    (3, "Inert gas"),
    (4, "Airless or thin"),
    (9, "Breathable mix"),
    (10, "Thick"),
    (11, "Invasive, toxic"),
    (12, "Corrosive and invasive"),
]

TEMPERATURE = [
    (2, "Frozen"),
    (3, "Variable cold-to-temperate"),
    (5, "Cold"),
    (8, "Temperate"),
    (10, "Warm"),
    (11, "Variable warm-to-burning"),
    (12, "Burning"),
]

BIOSPHERE = [
    (2, "Remnant biosphere"),
    (3, "Microbial life"),
    (5, "No native biosphere"),
    (8, "Human-miscible biosphere"),
    (10, "Immiscible biosphere"),
    (11, "Hybrid biosphere"),
    (12, "Engineered biosphere"),
]

POPULATION = [
    (2, "Failed colony"),
    (3, "Outpost"),
    (5, "Fewer than a million"),
    (8, "Several million"),
    (10, "Hundreds of millions"),
    (11, "Billions"),
    (12, "Alien inhabitants"),
]

TECH_LEVEL = [
    (2, "TL0, stone age"),
    (3, "TL1, medieval"),
    (5, "TL2, early industrial"),
    (8, "TL3, modern"),
    (10, "TL4, baseline postech"),
    (11, "TL4+, specialized postech"),
    (12, "TL5, pretech"),
]

# Secondary worlds only
ORIGIN = [
    "Recent colony from the primary world",
    "Refugees from a disaster elsewhere",
    "Founded ages ago by a different group",
    "Founded long ago by the primary world",
    "Lost colony that survived the Scream",
    "Exiles driven off the primary world",
    "Penal colony or labor camp",
    "Aliens or something stranger",
]

RELATIONSHIP = [
    "Bitter enemies of the primary world",
    "Wary trade partners",
    "Subordinate client of the primary world",
    "Rival claimants to the system",
    "Close allies bound by shared history",
    "Indifferent, barely in contact",
    "Secretly controlling the primary world",
    "Former masters, now reduced",
]

CONTACT_POINT = [
    "Trade in a vital resource",
    "Shared religious pilgrimage",
    "Exiled nobility or politicians",
    "Smuggling and black markets",
    "Joint defense against a common threat",
    "Intermarriage between ruling families",
    "A disputed orbital station",
    "Mercenary contracts",
]


def _lookup(table: list[tuple[int, str]], roll: int) -> str:
    """Return the entry covering roll in a (highest roll, result) table."""
    for highest, result in table:
        if roll <= highest:
            return result
    return table[-1][1]


def new_world(
    rng: SectorRNG,
    culture: Culture,
    primary: bool,
    excluded_tags: Iterable[str] = (),
) -> World:
    """Generate a world under the given culture.

    Args:
        rng: Random number generator
        culture: Culture used to name the world
        primary: True for a system's primary world
        excluded_tags: Tag names that must never be picked

    Returns:
        New World with up to two distinct tags (fewer only when the exclusion
        list leaves less than two tags to pick from)
    """
    name = place_name(rng, culture)
    atmosphere = _lookup(ATMOSPHERE, rng.roll(2, 6))
    temperature = _lookup(TEMPERATURE, rng.roll(2, 6))
    biosphere = _lookup(BIOSPHERE, rng.roll(2, 6))
    population = _lookup(POPULATION, rng.roll(2, 6))
    tech_level = _lookup(TECH_LEVEL, rng.roll(2, 6))

    pool = available_tags(excluded_tags)
    tags = tuple(rng.sample(pool, min(TAGS_PER_WORLD, len(pool))))

    if primary:
        return World(
            name=name,
            culture=culture,
            primary=True,
            tags=tags,
            atmosphere=atmosphere,
            temperature=temperature,
            biosphere=biosphere,
            population=population,
            tech_level=tech_level,
        )

    return World(
        name=name,
        culture=culture,
        primary=False,
        tags=tags,
        atmosphere=atmosphere,
        temperature=temperature,
        biosphere=biosphere,
        population=population,
        tech_level=tech_level,
        origin=rng.choice(ORIGIN),
        relationship=rng.choice(RELATIONSHIP),
        contact_point=rng.choice(CONTACT_POINT),
    )
