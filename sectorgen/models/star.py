"""Star system data model."""

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple

from ..utils.format import Formattable, OutputType, header
from .culture import Culture
from .poi import PointOfInterest
from .world import World


class Coordinate(NamedTuple):
    """A hex on the sector grid. Tuple ordering sorts by row, then column."""

    row: int
    col: int


@dataclass(frozen=True)
class Star:
    """Represents a star system on the sector map.

    A star always has exactly one primary world, stored first in `worlds`,
    followed by any secondary worlds. Stars are built once by the star factory
    and never change afterwards.
    """

    row: int
    col: int
    name: str  # Unique within its sector
    culture: Culture  # Culture of the primary world
    worlds: tuple[World, ...]
    pois: tuple[PointOfInterest, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate star data after initialization."""
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Invalid coordinate: {self.row},{self.col} (must be >= 0)")
        if not self.name:
            raise ValueError("Star name must not be empty")
        if not self.worlds:
            raise ValueError(f"Star {self.name} has no primary world")
        if not self.worlds[0].primary:
            raise ValueError(f"First world of star {self.name} must be primary")
        if any(w.primary for w in self.worlds[1:]):
            raise ValueError(f"Star {self.name} has more than one primary world")

    @property
    def coord(self) -> Coordinate:
        return Coordinate(self.row, self.col)

    @property
    def primary_world(self) -> World:
        return self.worlds[0]

    @property
    def secondary_worlds(self) -> tuple[World, ...]:
        return self.worlds[1:]

    def format(self, t: OutputType) -> str:
        """Return the details of the star formatted as type t.

        Order: star header, primary world, then other worlds and points of
        interest under their own headers when present.
        """
        out = header(t, 2, f"Hex {self.row},{self.col}: {self.name}")
        out += header(t, 3, "Primary World")
        out += self.primary_world.format(t)

        if self.secondary_worlds:
            out += header(t, 3, "Other Worlds")
            out += _format_all(t, self.secondary_worlds)

        if self.pois:
            out += header(t, 3, "Points of Interest")
            out += _format_all(t, self.pois)

        return out


def _format_all(t: OutputType, items: Iterable[Formattable]) -> str:
    return "".join(item.format(t) for item in items)
