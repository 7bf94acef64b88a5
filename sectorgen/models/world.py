"""World data model."""

from dataclasses import dataclass

from ..utils.format import OutputType, header, table
from .culture import Culture


@dataclass(frozen=True)
class WorldTag:
    """A world tag: a short hook describing what makes a world interesting."""

    name: str
    description: str


@dataclass(frozen=True)
class World:
    """A single world orbiting a star.

    The primary world is the one the system is known for. Secondary worlds
    additionally record how they came to be settled and how they relate to
    the primary world.
    """

    name: str
    culture: Culture
    primary: bool
    tags: tuple[WorldTag, ...]
    atmosphere: str
    temperature: str
    biosphere: str
    population: str
    tech_level: str
    origin: str | None = None  # Secondary worlds only
    relationship: str | None = None  # Secondary worlds only
    contact_point: str | None = None  # Secondary worlds only

    def __post_init__(self):
        """Validate world data after initialization."""
        if not self.name:
            raise ValueError("World name must not be empty")
        if self.primary and any((self.origin, self.relationship, self.contact_point)):
            raise ValueError(f"Primary world {self.name} cannot have secondary world details")
        tag_names = [tag.name for tag in self.tags]
        if len(tag_names) != len(set(tag_names)):
            raise ValueError(f"Duplicate tags on world {self.name}: {tag_names}")

    def format(self, t: OutputType) -> str:
        """Return the world's details formatted as type t."""
        rows = [
            ("Culture", self.culture.value),
            ("Atmosphere", self.atmosphere),
            ("Temperature", self.temperature),
            ("Biosphere", self.biosphere),
            ("Population", self.population),
            ("Tech Level", self.tech_level),
        ]
        if not self.primary:
            rows += [
                ("Origin", self.origin or ""),
                ("Relationship", self.relationship or ""),
                ("Contact Point", self.contact_point or ""),
            ]

        out = header(t, 4, self.name)
        out += table(t, ("Attribute", "Value"), rows)
        if self.tags:
            out += table(t, ("Tag", "Description"), [(tag.name, tag.description) for tag in self.tags])
        return out
