"""Point of interest data model."""

from dataclasses import dataclass

from ..utils.format import OutputType, header, table


@dataclass(frozen=True)
class PointOfInterest:
    """A notable location in a star system that isn't a world."""

    point: str  # e.g. "Deep-space station"
    occupied_by: str
    situation: str

    def format(self, t: OutputType) -> str:
        """Return the point of interest formatted as type t."""
        rows = [("Occupied By", self.occupied_by), ("Situation", self.situation)]
        return header(t, 4, self.point) + table(t, ("Detail", "Value"), rows)
