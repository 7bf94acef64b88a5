"""Sector container."""

from dataclasses import dataclass, field
from typing import Iterator

from .star import Star


@dataclass
class Sector:
    """The full collection of star systems on a rows x cols hex grid.

    Stars are kept in the order they were placed. The sector is append-only
    while it is being built and read-only once sealed; there are no update or
    delete operations.
    """

    rows: int
    cols: int
    stars: list[Star] = field(default_factory=list)  # Insertion order
    seed: int | None = None  # Seed the sector was generated from, if known
    sealed: bool = False

    def __post_init__(self):
        """Validate dimensions and any stars passed in."""
        if self.rows < 1:
            raise ValueError(f"Invalid rows: {self.rows} (must be >= 1)")
        if self.cols < 1:
            raise ValueError(f"Invalid cols: {self.cols} (must be >= 1)")

        initial, self.stars = self.stars, []
        for star in initial:
            self._check_star(star)
            self.stars.append(star)

    @property
    def cells(self) -> int:
        return self.rows * self.cols

    def __len__(self) -> int:
        return len(self.stars)

    def __iter__(self) -> Iterator[Star]:
        return iter(self.stars)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_occupied(self, row: int, col: int) -> bool:
        """Check whether a star already sits at row, col."""
        return self.star_at(row, col) is not None

    def star_at(self, row: int, col: int) -> Star | None:
        """Return the star at row, col, or None for an empty hex."""
        for star in self.stars:
            if star.row == row and star.col == col:
                return star
        return None

    def name_used(self, name: str) -> bool:
        """Check whether any placed star already uses name (exact match)."""
        return any(star.name == name for star in self.stars)

    def add_star(self, star: Star) -> None:
        """Append a star, enforcing bounds and uniqueness.

        Raises:
            ValueError: If the sector is sealed, the star lies off the grid, or
                its coordinate or name is already taken
        """
        if self.sealed:
            raise ValueError("Cannot add stars to a sealed sector")
        self._check_star(star)
        self.stars.append(star)

    def seal(self) -> None:
        """Mark generation as finished. Further add_star calls fail."""
        self.sealed = True

    def sorted_by_coordinate(self) -> list[Star]:
        """Return a new list of stars ordered by row, then column.

        The underlying insertion order is left untouched.
        """
        return sorted(self.stars, key=lambda s: s.coord)

    def _check_star(self, star: Star) -> None:
        if not self.in_bounds(star.row, star.col):
            raise ValueError(
                f"Star {star.name} at {star.row},{star.col} is outside "
                f"the {self.rows}x{self.cols} grid"
            )
        if self.is_occupied(star.row, star.col):
            raise ValueError(f"Hex {star.row},{star.col} is already occupied")
        if self.name_used(star.name):
            raise ValueError(f"Star name {star.name!r} is already in use")
