"""Errors raised while generating a sector."""


class SectorGenerationError(RuntimeError):
    """Base class for sector generation failures."""


class SectorConfigError(SectorGenerationError, ValueError):
    """Raised when generation parameters can never produce a sector."""


class PlacementExhaustedError(SectorGenerationError):
    """Raised when no free hex is found within the placement attempt budget."""

    def __init__(self, attempts: int, rows: int, cols: int, placed: int):
        """Initialize placement error.

        Args:
            attempts: Coordinate draws made for the star being placed
            rows: Sector rows
            cols: Sector columns
            placed: Stars placed before giving up
        """
        self.attempts = attempts
        self.placed = placed
        super().__init__(
            f"Could not find a free hex in the {rows}x{cols} grid after "
            f"{attempts} attempts ({placed} stars placed)"
        )


class NameExhaustedError(SectorGenerationError):
    """Raised when no unused system name is found within the name attempt budget."""

    def __init__(self, attempts: int, placed: int):
        self.attempts = attempts
        self.placed = placed
        super().__init__(
            f"Could not find an unused system name after {attempts} attempts "
            f"({placed} names in use)"
        )
