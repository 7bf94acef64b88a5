"""Sector generation defaults."""

# Grid dimensions (a standard sector is 8 hexes wide and 10 tall)
DEFAULT_ROWS = 10
DEFAULT_COLS = 8
MAX_GRID_DIMENSION = 50  # Upper bound accepted by the HTTP API

# Percentage chances (integer 0-100)
DEFAULT_POI_CHANCE = 30  # Point of interest per star
DEFAULT_OTHER_WORLD_CHANCE = 10  # Cascading chance of each additional world

# Star count
EXTRA_STARS = 0  # Stars placed beyond base + bonus
LEGACY_EXTRA_STARS = 1  # Older generators placed one star past the target

# Rejection sampling budgets
MAX_PLACEMENT_ATTEMPTS = 10_000  # Coordinate draws per star
MAX_NAME_ATTEMPTS = 1_000  # Fallback name rolls per star

# Generic name length range (inclusive)
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 6
