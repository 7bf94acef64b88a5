"""Sectorgen: procedural starmaps for science-fiction tabletop games."""

from .engine import generate_sector
from .models import Sector, Star

__version__ = "1.0.0"

__all__ = ["Sector", "Star", "generate_sector"]
