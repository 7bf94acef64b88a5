"""Data models for sectorgen."""

from .culture import Culture
from .poi import PointOfInterest
from .sector import Sector
from .star import Coordinate, Star
from .world import World, WorldTag

__all__ = [
    "Coordinate",
    "Culture",
    "PointOfInterest",
    "Sector",
    "Star",
    "World",
    "WorldTag",
]
