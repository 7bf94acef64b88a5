"""Content tables: cultures, worlds, tags, points of interest and names."""

from .culture import random_culture
from .names import generate_name, roll_system_name
from .poi import new_poi
from .tags import WORLD_TAGS, available_tags, tag_names
from .world import new_world

__all__ = [
    "WORLD_TAGS",
    "available_tags",
    "generate_name",
    "new_poi",
    "new_world",
    "random_culture",
    "roll_system_name",
    "tag_names",
]
