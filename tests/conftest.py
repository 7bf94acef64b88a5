"""Shared fixtures for sectorgen tests."""

import pytest

from sectorgen.models import Culture, PointOfInterest, Star, World, WorldTag


@pytest.fixture
def make_world():
    """Factory for worlds with fixed attributes."""

    def _make_world(name="Kyoto", primary=True, culture=Culture.JAPANESE, tags=None):
        extra = {}
        if not primary:
            extra = {
                "origin": "Lost colony that survived the Scream",
                "relationship": "Wary trade partners",
                "contact_point": "Mercenary contracts",
            }
        return World(
            name=name,
            culture=culture,
            primary=primary,
            tags=tuple(tags) if tags is not None else (WorldTag("Trade Hub", "Commerce."),),
            atmosphere="Breathable mix",
            temperature="Temperate",
            biosphere="Human-miscible biosphere",
            population="Several million",
            tech_level="TL4, baseline postech",
            **extra,
        )

    return _make_world


@pytest.fixture
def make_star(make_world):
    """Factory for stars with one primary world and optional extras."""

    def _make_star(row=0, col=0, name="Vega", secondary=0, pois=0):
        worlds = [make_world(primary=True)]
        worlds += [make_world(name=f"Moon {i}", primary=False) for i in range(secondary)]
        return Star(
            row=row,
            col=col,
            name=name,
            culture=Culture.JAPANESE,
            worlds=tuple(worlds),
            pois=tuple(
                PointOfInterest("Asteroid base", "Independent asteroid prospectors", "Hit a priceless vein of ore")
                for _ in range(pois)
            ),
        )

    return _make_star
