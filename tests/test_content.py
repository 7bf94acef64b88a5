"""Tests for content tables."""

from sectorgen.content import (
    WORLD_TAGS,
    available_tags,
    new_poi,
    new_world,
    random_culture,
    roll_system_name,
    tag_names,
)
from sectorgen.content.culture import PLACE_NAMES
from sectorgen.content.names import SYSTEM_NAMES
from sectorgen.content.poi import POINTS
from sectorgen.content.tags import unknown_tags
from sectorgen.content.world import ATMOSPHERE, TECH_LEVEL, _lookup
from sectorgen.models import Culture
from sectorgen.utils import SectorRNG


class TestTables:
    """Test table contents."""

    def test_tag_names_unique(self):
        names = tag_names()
        assert len(names) == len(WORLD_TAGS)
        assert len(set(names)) == len(names)

    def test_every_culture_has_place_names(self):
        assert set(PLACE_NAMES) == set(Culture)
        assert all(PLACE_NAMES[c] for c in Culture)

    def test_system_names_unique(self):
        assert len(set(SYSTEM_NAMES)) == len(SYSTEM_NAMES)

    def test_lookup_covers_2d6(self):
        assert _lookup(ATMOSPHERE, 2) == "Corrosive"
        assert _lookup(ATMOSPHERE, 7) == "Breathable mix"
        assert _lookup(ATMOSPHERE, 12) == "Corrosive and invasive"
        assert _lookup(TECH_LEVEL, 4) == "TL2, early industrial"


class TestTags:
    """Test tag exclusion."""

    def test_available_tags_case_insensitive(self):
        remaining = {t.name for t in available_tags(["zombies", " Trade Hub "])}
        assert "Zombies" not in remaining
        assert "Trade Hub" not in remaining
        assert len(remaining) == len(WORLD_TAGS) - 2

    def test_unknown_tags(self):
        assert unknown_tags(["Zombies", "Space Pirates", "holy war"]) == ["Space Pirates"]


class TestGenerators:
    """Test content generators."""

    def test_random_culture(self):
        rng = SectorRNG(1)
        seen = {random_culture(rng) for _ in range(500)}
        assert seen == set(Culture)

    def test_roll_system_name(self):
        assert roll_system_name(SectorRNG(1)) in SYSTEM_NAMES

    def test_new_world_uses_culture(self):
        rng = SectorRNG(2)
        for _ in range(20):
            world = new_world(rng, Culture.GREEK, True)
            assert world.culture is Culture.GREEK
            assert world.name in PLACE_NAMES[Culture.GREEK]
            assert len(world.tags) == 2

    def test_new_world_with_every_tag_excluded(self):
        world = new_world(SectorRNG(2), Culture.LATIN, False, tag_names())
        assert world.tags == ()
        assert world.origin

    def test_new_world_with_one_tag_left(self):
        keep = "Zombies"
        world = new_world(SectorRNG(2), Culture.LATIN, True, [n for n in tag_names() if n != keep])
        assert [t.name for t in world.tags] == [keep]

    def test_new_poi(self):
        rng = SectorRNG(3)
        for _ in range(20):
            poi = new_poi(rng)
            occupants, situations = POINTS[poi.point]
            assert poi.occupied_by in occupants
            assert poi.situation in situations
