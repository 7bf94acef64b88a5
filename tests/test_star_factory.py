"""Tests for star system composition."""

import pytest

from sectorgen.engine import SectorConfigError, new_star
from sectorgen.engine.star_factory import check_other_world_chance, excluded_tag_list
from sectorgen.utils import SectorRNG


class ScriptedRNG(SectorRNG):
    """RNG whose intn() draws come from a fixed script.

    Only the star factory's d100 rolls use intn(); content tables keep using
    the seeded generator underneath.
    """

    def __init__(self, draws, seed=0):
        super().__init__(seed)
        self.draws = list(draws)

    def intn(self, n):
        return self.draws.pop(0)


class TestNewStar:
    """Test new_star composition."""

    def test_basic_star(self):
        star = new_star(3, 4, "Vega", [], 0, 0, SectorRNG(1))
        assert star.coord == (3, 4)
        assert star.name == "Vega"
        assert len(star.worlds) == 1
        assert star.worlds[0].primary
        assert star.worlds[0].culture == star.culture
        assert star.pois == ()

    def test_cascade_stops_at_first_failed_roll(self):
        """Test that secondary worlds are added until a roll fails."""
        rng = ScriptedRNG([5, 9, 50, 99])
        star = new_star(0, 0, "Vega", [], 30, 10, rng)

        assert len(star.worlds) == 3
        assert [w.primary for w in star.worlds] == [True, False, False]
        assert star.pois == ()
        assert rng.draws == []

    def test_cascade_roll_equal_to_chance_fails(self):
        """Test that a roll equal to the chance is a failure."""
        star = new_star(0, 0, "Vega", [], 10, 10, ScriptedRNG([10, 9]))
        assert len(star.worlds) == 1
        assert len(star.pois) == 1

    def test_secondary_worlds_have_details(self):
        star = new_star(0, 0, "Vega", [], 0, 50, ScriptedRNG([0, 99, 99]))
        secondary = star.worlds[1]
        assert secondary.origin
        assert secondary.relationship
        assert secondary.contact_point

    def test_at_most_one_poi(self):
        for seed in range(30):
            star = new_star(0, 0, "Vega", [], 100, 0, SectorRNG(seed))
            assert len(star.pois) == 1

    def test_excluded_tags_respected(self):
        excluded = ["Zombies", "Trade Hub"]
        for seed in range(30):
            star = new_star(0, 0, "Vega", excluded, 0, 60, SectorRNG(seed))
            for world in star.worlds:
                assert len(world.tags) == 2
                assert not {t.name for t in world.tags} & set(excluded)

    def test_endless_cascade_rejected(self):
        with pytest.raises(SectorConfigError):
            new_star(0, 0, "Vega", [], 0, 100, SectorRNG(1))

    def test_mean_secondary_worlds(self):
        """Test the cascade averages chance / (100 - chance) extra worlds."""
        chance = 50
        total = sum(
            len(new_star(0, 0, "Vega", [], 0, chance, SectorRNG(seed)).worlds) - 1
            for seed in range(2000)
        )
        # Expected mean is 1.0; standard error over 2000 stars is ~0.03
        assert 0.85 < total / 2000 < 1.15

    def test_single_tag_string_is_one_tag(self):
        """Test that a bare string excludes that tag, not its letters."""
        for seed in range(50):
            star = new_star(0, 0, "Vega", "Trade Hub", 0, 60, SectorRNG(seed))
            for world in star.worlds:
                assert "Trade Hub" not in {t.name for t in world.tags}


class TestHelpers:
    """Test argument helpers."""

    def test_excluded_tag_list(self):
        assert excluded_tag_list("Zombies") == ["Zombies"]
        assert excluded_tag_list(("Zombies", "Holy War")) == ["Zombies", "Holy War"]
        assert excluded_tag_list([]) == []

    @pytest.mark.parametrize("chance", [100, 101])
    def test_check_other_world_chance_rejects(self, chance):
        with pytest.raises(SectorConfigError, match="never ends"):
            check_other_world_chance(chance)

    @pytest.mark.parametrize("chance", [-5, 0, 99])
    def test_check_other_world_chance_accepts(self, chance):
        check_other_world_chance(chance)
