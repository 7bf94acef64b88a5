"""Tests for sector generation."""

import pytest

from sectorgen.engine import (
    PlacementExhaustedError,
    SectorConfigError,
    generate_sector,
    roll_star_count,
    star_count_range,
)
from sectorgen.engine.sector_generator import _find_free_hex
from sectorgen.models import Sector
from sectorgen.utils import LEGACY_EXTRA_STARS, SectorRNG
from sectorgen.utils.serialization import sector_to_dict


class TestStarCount:
    """Test how many stars a grid receives."""

    def test_count_range(self):
        assert star_count_range(4, 4) == (4, 6)
        assert star_count_range(10, 8) == (20, 30)
        assert star_count_range(4, 4, extra_stars=LEGACY_EXTRA_STARS) == (5, 7)

    def test_rolled_count_within_range(self):
        """Test rolled counts stay within 25-37.5% of the grid."""
        for seed in range(50):
            rng = SectorRNG(seed)
            low, high = star_count_range(10, 8)
            assert low <= roll_star_count(10, 8, rng) <= high

    def test_bonus_reaches_both_ends(self):
        """Test the bonus covers the whole range [0, base // 2]."""
        counts = {roll_star_count(4, 4, SectorRNG(seed)) for seed in range(200)}
        assert counts == {4, 5, 6}


class TestGenerateSector:
    """Test sector generation."""

    def test_end_to_end_small_sector(self):
        """Test a 4x4 sector with no extras."""
        sector = generate_sector(4, 4, [], poi_chance=0, other_world_chance=0, rng=SectorRNG(42))

        assert sector.rows == 4
        assert sector.cols == 4
        assert 4 <= len(sector) <= 6
        for star in sector:
            assert len(star.worlds) == 1
            assert star.pois == ()
        assert len({s.coord for s in sector}) == len(sector)
        assert len({s.name for s in sector}) == len(sector)

    def test_deterministic_with_seed(self):
        """Test that the same seed produces the same sector."""
        a = generate_sector(10, 8, [], 30, 10, rng=SectorRNG(7))
        b = generate_sector(10, 8, [], 30, 10, rng=SectorRNG(7))
        assert sector_to_dict(a) == sector_to_dict(b)
        assert a.seed == 7

    def test_time_seeded_when_no_rng(self):
        """Test that a seed is recorded even without an explicit RNG."""
        sector = generate_sector(4, 4)
        assert isinstance(sector.seed, int)

    def test_sector_is_sealed(self, make_star):
        sector = generate_sector(4, 4, rng=SectorRNG(1))
        assert sector.sealed
        with pytest.raises(ValueError):
            sector.add_star(make_star(name="Zzzzzz"))

    @pytest.mark.parametrize("rows,cols", [(4, 4), (10, 8), (5, 13), (20, 20), (1, 7)])
    def test_invariants_across_seeds(self, rows, cols):
        """Test bounds, uniqueness and density for many seeds and grid sizes."""
        low, high = star_count_range(rows, cols)
        for seed in range(20):
            sector = generate_sector(rows, cols, [], 30, 10, rng=SectorRNG(seed))

            assert low <= len(sector) <= high
            coords = [s.coord for s in sector]
            names = [s.name for s in sector]
            assert len(coords) == len(set(coords))
            assert len(names) == len(set(names))
            for star in sector:
                assert 0 <= star.row < rows
                assert 0 <= star.col < cols

    def test_legacy_count_places_one_extra(self):
        """Test that legacy counting places exactly one star past the target."""
        for seed in range(20):
            default = generate_sector(6, 6, rng=SectorRNG(seed))
            legacy = generate_sector(6, 6, rng=SectorRNG(seed), extra_stars=LEGACY_EXTRA_STARS)
            assert len(legacy) == len(default) + 1

    def test_single_hex_grid(self):
        """Test that a 1x1 grid holds zero stars, or one with legacy counting."""
        assert len(generate_sector(1, 1, rng=SectorRNG(3))) == 0
        legacy = generate_sector(1, 1, rng=SectorRNG(3), extra_stars=LEGACY_EXTRA_STARS)
        assert len(legacy) == 1
        assert legacy.stars[0].coord == (0, 0)

    def test_sorted_view(self):
        """Test the sorted view is non-decreasing and repeatable."""
        sector = generate_sector(10, 8, [], 30, 10, rng=SectorRNG(11))
        ordered = sector.sorted_by_coordinate()

        assert ordered == sector.sorted_by_coordinate()
        keys = [(s.row, s.col) for s in ordered]
        assert keys == sorted(keys)

    def test_no_secondary_worlds_at_zero_chance(self):
        sector = generate_sector(10, 10, [], 0, 0, rng=SectorRNG(5))
        assert all(len(star.worlds) == 1 for star in sector)

    def test_secondary_worlds_appear_at_high_chance(self):
        sector = generate_sector(10, 10, [], 0, 90, rng=SectorRNG(5))
        assert any(len(star.worlds) > 1 for star in sector)
        for star in sector:
            assert star.worlds[0].primary
            assert not any(w.primary for w in star.worlds[1:])

    @pytest.mark.parametrize("poi_chance,expected", [(0, 0), (-10, 0), (100, 1), (250, 1)])
    def test_poi_chance_extremes(self, poi_chance, expected):
        """Test that out-of-range chances clamp instead of failing."""
        sector = generate_sector(8, 8, [], poi_chance, 0, rng=SectorRNG(9))
        assert all(len(star.pois) == expected for star in sector)

    def test_excluded_tags_never_picked(self):
        excluded = ["Zombies", "Holy War", "trade hub"]
        sector = generate_sector(10, 10, excluded, 0, 50, rng=SectorRNG(2))
        picked = {tag.name for star in sector for world in star.worlds for tag in world.tags}
        assert picked
        assert not picked & {"Zombies", "Holy War", "Trade Hub"}


class TestGenerateSectorErrors:
    """Test configuration and exhaustion errors."""

    @pytest.mark.parametrize("rows,cols", [(0, 4), (4, 0), (-1, -1)])
    def test_invalid_grid(self, rows, cols):
        with pytest.raises(SectorConfigError, match="Invalid grid size"):
            generate_sector(rows, cols, rng=SectorRNG(1))

    @pytest.mark.parametrize("chance", [100, 150])
    def test_endless_cascade_rejected(self, chance):
        """Test that a cascade chance that never fails is rejected up front."""
        with pytest.raises(SectorConfigError, match="other world chance"):
            generate_sector(4, 4, [], 0, chance, rng=SectorRNG(1))

    def test_too_many_stars_rejected(self):
        with pytest.raises(SectorConfigError, match="Cannot place"):
            generate_sector(2, 2, rng=SectorRNG(1), extra_stars=5)

    def test_negative_extra_stars_rejected(self):
        with pytest.raises(SectorConfigError, match="extra_stars"):
            generate_sector(4, 4, rng=SectorRNG(1), extra_stars=-1)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            generate_sector(0, 4)

    def test_full_grid_exhausts_placement(self, make_star):
        """Test that searching a full grid gives up after the attempt budget."""
        sector = Sector(rows=1, cols=2)
        sector.add_star(make_star(row=0, col=0, name="Aa"))
        sector.add_star(make_star(row=0, col=1, name="Bb"))

        with pytest.raises(PlacementExhaustedError) as exc_info:
            _find_free_hex(sector, SectorRNG(1), max_attempts=25)
        assert exc_info.value.attempts == 25
        assert exc_info.value.placed == 2

    def test_find_free_hex_finds_last_hex(self, make_star):
        sector = Sector(rows=1, cols=2)
        sector.add_star(make_star(row=0, col=0, name="Aa"))
        assert _find_free_hex(sector, SectorRNG(1), max_attempts=1000) == (0, 1)

    def test_endless_cascade_rejected_before_placing(self):
        """Test that a bad cascade chance fails even when no star would be placed."""
        with pytest.raises(SectorConfigError, match="other world chance"):
            generate_sector(1, 1, [], 0, 100, rng=SectorRNG(1))


class TestExcludedTagArgument:
    """Test how excluded tags are passed in."""

    def test_single_tag_string_is_one_tag(self):
        """Test that a bare string excludes that tag, not its letters."""
        for seed in range(10):
            sector = generate_sector(10, 10, "Zombies", 0, 50, rng=SectorRNG(seed))
            picked = {tag.name for star in sector for world in star.worlds for tag in world.tags}
            assert "Zombies" not in picked
