"""
Tests for city placement.
"""

import numpy as np
import pytest

from empyre.core.geometry import Position, idx_to_pos
from empyre.core.heightmap import Heightmap
from empyre.core.pieces import Piece
from empyre.core.settlements import CityOptions, Settlements, city_count, place_cities
from empyre.core.terrain import Location, Terrain, TerrainMap


def make_map(width, height, land):
    """Terrain map where the positions in ``land`` are land, the rest water."""
    cells = []
    for i in range(width * height):
        pos = idx_to_pos(i, width)
        cells.append(Location(pos, Terrain.LAND if pos in land else Terrain.WATER))
    return TerrainMap(width, height, cells)


class TestCityCount:
    """Test the perimeter-proportional city count."""

    def test_default_map_size(self):
        """A 100x60 map gets 70 cities."""
        assert city_count(100, 60) == 70

    def test_small_maps(self):
        """Small maps get few or no cities."""
        assert city_count(10, 10) == 8
        assert city_count(1, 1) == 0

    def test_custom_options(self):
        """Scale and divisor feed the heuristic."""
        assert city_count(10, 10, CityOptions(scale=228, divisor=10)) == 456

    def test_default_options(self):
        """Defaults are 100 and 228."""
        options = CityOptions()
        assert options.scale == 100
        assert options.divisor == 228


class TestPlaceCities:
    """Test sampling of city positions."""

    @pytest.fixture
    def rng(self):
        """Seeded generator for repeatable sampling."""
        return np.random.default_rng(1234)

    def test_exact_count_on_all_land(self, rng):
        """An all-land map gets exactly the target number of distinct cities."""
        terrain_map = make_map(10, 10, {Position(x, y) for x in range(10) for y in range(10)})
        cities = place_cities(terrain_map, rng=rng)

        assert len(cities) == 8
        assert len(set(cities)) == 8
        assert sum(1 for _ in terrain_map.pieces()) == 8

    def test_cities_only_on_land(self, rng):
        """Cities never land on water."""
        land = {Position(x, y) for x in range(5) for y in range(10)}
        terrain_map = make_map(10, 10, land)
        cities = place_cities(terrain_map, rng=rng)

        assert len(cities) == 8
        for pos in cities:
            assert pos in land
            assert terrain_map[pos].terrain == Terrain.LAND
            assert terrain_map[pos].piece == Piece.CITY
        for location in terrain_map.cells:
            if location.terrain == Terrain.WATER:
                assert location.piece is None

    def test_not_enough_land(self, rng):
        """Every land cell gets a city when land is scarce."""
        land = {Position(0, 0), Position(4, 4), Position(9, 9)}
        terrain_map = make_map(10, 10, land)
        cities = place_cities(terrain_map, rng=rng)
        assert set(cities) == land

    def test_no_land(self, rng):
        """No land means no cities and zero spacing."""
        terrain_map = make_map(10, 10, set())
        settlements = Settlements(terrain_map, rng=rng)
        assert settlements.place_cities() == []
        assert settlements.min_city_distance == 0

    def test_min_city_distance_not_enforced(self, rng):
        """The spacing value is computed from land per city."""
        terrain_map = make_map(10, 10, {Position(x, y) for x in range(10) for y in range(10)})
        settlements = Settlements(terrain_map, rng=rng)
        settlements.place_cities()
        # 100 land cells / 8 cities -> isqrt(12)
        assert settlements.min_city_distance == 3

    def test_on_generated_terrain(self, rng):
        """A generated 100x60 map gets the full city count on land."""
        heightmap = Heightmap.new_random(100, 60, rng=rng).smooth_times(5)
        terrain_map = heightmap.make_terrain(70)
        cities = Settlements(terrain_map, rng=rng).place_cities()

        assert len(set(cities)) == city_count(100, 60)
        assert all(terrain_map[pos].terrain == Terrain.LAND for pos in cities)
