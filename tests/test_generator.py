"""
Tests for the full generation pipeline.
"""

import numpy as np
import pytest

from pydantic import ValidationError

from empyre.core.generator import GenerationOptions, MapGenerator
from empyre.core.pieces import Piece
from empyre.core.settlements import city_count
from empyre.core.terrain import Terrain


class TestGenerationOptions:
    """Test generation option validation."""

    def test_defaults(self):
        """Defaults are a 100x60 map, 70 percent water, 5 passes."""
        options = GenerationOptions()
        assert (options.width, options.height) == (100, 60)
        assert options.water_ratio == 70
        assert options.smooth_iterations == 5

    @pytest.mark.parametrize("field,value", [("water_ratio", 91), ("water_ratio", -1), ("smooth_iterations", -1)])
    def test_out_of_range(self, field, value):
        """Out-of-range options are rejected."""
        with pytest.raises(ValidationError):
            GenerationOptions(**{field: value})


class TestMapGenerator:
    """Test end-to-end map generation."""

    def test_generate(self):
        """The pipeline yields classified terrain with cities on land."""
        options = GenerationOptions(width=40, height=24, water_ratio=50, smooth_iterations=2)
        terrain_map = MapGenerator(options).generate(rng=np.random.default_rng(2024))

        assert (terrain_map.width, terrain_map.height) == (40, 24)
        assert terrain_map.count(Terrain.UNKNOWN) == 0
        assert terrain_map.count(Terrain.WATER) > terrain_map.count(Terrain.LAND)

        cities = list(terrain_map.pieces())
        assert len(cities) == city_count(40, 24)
        assert all(loc.piece == Piece.CITY and loc.terrain == Terrain.LAND for loc in cities)

    def test_render_dimensions(self):
        """The rendered map has one line per row."""
        options = GenerationOptions(width=30, height=12, smooth_iterations=0)
        lines = MapGenerator(options).generate().render().splitlines()

        assert len(lines) == 12
        assert all(len(line) == 30 for line in lines)
        assert set("".join(lines)) <= {"+", ".", "O"}
