"""
End-to-end map generation.

Runs the stages in order: random heightmap, smoothing passes, terrain
classification, city placement.
"""

from typing import Optional

import numpy as np
import structlog

from pydantic import BaseModel, Field

from .geometry import DEFAULT_MAP_HEIGHT, DEFAULT_MAP_WIDTH
from .heightmap import Heightmap
from .settlements import CityOptions, Settlements
from .terrain import TerrainMap

logger = structlog.get_logger()


class GenerationOptions(BaseModel):
    """Options for a single map generation run."""

    width: int = Field(default=DEFAULT_MAP_WIDTH, gt=0, description="Map width in cells")
    height: int = Field(default=DEFAULT_MAP_HEIGHT, gt=0, description="Map height in cells")
    water_ratio: int = Field(default=70, ge=0, le=90, description="Target water percentage")
    smooth_iterations: int = Field(default=5, ge=0, description="Number of smoothing passes")
    cities: CityOptions = Field(default_factory=CityOptions)


class MapGenerator:
    """Generates a complete terrain map with cities."""

    def __init__(self, options: Optional[GenerationOptions] = None):
        self.options = options or GenerationOptions()

    def generate(self, rng: Optional[np.random.Generator] = None) -> TerrainMap:
        opts = self.options
        logger.info("Starting map generation", width=opts.width, height=opts.height)

        logger.info("Generating heightmap")
        heightmap = Heightmap.new_random(opts.width, opts.height, rng=rng)

        logger.info("Smoothing heightmap", iterations=opts.smooth_iterations)
        heightmap = heightmap.smooth_times(opts.smooth_iterations)

        logger.info("Classifying terrain", water_ratio=opts.water_ratio)
        terrain_map = heightmap.make_terrain(opts.water_ratio)

        logger.info("Placing cities")
        Settlements(terrain_map, opts.cities, rng=rng).place_cities()

        logger.info("Map generation completed")
        return terrain_map
