"""
Heightfield generation and terrain classification.

A heightmap starts as white noise, is smoothed a number of times into
continuous landmasses, and is finally thresholded into water and land at
the height that puts the requested share of the map under water.
"""

from typing import Optional

import numpy as np
import structlog

from ..utils.random import get_rng
from .geometry import idx_to_pos
from .grid import Grid
from .terrain import Location, Terrain, TerrainMap

logger = structlog.get_logger()

MAX_HEIGHT = 999


class Heightmap(Grid[int]):
    """Grid of integer elevations in [0, MAX_HEIGHT)."""

    @classmethod
    def new_random(
        cls, width: int, height: int, rng: Optional[np.random.Generator] = None
    ) -> "Heightmap":
        """
        Fill a new heightmap with independent uniform elevations.

        Args:
            width: Number of columns
            height: Number of rows
            rng: Optional generator, defaults to the shared one

        Returns:
            Heightmap of uncorrelated values in [0, MAX_HEIGHT)
        """
        values = get_rng(rng).integers(0, MAX_HEIGHT, size=width * height, dtype=np.uint16)
        return cls(width, height, values.tolist())

    def smooth(self) -> "Heightmap":
        """
        Average every cell with its in-bounds neighbours.

        Returns a new heightmap; this one is left untouched. Edge and corner
        cells average over fewer neighbours.
        """
        new_cells = []
        for idx, value in enumerate(self.cells):
            pos = idx_to_pos(idx, self.width)
            total = value
            count = 1
            for n_value in self.neighbours(pos):
                total += n_value
                count += 1
            new_cells.append(total // count)
        return Heightmap(self.width, self.height, new_cells)

    def smooth_times(self, iterations: int) -> "Heightmap":
        """Apply ``smooth`` repeatedly; zero iterations returns a copy."""
        heightmap = Heightmap(self.width, self.height, list(self.cells))
        for _ in range(iterations):
            heightmap = heightmap.smooth()
        logger.debug("Smoothed heightmap", iterations=iterations)
        return heightmap

    def water_height(self, ratio: int) -> int:
        """
        Find the lowest height that puts more than ``ratio`` percent of
        the map at or below it.

        The percentage is truncated to an integer before the comparison.

        Args:
            ratio: Target water percentage, 0-100

        Returns:
            Threshold height, or MAX_HEIGHT if no height qualifies
        """
        heights = np.asarray(self.cells, dtype=np.int64)
        total = heights.size
        # below[h] == number of cells with value <= h
        below = np.cumsum(np.bincount(heights, minlength=MAX_HEIGHT)[:MAX_HEIGHT])
        qualifying = np.nonzero(below * 100 // total > ratio)[0]
        if qualifying.size == 0:
            return MAX_HEIGHT
        return int(qualifying[0])

    def make_terrain(self, water_ratio: int) -> TerrainMap:
        """
        Classify every cell as water or land.

        Args:
            water_ratio: Target water percentage

        Returns:
            TerrainMap where cells at or below the water height are water
        """
        threshold = self.water_height(water_ratio)
        cells = [
            Location(
                idx_to_pos(idx, self.width),
                Terrain.WATER if level <= threshold else Terrain.LAND,
            )
            for idx, level in enumerate(self.cells)
        ]
        terrain_map = TerrainMap(self.width, self.height, cells)
        logger.debug(
            "Classified terrain",
            water_ratio=water_ratio,
            water_height=threshold,
            water_cells=terrain_map.count(Terrain.WATER),
            land_cells=terrain_map.count(Terrain.LAND),
        )
        return terrain_map
