"""
City placement on a classified terrain map.

The number of cities scales with the map's width plus height, not with its
land area. Cities are sampled uniformly from the land cells, without
replacement, so no two cities share a cell within one placement pass.
"""

from typing import List, Optional

import numpy as np
import structlog

from pydantic import BaseModel, Field

from ..utils.random import get_rng
from .geometry import Position, isqrt
from .pieces import Piece
from .terrain import TerrainMap

logger = structlog.get_logger()


class CityOptions(BaseModel):
    """City count heuristic: scale * (width + height) // divisor."""

    scale: int = Field(default=100, ge=0, description="Multiplier on width + height")
    divisor: int = Field(default=228, gt=0, description="Divisor of the scaled perimeter")


def city_count(width: int, height: int, options: Optional[CityOptions] = None) -> int:
    """Target number of cities for a map of the given size."""
    options = options or CityOptions()
    return options.scale * (width + height) // options.divisor


class Settlements:
    """Places cities on a terrain map."""

    def __init__(
        self,
        terrain_map: TerrainMap,
        options: Optional[CityOptions] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize Settlements.

        Args:
            terrain_map: Map to place cities on, modified in place
            options: CityOptions for the city count heuristic
            rng: Optional generator, defaults to the shared one
        """
        self.terrain_map = terrain_map
        self.options = options or CityOptions()
        self.rng = get_rng(rng)
        self.cities: List[Position] = []
        # Candidate spacing between cities; computed but not enforced
        self.min_city_distance = 0

    def place_cities(self) -> List[Position]:
        """
        Put a City piece on randomly sampled distinct land cells.

        Returns:
            Positions that received a city, in sampling order
        """
        target = city_count(self.terrain_map.width, self.terrain_map.height, self.options)
        land = self.terrain_map.land_positions()

        if target > 0:
            self.min_city_distance = isqrt(len(land) // target)

        count = min(target, len(land))
        if count < target:
            logger.warning("Not enough land for all cities", target=target, land_cells=len(land))

        chosen = self.rng.choice(len(land), size=count, replace=False) if count else []
        self.cities = [land[int(i)] for i in chosen]

        for pos in self.cities:
            self.terrain_map.put_piece(Piece.CITY, pos)

        logger.debug(
            "Placed cities",
            cities=len(self.cities),
            land_cells=len(land),
            min_city_distance=self.min_city_distance,
        )
        return self.cities


def place_cities(
    terrain_map: TerrainMap, rng: Optional[np.random.Generator] = None
) -> List[Position]:
    """Place cities on ``terrain_map`` with the default options."""
    return Settlements(terrain_map, rng=rng).place_cities()
