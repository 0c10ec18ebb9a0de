"""
Core map generation functionality.
"""

from .geometry import DEFAULT_MAP_HEIGHT, DEFAULT_MAP_WIDTH, Position, idx_to_pos, pos_to_idx
from .grid import Grid, NEIGHBOUR_OFFSETS
from .pieces import Piece
from .terrain import Location, Terrain, TerrainMap
from .heightmap import Heightmap, MAX_HEIGHT
from .settlements import CityOptions, Settlements, city_count, place_cities
from .generator import GenerationOptions, MapGenerator

__all__ = ['DEFAULT_MAP_HEIGHT', 'DEFAULT_MAP_WIDTH', 'Position', 'idx_to_pos', 'pos_to_idx',
           'Grid', 'NEIGHBOUR_OFFSETS', 'Piece', 'Location', 'Terrain', 'TerrainMap',
           'Heightmap', 'MAX_HEIGHT', 'CityOptions', 'Settlements', 'city_count', 'place_cities',
           'GenerationOptions', 'MapGenerator']
