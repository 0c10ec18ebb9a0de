"""
Terrain classification and map locations.

A terrain map is a grid of Location cells. Each location has a fixed
terrain and can hold a single piece placed on top of it.
"""

from enum import Enum
from typing import Iterator, List, Optional

from .geometry import Position
from .grid import Grid
from .pieces import Piece, piece_glyph


class Terrain(Enum):
    """Terrain of a single map cell."""

    WATER = "water"
    LAND = "land"
    UNKNOWN = "unknown"  # display fallback only


TERRAIN_GLYPHS = {
    Terrain.LAND: "+",
    Terrain.WATER: ".",
    Terrain.UNKNOWN: " ",
}


def terrain_glyph(terrain: Terrain) -> str:
    """Display character for a terrain type."""
    return TERRAIN_GLYPHS[terrain]


class Location:
    """A map cell: its position, terrain and optional piece."""

    __slots__ = ("pos", "_terrain", "piece")

    def __init__(self, pos: Position, terrain: Terrain, piece: Optional[Piece] = None):
        self.pos = pos
        self._terrain = terrain
        self.piece = piece

    @property
    def terrain(self) -> Terrain:
        return self._terrain

    def __eq__(self, other) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return (self.pos, self._terrain, self.piece) == (
            other.pos,
            other._terrain,
            other.piece,
        )

    def __repr__(self) -> str:
        return f"Location(pos={self.pos}, terrain={self._terrain}, piece={self.piece})"

    def __str__(self) -> str:
        if self.piece is not None:
            return piece_glyph(self.piece)
        return terrain_glyph(self._terrain)


class TerrainMap(Grid[Location]):
    """Grid of classified locations that pieces can be placed on."""

    def put_piece(self, piece: Piece, pos: Position) -> None:
        """Place a piece at ``pos``, replacing whatever piece was there."""
        self[pos].piece = piece

    def remove_piece(self, pos: Position) -> None:
        """Clear the piece at ``pos``."""
        self[pos].piece = None

    def land_positions(self) -> List[Position]:
        """Positions of all land cells, in row-major order."""
        return [loc.pos for loc in self.cells if loc.terrain == Terrain.LAND]

    def count(self, terrain: Terrain) -> int:
        """Number of cells with the given terrain."""
        return sum(1 for loc in self.cells if loc.terrain == terrain)

    def pieces(self) -> Iterator[Location]:
        """Yield every location that currently holds a piece."""
        return (loc for loc in self.cells if loc.piece is not None)
