"""
Integer grid coordinates and index helpers.

Positions are plain signed 16-bit coordinate pairs. They carry no bounds of
their own; whether a position is valid depends on the grid it is used with.
"""

import math
from dataclasses import dataclass

DEFAULT_MAP_WIDTH = 100
DEFAULT_MAP_HEIGHT = 60

_I16_MIN = -(2**15)
_I16_MAX = 2**15 - 1


@dataclass(frozen=True)
class Position:
    """A cell coordinate on a grid."""

    x: int
    y: int

    def __post_init__(self):
        for value in (self.x, self.y):
            if not _I16_MIN <= value <= _I16_MAX:
                raise ValueError(f"Coordinate {value} does not fit in 16 bits")

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def distance(self, other: "Position") -> int:
        """
        Legacy distance helper.

        The deltas are combined with XOR, not squared, so this is not a
        euclidean distance. Nothing in placement relies on it.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        return isqrt(max(dx ^ 2 + dy ^ 2, 0))


def isqrt(value: int) -> int:
    """Floor of the square root of a non-negative integer."""
    return math.isqrt(value)


def pos_to_idx(pos: Position, width: int) -> int:
    """Row-major offset of a position."""
    return pos.y * width + pos.x


def idx_to_pos(idx: int, width: int) -> Position:
    """Position of a row-major offset."""
    y, x = divmod(idx, width)
    return Position(x, y)
