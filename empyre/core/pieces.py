"""
Placeable game pieces.
"""

from enum import Enum


class Piece(Enum):
    """Objects that can occupy a map location."""

    CITY = "city"


PIECE_GLYPHS = {
    Piece.CITY: "O",
}


def piece_glyph(piece: Piece) -> str:
    """Display character for a piece."""
    return PIECE_GLYPHS[piece]
