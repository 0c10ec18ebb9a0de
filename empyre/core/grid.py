"""
Generic rectangular grid stored as a flat row-major sequence.

This module provides:
- Grid construction from a default factory
- Position-based indexing with bounds checks
- Moore neighbourhood iteration (up to eight neighbours)
- Text rendering, one glyph per cell
"""

from typing import Callable, Generic, Iterator, List, Tuple, TypeVar

from .geometry import Position, idx_to_pos, pos_to_idx

T = TypeVar("T")

# Fixed Moore offsets: NW, N, NE, W, E, SW, S, SE
NEIGHBOUR_OFFSETS: Tuple[Position, ...] = (
    Position(-1, -1),
    Position(0, -1),
    Position(1, -1),
    Position(-1, 0),
    Position(1, 0),
    Position(-1, 1),
    Position(0, 1),
    Position(1, 1),
)


class Grid(Generic[T]):
    """
    A width x height grid of cells.

    Cells are kept in a single list in row-major order, so the cell at
    (x, y) lives at index y * width + x.
    """

    def __init__(self, width: int, height: int, cells: List[T]):
        """
        Initialize the grid.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Row-major cell values, exactly width * height of them
        """
        assert len(cells) == width * height, (
            f"Grid {width}x{height} needs {width * height} cells, got {len(cells)}"
        )
        self.width = width
        self.height = height
        self.cells = cells

    @classmethod
    def new(cls, width: int, height: int, default: Callable[[], T] = int) -> "Grid[T]":
        """Create a grid with every cell set to ``default()``."""
        return cls(width, height, [default() for _ in range(width * height)])

    def covers(self, pos: Position) -> bool:
        """Check whether a position lies inside the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def _index(self, pos: Position) -> int:
        if not self.covers(pos):
            raise IndexError(f"{pos} is outside {self.width}x{self.height} grid")
        return pos_to_idx(pos, self.width)

    def __getitem__(self, pos: Position) -> T:
        return self.cells[self._index(pos)]

    def __setitem__(self, pos: Position, value: T) -> None:
        self.cells[self._index(pos)] = value

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and list(self.cells) == list(other.cells)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for idx in range(len(self.cells)):
            yield idx_to_pos(idx, self.width)

    def neighbours(self, pos: Position) -> Iterator[T]:
        """
        Yield the values of the in-bounds Moore neighbours of ``pos``.

        Neighbours come in the fixed order NW, N, NE, W, E, SW, S, SE.
        Offsets falling outside the grid are skipped. Each call returns a
        fresh generator; an exhausted one cannot be restarted.
        """
        for offset in NEIGHBOUR_OFFSETS:
            n_pos = pos + offset
            if self.covers(n_pos):
                yield self.cells[pos_to_idx(n_pos, self.width)]

    def render(self) -> str:
        """Render the grid as text, one line per row."""
        lines = []
        for y in range(self.height):
            row = self.cells[y * self.width:(y + 1) * self.width]
            lines.append("".join(str(cell) for cell in row) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()
