"""Immutable occupancy grid.

The grid is built once from raw rows of cell markers (``0`` free, ``1`` wall)
and never changes afterwards. Renderers that overlay the ghost, the pacman or
path markers work on their own copies (see :meth:`Grid.to_rows`).

Rows are stored row-major, so the cell for ``Position(x, y)`` lives at
``cells[y][x]``.
"""

from dataclasses import dataclass
from typing import Iterator, List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ghost_chase.components import Cell, Position
from ghost_chase.errors import InvalidGridError
from ghost_chase.types import Rows


@dataclass(frozen=True)
class Grid:
    """Rectangular maze of free and wall cells.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        cells (PVector[PVector[Cell]]): Row-major cell markers.
    """

    width: int
    height: int
    cells: PVector[PVector[Cell]]

    @classmethod
    def from_rows(cls, rows: Rows) -> "Grid":
        """Build a grid from nested sequences of ``0``/``1`` markers.

        Raises:
            InvalidGridError: If there are no rows, a row is empty, rows have
                different lengths, or a marker is not a known ``Cell`` value.
        """
        if len(rows) == 0:
            raise InvalidGridError("Grid must have at least one row")
        width = len(rows[0])
        if width == 0:
            raise InvalidGridError("Grid rows must not be empty")

        cells: List[PVector[Cell]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridError(
                    f"Grid is not rectangular: row {y} has {len(row)} cells, expected {width}"
                )
            try:
                cells.append(pvector(Cell(marker) for marker in row))
            except ValueError as exc:
                raise InvalidGridError(f"Unknown cell marker in row {y}: {list(row)}") from exc

        return cls(width=width, height=len(cells), cells=pvector(cells))

    def is_in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_passable(self, pos: Position) -> bool:
        """Return True if ``pos`` is in bounds and not a wall.

        Off-grid positions are simply not passable; the search generates them
        at the maze boundary.
        """
        return self.is_in_bounds(pos) and self.cells[pos.y][pos.x] == Cell.FREE

    def cell_at(self, pos: Position) -> Cell:
        if not self.is_in_bounds(pos):
            raise IndexError(f"Out of bounds: {pos} for grid {self.width}x{self.height}")
        return self.cells[pos.y][pos.x]

    def free_positions(self) -> Iterator[Position]:
        """Yield every passable position in row-major order."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell == Cell.FREE:
                    yield Position(x, y)

    def to_rows(self) -> List[List[int]]:
        """Return a mutable copy of the raw markers (for display overlays)."""
        return [[int(cell) for cell in row] for row in self.cells]
