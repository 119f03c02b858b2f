"""ASCII maze authoring format.

One line per row, one character per cell:

* ``#`` wall
* ``.`` free cell
* ``G`` ghost start (free)
* ``P`` pacman start (free)

Blank leading/trailing lines and surrounding whitespace are ignored. Exactly
one ``G`` and one ``P`` are required.
"""

from typing import Dict, List, Optional, Tuple

from ghost_chase.components import Cell, Position
from ghost_chase.errors import InvalidGridError
from ghost_chase.grid import Grid
from ghost_chase.state import ChaseState, new_state

WALL_CHAR = "#"
FREE_CHAR = "."
GHOST_CHAR = "G"
PACMAN_CHAR = "P"

CHAR_TO_CELL: Dict[str, Cell] = {
    WALL_CHAR: Cell.WALL,
    FREE_CHAR: Cell.FREE,
    GHOST_CHAR: Cell.FREE,
    PACMAN_CHAR: Cell.FREE,
}


def parse_maze(text: str) -> Tuple[Grid, Position, Position]:
    """Parse an ASCII maze into a grid plus ghost and pacman starts.

    Raises:
        InvalidGridError: On unknown characters, ragged rows, or a missing or
            duplicated ``G``/``P`` marker.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    rows: List[List[int]] = []
    ghost: Optional[Position] = None
    pacman: Optional[Position] = None

    for y, line in enumerate(lines):
        row: List[int] = []
        for x, char in enumerate(line):
            if char not in CHAR_TO_CELL:
                raise InvalidGridError(f"Unknown maze character {char!r} at ({x}, {y})")
            if char == GHOST_CHAR:
                if ghost is not None:
                    raise InvalidGridError("Maze has more than one ghost start")
                ghost = Position(x, y)
            elif char == PACMAN_CHAR:
                if pacman is not None:
                    raise InvalidGridError("Maze has more than one pacman start")
                pacman = Position(x, y)
            row.append(int(CHAR_TO_CELL[char]))
        rows.append(row)

    if ghost is None or pacman is None:
        raise InvalidGridError("Maze needs exactly one 'G' and one 'P'")
    return Grid.from_rows(rows), ghost, pacman


def format_maze(grid: Grid, ghost: Position, pacman: Position) -> str:
    """Inverse of :func:`parse_maze`."""
    lines: List[str] = []
    for y, row in enumerate(grid.cells):
        chars: List[str] = []
        for x, cell in enumerate(row):
            pos = Position(x, y)
            if pos == ghost:
                chars.append(GHOST_CHAR)
            elif pos == pacman:
                chars.append(PACMAN_CHAR)
            else:
                chars.append(WALL_CHAR if cell == Cell.WALL else FREE_CHAR)
        lines.append("".join(chars))
    return "\n".join(lines)


def load_level(text: str) -> ChaseState:
    grid, ghost, pacman = parse_maze(text)
    return new_state(grid, ghost, pacman)
