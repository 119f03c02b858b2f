from enum import IntEnum


class Cell(IntEnum):
    """Cell marker stored in the grid (raw rows use the integer values)."""

    FREE = 0
    WALL = 1
