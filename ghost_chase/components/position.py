"""Position component.

Immutable integer grid coordinates shared by the ghost, the pacman and every
path element.
"""

from dataclasses import dataclass

from ghost_chase.types import Coord


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def to_tuple(self) -> Coord:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
