"""ghost_chase.components
=========================

Value objects shared across the package: grid coordinates, cell markers and
cardinal directions. All of them are immutable; positions are copied by value
wherever they are used::

    from ghost_chase.components import Position, Cell, Direction

"""

from .cell import Cell
from .direction import Direction, EXPANSION_ORDER
from .position import Position

__all__ = [
    "Cell",
    "Direction",
    "EXPANSION_ORDER",
    "Position",
]
