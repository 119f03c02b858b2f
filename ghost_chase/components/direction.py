"""Cardinal directions.

``EXPANSION_ORDER`` fixes the order in which the search visits neighbors
(up, right, down, left). Among equal-length shortest paths, the one returned
is the first discovered under this order.
"""

from enum import Enum
from typing import List, Tuple


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


EXPANSION_ORDER: List[Direction] = [
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
]
