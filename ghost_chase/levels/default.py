"""The stock level: a 6x5 maze with the ghost in the top-right corner."""

from typing import List

from ghost_chase.components import Position
from ghost_chase.grid import Grid
from ghost_chase.state import ChaseState, new_state

DEFAULT_MAZE: List[List[int]] = [
    [0, 0, 0, 0, 0, 0],
    [0, 1, 1, 0, 1, 0],
    [0, 0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0, 0],
    [0, 0, 0, 0, 0, 0],
]

DEFAULT_GHOST = Position(5, 0)
DEFAULT_PACMAN = Position(2, 4)


def default_level() -> ChaseState:
    return new_state(Grid.from_rows(DEFAULT_MAZE), DEFAULT_GHOST, DEFAULT_PACMAN)
