"""Pacman action enumerations.

The ghost is driven by the search; the pacman is driven from outside. These
enums describe the pacman's moves for the interactive drivers and the
Gymnasium environment.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple


class Action(StrEnum):
    """String enum of pacman actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Move one cell.
        WAIT: Stay in place; the ghost still takes its tick.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()


ACTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
    Action.WAIT: (0, 0),
}


class GymAction(IntEnum):
    """Stable integer mapping for Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()
