"""Ghost Chase: a ghost hunts pac-man along BFS shortest paths on a grid maze.

Typical use::

    from ghost_chase import Game

    game = Game([[0, 0, 0], [1, 1, 0], [0, 0, 0]], ghost=(0, 0), pacman=(0, 2))
    game.tick()

Library logs go through loguru and are disabled until a driver calls
:func:`ghost_chase.config.configure_logging`.
"""

from loguru import logger

from ghost_chase.components import Cell, Position
from ghost_chase.errors import GhostChaseError, InvalidGridError, InvalidPositionError
from ghost_chase.game import Game
from ghost_chase.ghost import Ghost
from ghost_chase.grid import Grid
from ghost_chase.pathfinding import bfs_path
from ghost_chase.state import ChaseState, new_state
from ghost_chase.step import move_pacman, step

logger.disable("ghost_chase")

__all__ = [
    "Cell",
    "ChaseState",
    "Game",
    "Ghost",
    "GhostChaseError",
    "Grid",
    "InvalidGridError",
    "InvalidPositionError",
    "Position",
    "bfs_path",
    "move_pacman",
    "new_state",
    "step",
]
