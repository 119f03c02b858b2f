"""Level sources.

Every level function returns an initial :class:`~ghost_chase.state.ChaseState`.
``LEVEL_FN_REGISTRY`` maps names to the built-in sources so drivers can
select one by name.
"""

from typing import Dict

from ghost_chase.types import LevelFn

from .ascii import format_maze, load_level, parse_maze
from .default import DEFAULT_GHOST, DEFAULT_MAZE, DEFAULT_PACMAN, default_level
from .generator import generate

LEVEL_FN_REGISTRY: Dict[str, LevelFn] = {
    "default": default_level,
    "generated": generate,
}

__all__ = [
    "DEFAULT_GHOST",
    "DEFAULT_MAZE",
    "DEFAULT_PACMAN",
    "LEVEL_FN_REGISTRY",
    "default_level",
    "format_maze",
    "generate",
    "load_level",
    "parse_maze",
]
