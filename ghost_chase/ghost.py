"""The pursuer.

A :class:`Ghost` is a value object: its position only changes through
:meth:`Ghost.move`, which returns the ghost at the new cell. The grid
reference is shared with the owning :class:`~ghost_chase.state.ChaseState`
and only ever read.
"""

from dataclasses import dataclass, replace

from ghost_chase.components import Position
from ghost_chase.grid import Grid
from ghost_chase.pathfinding import bfs_path
from ghost_chase.types import Path


@dataclass(frozen=True)
class Ghost:
    """Pursuer with a current position on a shared grid.

    Attributes:
        position: Current cell.
        grid: Maze the ghost searches.
    """

    position: Position
    grid: Grid

    def shortest_path_to(self, target: Position) -> Path:
        """Return the shortest path from the ghost to ``target``.

        The path starts at the ghost's position and ends at ``target``; it is
        empty when ``target`` is unreachable.
        """
        return bfs_path(self.grid, self.position, target)

    def move(self, next_position: Position) -> "Ghost":
        """Return this ghost relocated to ``next_position``.

        No adjacency or passability check is made here; callers pass an
        element of a path returned by :meth:`shortest_path_to`.
        """
        return replace(self, position=next_position)

    def get_position(self) -> Position:
        return self.position
