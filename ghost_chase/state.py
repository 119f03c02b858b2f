"""Immutable chase snapshot.

:class:`ChaseState` holds everything a renderer needs for one frame: the
grid, the ghost, the pacman's position, the path computed on the latest tick
and the path computed when the chase was created. Every tick produces a new
snapshot (see :mod:`ghost_chase.step`); nothing is mutated in place.

The ``initial_path`` is computed once, by :func:`new_state`, and is kept only
for display. Comparing its length to the latest path tells how far along the
original route the ghost has come.
"""

from dataclasses import dataclass
from typing import Optional, Union

from loguru import logger
from pyrsistent import pvector

from ghost_chase.components import Position
from ghost_chase.errors import InvalidPositionError
from ghost_chase.ghost import Ghost
from ghost_chase.grid import Grid
from ghost_chase.types import Coord, Path

PositionLike = Union[Position, Coord]


@dataclass(frozen=True)
class ChaseState:
    """Snapshot of the chase after a given number of ticks.

    Attributes:
        grid (Grid): Static maze.
        ghost (Ghost): Pursuer and its current position.
        pacman (Position): Target position, updated by the driver between ticks.
        path (Path): Path computed on the most recent tick (initially the
            initial path).
        initial_path (Path): Path computed at construction; never recomputed.
        turn (int): Number of ticks run so far.
        seed (int | None): Seed of the generated level, if any.
    """

    grid: Grid
    ghost: Ghost
    pacman: Position
    path: Path = pvector()
    initial_path: Path = pvector()
    turn: int = 0
    seed: Optional[int] = None

    @property
    def ghost_position(self) -> Position:
        return self.ghost.get_position()

    @property
    def initial_path_size(self) -> int:
        return len(self.initial_path)

    @property
    def caught(self) -> bool:
        """True once the ghost shares the pacman's cell."""
        return self.ghost_position == self.pacman

    @property
    def path_ahead(self) -> Path:
        """The latest path from the ghost's current cell onwards.

        ``path`` is computed before the ghost moves, so after a tick that moved
        the ghost its first cell is already behind.
        """
        if self.ghost_position in self.path:
            return self.path[self.path.index(self.ghost_position) :]
        return self.path

    @property
    def progress(self) -> int:
        """Index into ``initial_path`` that matches the ghost's remaining route."""
        return self.initial_path_size - len(self.path_ahead)


def to_position(pos: PositionLike) -> Position:
    if isinstance(pos, Position):
        return pos
    x, y = pos
    return Position(int(x), int(y))


def check_placement(grid: Grid, pos: Position, role: str) -> None:
    """Raise if ``pos`` cannot hold the ghost or the pacman."""
    if not grid.is_in_bounds(pos):
        logger.warning("Rejected {} position {}: out of bounds", role, pos)
        raise InvalidPositionError(
            f"{role.capitalize()} position {pos} is outside the {grid.width}x{grid.height} grid"
        )
    if not grid.is_passable(pos):
        logger.warning("Rejected {} position {}: wall", role, pos)
        raise InvalidPositionError(f"{role.capitalize()} position {pos} is on a wall")


def new_state(
    grid: Grid,
    ghost_position: PositionLike,
    pacman_position: PositionLike,
    seed: Optional[int] = None,
) -> ChaseState:
    """Validate placements and build the initial snapshot.

    The initial path from ghost to pacman is computed eagerly and stored both
    as ``initial_path`` and as the current ``path``.

    Raises:
        InvalidPositionError: If either position is off the grid or on a wall.
    """
    ghost_pos = to_position(ghost_position)
    pacman_pos = to_position(pacman_position)
    check_placement(grid, ghost_pos, "ghost")
    check_placement(grid, pacman_pos, "pacman")

    ghost = Ghost(position=ghost_pos, grid=grid)
    initial_path = ghost.shortest_path_to(pacman_pos)
    logger.debug(
        "New chase on {}x{} grid: ghost {} pacman {} initial path length {}",
        grid.width,
        grid.height,
        ghost_pos,
        pacman_pos,
        len(initial_path),
    )
    return ChaseState(
        grid=grid,
        ghost=ghost,
        pacman=pacman_pos,
        path=initial_path,
        initial_path=initial_path,
        seed=seed,
    )
