"""Driver-facing simulation handle.

:class:`Game` owns one chase. Drivers (the console loop, the Gymnasium
environment, the Streamlit app) construct it, update the pacman between
ticks, call :meth:`Game.tick` and read the exposed state to render a frame.
The game never prints or draws anything itself.

Example:

>>> game = Game([[0, 0, 0]], ghost=(0, 0), pacman=(2, 0))
>>> game.tick()
>>> game.ghost_position
Position(x=1, y=0)
"""

from typing import Optional, Union

from ghost_chase.components import Position
from ghost_chase.grid import Grid
from ghost_chase.state import ChaseState, PositionLike, new_state
from ghost_chase.step import move_pacman, step
from ghost_chase.types import Path, Rows


class Game:
    """Mutable wrapper around the current :class:`ChaseState`.

    Arguments:
        grid: A :class:`Grid` or raw rows of ``0``/``1`` markers.
        ghost: Initial ghost cell.
        pacman: Initial pacman cell.
        seed: Optional level seed, carried on the state.
        state: An existing snapshot to resume from instead of building a
            new level.

    Raises:
        InvalidGridError: If raw rows are not a valid rectangular maze.
        InvalidPositionError: If either start cell is off the grid or a wall.
        TypeError: If neither a full level nor a ``state`` is given.
    """

    def __init__(
        self,
        grid: Optional[Union[Grid, Rows]] = None,
        ghost: Optional[PositionLike] = None,
        pacman: Optional[PositionLike] = None,
        seed: Optional[int] = None,
        *,
        state: Optional[ChaseState] = None,
    ) -> None:
        if state is None:
            if grid is None or ghost is None or pacman is None:
                raise TypeError("Game needs grid, ghost and pacman, or a state")
            if not isinstance(grid, Grid):
                grid = Grid.from_rows(grid)
            state = new_state(grid, ghost, pacman, seed=seed)
        self.state: ChaseState = state

    @classmethod
    def from_state(cls, state: ChaseState) -> "Game":
        return cls(state=state)

    def tick(self) -> None:
        """Replan and advance the ghost by at most one cell."""
        self.state = step(self.state)

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def ghost_position(self) -> Position:
        return self.state.ghost_position

    @property
    def pacman_position(self) -> Position:
        return self.state.pacman

    @pacman_position.setter
    def pacman_position(self, position: PositionLike) -> None:
        self.state = move_pacman(self.state, position)

    @property
    def path(self) -> Path:
        """Path computed on the most recent tick (the initial path before any)."""
        return self.state.path

    @property
    def initial_path(self) -> Path:
        return self.state.initial_path

    @property
    def initial_path_size(self) -> int:
        return self.state.initial_path_size

    @property
    def turn(self) -> int:
        return self.state.turn

    @property
    def caught(self) -> bool:
        return self.state.caught
