"""Tick reducer.

:func:`step` is the only way the ghost advances. Each call replans from
scratch: it searches from the ghost's current cell to the pacman's current
cell, records the new path on the snapshot and moves the ghost to the second
cell of that path. With a path of one cell (already caught) or no path at
all, the ghost stays where it is.

:func:`move_pacman` and :func:`pacman_action` are the entry points for the
driver that owns the target's movement. Neither moves the ghost.
"""

from dataclasses import replace

from loguru import logger

from ghost_chase.actions import ACTION_DELTAS, Action
from ghost_chase.state import ChaseState, PositionLike, check_placement, to_position


def step(state: ChaseState) -> ChaseState:
    """Advance the chase by one tick.

    Args:
        state (ChaseState): Snapshot before the tick.

    Returns:
        ChaseState: Snapshot with the fresh ``path``, the ghost moved one cell
            along it when possible, and ``turn`` incremented.
    """
    path = state.ghost.shortest_path_to(state.pacman)
    ghost = state.ghost
    if len(path) > 1:
        ghost = ghost.move(path[1])
    elif len(path) == 0:
        logger.debug("Turn {}: no path from {} to {}", state.turn, ghost.position, state.pacman)

    logger.debug(
        "Turn {}: ghost {} -> {} (path length {})",
        state.turn,
        state.ghost.position,
        ghost.position,
        len(path),
    )
    return replace(state, ghost=ghost, path=path, turn=state.turn + 1)


def move_pacman(state: ChaseState, position: PositionLike) -> ChaseState:
    """Place the pacman at ``position``.

    Raises:
        InvalidPositionError: If ``position`` is off the grid or on a wall.
    """
    pos = to_position(position)
    check_placement(state.grid, pos, "pacman")
    return replace(state, pacman=pos)


def pacman_action(state: ChaseState, action: Action) -> ChaseState:
    """Move the pacman one cell for ``action``.

    A move into a wall or off the grid leaves the pacman in place.
    """
    dx, dy = ACTION_DELTAS[action]
    next_pos = state.pacman.offset(dx, dy)
    if not state.grid.is_passable(next_pos):
        return state
    return replace(state, pacman=next_pos)
