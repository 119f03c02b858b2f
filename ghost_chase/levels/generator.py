"""Procedural level generator.

Carves a perfect maze, thins its walls and places the ghost and the pacman
on two distinct free cells. Placement uses the same seeded RNG as the
carving, so a seed fully determines the level.
"""

import random
from typing import Optional

from loguru import logger

from ghost_chase.grid import Grid
from ghost_chase.pathfinding import distance_map
from ghost_chase.state import ChaseState, new_state
from ghost_chase.utils.maze import carve_perfect_maze, thin_walls, to_rows

DEFAULT_WIDTH = 9
DEFAULT_HEIGHT = 9
DEFAULT_WALL_PERCENTAGE = 0.8


def generate(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    seed: Optional[int] = None,
    wall_percentage: float = DEFAULT_WALL_PERCENTAGE,
) -> ChaseState:
    """Generate a random chase level.

    Args:
        width: Grid width in cells.
        height: Grid height in cells.
        seed: RNG seed; ``None`` draws a fresh level every call.
        wall_percentage: Share of the perfect maze's walls to keep.

    Returns:
        ChaseState: Initial snapshot with ghost and pacman connected.

    Raises:
        ValueError: If no two free cells are connected.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Level size must be positive, got {width}x{height}")
    rng = random.Random(seed)
    open_map = thin_walls(carve_perfect_maze(width, height, rng), wall_percentage, rng)
    grid = Grid.from_rows(to_rows(open_map, width, height))

    # Thinning can leave isolated free cells; the pacman is drawn from the
    # ghost's connected region.
    free = list(grid.free_positions())
    rng.shuffle(free)
    for ghost in free:
        reachable = [pos for pos in distance_map(grid, ghost) if pos != ghost]
        if reachable:
            pacman = rng.choice(reachable)
            break
    else:
        raise ValueError(f"A {width}x{height} level has no two connected free cells")
    logger.debug("Generated {}x{} level (seed {})", width, height, seed)
    return new_state(grid, ghost, pacman, seed=seed)
