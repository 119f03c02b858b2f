"""Procedural maze carving.

Mazes are produced as raw rows of cell markers so they can go straight into
:meth:`ghost_chase.grid.Grid.from_rows`.
"""

import random
from typing import Dict, List, Tuple

from ghost_chase.components import Cell
from ghost_chase.types import Coord

OpenMap = Dict[Coord, bool]  # True = free; False = wall

CARVE_DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def carve_perfect_maze(width: int, height: int, rng: random.Random) -> OpenMap:
    """Carve a perfect maze with randomized depth-first backtracking.

    Cells on even coordinates are rooms; walls between neighboring rooms are
    knocked down as the walk proceeds. The right and bottom edges are opened
    next to open cells so even-sized grids have no dead border.
    """
    open_map: OpenMap = {(x, y): False for x in range(width) for y in range(height)}

    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < width and 0 <= y < height

    open_map[(0, 0)] = True
    stack: List[Coord] = [(0, 0)]
    while stack:
        x, y = stack[-1]
        candidates = [
            (dx, dy)
            for dx, dy in CARVE_DIRECTIONS
            if in_bounds(x + dx * 2, y + dy * 2) and not open_map[(x + dx * 2, y + dy * 2)]
        ]
        if not candidates:
            stack.pop()
            continue
        dx, dy = rng.choice(candidates)
        open_map[(x + dx, y + dy)] = True
        open_map[(x + dx * 2, y + dy * 2)] = True
        stack.append((x + dx * 2, y + dy * 2))

    for y in range(height):
        if open_map.get((width - 2, y), False):
            open_map[(width - 1, y)] = True
    for x in range(width):
        if open_map.get((x, height - 2), False):
            open_map[(x, height - 1)] = True

    return open_map


def thin_walls(open_map: OpenMap, wall_percentage: float, rng: random.Random) -> OpenMap:
    """Keep only ``wall_percentage`` of the walls (0.0 open field, 1.0 unchanged).

    Opening walls never cuts an existing route, but a wall opened between
    kept walls becomes an isolated free cell. Callers that need connected
    placements must check reachability themselves.
    """
    if not 0.0 <= wall_percentage <= 1.0:
        raise ValueError(f"wall_percentage must be within [0, 1], got {wall_percentage}")
    walls = sorted(pos for pos, is_open in open_map.items() if not is_open)
    rng.shuffle(walls)
    kept = set(walls[: int(len(walls) * wall_percentage)])
    return {pos: is_open or pos not in kept for pos, is_open in open_map.items()}


def to_rows(open_map: OpenMap, width: int, height: int) -> List[List[int]]:
    return [
        [int(Cell.FREE if open_map[(x, y)] else Cell.WALL) for x in range(width)]
        for y in range(height)
    ]
