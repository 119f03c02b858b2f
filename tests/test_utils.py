from typing import Dict, List, Sequence, Tuple

from ghost_chase.components import Position
from ghost_chase.grid import Grid
from ghost_chase.state import ChaseState, new_state

OPEN_3X1: List[List[int]] = [[0, 0, 0]]

WALL_DETOUR: List[List[int]] = [
    [0, 0, 0],
    [1, 1, 0],
    [0, 0, 0],
]

# Two regions separated by a full wall column
SPLIT: List[List[int]] = [
    [0, 1, 0],
    [0, 1, 0],
    [0, 1, 0],
]

ORIGINAL_MAZE: List[List[int]] = [
    [0, 0, 0, 0, 0, 0],
    [0, 1, 1, 0, 1, 0],
    [0, 0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0, 0],
    [0, 0, 0, 0, 0, 0],
]

OPEN_4X4: List[List[int]] = [[0] * 4 for _ in range(4)]


def make_grid(rows: Sequence[Sequence[int]]) -> Grid:
    return Grid.from_rows(rows)


def make_state(
    rows: Sequence[Sequence[int]],
    ghost: Tuple[int, int],
    pacman: Tuple[int, int],
) -> ChaseState:
    """Initial snapshot on ``rows`` with the given ghost and pacman cells."""
    return new_state(Grid.from_rows(rows), ghost, pacman)


def reference_distances(grid: Grid, start: Position) -> Dict[Position, int]:
    """Bellman-Ford style relaxation over unit edges, independent of BFS."""
    cells = list(grid.free_positions())
    dist: Dict[Position, int] = {start: 0} if grid.is_passable(start) else {}
    changed = True
    while changed:
        changed = False
        for pos in cells:
            for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
                other = Position(pos.x + dx, pos.y + dy)
                if other in dist and dist[other] + 1 < dist.get(pos, 1 << 30):
                    dist[pos] = dist[other] + 1
                    changed = True
    return dist


def as_tuples(path: Sequence[Position]) -> List[Tuple[int, int]]:
    return [pos.to_tuple() for pos in path]
