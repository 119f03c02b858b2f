"""Shortest-path search over the grid.

:func:`bfs_path` is the search the ghost runs every tick. It keeps a FIFO
frontier of ``(position, path so far)`` pairs. A position is marked visited as
soon as it is enqueued, so each passable cell enters the queue at most once
and the search is ``O(width * height)`` in time and space.

Paths are persistent vectors: extending a path for a neighbor shares
structure with its parent instead of copying it.

:func:`distance_map` is a separate level-synchronized BFS that reports the
move distance to every reachable cell. It does not share code with
:func:`bfs_path` so it can be used to check it.
"""

from collections import deque
from typing import Deque, Dict, Iterator, List, Set, Tuple

from pyrsistent import pvector

from ghost_chase.components import EXPANSION_ORDER, Position
from ghost_chase.grid import Grid
from ghost_chase.types import Path


def neighbors(pos: Position) -> Iterator[Position]:
    """Yield the four cardinal neighbors of ``pos`` in expansion order."""
    for direction in EXPANSION_ORDER:
        dx, dy = direction.delta
        yield pos.offset(dx, dy)


def is_adjacent(a: Position, b: Position) -> bool:
    """Return True if ``a`` and ``b`` are one cardinal step apart."""
    return abs(a.x - b.x) + abs(a.y - b.y) == 1


def bfs_path(grid: Grid, start: Position, target: Position) -> Path:
    """Find the shortest 4-directional path from ``start`` to ``target``.

    Args:
        grid (Grid): Maze to search.
        start (Position): First element of the returned path.
        target (Position): Last element of the returned path.

    Returns:
        Path: ``[start, ..., target]`` of minimum length, ``[start]`` when
            ``start == target``, or an empty path if ``target`` cannot be
            reached (including when it is a wall or off the grid).
    """
    queue: Deque[Tuple[Position, Path]] = deque([(start, pvector([start]))])
    visited: Set[Position] = {start}

    while queue:
        pos, path = queue.popleft()
        if pos == target:
            return path
        for next_pos in neighbors(pos):
            if grid.is_passable(next_pos) and next_pos not in visited:
                visited.add(next_pos)
                queue.append((next_pos, path.append(next_pos)))

    return pvector()


def distance_map(grid: Grid, start: Position) -> Dict[Position, int]:
    """Return the move distance from ``start`` to every reachable cell.

    ``start`` itself maps to ``0``. An impassable ``start`` yields an empty
    map.
    """
    if not grid.is_passable(start):
        return {}
    distances: Dict[Position, int] = {start: 0}
    frontier: List[Position] = [start]
    level = 0
    while frontier:
        level += 1
        next_frontier: List[Position] = []
        for pos in frontier:
            for next_pos in neighbors(pos):
                if grid.is_passable(next_pos) and next_pos not in distances:
                    distances[next_pos] = level
                    next_frontier.append(next_pos)
        frontier = next_frontier
    return distances


def is_valid_path(grid: Grid, path: Path, start: Position, target: Position) -> bool:
    """Check that ``path`` connects ``start`` to ``target`` over passable cells.

    Every element must be passable and consecutive elements must be adjacent.
    The empty path is never valid.
    """
    if len(path) == 0 or path[0] != start or path[-1] != target:
        return False
    if not all(grid.is_passable(pos) for pos in path):
        return False
    return all(is_adjacent(a, b) for a, b in zip(path, path[1:]))
