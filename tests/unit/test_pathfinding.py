from typing import List, Tuple

import pytest

from ghost_chase.components import Position
from ghost_chase.pathfinding import (
    bfs_path,
    distance_map,
    is_adjacent,
    is_valid_path,
    neighbors,
)
from tests.test_utils import (
    OPEN_3X1,
    OPEN_4X4,
    ORIGINAL_MAZE,
    SPLIT,
    WALL_DETOUR,
    as_tuples,
    make_grid,
    reference_distances,
)


def test_neighbors_in_expansion_order() -> None:
    assert list(neighbors(Position(1, 1))) == [
        Position(1, 0),  # up
        Position(2, 1),  # right
        Position(1, 2),  # down
        Position(0, 1),  # left
    ]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0), (1, 0), True),
        ((0, 0), (0, 1), True),
        ((0, 0), (1, 1), False),
        ((0, 0), (0, 0), False),
        ((0, 0), (2, 0), False),
    ],
)
def test_is_adjacent(a: Tuple[int, int], b: Tuple[int, int], expected: bool) -> None:
    assert is_adjacent(Position(*a), Position(*b)) is expected


def test_open_corridor() -> None:
    grid = make_grid(OPEN_3X1)
    path = bfs_path(grid, Position(0, 0), Position(2, 0))
    assert as_tuples(path) == [(0, 0), (1, 0), (2, 0)]


def test_wall_forces_detour() -> None:
    grid = make_grid(WALL_DETOUR)
    start, target = Position(0, 0), Position(0, 2)
    path = bfs_path(grid, start, target)
    # Manhattan distance is 2, but the wall row forces the long way round
    assert as_tuples(path) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2)]
    assert len(path) - 1 == reference_distances(grid, start)[target]


def test_self_path() -> None:
    grid = make_grid(WALL_DETOUR)
    path = bfs_path(grid, Position(2, 1), Position(2, 1))
    assert as_tuples(path) == [(2, 1)]


def test_unreachable_region_returns_empty() -> None:
    grid = make_grid(SPLIT)
    assert len(bfs_path(grid, Position(0, 0), Position(2, 2))) == 0
    assert len(bfs_path(grid, Position(2, 0), Position(0, 1))) == 0


@pytest.mark.parametrize("target", [(1, 1), (-1, 0), (3, 0), (0, 3)])
def test_impassable_target_returns_empty(target: Tuple[int, int]) -> None:
    grid = make_grid(WALL_DETOUR)
    assert len(bfs_path(grid, Position(0, 0), Position(*target))) == 0


def test_tie_break_prefers_up_then_right() -> None:
    grid = make_grid(OPEN_4X4)
    # Down-right diagonal: right is expanded before down at every level
    path = bfs_path(grid, Position(0, 0), Position(1, 1))
    assert as_tuples(path) == [(0, 0), (1, 0), (1, 1)]
    # Up-left diagonal: up is expanded before left
    path = bfs_path(grid, Position(1, 1), Position(0, 0))
    assert as_tuples(path) == [(1, 1), (1, 0), (0, 0)]


def test_original_maze_route() -> None:
    grid = make_grid(ORIGINAL_MAZE)
    path = bfs_path(grid, Position(5, 0), Position(2, 4))
    assert as_tuples(path) == [
        (5, 0),
        (5, 1),
        (5, 2),
        (5, 3),
        (5, 4),
        (4, 4),
        (3, 4),
        (2, 4),
    ]


@pytest.mark.parametrize("rows", [OPEN_3X1, WALL_DETOUR, SPLIT, ORIGINAL_MAZE, OPEN_4X4])
def test_shortest_and_valid_for_all_pairs(rows: List[List[int]]) -> None:
    grid = make_grid(rows)
    cells = list(grid.free_positions())
    for start in cells:
        expected = reference_distances(grid, start)
        for target in cells:
            path = bfs_path(grid, start, target)
            if target in expected:
                assert len(path) - 1 == expected[target]
                assert is_valid_path(grid, path, start, target)
            else:
                assert len(path) == 0


@pytest.mark.parametrize("rows", [WALL_DETOUR, SPLIT, ORIGINAL_MAZE])
def test_distance_map_matches_reference(rows: List[List[int]]) -> None:
    grid = make_grid(rows)
    for start in grid.free_positions():
        assert distance_map(grid, start) == reference_distances(grid, start)


def test_distance_map_from_wall_is_empty() -> None:
    grid = make_grid(WALL_DETOUR)
    assert distance_map(grid, Position(0, 1)) == {}


def test_is_valid_path_rejections() -> None:
    grid = make_grid(WALL_DETOUR)
    start, target = Position(0, 0), Position(2, 0)
    good = bfs_path(grid, start, target)
    assert is_valid_path(grid, good, start, target)
    assert not is_valid_path(grid, good[:0], start, target)
    assert not is_valid_path(grid, good, Position(1, 0), target)
    assert not is_valid_path(grid, good, start, Position(2, 1))
    # Skips a cell
    assert not is_valid_path(grid, good.delete(1), start, target)
    # Steps through a wall
    through_wall = bfs_path(grid, Position(0, 0), Position(0, 0)).append(Position(0, 1))
    assert not is_valid_path(grid, through_wall, Position(0, 0), Position(0, 1))
