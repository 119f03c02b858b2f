"""Console frame renderer.

Formats a :class:`ChaseState` as the text frame printed by the console
driver: positions, the initial path with a ``<-`` marker at the ghost's
progress, the maze with overlays, and the legend. The function is pure; the
caller decides where the text goes.
"""

from enum import IntEnum
from typing import Dict, List

from ghost_chase.state import ChaseState


class Glyph(IntEnum):
    """Overlay codes painted on a copy of the grid's raw markers."""

    FREE = 0
    WALL = 1
    GHOST = 2
    PACMAN = 3
    PATH = 4


GLYPH_CHARS: Dict[Glyph, str] = {
    Glyph.FREE: "·",
    Glyph.WALL: "█",
    Glyph.GHOST: "F",
    Glyph.PACMAN: "P",
    Glyph.PATH: "*",
}

LEGEND: Dict[Glyph, str] = {
    Glyph.FREE: "Free cell",
    Glyph.WALL: "Wall",
    Glyph.GHOST: "Ghost",
    Glyph.PACMAN: "Pac-Man",
    Glyph.PATH: "Shortest path",
}

PROGRESS_MARKER = " <-"


def overlay(state: ChaseState) -> List[List[Glyph]]:
    """Return the grid as glyph rows with path, ghost and pacman painted on.

    Only the part of the path still ahead of the ghost is marked. Path cells
    under the ghost or the pacman keep their actor glyph; the pacman wins
    when both share a cell.
    """
    display = [[Glyph(marker) for marker in row] for row in state.grid.to_rows()]
    ghost = state.ghost_position
    for pos in state.path_ahead:
        if pos != ghost and pos != state.pacman:
            display[pos.y][pos.x] = Glyph.PATH
    display[ghost.y][ghost.x] = Glyph.GHOST
    display[state.pacman.y][state.pacman.x] = Glyph.PACMAN
    return display


def render_maze(state: ChaseState) -> str:
    return "\n".join(
        " ".join(GLYPH_CHARS[glyph] for glyph in row) for row in overlay(state)
    )


def render_initial_path(state: ChaseState) -> str:
    lines: List[str] = []
    for index, pos in enumerate(state.initial_path):
        suffix = PROGRESS_MARKER if index == state.progress else ""
        lines.append(f"{index}: {pos}{suffix}")
    if not lines:
        lines.append("(no path)")
    return "\n".join(lines)


def render_legend() -> str:
    return "\n".join(f"{GLYPH_CHARS[glyph]} - {label}" for glyph, label in LEGEND.items())


def render_text(state: ChaseState) -> str:
    """Render the full console frame for ``state``."""
    sections = [
        "=== Current State ===",
        f"Ghost: {state.ghost_position}",
        f"Pac-Man: {state.pacman}",
        f"Turn: {state.turn}",
        "",
        "Shortest path found:",
        render_initial_path(state),
        "",
        "Maze:",
        render_maze(state),
        "",
        "Legend:",
        render_legend(),
        "=====================",
    ]
    return "\n".join(sections)
