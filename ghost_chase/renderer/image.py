"""Raster renderer.

Draws a :class:`ChaseState` as an RGBA PIL image: one square per cell, a dot
on every path cell still ahead of the ghost, a round ghost and a pie-shaped
pacman. Used by the Gymnasium environment for image observations and by the
Streamlit app.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from ghost_chase.components import Cell, Position
from ghost_chase.state import ChaseState

DEFAULT_RESOLUTION = 640

RGBA = Tuple[int, int, int, int]
UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class Palette:
    floor: RGBA = (24, 24, 40, 255)
    wall: RGBA = (33, 33, 222, 255)
    path: RGBA = (255, 184, 151, 255)
    ghost: RGBA = (255, 0, 0, 255)
    pacman: RGBA = (255, 255, 0, 255)


DEFAULT_PALETTE = Palette()


def _cell_box(pos: Position, cell_size: int, inset: int = 0) -> Tuple[int, int, int, int]:
    x0, y0 = pos.x * cell_size, pos.y * cell_size
    return (x0 + inset, y0 + inset, x0 + cell_size - 1 - inset, y0 + cell_size - 1 - inset)


def render_image(
    state: ChaseState,
    resolution: int = DEFAULT_RESOLUTION,
    palette: Palette = DEFAULT_PALETTE,
) -> Image.Image:
    """Render ``state`` at ``resolution`` pixels wide.

    The cell size is ``resolution // width`` (at least one pixel), so the
    image height follows the grid's aspect ratio.
    """
    grid = state.grid
    cell_size = max(1, resolution // grid.width)
    img = Image.new("RGBA", (grid.width * cell_size, grid.height * cell_size), palette.floor)
    draw = ImageDraw.Draw(img)

    for y, row in enumerate(grid.cells):
        for x, cell in enumerate(row):
            if cell == Cell.WALL:
                draw.rectangle(_cell_box(Position(x, y), cell_size), fill=palette.wall)

    dot_inset = int(cell_size * 0.4)
    for pos in state.path_ahead:
        if pos != state.ghost_position and pos != state.pacman:
            draw.ellipse(_cell_box(pos, cell_size, dot_inset), fill=palette.path)

    actor_inset = int(cell_size * 0.1)
    draw.ellipse(_cell_box(state.ghost_position, cell_size, actor_inset), fill=palette.ghost)
    draw.pieslice(
        _cell_box(state.pacman, cell_size, actor_inset), start=30, end=330, fill=palette.pacman
    )
    return img


def render_array(state: ChaseState, resolution: int = DEFAULT_RESOLUTION) -> UInt8Array:
    """Render ``state`` as an ``(H, W, 4)`` uint8 array."""
    return np.asarray(render_image(state, resolution), dtype=np.uint8)
