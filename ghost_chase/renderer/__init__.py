"""Renderers turn a :class:`~ghost_chase.state.ChaseState` into text or images.

Nothing in the simulation core calls these; drivers do.
"""

from .image import DEFAULT_RESOLUTION, render_array, render_image
from .text import render_text

__all__ = [
    "DEFAULT_RESOLUTION",
    "render_array",
    "render_image",
    "render_text",
]
