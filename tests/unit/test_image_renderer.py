import numpy as np

from ghost_chase.renderer.image import DEFAULT_PALETTE, render_array, render_image
from tests.test_utils import WALL_DETOUR, make_state


def test_image_size_follows_grid() -> None:
    state = make_state([[0, 0, 0, 0], [0, 0, 0, 0]], ghost=(0, 0), pacman=(3, 1))
    img = render_image(state, resolution=100)
    assert img.mode == "RGBA"
    assert img.size == (100, 50)


def test_wall_and_floor_colors() -> None:
    state = make_state(WALL_DETOUR, ghost=(0, 0), pacman=(0, 2))
    img = render_image(state, resolution=30)
    # Cell (1, 1) is a wall, (1, 2) lies on the path but its corner is floor
    assert img.getpixel((15, 15)) == DEFAULT_PALETTE.wall
    assert img.getpixel((10, 20)) == DEFAULT_PALETTE.floor


def test_actors_drawn_at_cell_centers() -> None:
    state = make_state(WALL_DETOUR, ghost=(0, 0), pacman=(2, 2))
    img = render_image(state, resolution=30)
    assert img.getpixel((5, 5)) == DEFAULT_PALETTE.ghost
    assert img.getpixel((23, 25)) == DEFAULT_PALETTE.pacman


def test_path_dots() -> None:
    state = make_state(WALL_DETOUR, ghost=(0, 0), pacman=(2, 2))
    img = render_image(state, resolution=100)
    # Cell (1, 0) spans pixels 33..65 horizontally
    assert img.getpixel((49, 16)) == DEFAULT_PALETTE.path
    assert img.getpixel((34, 1)) == DEFAULT_PALETTE.floor


def test_render_array_shape() -> None:
    state = make_state(WALL_DETOUR, ghost=(0, 0), pacman=(0, 2))
    arr = render_array(state, resolution=60)
    assert arr.shape == (60, 60, 4)
    assert arr.dtype == np.uint8
