from ghost_chase.renderer.text import (
    GLYPH_CHARS,
    Glyph,
    overlay,
    render_initial_path,
    render_legend,
    render_maze,
    render_text,
)
from ghost_chase.step import step
from tests.test_utils import OPEN_3X1, WALL_DETOUR, make_state


def test_initial_frame_maze() -> None:
    state = make_state(WALL_DETOUR, ghost=(0, 0), pacman=(0, 2))
    assert render_maze(state).splitlines() == [
        "F * *",
        "█ █ *",
        "P * *",
    ]


def test_path_behind_ghost_not_marked() -> None:
    state = step(make_state(OPEN_3X1, ghost=(0, 0), pacman=(2, 0)))
    assert render_maze(state) == "· F P"


def test_initial_path_marker_follows_ghost() -> None:
    state = make_state(OPEN_3X1, ghost=(0, 0), pacman=(2, 0))
    assert render_initial_path(state).splitlines() == [
        "0: (0, 0) <-",
        "1: (1, 0)",
        "2: (2, 0)",
    ]
    state = step(state)
    assert render_initial_path(state).splitlines()[1] == "1: (1, 0) <-"


def test_initial_path_empty() -> None:
    state = make_state([[0, 1, 0]], ghost=(0, 0), pacman=(2, 0))
    assert render_initial_path(state) == "(no path)"


def test_pacman_drawn_over_ghost_when_caught() -> None:
    state = step(make_state(OPEN_3X1, ghost=(0, 0), pacman=(1, 0)))
    assert state.caught
    assert overlay(state)[0] == [Glyph.FREE, Glyph.PACMAN, Glyph.FREE]


def test_render_text_sections() -> None:
    state = make_state(WALL_DETOUR, ghost=(0, 0), pacman=(0, 2))
    text = render_text(state)
    assert "Ghost: (0, 0)" in text
    assert "Pac-Man: (0, 2)" in text
    assert "Turn: 0" in text
    assert render_legend() in text
    for char in GLYPH_CHARS.values():
        assert f"{char} - " in text


def test_render_does_not_touch_grid() -> None:
    state = make_state(WALL_DETOUR, ghost=(0, 0), pacman=(0, 2))
    render_text(state)
    assert state.grid.to_rows() == WALL_DETOUR
