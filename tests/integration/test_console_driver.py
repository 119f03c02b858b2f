from pathlib import Path
from typing import Callable, List

from ghost_chase.__main__ import run
from ghost_chase.components import Position
from ghost_chase.config import ChaseConfig


def make_input(keys: List[str]) -> Callable[[str], str]:
    """Feed ``keys`` to the driver, then signal end of input."""
    it = iter(keys)

    def input_fn(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return input_fn


def test_default_level_until_caught() -> None:
    frames: List[str] = []
    game = run(ChaseConfig(), input_fn=make_input([""] * 20), output_fn=frames.append)
    assert game.caught
    assert game.turn == 7
    assert frames[-1] == "Caught after 7 ticks."


def test_quit_key_stops() -> None:
    frames: List[str] = []
    game = run(ChaseConfig(), input_fn=make_input(["", "q", ""]), output_fn=frames.append)
    assert game.turn == 1
    assert not game.caught


def test_eof_stops() -> None:
    game = run(ChaseConfig(), input_fn=make_input([]), output_fn=lambda _: None)
    assert game.turn == 0


def test_max_ticks() -> None:
    game = run(ChaseConfig(max_ticks=2), input_fn=make_input([""] * 10), output_fn=lambda _: None)
    assert game.turn == 2


def test_pacman_keys_and_unknown_key(tmp_path: Path) -> None:
    maze = tmp_path / "maze.txt"
    maze.write_text("G....\n.....\n....P\n", encoding="utf-8")
    frames: List[str] = []
    game = run(
        ChaseConfig(maze_path=str(maze), max_ticks=1),
        input_fn=make_input(["x", "w"]),
        output_fn=frames.append,
    )
    assert "Unknown key 'x'" in frames
    assert game.pacman_position == Position(4, 1)
    assert game.turn == 1


def test_generated_level() -> None:
    game = run(
        ChaseConfig(generated=True, width=7, height=7, seed=11, max_ticks=0),
        input_fn=make_input([]),
        output_fn=lambda _: None,
    )
    assert game.grid.width == 7
    assert game.state.seed == 11
