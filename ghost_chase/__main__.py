"""Console driver: ``python -m ghost_chase``.

Shows the text frame after every tick and waits for a key. Enter ticks,
``w``/``a``/``s``/``d`` move the pacman and then tick, ``q`` quits. The loop
also stops once the ghost catches the pacman or ``--max-ticks`` is reached.
"""

from typing import Callable, Dict, Optional, Sequence

from loguru import logger

from ghost_chase.actions import Action
from ghost_chase.config import ChaseConfig, configure_logging, make_initial_state
from ghost_chase.game import Game
from ghost_chase.renderer.text import render_text
from ghost_chase.step import pacman_action

KEY_ACTIONS: Dict[str, Action] = {
    "": Action.WAIT,
    "w": Action.UP,
    "a": Action.LEFT,
    "s": Action.DOWN,
    "d": Action.RIGHT,
}
QUIT_KEY = "q"
PROMPT = "[Enter] tick  [w/a/s/d] move pac-man  [q] quit > "


def run(
    config: ChaseConfig,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Game:
    """Drive one chase until quit, caught or out of ticks; return the game."""
    game = Game.from_state(make_initial_state(config))
    output_fn("=== Ghost Chase ===")
    output_fn(render_text(game.state))

    while not game.caught:
        if config.max_ticks is not None and game.turn >= config.max_ticks:
            break
        try:
            key = input_fn(PROMPT).strip().lower()
        except EOFError:
            break
        if key == QUIT_KEY:
            break
        action = KEY_ACTIONS.get(key)
        if action is None:
            output_fn(f"Unknown key {key!r}")
            continue
        game.state = pacman_action(game.state, action)
        game.tick()
        output_fn(render_text(game.state))

    if game.caught:
        output_fn(f"Caught after {game.turn} ticks.")
    logger.info("Chase ended at turn {} (caught={})", game.turn, game.caught)
    return game


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = ChaseConfig.from_args(argv)
    configure_logging(config.log_level)
    run(config)


if __name__ == "__main__":
    main()
