"""Driver configuration and logging setup.

:class:`ChaseConfig` collects the knobs the console driver and the Streamlit
app expose. It is a frozen dataclass; use :func:`dataclasses.replace` to
derive variants.

The library disables its own loguru output on import (see
:mod:`ghost_chase`); :func:`configure_logging` turns it back on for
drivers.
"""

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from loguru import logger

from ghost_chase.levels import LEVEL_FN_REGISTRY, load_level
from ghost_chase.levels.generator import (
    DEFAULT_HEIGHT,
    DEFAULT_WALL_PERCENTAGE,
    DEFAULT_WIDTH,
)
from ghost_chase.renderer.image import DEFAULT_RESOLUTION
from ghost_chase.state import ChaseState

LOG_LEVEL_ENV = "GHOST_CHASE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ChaseConfig:
    """Level selection and driver settings.

    Attributes:
        maze_path: ASCII maze file; overrides ``generated`` when set.
        generated: Use the procedural generator instead of the stock level.
        width: Generated level width.
        height: Generated level height.
        seed: Generated level seed.
        wall_percentage: Share of maze walls kept by the generator.
        max_ticks: Stop the console loop after this many ticks (``None`` runs
            until caught or quit).
        render_resolution: Image width in pixels.
        log_level: Loguru level name for the stderr sink.
    """

    maze_path: Optional[str] = None
    generated: bool = False
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None
    wall_percentage: float = DEFAULT_WALL_PERCENTAGE
    max_ticks: Optional[int] = None
    render_resolution: int = DEFAULT_RESOLUTION
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> "ChaseConfig":
        args = build_parser().parse_args(argv)
        return cls(
            maze_path=args.maze,
            generated=args.generate,
            width=args.width,
            height=args.height,
            seed=args.seed,
            wall_percentage=args.wall_percentage,
            max_ticks=args.max_ticks,
            log_level=args.log_level,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghost_chase",
        description="Watch a ghost chase pac-man along the shortest path, one tick at a time.",
    )
    parser.add_argument("--maze", help="ASCII maze file ('#' wall, '.' free, 'G' ghost, 'P' pacman)")
    parser.add_argument("--generate", action="store_true", help="Use a procedurally generated level")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--wall-percentage", type=float, default=DEFAULT_WALL_PERCENTAGE)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"Loguru level (default from ${LOG_LEVEL_ENV}, else {DEFAULT_LOG_LEVEL})",
    )
    return parser


def make_initial_state(config: ChaseConfig) -> ChaseState:
    """Build the initial snapshot described by ``config``."""
    if config.maze_path is not None:
        with open(config.maze_path, encoding="utf-8") as f:
            return load_level(f.read())
    if config.generated:
        return LEVEL_FN_REGISTRY["generated"](
            width=config.width,
            height=config.height,
            seed=config.seed,
            wall_percentage=config.wall_percentage,
        )
    return LEVEL_FN_REGISTRY["default"]()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Enable package logs and route them to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.enable("ghost_chase")
