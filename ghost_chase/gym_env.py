"""Gymnasium environment for the chase.

The agent plays the pacman; the ghost is the pursuer. Each environment step
applies the pacman's action and then ticks the simulation once, so the ghost
always replans against the pacman's newest cell.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"ghost", "pacman", "path_length", "distance", "turn"}}``

Reward is ``+1`` per tick survived and ``-1`` on the tick the ghost catches
the pacman. ``terminated`` is ``True`` once caught, ``truncated`` once
``max_steps`` ticks have run.

Usage:

``env = GhostChaseEnv(width=9, height=9, seed=0)``
"""

import inspect
from typing import Any, Callable, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from ghost_chase.actions import Action
from ghost_chase.levels import generate
from ghost_chase.pathfinding import distance_map
from ghost_chase.renderer.image import DEFAULT_RESOLUTION, render_array, render_image
from ghost_chase.renderer.text import render_text
from ghost_chase.state import ChaseState
from ghost_chase.step import pacman_action, step

ObsType = Dict[str, Any]

DEFAULT_MAX_STEPS = 200
CAUGHT_REWARD = -1.0
SURVIVE_REWARD = 1.0


def accepts_seed(fn: Callable[..., ChaseState]) -> bool:
    """True if ``fn`` takes a ``seed`` keyword (directly or through ``**kwargs``)."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(
        p.name == "seed" or p.kind is inspect.Parameter.VAR_KEYWORD for p in params
    )


def chase_observation_dict(state: ChaseState) -> Dict[str, Any]:
    """Structured part of the observation.

    ``distance`` is the ghost-to-pacman move distance, or ``-1`` when the
    pacman is unreachable.
    """
    distance = distance_map(state.grid, state.ghost_position).get(state.pacman, -1)
    return {
        "ghost": np.array(state.ghost_position.to_tuple(), dtype=np.int64),
        "pacman": np.array(state.pacman.to_tuple(), dtype=np.int64),
        "path_length": int(len(state.path)),
        "distance": int(distance),
        "turn": int(state.turn),
    }


class GhostChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` where the agent evades the ghost.

    The action space is ``Discrete(len(Action))``; see :mod:`ghost_chase.actions`.
    """

    metadata = {"render_modes": ["human", "texture", "ansi"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        max_steps: int = DEFAULT_MAX_STEPS,
        initial_state_fn: Callable[..., ChaseState] = generate,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" returns PIL images, "ansi" returns the text
                frame, "human" opens an image viewer.
            render_resolution: Width (pixels) of rendered images.
            max_steps: Ticks before the episode is truncated.
            initial_state_fn: Callable returning an initial ``ChaseState``.
            **kwargs: Forwarded to ``initial_state_fn`` (e.g. size, seed).
        """
        from gymnasium import spaces

        self._initial_state_fn = initial_state_fn
        self._initial_state_kwargs = kwargs
        self._render_resolution = render_resolution
        self._render_mode = render_mode
        self.max_steps = max_steps

        self.state: Optional[ChaseState] = None

        # Observation image shape follows the level, so build one level up front
        first_state = self._initial_state_fn(**self._initial_state_kwargs)
        width, height = first_state.grid.width, first_state.grid.height
        image_shape = render_array(first_state, render_resolution).shape

        def int_box(low: int, high: int, shape: Tuple[int, ...] = ()) -> spaces.Box:
            return spaces.Box(low=low, high=high, shape=shape, dtype=np.int64)

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(low=0, high=255, shape=image_shape, dtype=np.uint8),
                "info": spaces.Dict(
                    {
                        "ghost": int_box(0, max(width, height) - 1, (2,)),
                        "pacman": int_box(0, max(width, height) - 1, (2,)),
                        "path_length": int_box(0, width * height),
                        "distance": int_box(-1, width * height),
                        "turn": int_box(0, 1_000_000_000),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self.state = first_state

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Seeds the environment RNG. Also overrides the level seed
                passed on construction when ``initial_state_fn`` takes one;
                fixed levels ignore it.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        kwargs = dict(self._initial_state_kwargs)
        if seed is not None and accepts_seed(self._initial_state_fn):
            kwargs["seed"] = seed
        self.state = self._initial_state_fn(**kwargs)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Move the pacman, then tick the ghost.

        Arguments:
            action: Integer index into the ``Action`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(Action):
            raise ValueError(f"Invalid action: {action}")
        pacman_move: Action = list(Action)[int(action)]

        self.state = pacman_action(self.state, pacman_move)
        caught = self.state.caught
        if not caught:
            self.state = step(self.state)
            caught = self.state.caught

        reward = CAUGHT_REWARD if caught else SURVIVE_REWARD
        truncated = not caught and self.state.turn >= self.max_steps
        return self._get_obs(), reward, caught, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage | str]:  # type: ignore
        """Render the current state in ``mode`` (defaults to the configured mode)."""
        render_mode = mode or self._render_mode
        assert self.state is not None
        if render_mode == "ansi":
            return render_text(self.state)
        img = render_image(self.state, self._render_resolution)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {
            "image": render_array(self.state, self._render_resolution),
            "info": chase_observation_dict(self.state),
        }

    def _get_info(self) -> Dict[str, object]:
        assert self.state is not None
        path: List[Tuple[int, int]] = [pos.to_tuple() for pos in self.state.path]
        return {"path": path}

    def close(self) -> None:
        pass
