"""Common type aliases.

``Path`` is the central value produced by the search and consumed by the
tick reducer and renderers. An empty ``Path`` means the target could not be
reached.
"""

from typing import Callable, Sequence, Tuple, TYPE_CHECKING

from pyrsistent.typing import PVector

# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from ghost_chase.components import Position
    from ghost_chase.state import ChaseState

Coord = Tuple[int, int]
Rows = Sequence[Sequence[int]]

Path = PVector["Position"]

LevelFn = Callable[..., "ChaseState"]
