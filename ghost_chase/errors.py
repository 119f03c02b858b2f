"""Exception hierarchy.

Errors are raised only at input boundaries (grid construction, placing the
ghost or pacman). A search that finds no route is not an error; it yields an
empty path.
"""


class GhostChaseError(ValueError):
    """Base class for all invalid-input errors raised by the package."""


class InvalidGridError(GhostChaseError):
    """Raised when raw maze rows are empty, ragged or contain unknown markers."""


class InvalidPositionError(GhostChaseError):
    """Raised when a ghost or pacman position is off the grid or on a wall."""
