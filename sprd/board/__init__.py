"""Public board package interface."""

from .cells import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    CELL_WIDTH,
    DIRECTIONS,
    LEFT,
    RIGHT,
    UP_LEFT,
    UP_RIGHT,
    Cell,
)  # noqa: F401
from .config import BoardConfig, resolve_config  # noqa: F401
from .pipeline import Board, generate_board  # noqa: F401
from .rng import RandomSource  # noqa: F401

__all__ = [
    "Board",
    "BoardConfig",
    "Cell",
    "RandomSource",
    "generate_board",
    "resolve_config",
    "CELL_WIDTH",
    "DIRECTIONS",
    "LEFT",
    "UP_LEFT",
    "UP_RIGHT",
    "RIGHT",
    "BOTTOM_RIGHT",
    "BOTTOM_LEFT",
]
