from .board import (
    CENTRAL_ROSETTA,
    ENTER,
    PATH_LENGTH,
    PIECES,
    Board,
    is_rosetta,
    is_shared,
    opponent,
)
from .config import config, search_config, training_config
from .dice import PROBABILITIES, roll_dice
from .errors import (
    GameOverError,
    IllegalMoveError,
    InvalidPlayerError,
    InvariantViolation,
    RoyalUrError,
)
from .render import format_weights, render_board

__all__ = [
    "Board",
    "ENTER",
    "PATH_LENGTH",
    "PIECES",
    "CENTRAL_ROSETTA",
    "is_rosetta",
    "is_shared",
    "opponent",
    "config",
    "search_config",
    "training_config",
    "PROBABILITIES",
    "roll_dice",
    "RoyalUrError",
    "InvalidPlayerError",
    "IllegalMoveError",
    "GameOverError",
    "InvariantViolation",
    "render_board",
    "format_weights",
]
