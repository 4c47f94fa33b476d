"""
Royal Game of Ur engine.
Board rules, expectimax search over static evaluators, self-play training of
a linear evaluator, and a match runner for comparing move policies.
"""

from royal_ur.evaluators import (
    AdvancementEvaluator,
    Evaluator,
    LinearEvaluator,
    LinearWeights,
)
from royal_ur.game import (
    ENTER,
    PROBABILITIES,
    Board,
    GameOverError,
    IllegalMoveError,
    InvalidPlayerError,
    InvariantViolation,
    RoyalUrError,
    render_board,
    roll_dice,
)
from royal_ur.search import Expectimax
from royal_ur.strategy import (
    BaseStrategy,
    ExpectimaxStrategy,
    FirstMoveStrategy,
    GreedyStrategy,
    LastMoveStrategy,
    RandomStrategy,
)
from royal_ur.tournament import ShowdownResult, play_game, showdown
from royal_ur.training import self_play_game, train_self_play, train_step

__version__ = "0.1.0"

__all__ = [
    "Board",
    "ENTER",
    "PROBABILITIES",
    "roll_dice",
    "render_board",
    "RoyalUrError",
    "InvalidPlayerError",
    "IllegalMoveError",
    "GameOverError",
    "InvariantViolation",
    "Evaluator",
    "AdvancementEvaluator",
    "LinearEvaluator",
    "LinearWeights",
    "Expectimax",
    "BaseStrategy",
    "FirstMoveStrategy",
    "LastMoveStrategy",
    "RandomStrategy",
    "GreedyStrategy",
    "ExpectimaxStrategy",
    "play_game",
    "showdown",
    "ShowdownResult",
    "train_step",
    "self_play_game",
    "train_self_play",
]
