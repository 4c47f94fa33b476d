"""Move-choosing policies for scripted play, search and evaluation."""

from .base import BaseStrategy
from .expectimax import ExpectimaxStrategy
from .greedy import GreedyStrategy
from .registry import STRATEGY_REGISTRY, available, create
from .simple import FirstMoveStrategy, LastMoveStrategy, RandomStrategy

__all__ = [
    "BaseStrategy",
    "FirstMoveStrategy",
    "LastMoveStrategy",
    "RandomStrategy",
    "GreedyStrategy",
    "ExpectimaxStrategy",
    "STRATEGY_REGISTRY",
    "available",
    "create",
]
