"""Position evaluators plugged into the expectimax search."""

from .advancement import AdvancementEvaluator
from .base import Evaluator
from .linear import LinearEvaluator, LinearWeights, board_features
from .registry import available, create

__all__ = [
    "Evaluator",
    "AdvancementEvaluator",
    "LinearEvaluator",
    "LinearWeights",
    "board_features",
    "available",
    "create",
]
