from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from ..evaluators.advancement import AdvancementEvaluator
from ..evaluators.base import Evaluator
from ..evaluators.linear import LinearEvaluator, LinearWeights
from ..game.board import Board
from ..game.config import search_config
from ..search import Expectimax
from .base import BaseStrategy


@dataclass(slots=True)
class ExpectimaxStrategy(BaseStrategy):
    """Plays the arg-max of a depth-limited expectimax over ``evaluator``."""

    name: ClassVar[str] = "expectimax"

    evaluator: Evaluator = field(default_factory=AdvancementEvaluator)
    depth: int = search_config.depth
    engine: Expectimax = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("Search depth must be at least 1")
        self.engine = Expectimax(self.evaluator)

    @classmethod
    def from_weights(
        cls, weights: LinearWeights, depth: Optional[int] = None
    ) -> "ExpectimaxStrategy":
        """Search-backed policy for a trained linear evaluator."""
        return cls(
            evaluator=LinearEvaluator(weights),
            depth=search_config.depth if depth is None else depth,
        )

    def _select(self, board: Board, dice: int, moves: List[int]) -> int:
        if len(moves) == 1:
            return moves[0]
        move, _ = self.engine.best_move(board, dice, self.depth)
        return move
