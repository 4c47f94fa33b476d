from __future__ import annotations

from typing import ClassVar

from ..game.board import Board


class Evaluator:
    """Static position evaluator used at the floor of the search.

    ``evaluate`` scores a board from the point of view of ``board.turn``; the
    same position is worth the opposite to the other player. A state reached
    by a winning move is worth ``certain_win_value`` whatever the depth.
    """

    name: ClassVar[str] = "base"
    certain_win_value: ClassVar[float] = 0.0

    def evaluate(self, board: Board) -> float:  # pragma: no cover - abstract
        raise NotImplementedError
