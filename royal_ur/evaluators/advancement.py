from __future__ import annotations

from typing import ClassVar

import numpy as np

from ..game.board import PATH_LENGTH, PIECES, Board, opponent
from .base import Evaluator

# A borne-off piece is worth one more than a piece on the last cell.
OUT_VALUE = PATH_LENGTH + 1
# Advancement of a piece on cell i is i + 1.
_ADVANCEMENT = np.arange(1, PATH_LENGTH + 1, dtype=np.float64)


class AdvancementEvaluator(Evaluator):
    """Sum of the mover's piece advancement minus the opponent's.

    Pre-terminal scores stay within +/-(OUT_VALUE * (PIECES - 1) + PATH_LENGTH),
    strictly below ``certain_win_value``.
    """

    name: ClassVar[str] = "advancement"
    certain_win_value: ClassVar[float] = float(PIECES * OUT_VALUE)

    def evaluate(self, board: Board) -> float:
        me = board.turn
        opp = opponent(me)
        score = OUT_VALUE * (int(board.out[me]) - int(board.out[opp]))
        score += float(_ADVANCEMENT @ board.cells[me]) - float(
            _ADVANCEMENT @ board.cells[opp]
        )
        return float(score)
