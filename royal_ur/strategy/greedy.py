from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..game.board import ENTER, Board, is_rosetta, is_shared
from .base import BaseStrategy


@dataclass(slots=True)
class GreedyStrategy(BaseStrategy):
    """Captures first, then lands on a rosetta, else advances the leading piece.

    Candidates are scanned from the most advanced piece backwards.
    """

    name: ClassVar[str] = "greedy"

    def _select(self, board: Board, dice: int, moves: List[int]) -> int:
        theirs = board.cells[1 - board.turn]
        for move in reversed(moves):
            if move == ENTER:
                continue
            dest = move + dice
            if is_shared(dest) and theirs[dest]:
                return move
        for move in reversed(moves):
            dest = dice - 1 if move == ENTER else move + dice
            if is_rosetta(dest):
                return move
        return moves[-1]
