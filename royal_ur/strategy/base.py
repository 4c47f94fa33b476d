from __future__ import annotations

from typing import ClassVar, List

from ..game.board import Board
from ..game.errors import IllegalMoveError


class BaseStrategy:
    """Base class for move-choosing policies.

    The match runner calls ``choose`` once per turn on a board that has at
    least one legal move for ``dice``; rolls without a legal move are handled
    by the runner by passing the turn.
    """

    name: ClassVar[str] = "base"

    def choose(self, board: Board, dice: int) -> int:
        moves = board.legal_moves(dice)
        if not moves:
            raise IllegalMoveError(
                f"player {board.turn} has no legal move with dice {dice}"
            )
        return self._select(board, dice, moves)

    def _select(
        self, board: Board, dice: int, moves: List[int]
    ) -> int:  # pragma: no cover - abstract
        raise NotImplementedError

    def __str__(self) -> str:
        return self.name
