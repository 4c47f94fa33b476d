"""Depth-limited expectimax over dice (chance nodes) and moves (choice nodes).

Every value returned here is expressed for the player about to move in the
board passed in. A transition that hands the move to the opponent flips the
sign; a rosetta bonus turn keeps it.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from loguru import logger

from .evaluators.base import Evaluator
from .game.board import Board
from .game.dice import PROBABILITIES
from .game.errors import IllegalMoveError


class Expectimax:
    """Turns a static evaluator into a position value and a move choice.

    The engine holds no state besides its evaluator; boards passed in are
    never mutated, every step works on a copy.
    """

    def __init__(self, evaluator: Evaluator) -> None:
        self.evaluator = evaluator
        self._probabilities = [float(p) for p in PROBABILITIES]

    def expected_value(self, board: Board, depth: int) -> float:
        if depth < 0:
            raise ValueError("depth must be non-negative")
        return self._expected_value(board, depth)

    def eval_move(self, board: Board, dice: int, move: int, depth: int) -> float:
        """Value of playing ``move`` with ``dice``, then searching ``depth`` more."""
        if depth < 0:
            raise ValueError("depth must be non-negative")
        if move not in board.legal_moves(dice):
            raise IllegalMoveError(
                f"move {move} is not legal for player {board.turn} with dice {dice}"
            )
        return self._eval_move(board, dice, move, depth)

    def eval_no_move(self, board: Board, depth: int) -> float:
        """Value of a roll that leaves the mover without any legal move."""
        if depth < 0:
            raise ValueError("depth must be non-negative")
        return self._eval_no_move(board, depth)

    def rank_moves(
        self, board: Board, dice: int, depth: int
    ) -> List[Tuple[int, float]]:
        """(move, value) for every legal move, in enumeration order."""
        if depth < 1:
            raise ValueError("depth must be at least 1")
        return [
            (move, self._eval_move(board, dice, move, depth - 1))
            for move in board.legal_moves(dice)
        ]

    def best_move(
        self, board: Board, dice: int, depth: int
    ) -> Tuple[Optional[int], float]:
        """Arg-max move for ``dice``; ties go to the first move enumerated."""
        ranked = self.rank_moves(board, dice, depth)
        if not ranked:
            return None, self._eval_no_move(board, depth - 1)

        best, best_val = ranked[0]
        for move, val in ranked[1:]:
            if val > best_val:
                best, best_val = move, val
        logger.debug(
            f"[Expectimax] player={board.turn} dice={dice} depth={depth} "
            f"ranking={ranked} -> {best}"
        )
        return best, best_val

    # --- recursion (moves come from legal_moves, no re-validation) ---
    def _expected_value(self, board: Board, depth: int) -> float:
        if depth == 0:
            return self.evaluator.evaluate(board)

        total = 0.0
        for dice, proba in enumerate(self._probabilities):
            moves = board.legal_moves(dice)
            if not moves:
                value = self._eval_no_move(board, depth - 1)
            else:
                value = max(
                    self._eval_move(board, dice, move, depth - 1) for move in moves
                )
            total += proba * value
        return total

    def _eval_move(self, board: Board, dice: int, move: int, depth: int) -> float:
        copy = board.copy()
        if copy.apply_move(dice, move, check=False):
            return self.evaluator.certain_win_value
        value = self._expected_value(copy, depth)
        return value if copy.turn == board.turn else -value

    def _eval_no_move(self, board: Board, depth: int) -> float:
        copy = board.copy()
        copy.swap_turn()
        return -self._expected_value(copy, depth)
