from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, List

from ..game.board import Board
from .base import BaseStrategy


@dataclass(slots=True)
class FirstMoveStrategy(BaseStrategy):
    """Always plays the first legal move (entering a piece when possible)."""

    name: ClassVar[str] = "first"

    def _select(self, board: Board, dice: int, moves: List[int]) -> int:
        return moves[0]


@dataclass(slots=True)
class LastMoveStrategy(BaseStrategy):
    """Always moves the most advanced piece that can move."""

    name: ClassVar[str] = "last"

    def _select(self, board: Board, dice: int, moves: List[int]) -> int:
        return moves[-1]


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    name: ClassVar[str] = "random"

    rng_seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.rng_seed)

    def _select(self, board: Board, dice: int, moves: List[int]) -> int:
        return self.rng.choice(moves)
