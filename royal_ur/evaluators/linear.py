from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Mapping, Optional, Sequence

import numpy as np

from ..game.board import PATH_LENGTH, Board, opponent
from .base import Evaluator

# Feature layout: [ready, cell 0..13, out, bias]
READY_INDEX = 0
CELLS_SLICE = slice(1, 1 + PATH_LENGTH)
OUT_INDEX = 1 + PATH_LENGTH
BIAS_INDEX = OUT_INDEX + 1
NUM_FEATURES = BIAS_INDEX + 1


@dataclass(slots=True)
class LinearWeights:
    """Parameter table of a linear evaluator.

    ``bias`` is the advantage of being the player about to move.
    """

    ready: float = 0.0
    cells: tuple[float, ...] = field(default_factory=lambda: (0.0,) * PATH_LENGTH)
    out: float = 0.0
    bias: float = 0.0

    def __post_init__(self):
        self.cells = tuple(float(w) for w in self.cells)
        if len(self.cells) != PATH_LENGTH:
            raise ValueError(
                f"cells must hold {PATH_LENGTH} weights, got {len(self.cells)}"
            )
        self.ready = float(self.ready)
        self.out = float(self.out)
        self.bias = float(self.bias)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, object]]) -> "LinearWeights":
        if data is None:
            return cls()
        return cls(
            ready=float(data.get("ready", 0.0)),
            cells=tuple(data.get("cells", (0.0,) * PATH_LENGTH)),
            out=float(data.get("out", 0.0)),
            bias=float(data.get("bias", 0.0)),
        )

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "LinearWeights":
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (NUM_FEATURES,):
            raise ValueError(f"expected {NUM_FEATURES} weights, got {values.shape}")
        return cls(
            ready=values[READY_INDEX],
            cells=tuple(values[CELLS_SLICE].tolist()),
            out=values[OUT_INDEX],
            bias=values[BIAS_INDEX],
        )

    def as_array(self) -> np.ndarray:
        values = np.empty(NUM_FEATURES, dtype=np.float64)
        values[READY_INDEX] = self.ready
        values[CELLS_SLICE] = self.cells
        values[OUT_INDEX] = self.out
        values[BIAS_INDEX] = self.bias
        return values


def board_features(board: Board) -> np.ndarray:
    """Mover-minus-opponent feature vector, with a trailing constant 1."""
    me = board.turn
    opp = opponent(me)
    features = np.empty(NUM_FEATURES, dtype=np.float64)
    features[READY_INDEX] = int(board.ready[me]) - int(board.ready[opp])
    features[CELLS_SLICE] = board.cells[me].astype(np.float64) - board.cells[opp]
    features[OUT_INDEX] = int(board.out[me]) - int(board.out[opp])
    features[BIAS_INDEX] = 1.0
    return features


class LinearEvaluator(Evaluator):
    """Linear evaluator trained online against itself."""

    name: ClassVar[str] = "linear"
    certain_win_value: ClassVar[float] = 1.0

    def __init__(self, weights: Optional[LinearWeights] = None) -> None:
        self._weights = (weights or LinearWeights()).as_array()

    @property
    def weights(self) -> LinearWeights:
        return LinearWeights.from_array(self._weights)

    def features(self, board: Board) -> np.ndarray:
        return board_features(board)

    def evaluate(self, board: Board) -> float:
        return float(self._weights @ board_features(board))

    def step(self, board: Board, target: float, alpha: float) -> float:
        """Move the weights toward ``target`` on ``board``; return the error.

        The evaluation is linear, so its gradient is the feature vector:
        features the mover holds get +delta, the opponent's get -delta.
        """
        features = board_features(board)
        error = float(target) - float(self._weights @ features)
        self._weights += (alpha * error) * features
        return error
