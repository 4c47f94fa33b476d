from __future__ import annotations

from typing import Dict, Type

from .base import BaseStrategy
from .expectimax import ExpectimaxStrategy
from .greedy import GreedyStrategy
from .simple import FirstMoveStrategy, LastMoveStrategy, RandomStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    FirstMoveStrategy.name: FirstMoveStrategy,
    LastMoveStrategy.name: LastMoveStrategy,
    RandomStrategy.name: RandomStrategy,
    GreedyStrategy.name: GreedyStrategy,
    ExpectimaxStrategy.name: ExpectimaxStrategy,
}


def create(strategy_name: str, **kwargs) -> BaseStrategy:
    cls = STRATEGY_REGISTRY.get(strategy_name.lower())
    if cls is None:
        raise KeyError(f"Unknown strategy '{strategy_name}'.")
    return cls(**kwargs)


def available() -> Dict[str, Type[BaseStrategy]]:
    return dict(STRATEGY_REGISTRY)
