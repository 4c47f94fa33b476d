from __future__ import annotations

from typing import Dict, Type

from .advancement import AdvancementEvaluator
from .base import Evaluator
from .linear import LinearEvaluator

EVALUATOR_REGISTRY: Dict[str, Type[Evaluator]] = {
    AdvancementEvaluator.name: AdvancementEvaluator,
    LinearEvaluator.name: LinearEvaluator,
}


def create(evaluator_name: str, **kwargs) -> Evaluator:
    cls = EVALUATOR_REGISTRY.get(evaluator_name.lower())
    if cls is None:
        raise KeyError(f"Unknown evaluator '{evaluator_name}'.")
    return cls(**kwargs)


def available() -> Dict[str, Type[Evaluator]]:
    return dict(EVALUATOR_REGISTRY)
