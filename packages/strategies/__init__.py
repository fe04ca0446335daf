from __future__ import annotations
from typing import List
from .base import BaseStrategy, REGISTRY, register

from . import pangram  # noqa: F401
from . import top_letters  # noqa: F401


def create_strategy(strategy_id: str) -> BaseStrategy:
    """
    Factory: instantiate a registered search strategy by id.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
