from __future__ import annotations
from typing import Dict, List, Sequence, Type

from packages.engine import LetterCombination, Word

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that search strategies inherit ----
class BaseStrategy:
    """
    A strategy decides WHICH letter combinations to score; scoring itself is
    shared (packages.engine.scoring).
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def candidates(self, words: Sequence[Word], alphabet: str, *,
                   required_pangram: bool = True) -> List[LetterCombination]:
        raise NotImplementedError("Override in subclass")
