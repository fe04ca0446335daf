"""
Exhaustive pangram-pruned search (the authoritative one).

Only letter sets of actual pangram words can host a valid puzzle, so those
are the only combinations scored. Without the pangram requirement every
7-subset of the usable alphabet is scored instead.
"""

from __future__ import annotations
from typing import List, Sequence

from packages.engine import LetterCombination, Word, all_combinations, enumerate_combinations
from .base import BaseStrategy, register


@register
class PangramStrategy(BaseStrategy):
    id = "pangram"
    name = "Exhaustive (pangram-pruned)"
    version = "1.0.0"

    def candidates(self, words: Sequence[Word], alphabet: str, *,
                   required_pangram: bool = True) -> List[LetterCombination]:
        if required_pangram:
            return enumerate_combinations(words)
        return all_combinations(alphabet)
