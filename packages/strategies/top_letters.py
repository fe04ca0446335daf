"""
Top-letters heuristic.

Idea:
  - Count, for each letter, how many corpus words contain it.
  - Keep only the TOP_LETTERS most common letters and search 7-subsets of
    those (C(15,7) = 6,435 instead of 480,700).

Notes:
  - Approximate. A winning honeycomb that leans on a less common letter is
    missed; every score it does report equals the exhaustive one.
  - Kept for comparison against the exhaustive `pangram` strategy.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Sequence

from packages.engine import LetterCombination, Word, all_combinations, enumerate_combinations
from .base import BaseStrategy, register


@register
class TopLettersStrategy(BaseStrategy):
    id = "top_letters"
    name = "Most common letters (heuristic)"
    version = "1.0.0"

    TOP_LETTERS = 15

    def _top_letters(self, words: Sequence[Word], alphabet: str) -> str:
        counts = Counter(ch for w in words for ch in w.letters)
        # ties broken alphabetically so the pick is deterministic
        ranked = sorted(alphabet, key=lambda ch: (-counts[ch], ch))
        return "".join(sorted(ranked[: self.TOP_LETTERS]))

    def candidates(self, words: Sequence[Word], alphabet: str, *,
                   required_pangram: bool = True) -> List[LetterCombination]:
        top = self._top_letters(words, alphabet)
        if required_pangram:
            keep = set(top)
            return [c for c in enumerate_combinations(words) if keep.issuperset(c.letters)]
        return all_combinations(top)
