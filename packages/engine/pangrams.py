"""
Pangram enumeration: which 7-letter combinations are worth scoring?

Every valid honeycomb must admit at least one pangram, so the only
combinations that can ever win are the distinct letter sets of words that
use exactly 7 distinct letters. That cuts C(25,7) = 480,700 candidate
combinations down to a few thousand on a typical dictionary.
"""

from __future__ import annotations

from itertools import combinations as _choose
from typing import Iterable, List

from .models import COMBINATION_SIZE, LetterCombination, Word


def enumerate_combinations(words: Iterable[Word]) -> List[LetterCombination]:
    """
    Distinct letter sets of all pangram-capable words, sorted.
    Words spelled differently but sharing a letter set map to one combination.
    """
    seen = {w.letters for w in words if len(w.letters) == COMBINATION_SIZE}
    return [LetterCombination(letters) for letters in sorted(seen)]


def all_combinations(alphabet: str) -> List[LetterCombination]:
    """Every 7-subset of the usable alphabet (no pangram requirement)."""
    return [LetterCombination("".join(c)) for c in _choose(sorted(alphabet), COMBINATION_SIZE)]


def pangrams_for(combination: LetterCombination, words: Iterable[Word]) -> List[Word]:
    """Words whose distinct letters are exactly `combination`."""
    return [w for w in words if w.letters == combination.letters]
