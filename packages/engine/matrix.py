"""
Letter-membership matrix over the word corpus.

Rows are words, columns are the letters of the usable alphabet (25 letters,
banned letter removed). Each word is also kept as an integer bitmask
(bit i <-> alphabet[i]) so a subset test is a single AND:

    word W is legal for combination C   iff  W & ~C == 0
    ... and counts for center letter L  iff  W & (1 << idx(L)) != 0

The dense 0/1 matrix is what the vectorised scorer multiplies; the masks are
what the per-combination reference scorer walks.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .models import Honeycomb, LetterCombination, Word


def letter_mask(word: str, alphabet: str) -> int:
    """
    Bitmask of the distinct letters of `word` within `alphabet`.
    Raises ValueError if the word uses a letter outside the alphabet.
    """
    m = 0
    for ch in set(word):
        i = alphabet.find(ch)
        if i < 0:
            raise ValueError(f"letter {ch!r} of {word!r} is not in the usable alphabet")
        m |= 1 << i
    return m


def mask_letters(mask: int, alphabet: str) -> str:
    """Inverse of letter_mask: sorted letters whose bits are set."""
    return "".join(ch for i, ch in enumerate(alphabet) if mask >> i & 1)


class LetterMatrix:
    """
    Binary (word x letter) incidence structure plus per-word masks and points.
    Built once from the filtered corpus and never mutated.
    """

    def __init__(self, words: Sequence[Word], alphabet: str,
                 members: np.ndarray, masks: np.ndarray, points: np.ndarray):
        self.words: List[Word] = list(words)
        self.alphabet = alphabet
        self.members = members   # (n_words, n_letters) uint8 0/1
        self.masks = masks       # (n_words,) int64
        self.points = points     # (n_words,) int64
        for arr in (self.members, self.masks, self.points):
            arr.setflags(write=False)

    @classmethod
    def from_words(cls, words: Sequence[Word], alphabet: str) -> "LetterMatrix":
        n, k = len(words), len(alphabet)
        members = np.zeros((n, k), dtype=np.uint8)
        masks = np.zeros(n, dtype=np.int64)
        points = np.zeros(n, dtype=np.int64)
        for row, w in enumerate(words):
            m = letter_mask(w.letters, alphabet)
            masks[row] = m
            points[row] = w.points
            for ch in w.letters:
                members[row, alphabet.index(ch)] = 1
        return cls(words, alphabet, members, masks, points)

    def __len__(self) -> int:
        return len(self.words)

    def index_of(self, letter: str) -> int:
        i = self.alphabet.find(letter)
        if i < 0:
            raise ValueError(f"letter {letter!r} is not in the usable alphabet {self.alphabet!r}")
        return i

    def contains(self, row: int, letter: str) -> bool:
        """Does word `row` contain `letter`?"""
        return bool(self.members[row, self.index_of(letter)])

    def letters_of(self, row: int) -> str:
        return mask_letters(int(self.masks[row]), self.alphabet)

    def legal_mask(self, allowed_mask: int, center: str | None = None) -> np.ndarray:
        """
        Boolean selector over words: letters within `allowed_mask` and, when a
        center is given, containing the center letter.
        """
        sel = (self.masks & ~np.int64(allowed_mask)) == 0
        if center is not None:
            sel &= (self.masks & np.int64(1 << self.index_of(center))) != 0
        return sel

    def words_for(self, honeycomb: Honeycomb) -> List[Word]:
        """All corpus words playable on `honeycomb`, in corpus order."""
        sel = self.legal_mask(honeycomb.combination.mask(self.alphabet), honeycomb.center)
        return [self.words[i] for i in np.flatnonzero(sel)]

    def combination_matrix(self, combinations: Sequence[LetterCombination]) -> np.ndarray:
        """(n_combinations, n_letters) 0/1 matrix with a row per combination."""
        out = np.zeros((len(combinations), len(self.alphabet)), dtype=np.uint8)
        for row, c in enumerate(combinations):
            for ch in c.letters:
                out[row, self.index_of(ch)] = 1
        return out
