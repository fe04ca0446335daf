"""
Typed records flowing through the honeycomb search.

  - Word:              a normalized dictionary word with its point value
  - LetterCombination: 7 distinct letters (sorted, stored as a string)
  - Honeycomb:         a combination plus its required center letter
  - ScoreResult:       read-only mapping Honeycomb -> total score

All records are frozen and validated once, at construction.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterator

# A honeycomb always has exactly this many letters.
COMBINATION_SIZE = 7

# Points rules (NYT Spelling Bee).
SHORT_WORD_LENGTH = 4
SHORT_WORD_POINTS = 1
PANGRAM_BONUS = 7


def usable_alphabet(banned_letter: str) -> str:
    """Lowercase a-z with the banned letter removed (25 letters)."""
    return "".join(ch for ch in string.ascii_lowercase if ch != banned_letter)


def word_points(text: str) -> int:
    """
    Points for a single word.

    Examples:
      word_points("game")    -> 1
      word_points("amalgam") -> 7
      word_points("tearing") -> 14   (7 letters + pangram bonus)
    """
    base = SHORT_WORD_POINTS if len(text) == SHORT_WORD_LENGTH else len(text)
    bonus = PANGRAM_BONUS if len(set(text)) == COMBINATION_SIZE else 0
    return base + bonus


@dataclass(frozen=True)
class Word:
    text: str      # lowercase a-z
    length: int
    letters: str   # sorted distinct letters
    points: int

    def __post_init__(self):
        if not self.text or not (self.text.isascii() and self.text.isalpha() and self.text.islower()):
            raise ValueError(f"word must be lowercase a-z; got {self.text!r}")
        if self.length != len(self.text):
            raise ValueError(f"length mismatch for {self.text!r}")
        if self.letters != "".join(sorted(set(self.text))):
            raise ValueError(f"letters mismatch for {self.text!r}")
        if not 1 <= len(self.letters) <= COMBINATION_SIZE:
            raise ValueError(f"{self.text!r} has {len(self.letters)} distinct letters")

    @classmethod
    def from_text(cls, text: str) -> "Word":
        return cls(
            text=text,
            length=len(text),
            letters="".join(sorted(set(text))),
            points=word_points(text),
        )

    @property
    def is_pangram(self) -> bool:
        return len(self.letters) == COMBINATION_SIZE


@dataclass(frozen=True, order=True)
class LetterCombination:
    letters: str  # exactly 7 distinct letters, sorted

    def __post_init__(self):
        if len(self.letters) != COMBINATION_SIZE or len(set(self.letters)) != COMBINATION_SIZE:
            raise ValueError(f"combination needs {COMBINATION_SIZE} distinct letters; got {self.letters!r}")
        if self.letters != "".join(sorted(self.letters)):
            raise ValueError(f"combination letters must be sorted; got {self.letters!r}")
        if not (self.letters.isascii() and self.letters.isalpha() and self.letters.islower()):
            raise ValueError(f"combination must be lowercase a-z; got {self.letters!r}")

    @classmethod
    def of(cls, letters) -> "LetterCombination":
        """Build from any iterable of letters (order and case ignored)."""
        return cls("".join(sorted({ch.lower() for ch in letters})))

    def __contains__(self, letter: str) -> bool:
        return len(letter) == 1 and letter in self.letters

    def mask(self, alphabet: str) -> int:
        m = 0
        for ch in self.letters:
            m |= 1 << alphabet.index(ch)
        return m


@dataclass(frozen=True, order=True)
class Honeycomb:
    combination: LetterCombination
    center: str

    def __post_init__(self):
        if len(self.center) != 1 or self.center not in self.combination:
            raise ValueError(f"center {self.center!r} not in {self.combination.letters!r}")

    @classmethod
    def parse(cls, letters: str, center: str) -> "Honeycomb":
        return cls(LetterCombination.of(letters), center.lower())

    def label(self) -> str:
        """Display form, center letter upper-cased: e.g. 'aegiLnr'."""
        return "".join(ch.upper() if ch == self.center else ch for ch in self.combination.letters)


class ScoreResult(Mapping):
    """
    Immutable Honeycomb -> score mapping, built once per run.
    """

    def __init__(self, scores: Dict[Honeycomb, int]):
        self._scores = MappingProxyType(dict(scores))

    def __getitem__(self, key: Honeycomb) -> int:
        return self._scores[key]

    def __iter__(self) -> Iterator[Honeycomb]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __eq__(self, other) -> bool:
        if isinstance(other, ScoreResult):
            return dict(self._scores) == dict(other._scores)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ScoreResult({len(self)} honeycombs)"
