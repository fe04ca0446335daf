"""
Dictionary loader.

Turns a raw word list into Word records that can take part in a honeycomb:
  - normalized (stripped, lowercase)
  - a-z only
  - at least `min_word_length` letters
  - never contains the banned letter
  - at most 7 distinct letters

Anything else is dropped silently; that is ordinary filtering, not an error.
Duplicates collapse to the first occurrence.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple

from packages.engine.models import COMBINATION_SIZE, Word

DEFAULT_BANNED_LETTER = "s"
DEFAULT_MIN_WORD_LENGTH = 4

# Rejection reasons, in the order they are checked.
BLANK = "blank"
NON_ALPHA = "non_alpha"
TOO_SHORT = "too_short"
BANNED_LETTER = "banned_letter"
TOO_MANY_LETTERS = "too_many_letters"
REJECT_REASONS = (BLANK, NON_ALPHA, TOO_SHORT, BANNED_LETTER, TOO_MANY_LETTERS)


def classify(raw: str, *, banned_letter: str = DEFAULT_BANNED_LETTER,
             min_word_length: int = DEFAULT_MIN_WORD_LENGTH) -> Tuple[str, str | None]:
    """
    Normalize one line and decide whether it is usable.

    Returns:
      (normalized_word, None) if accepted, else (normalized_word, reason).
    """
    w = raw.strip().lower()
    if not w:
        return w, BLANK
    if not (w.isascii() and w.isalpha()):
        return w, NON_ALPHA
    if len(w) < min_word_length:
        return w, TOO_SHORT
    if banned_letter and banned_letter in w:
        return w, BANNED_LETTER
    if len(set(w)) > COMBINATION_SIZE:
        return w, TOO_MANY_LETTERS
    return w, None


def filter_words(lines: Iterable[str], *, banned_letter: str = DEFAULT_BANNED_LETTER,
                 min_word_length: int = DEFAULT_MIN_WORD_LENGTH) -> Tuple[List[str], Counter]:
    """
    Accepted (deduplicated, order-preserving) words plus a Counter of
    rejection reasons and duplicates.
    """
    seen = set()
    out: List[str] = []
    rejected: Counter = Counter()
    for raw in lines:
        w, reason = classify(raw, banned_letter=banned_letter, min_word_length=min_word_length)
        if reason is not None:
            rejected[reason] += 1
            continue
        if w in seen:
            rejected["duplicate"] += 1
            continue
        seen.add(w)
        out.append(w)
    return out, rejected


def load_words(lines: Iterable[str], *, banned_letter: str = DEFAULT_BANNED_LETTER,
               min_word_length: int = DEFAULT_MIN_WORD_LENGTH) -> List[Word]:
    """Build the scored corpus from raw lines."""
    words, _ = filter_words(lines, banned_letter=banned_letter, min_word_length=min_word_length)
    return [Word.from_text(w) for w in words]
