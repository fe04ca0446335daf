from __future__ import annotations
from dataclasses import dataclass

from packages.engine.scoring import CHUNK_SIZE
from packages.lexicon.loader import DEFAULT_BANNED_LETTER, DEFAULT_MIN_WORD_LENGTH


@dataclass(frozen=True)
class SearchConfig:
    """
    Options for one honeycomb search run.

    banned_letter    : letter excluded from every word and combination
    min_word_length  : shortest playable word
    required_pangram : only score combinations that admit a pangram
    chunk_size       : combinations per matrix product in the scorer
    """
    banned_letter: str = DEFAULT_BANNED_LETTER
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    required_pangram: bool = True
    chunk_size: int = CHUNK_SIZE

    def __post_init__(self):
        b = self.banned_letter
        if not (len(b) == 1 and b.isascii() and b.isalpha() and b.islower()):
            raise ValueError(f"banned_letter must be a single lowercase letter; got {b!r}")
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be >= 1; got {self.min_word_length}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1; got {self.chunk_size}")
