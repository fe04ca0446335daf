"""
Search harness core primitives.

- build_corpus: raw lines -> (words, membership matrix) under a SearchConfig.
- run_search:   the whole batch pipeline
                Loader -> Matrix -> Pangram Enumerator -> Scorer -> Ranker.

These functions are UI-agnostic so they can be reused by the CLI apps,
a notebook, or tests without changes. Every call recomputes from the lines
it is given; nothing is cached between runs.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from packages.engine import (Honeycomb, LetterMatrix, ScoreResult, Word, best, bottom_k,
                             score_honeycombs, top_k, usable_alphabet, worst)
from packages.engine.scoring import Progress
from packages.lexicon import load_words
from packages.strategies import create_strategy
from .config import SearchConfig

DEFAULT_STRATEGY = "pangram"


class NoHoneycombError(ValueError):
    """No letter combination qualified for scoring (e.g. no pangram in the corpus)."""


@dataclass
class SearchReport:
    """Everything a caller needs from one run."""
    strategy_id: str
    config: SearchConfig
    num_words: int
    num_combinations: int
    scores: ScoreResult
    best: List[Tuple[Honeycomb, int]]
    worst: List[Tuple[Honeycomb, int]]
    time_ms: float
    timings: Dict[str, float] = field(default_factory=dict)

    def top(self, k: int) -> List[Tuple[Honeycomb, int]]:
        return top_k(self.scores, k)

    def bottom(self, k: int) -> List[Tuple[Honeycomb, int]]:
        return bottom_k(self.scores, k)


def build_corpus(lines: Iterable[str], config: SearchConfig) -> Tuple[List[Word], LetterMatrix]:
    """Filter + annotate words and build their membership matrix."""
    words = load_words(lines, banned_letter=config.banned_letter,
                       min_word_length=config.min_word_length)
    matrix = LetterMatrix.from_words(words, usable_alphabet(config.banned_letter))
    return words, matrix


def run_search(
        lines: Iterable[str],
        *,
        config: SearchConfig | None = None,
        strategy_id: str = DEFAULT_STRATEGY,
        progress: Progress | None = None,
) -> SearchReport:
    """
    Run one complete honeycomb search over a raw word list.

    Args:
        lines       : raw word list lines (see packages.lexicon.read_source)
        config      : search options (defaults: banned 's', min length 4, pangram required)
        strategy_id : registered strategy deciding which combinations to score
        progress    : optional wrapper over the scorer's chunk iterator

    Returns:
        SearchReport with the full ScoreResult and the tied best/worst honeycombs.

    Raises:
        NoHoneycombError if the strategy yields no combination to score.
    """
    config = config or SearchConfig()
    strategy = create_strategy(strategy_id)
    timings: Dict[str, float] = {}

    t0 = time.perf_counter()
    words, matrix = build_corpus(lines, config)
    t1 = time.perf_counter()
    timings["load_ms"] = (t1 - t0) * 1000.0

    combos = strategy.candidates(words, matrix.alphabet, required_pangram=config.required_pangram)
    t2 = time.perf_counter()
    timings["enumerate_ms"] = (t2 - t1) * 1000.0
    if not combos:
        raise NoHoneycombError(
            f"no letter combination to score ({len(words)} usable words, "
            f"strategy={strategy.id}, required_pangram={config.required_pangram})")

    scores = score_honeycombs(combos, matrix, chunk_size=config.chunk_size, progress=progress)
    t3 = time.perf_counter()
    timings["score_ms"] = (t3 - t2) * 1000.0

    return SearchReport(
        strategy_id=strategy.id,
        config=config,
        num_words=len(words),
        num_combinations=len(combos),
        scores=scores,
        best=best(scores),
        worst=worst(scores),
        time_ms=(t3 - t0) * 1000.0,
        timings=timings,
    )
