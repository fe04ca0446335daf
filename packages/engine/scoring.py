"""
Honeycomb scoring.

For a combination C and center letter L, the score is the sum of points over
every word whose letters all lie in C and that contains L.

Two implementations, same results:

  score_combination  - reference bitmask form for a single combination.
                       Selects the words legal for C once, then partitions
                       them by which of the 7 letters they contain, so all
                       7 centers come out of one pass.

  score_honeycombs   - vectorised form for the whole search. With M the
                       (word x letter) 0/1 matrix and C a chunk of
                       combination rows:
                           illegal = M @ (1 - C).T      # letters outside C
                           legal   = illegal == 0
                           S       = (legal * points).T @ M
                       S[c, l] is the points total of words legal for
                       combination c that contain letter l.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Sequence

import numpy as np

from .matrix import LetterMatrix
from .models import Honeycomb, LetterCombination, ScoreResult

# Combinations scored per matrix product. Peak memory is about
# 2 * n_distinct_letter_sets * CHUNK_SIZE * 8 bytes.
CHUNK_SIZE = 256

Progress = Callable[[Iterable], Iterable]


def score_combination(combination: LetterCombination, matrix: LetterMatrix) -> Dict[str, int]:
    """
    Return {center_letter: score} for the 7 honeycombs of `combination`.
    """
    alphabet = matrix.alphabet
    allowed = combination.mask(alphabet)
    bits = [(ch, 1 << alphabet.index(ch)) for ch in combination.letters]

    totals = {ch: 0 for ch in combination.letters}
    for mask, pts in zip(matrix.masks.tolist(), matrix.points.tolist()):
        if mask & ~allowed:
            continue  # uses a letter outside the combination
        for ch, bit in bits:
            if mask & bit:
                totals[ch] += pts
    return totals


def _collapse_letter_sets(matrix: LetterMatrix):
    """
    Words sharing a letter set are interchangeable for scoring: keep one
    matrix row per distinct mask and sum their points.
    """
    _, first, inverse = np.unique(matrix.masks, return_index=True, return_inverse=True)
    members = matrix.members[first].astype(np.float64)
    points = np.bincount(inverse.reshape(-1), weights=matrix.points, minlength=len(first))
    return members, points


def score_honeycombs(
        combinations: Sequence[LetterCombination],
        matrix: LetterMatrix,
        *,
        chunk_size: int = CHUNK_SIZE,
        progress: Progress | None = None,
) -> ScoreResult:
    """
    Score every (combination, center) pair.

    Args:
      combinations : candidate letter combinations (usually pangram-pruned)
      matrix       : corpus membership matrix
      chunk_size   : combinations per matrix product
      progress     : optional wrapper over the chunk iterator (e.g. tqdm)

    Returns:
      ScoreResult with 7 entries per combination.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1; got {chunk_size}")

    scores: Dict[Honeycomb, int] = {}
    if not combinations:
        return ScoreResult(scores)

    members, points = _collapse_letter_sets(matrix)
    combo_rows = matrix.combination_matrix(combinations).astype(np.float64)
    col = {ch: i for i, ch in enumerate(matrix.alphabet)}

    starts = range(0, len(combinations), chunk_size)
    iterator = progress(starts) if progress is not None else starts

    for start in iterator:
        block = combinations[start:start + chunk_size]
        outside = 1.0 - combo_rows[start:start + chunk_size]     # (b, k)
        legal = (members @ outside.T) == 0                       # (n, b)
        totals = (legal * points[:, None]).T @ members           # (b, k)
        totals = np.rint(totals).astype(np.int64)
        for row, comb in enumerate(block):
            for ch in comb.letters:
                scores[Honeycomb(comb, ch)] = int(totals[row, col[ch]])

    return ScoreResult(scores)


def score_reference(combinations: Iterable[LetterCombination], matrix: LetterMatrix) -> ScoreResult:
    """Full search with the per-combination bitmask scorer (slow; for checks)."""
    scores: Dict[Honeycomb, int] = {}
    for comb in combinations:
        for ch, s in score_combination(comb, matrix).items():
            scores[Honeycomb(comb, ch)] = s
    return ScoreResult(scores)
