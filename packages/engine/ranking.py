"""
Ranking queries over a ScoreResult.

Order is deterministic: score first, then honeycomb (letters, then center),
so equal inputs always produce equal reports. Ties at the extremes are all
returned rather than resolved to one.
"""

from __future__ import annotations

from typing import List, Tuple

from .models import Honeycomb, ScoreResult

Ranked = List[Tuple[Honeycomb, int]]


def top_k(result: ScoreResult, k: int) -> Ranked:
    """Highest-scoring k honeycombs, best first."""
    items = sorted(result.items(), key=lambda kv: (-kv[1], kv[0]))
    return items[:max(k, 0)]


def bottom_k(result: ScoreResult, k: int) -> Ranked:
    """Lowest-scoring k honeycombs, worst first."""
    items = sorted(result.items(), key=lambda kv: (kv[1], kv[0]))
    return items[:max(k, 0)]


def best(result: ScoreResult) -> Ranked:
    """Every honeycomb tied at the maximum score (empty if no results)."""
    if not result:
        return []
    hi = max(result.values())
    return sorted((h, s) for h, s in result.items() if s == hi)


def worst(result: ScoreResult) -> Ranked:
    """Every honeycomb tied at the minimum score (empty if no results)."""
    if not result:
        return []
    lo = min(result.values())
    return sorted((h, s) for h, s in result.items() if s == lo)
