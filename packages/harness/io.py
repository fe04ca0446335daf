"""
I/O utilities for search runs.

Responsibilities:
- write_csv:     ranked honeycombs as a tidy CSV (one row per honeycomb).
- write_manifest:dump a JSON manifest with config, word-list report, and extremes.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Tuple
import csv
import json
import subprocess
import datetime as dt

from packages.engine import Honeycomb

FIELDS = ["rank", "letters", "center", "label", "score"]


def honeycomb_rows(ranked: Iterable[Tuple[Honeycomb, int]]) -> List[Dict]:
    """
    Flatten (honeycomb, score) pairs into dict rows. Equal scores share a
    rank (competition ranking: 1, 2, 2, 4, ...).
    """
    rows: List[Dict] = []
    prev = None
    rank = 0
    for pos, (h, s) in enumerate(ranked, start=1):
        if s != prev:
            rank, prev = pos, s
        rows.append({
            "rank": rank,
            "letters": h.combination.letters,
            "center": h.center,
            "label": h.label(),
            "score": s,
        })
    return rows


def write_csv(ranked: Iterable[Tuple[Honeycomb, int]], path: str) -> str:
    """
    Serialize ranked honeycombs to CSV.

    Schema (columns):
      rank, letters, center, label, score

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(honeycomb_rows(ranked))
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, banned, min length, strategy, outdir)
      - wordlist: output of lexicon.validate_wordlist(...)
      - best / worst: tied extreme honeycombs as rows
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
