"""
Word-list validator for beeAI.

What this module does:
- Read a raw word list (one word per line) from disk.
- Apply the loader's rules and count why lines were dropped
  (blank, non-alpha, too short, banned letter, >7 distinct letters, duplicate).
- Compute SHA-256 of the raw file and the number of pangram-capable words.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.lexicon import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words.txt", banned_letter="s")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.engine.models import COMBINATION_SIZE
from .io import is_url, read_source
from .loader import (DEFAULT_BANNED_LETTER, DEFAULT_MIN_WORD_LENGTH, REJECT_REASONS,
                     filter_words)


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    source: str             # path or URL (as given)
    exists: bool            # could the source be read?
    sha256: str             # SHA-256 of the raw text (empty string if missing)
    raw_lines: int          # lines read
    accepted: int           # usable words after filtering + dedupe
    pangram_words: int      # accepted words with exactly 7 distinct letters
    duplicates: int         # repeated usable words
    rejected: Dict[str, int] = field(default_factory=dict)  # reason -> count
    banned_letter: str = DEFAULT_BANNED_LETTER
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_lines(lines: List[str]) -> str:
    """SHA-256 over the lines joined with newlines (same for file and URL)."""
    h = hashlib.sha256()
    for ln in lines:
        h.update(ln.encode("utf-8"))
        h.update(b"\n")
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(source: str, *, banned_letter: str = DEFAULT_BANNED_LETTER,
                      min_word_length: int = DEFAULT_MIN_WORD_LENGTH) -> Dict:
    """
    Validate a word list for the honeycomb search.

    Parameters
    ----------
    source : str
        Path or http(s) URL of a plain-text word list.
    banned_letter, min_word_length :
        Loader rules (see packages.lexicon.loader).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport) where `passed`
        means: readable, at least one accepted word, and at least one
        pangram-capable word. Rejected lines never fail validation; they are
        expected in any general-purpose dictionary.
    """
    src = str(source)
    if not is_url(src) and not Path(src).is_file():
        rep = WordListReport(
            source=src, exists=False, sha256="", raw_lines=0, accepted=0,
            pangram_words=0, duplicates=0, banned_letter=banned_letter,
            min_word_length=min_word_length, issues=[f"word list not found: {src}"],
        )
        return asdict(rep)

    return validate_lines(read_source(src), src, banned_letter=banned_letter,
                          min_word_length=min_word_length)


def validate_lines(lines: List[str], source: str = "<lines>", *,
                   banned_letter: str = DEFAULT_BANNED_LETTER,
                   min_word_length: int = DEFAULT_MIN_WORD_LENGTH) -> Dict:
    """Same report as validate_wordlist, for lines already in memory."""
    words, rejected = filter_words(lines, banned_letter=banned_letter,
                                   min_word_length=min_word_length)
    pangrams = sum(1 for w in words if len(set(w)) == COMBINATION_SIZE)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 usable words")
    elif pangrams == 0:
        issues.append(f"no word has exactly {COMBINATION_SIZE} distinct letters")

    rep = WordListReport(
        source=str(source),
        exists=True,
        sha256=_sha256_lines(lines),
        raw_lines=len(lines),
        accepted=len(words),
        pangram_words=pangrams,
        duplicates=rejected.get("duplicate", 0),
        rejected={r: rejected.get(r, 0) for r in REJECT_REASONS},
        banned_letter=banned_letter,
        min_word_length=min_word_length,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | lines=172820 | accepted=44585 (pangrams=7986, dup=0) | banned='s' | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['source']} | lines={report['raw_lines']} | sha={sha} "
        f"| accepted={report['accepted']} (pangrams={report['pangram_words']}, "
        f"dup={report['duplicates']}) | banned='{report['banned_letter']}' | {status}"
    )
