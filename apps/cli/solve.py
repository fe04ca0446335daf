# apps/cli/solve.py
"""
List every playable word for one honeycomb and its total score.

Usage:
    python -m apps.cli.solve --letters aegilnr --center r --words words.txt
"""

from __future__ import annotations

import argparse
import sys

from packages.engine import Honeycomb, pangrams_for, score_combination
from packages.harness import SearchConfig, build_corpus
from packages.lexicon import WordListLoadError, read_source


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="beeAI: solve a single honeycomb")
    ap.add_argument("--letters", required=True, help="the 7 distinct letters")
    ap.add_argument("--center", required=True, help="required center letter")
    ap.add_argument("--words", default="packages/lexicon/data/words.txt",
                    help="word list path or http(s) URL")
    ap.add_argument("--banned", default="s")
    ap.add_argument("--min-length", type=int, default=4)
    args = ap.parse_args(argv)

    try:
        config = SearchConfig(banned_letter=args.banned.lower(), min_word_length=args.min_length)
        honeycomb = Honeycomb.parse(args.letters, args.center)
    except ValueError as e:
        ap.error(str(e))
    if config.banned_letter in honeycomb.combination:
        ap.error(f"letters may not include the banned letter '{config.banned_letter}'")

    try:
        lines = read_source(args.words)
    except WordListLoadError as e:
        print(f"Load failed: {e}", file=sys.stderr)
        return 1

    _, matrix = build_corpus(lines, config)
    playable = sorted(matrix.words_for(honeycomb), key=lambda w: (-w.points, w.text))
    total = score_combination(honeycomb.combination, matrix)[honeycomb.center]
    pangrams = {w.text for w in pangrams_for(honeycomb.combination, playable)}

    print(f"{honeycomb.label()} | words={len(playable)} | pangrams={len(pangrams)} | score={total}")
    for w in playable:
        tag = " (PANGRAM)" if w.text in pangrams else ""
        print(f"{w.text.upper():<20}  len={w.length:<2}  points={w.points:<2}{tag}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
