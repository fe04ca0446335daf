# apps/cli/run.py
"""
CLI entry point for the honeycomb search.

This script:
  1) Validates the word list (prints counts + SHA, pangram-capable words).
  2) Runs the requested search strategy with a live progress indicator.
  3) Prints the best and worst honeycombs (all ties) and writes:
       - CSV:  every scored honeycomb, ranked
       - JSON: manifest with config, word-list report, git commit, extremes

Exit codes: 0 ok, 1 word list could not be loaded, 2 no honeycomb found.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.harness import NoHoneycombError, SearchConfig, run_search
from packages.harness.io import (honeycomb_rows, timestamp_id, git_commit_or_unknown, write_csv,
                                 write_manifest)
from packages.lexicon import WordListLoadError, pretty_summary, read_source, validate_lines
from packages.strategies import get_strategy_ids


def _plain_progress(iterable, *, label: str = "Scoring"):
    """Text progress on stderr: one carriage-return line, refreshed at most once a second."""
    items = list(iterable)
    total = len(items)
    start = time.time()
    last_print = 0.0
    for idx, item in enumerate(items, 1):
        yield item
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{label}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n")
    sys.stderr.flush()


def make_progress(mode: str):
    """Return a wrapper for the scorer's chunk iterator, or None for no progress."""
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        return lambda it: tqdm(it, ncols=80, desc="Scoring", unit="chunk")
    if mode == "plain":
        return _plain_progress
    return None


def _print_ranked(title: str, ranked) -> None:
    print(title)
    for row in honeycomb_rows(ranked):
        print(f"  #{row['rank']:<4} {row['label']}  (center '{row['center']}')  score={row['score']}")


def main(argv=None) -> int:
    """
    Parse CLI args, validate the word list, run the search, print and write outputs.
    """
    ap = argparse.ArgumentParser(description="beeAI: find the best and worst Spelling Bee honeycombs")
    ap.add_argument("--words", default="packages/lexicon/data/words.txt",
                    help="word list path or http(s) URL (one word per line)")
    ap.add_argument("--banned", default="s", help="letter excluded from every puzzle")
    ap.add_argument("--min-length", type=int, default=4, help="shortest playable word")
    ap.add_argument("--no-require-pangram", dest="require_pangram", action="store_false",
                    help="score every 7-letter combination, not only pangram letter sets")
    ap.add_argument("--strategy", default="pangram",
                    help=f"search strategy (one of: {', '.join(get_strategy_ids())})")
    ap.add_argument("--top", type=int, default=10, help="how many best/worst honeycombs to print")
    ap.add_argument("--chunk-size", type=int, default=256,
                    help="combinations per matrix product (memory vs speed)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-write", action="store_true", help="print only; skip CSV/manifest")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show scoring progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    try:
        config = SearchConfig(banned_letter=args.banned.lower(), min_word_length=args.min_length,
                              required_pangram=args.require_pangram, chunk_size=args.chunk_size)
    except ValueError as e:
        ap.error(str(e))

    # 1) Load + validate once (same lines feed the search)
    try:
        lines = read_source(args.words)
    except WordListLoadError as e:
        print(f"Load failed: {e}", file=sys.stderr)
        return 1
    rep = validate_lines(lines, args.words, banned_letter=config.banned_letter,
                         min_word_length=config.min_word_length)
    print(pretty_summary(rep))

    # 2) Search
    try:
        report = run_search(lines, config=config, strategy_id=args.strategy,
                            progress=make_progress(args.progress))
    except NoHoneycombError as e:
        print(f"No honeycomb found: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        ap.error(str(e))

    print(f"strategy={report.strategy_id} | words={report.num_words} "
          f"| combinations={report.num_combinations} | honeycombs={len(report.scores)} "
          f"| {report.time_ms / 1000.0:.2f}s")

    # 3) Report extremes (all ties) and the requested top/bottom lists
    _print_ranked(f"Best ({len(report.best)} tied):", report.best)
    _print_ranked(f"Worst ({len(report.worst)} tied):", report.worst)
    if args.top > 0:
        _print_ranked(f"Top {args.top}:", report.top(args.top))
        _print_ranked(f"Bottom {args.top}:", report.bottom(args.top))

    if args.no_write:
        return 0

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"search_{run_id}.csv"
    manifest_path = outdir / f"search_{run_id}_manifest.json"

    write_csv(report.top(len(report.scores)), str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "strategy_id": report.strategy_id,
        "num_words": report.num_words,
        "num_combinations": report.num_combinations,
        "timings_ms": report.timings,
        "best": honeycomb_rows(report.best),
        "worst": honeycomb_rows(report.worst),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
