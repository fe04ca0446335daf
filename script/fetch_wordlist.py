"""
Download a plain-text word list and write a clean copy for the search.

What it does:
- Downloads the list (one word per line) over HTTP.
- Lowercases, drops blanks and non a-z tokens.
- De-duplicates while preserving order (or sorts with --sort) and writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out packages/lexicon/data/words.txt
"""

import argparse

from packages.lexicon.io import fetch_lines, write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean(lines) -> list[str]:
    words = [ln.strip().lower() for ln in lines]
    return unique_preserve_order(w for w in words if w.isascii() and w.isalpha())


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for the honeycomb search")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/lexicon/data/words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = clean(fetch_lines(args.url))
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
