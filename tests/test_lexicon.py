from pathlib import Path

import pytest
import requests

from packages.engine import word_points
from packages.lexicon import (WordListLoadError, filter_words, load_words, pretty_summary,
                              read_source, validate_wordlist)
from packages.lexicon import io as lexicon_io


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.mark.parametrize("word,expected", [
    ("game", 1),
    ("aaaa", 1),
    ("tiger", 5),
    ("amalgam", 7),
    ("tearing", 14),
    ("mortgage", 15),
])
def test_word_points(word, expected):
    assert word_points(word) == expected


def test_load_words_filters_and_normalizes():
    raw = ["Game", "game", "  TEARING ", "stare", "cat", "a1bc", "", "relating", "amalgam"]
    words = load_words(raw)
    assert [w.text for w in words] == ["game", "tearing", "amalgam"]
    for w in words:
        assert "s" not in w.text
        assert 1 <= len(w.letters) <= 7
        assert w.points == (1 if w.length == 4 else w.length) + (7 if len(set(w.text)) == 7 else 0)
    assert words[1].is_pangram and not words[0].is_pangram


def test_filter_words_counts_rejections():
    raw = ["Game", "game", "stare", "cat", "a1bc", "", "relating"]
    kept, rejected = filter_words(raw)
    assert kept == ["game"]
    assert rejected["duplicate"] == 1
    assert rejected["banned_letter"] == 1
    assert rejected["too_short"] == 1
    assert rejected["non_alpha"] == 1
    assert rejected["blank"] == 1
    assert rejected["too_many_letters"] == 1


def test_custom_banned_letter_and_min_length():
    words = load_words(["stare", "game", "tag"], banned_letter="g", min_word_length=3)
    assert [w.text for w in words] == ["stare"]


def test_read_source_missing_file(tmp_path: Path):
    with pytest.raises(WordListLoadError):
        read_source(tmp_path / "nope.txt")


def test_read_source_url_failure(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(lexicon_io.requests, "get", boom)
    with pytest.raises(WordListLoadError):
        read_source("https://example.invalid/words.txt")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["tearing", "granite", "game", "stare", "cat", "game"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["accepted"] == 3
    assert rep["pangram_words"] == 2
    assert rep["duplicates"] == 1
    assert rep["rejected"]["banned_letter"] == 1
    assert rep["rejected"]["too_short"] == 1
    s = pretty_summary(rep)
    assert "accepted=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["game", "tiger"])
    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert any("distinct letters" in msg for msg in rep["issues"])

    missing = validate_wordlist(str(tmp_path / "missing.txt"))
    assert missing["exists"] is False and missing["passed"] is False
    assert "FAIL" in pretty_summary(missing)


def test_undecodable_line_is_skipped(tmp_path: Path):
    p = tmp_path / "latin1.txt"
    p.write_bytes("naïve\ngame\n".encode("latin-1"))
    lines = read_source(p)
    assert [w.text for w in load_words(lines)] == ["game"]
    _, rejected = filter_words(lines)
    assert rejected["non_alpha"] == 1
