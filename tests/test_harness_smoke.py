import csv
import math
from pathlib import Path

import pytest

from packages.engine import Honeycomb, LetterMatrix, score_honeycombs
from packages.harness import NoHoneycombError, SearchConfig, run_search, write_csv
from packages.harness.io import honeycomb_rows
from packages.lexicon import load_words
from packages.strategies import create_strategy, get_strategy_ids

CORPUS = ["tearing", "granite", "rating", "tiger", "grain", "gain",
          "mortgage", "game", "amalgam", "gator", "stare", "cat"]


def test_run_search_end_to_end():
    rep = run_search(CORPUS)
    assert rep.strategy_id == "pangram"
    assert rep.num_words == 10
    assert rep.num_combinations == 2
    assert len(rep.scores) == 14
    assert rep.best == [(Honeycomb.parse("aeginrt", "g"), 45), (Honeycomb.parse("aeginrt", "i"), 45)]
    assert rep.worst == [(Honeycomb.parse("aegmort", "e"), 16), (Honeycomb.parse("aegmort", "m"), 16)]
    assert rep.top(1)[0][1] == 45


def test_run_search_is_idempotent():
    assert run_search(CORPUS).scores == run_search(list(CORPUS)).scores


def test_run_search_without_pangram_raises():
    with pytest.raises(NoHoneycombError):
        run_search(["game", "tiger"])


def test_top_letters_without_pangram_requirement():
    cfg = SearchConfig(required_pangram=False)
    rep = run_search(["game", "tiger"], config=cfg, strategy_id="top_letters")
    assert rep.num_combinations == 6435
    # game and tiger share both e and g
    assert rep.best == [(Honeycomb.parse("aegimrt", "e"), 6), (Honeycomb.parse("aegimrt", "g"), 6)]


def test_top_letters_agrees_with_exhaustive():
    exhaustive = run_search(CORPUS).scores
    heuristic = run_search(CORPUS, strategy_id="top_letters").scores
    for h, s in heuristic.items():
        assert exhaustive[h] == s


def test_progress_wrapper_is_used():
    seen = []

    def progress(it):
        for x in it:
            seen.append(x)
            yield x

    run_search(CORPUS, config=SearchConfig(chunk_size=1), progress=progress)
    assert seen == [0, 1]


def test_strategy_registry():
    assert {"pangram", "top_letters"} <= set(get_strategy_ids())
    with pytest.raises(ValueError):
        create_strategy("nope")


@pytest.mark.parametrize("kwargs", [
    {"banned_letter": "ss"},
    {"banned_letter": "S"},
    {"banned_letter": "1"},
    {"min_word_length": 0},
    {"chunk_size": 0},
])
def test_search_config_guardrails(kwargs):
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_write_csv_ranks_ties(tmp_path: Path):
    ranked = [(Honeycomb.parse("aeginrt", "g"), 45), (Honeycomb.parse("aeginrt", "i"), 45),
              (Honeycomb.parse("aeginrt", "r"), 44)]
    assert [r["rank"] for r in honeycomb_rows(ranked)] == [1, 1, 3]

    out = write_csv(ranked, str(tmp_path / "out" / "ranked.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0] == {"rank": "1", "letters": "aeginrt", "center": "g", "label": "aeGinrt", "score": "45"}
    assert rows[2]["rank"] == "3"


def test_pangram_strategy_without_requirement_scores_every_subset():
    alphabet = "abcdegilr"
    words = load_words(["badge", "bridge", "glider", "abide"])
    combos = create_strategy("pangram").candidates(words, alphabet, required_pangram=False)
    assert len(combos) == math.comb(len(alphabet), 7)

    mx = LetterMatrix.from_words(words, alphabet)
    scores = score_honeycombs(combos, mx)
    assert len(scores) == 7 * len(combos)
    # badge(5) + bridge(6) + abide(5); glider uses an l
    assert scores[Honeycomb.parse("abdegir", "d")] == 16
    assert scores[Honeycomb.parse("abdegir", "r")] == 6
    assert scores[Honeycomb.parse("abdegir", "a")] == 10
