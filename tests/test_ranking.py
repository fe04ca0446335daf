from packages.engine import Honeycomb, ScoreResult, best, bottom_k, top_k, worst


def _h(center):
    return Honeycomb.parse("aeginrt", center)


RESULT = ScoreResult({_h("a"): 10, _h("e"): 20, _h("g"): 20, _h("i"): 5, _h("n"): 5})


def test_best_and_worst_report_all_ties():
    assert best(RESULT) == [(_h("e"), 20), (_h("g"), 20)]
    assert worst(RESULT) == [(_h("i"), 5), (_h("n"), 5)]


def test_top_and_bottom_k_are_deterministic():
    assert [h.center for h, _ in top_k(RESULT, 3)] == ["e", "g", "a"]
    assert [h.center for h, _ in bottom_k(RESULT, 3)] == ["i", "n", "a"]
    assert top_k(RESULT, 0) == []
    assert len(top_k(RESULT, 99)) == 5


def test_empty_result():
    empty = ScoreResult({})
    assert best(empty) == [] and worst(empty) == []
    assert top_k(empty, 3) == [] and bottom_k(empty, 3) == []
