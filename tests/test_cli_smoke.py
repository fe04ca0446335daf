import json
from pathlib import Path

import pytest

from apps.cli import run, solve

CORPUS = ["tearing", "granite", "rating", "tiger", "grain", "gain",
          "mortgage", "game", "amalgam", "gator"]


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def test_run_writes_outputs(tmp_path: Path, capsys):
    words = _write(tmp_path / "words.txt", CORPUS)
    outdir = tmp_path / "reports"
    code = run.main(["--words", words, "--outdir", str(outdir), "--progress", "off", "--top", "3"])
    assert code == 0

    out = capsys.readouterr().out
    assert "Best (2 tied):" in out and "score=45" in out
    assert "Worst (2 tied):" in out and "score=16" in out

    csvs = list(outdir.glob("search_*.csv"))
    manifests = list(outdir.glob("search_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_combinations"] == 2
    assert [r["score"] for r in manifest["best"]] == [45, 45]


def test_run_exit_codes(tmp_path: Path):
    assert run.main(["--words", str(tmp_path / "missing.txt"), "--no-write", "--progress", "off"]) == 1
    words = _write(tmp_path / "words.txt", ["game", "tiger"])
    assert run.main(["--words", words, "--no-write", "--progress", "off"]) == 2


def test_solve_single_honeycomb(tmp_path: Path, capsys):
    words = _write(tmp_path / "words.txt", CORPUS)
    assert solve.main(["--letters", "tearing", "--center", "g", "--words", words]) == 0
    out = capsys.readouterr().out
    assert "score=45" in out
    assert "TEARING" in out and "(PANGRAM)" in out
    assert "GATOR" not in out


def test_run_top_letters_without_pangram(tmp_path: Path, capsys):
    words = _write(tmp_path / "words.txt", ["game", "tiger"])
    code = run.main(["--words", words, "--strategy", "top_letters", "--no-require-pangram",
                     "--no-write", "--progress", "off", "--top", "0"])
    assert code == 0
    out = capsys.readouterr().out
    assert "strategy=top_letters" in out and "combinations=6435" in out
    assert "Best (2 tied):" in out and "score=6" in out


def test_run_unknown_strategy_is_usage_error(tmp_path: Path):
    words = _write(tmp_path / "words.txt", CORPUS)
    with pytest.raises(SystemExit) as exc:
        run.main(["--words", words, "--strategy", "nope", "--no-write", "--progress", "off"])
    assert exc.value.code == 2


def test_solve_rejects_empty_center(tmp_path: Path):
    words = _write(tmp_path / "words.txt", CORPUS)
    with pytest.raises(SystemExit) as exc:
        solve.main(["--letters", "tearing", "--center", "", "--words", words])
    assert exc.value.code == 2
