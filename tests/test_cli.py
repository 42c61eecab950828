import csv
import json
from pathlib import Path

import pytest
from apps.cli import build_cache, path, rank, run, solve
from wordle_info.datasets import read_permutation_cache

REF = ["slate", "crane", "trace", "plate", "stale", "crony", "misty", "blimp", "grace"]


@pytest.fixture
def dictionary(tmp_path: Path) -> str:
    p = tmp_path / "dictionary.txt"
    p.write_text("\n".join(REF) + "\n", encoding="utf-8")
    return str(p)


def _scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_build_cache_cli(tmp_path: Path, dictionary, capsys):
    out = tmp_path / "perm.pkl"
    assert build_cache.main(["--dictionary", dictionary, "--out", str(out), "--progress", "off"]) == 0
    assert sorted(read_permutation_cache(out)) == sorted(REF)
    assert "Cached 9 of 9 words" in capsys.readouterr().out


def test_build_cache_cli_from_frequency(tmp_path: Path, capsys):
    freq = tmp_path / "frequency.txt"
    freq.write_text("the 100\nslate 5\nlonger 3\n", encoding="utf-8")
    out = tmp_path / "perm.pkl"
    assert build_cache.main(["--from-frequency", "--frequency", str(freq), "--out", str(out),
                             "--max-length", "5", "--progress", "off"]) == 0
    assert sorted(read_permutation_cache(out)) == ["slate", "the"]
    assert "Cached 2 of 3 words" in capsys.readouterr().out


def test_path_cli(dictionary, capsys):
    assert path.main(["--dictionary", dictionary, "--answer", "crony", "--workers", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Managed to solve for crony in ")
    assert out.rstrip().endswith("crony")


def test_path_cli_unknown_answer(dictionary, capsys):
    assert path.main(["--dictionary", dictionary, "--answer", "zzzzz"]) == 1
    assert "Ran out of dictionary" in capsys.readouterr().out


def test_path_cli_missing_dictionary(tmp_path: Path):
    with pytest.raises(SystemExit):
        path.main(["--dictionary", str(tmp_path / "nope.txt"), "--answer", "crane"])


def test_solve_cli_reaches_the_answer(dictionary, capsys):
    inputs = _scripted("xx", "slate", "GYGYX", "slate", "gygyg")
    assert solve.main(["--dictionary", dictionary, "--workers", "1", "--strategy", "positional_freq"],
                      input_fn=inputs) == 0
    out = capsys.readouterr().out
    assert "9 possible words remaining" in out
    assert "The top 3 answers remaining:" in out
    assert "1 Remaining" in out
    assert "The answer is: stale" in out


def test_solve_cli_empty_word_quits(dictionary, capsys):
    assert solve.main(["--dictionary", dictionary, "--workers", "1"], input_fn=_scripted("")) == 0
    assert "Goodbye" in capsys.readouterr().out


def test_solve_cli_inconsistent_feedback(dictionary):
    inputs = _scripted("slate", "GGGG-")
    with pytest.raises(SystemExit):
        solve.main(["--dictionary", dictionary, "--workers", "1", "--strategy", "letter_freq"],
                   input_fn=inputs)


def test_rank_cli(tmp_path: Path, dictionary, capsys):
    cache = tmp_path / "perm.pkl"
    build_cache.main(["--dictionary", dictionary, "--out", str(cache), "--progress", "off"])
    outdir = tmp_path / "reports"
    assert rank.main(["--dictionary", dictionary, "--cache", str(cache), "--workers", "1",
                      "--top", "3", "--outdir", str(outdir), "--progress", "off"]) == 0
    files = list(outdir.glob("entropy_*.txt"))
    assert len(files) == 1
    lines = files[0].read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(REF)
    bits = [float(ln.split("\t")[1]) for ln in lines]
    assert bits == sorted(bits, reverse=True)


def test_run_cli_writes_csv_and_manifest(tmp_path: Path, dictionary, capsys):
    outdir = tmp_path / "reports"
    assert run.main(["--dictionary", dictionary, "--workers", "1", "--progress", "off",
                     "--outdir", str(outdir)]) == 0
    out = capsys.readouterr().out
    assert "Solved 9/9" in out

    (csv_path,) = outdir.glob("run_*.csv")
    with csv_path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == REF
    assert all(r["solver"] == "positional_freq" and r["success"] == "True" for r in rows)

    (manifest_path,) = outdir.glob("run_*_manifest.json")
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 9 and manifest["num_solved"] == 9
    assert manifest["wordlists"]["passed"] is True
