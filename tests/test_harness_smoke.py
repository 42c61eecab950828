import math

import pytest
from wordle_info.engine import PermutationCache, Uniform
from wordle_info.game import GameSession
from wordle_info.harness import autosolve, play_session, run_batch

REF = ["slate", "crane", "trace", "plate", "stale", "crony", "misty", "blimp", "grace"]


@pytest.mark.parametrize("answer", REF)
def test_autosolve_every_word(answer):
    r = autosolve(REF, answer)
    assert r["success"] is True
    assert r["path"][-1] == answer
    assert r["guesses"] == len(r["path"]) <= len(REF)
    # no word is guessed twice
    assert len(set(r["path"])) == len(r["path"])


def test_autosolve_answer_outside_dictionary():
    r = autosolve(REF, "zzzzz")
    assert r["success"] is False
    assert "zzzzz" not in r["path"]


def test_autosolve_with_entropy_solver():
    r = autosolve(REF, "crony", solver_id="entropy")
    assert r["success"] is True


def test_autosolve_unknown_solver():
    with pytest.raises(ValueError):
        autosolve(REF, "crane", solver_id="nope")


def test_run_batch_parallel_matches_in_process():
    serial = run_batch(REF, workers=1)
    parallel = run_batch(REF, workers=2)
    assert [r["answer"] for r in serial] == REF
    assert [r["answer"] for r in parallel] == REF
    assert [r["path"] for r in parallel] == [r["path"] for r in serial]
    assert all(r["success"] for r in serial)


def test_play_session_solves_and_accounts_for_all_information():
    session = GameSession(Uniform(), REF, cache=PermutationCache.build(REF), workers=1)
    r = play_session(session, "misty")
    assert r["success"] is True
    assert r["path"][-1] == "misty"
    total = sum(o.actual_entropy for o in r["outcomes"])
    assert total == pytest.approx(math.log2(len(REF)), abs=1e-9)


def test_play_session_answer_outside_dictionary():
    session = GameSession(Uniform(), REF, cache=PermutationCache.build(REF), workers=1)
    r = play_session(session, "zzzzz", strategy="positional_freq")
    assert r["success"] is False
    assert r["guesses"] >= 1


def test_play_session_max_turns():
    session = GameSession(Uniform(), REF, cache=PermutationCache.build(REF), workers=1)
    r = play_session(session, "crony", strategy="letter_freq", max_turns=1)
    assert r["guesses"] == 1
