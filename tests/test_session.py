import math
from pathlib import Path

import pytest
from wordle_info.datasets import write_permutation_cache
from wordle_info.engine import (
    Frequency,
    PermutationCache,
    Uniform,
    at,
    correct_position,
    incorrect_position,
    not_in_word,
    parse_pattern,
    score,
)
from wordle_info.game import GameSession, InconsistentFeedbackError, SessionState

REF = ["slate", "crane", "trace", "plate", "stale", "crony", "misty", "blimp", "grace"]
WEARY_DICT = ["woman", "weary", "waist", "dream", "wacko", "crown", "wails"]


def _session(words=REF, **kw):
    return GameSession(Uniform(), words, cache=PermutationCache.build(words), workers=1, **kw)


def test_constructor_errors():
    with pytest.raises(ValueError):
        GameSession(None, REF)
    with pytest.raises(ValueError):
        GameSession(Uniform(), None)
    with pytest.raises(ValueError):
        GameSession(Uniform(), [])
    with pytest.raises(ValueError):
        GameSession(Uniform(), ["slate", "slates"])


def test_dictionary_is_cleaned():
    s = GameSession(Uniform(), ["Slate", "slate", " crane "])
    assert s.possible_words() == ["slate", "crane"]
    assert s.word_length == 5
    # missing permutations are filled in on construction
    assert "slate" in s.cache and "crane" in s.cache


def test_slate_solves_itself():
    s = _session()
    assert s.state is SessionState.ACTIVE
    s.add_feedback(score("slate", "slate"))
    out = s.evaluate_information("slate")
    assert out.estimated_entropy == pytest.approx(math.log2(9) - 2 / 9, abs=1e-12)
    assert out.actual_entropy == pytest.approx(math.log2(9), abs=1e-12)
    assert out.possible_answers == ("slate",)
    assert s.state is SessionState.SOLVED
    assert s.path == ["slate"]
    assert s.history == [out]


def test_weary_elimination_and_idempotence():
    s = _session(WEARY_DICT)
    s.add_information(0, correct_position("w"))
    s.add_information(1, not_in_word("e"))
    s.add_information(2, incorrect_position("a"))
    s.add_information(3, not_in_word("r"))
    s.add_information(4, not_in_word("y"))
    assert s.eliminate_words() == 3
    assert s.possible_words() == ["woman", "waist", "wacko", "wails"]
    assert s.eliminate_words() == 0


def test_add_information_position_out_of_range():
    s = _session()
    with pytest.raises(ValueError):
        s.add_information(5, not_in_word("q"))
    with pytest.raises(ValueError):
        s.add_information(-1, not_in_word("q"))


def test_candidates_only_shrink():
    s = _session()
    sizes = [s.remaining_words()]
    for guess in ["crony", "blimp", "trace"]:
        s.add_feedback(score(guess, "stale"))
        s.eliminate_words()
        sizes.append(s.remaining_words())
    assert sizes == sorted(sizes, reverse=True)
    assert "stale" in s.possible_words()


def test_inconsistent_feedback_raises():
    s = _session()
    s.add_feedback(parse_pattern("slate", "GGGG-"))  # nothing in REF matches "slat?" without e
    with pytest.raises(InconsistentFeedbackError) as ei:
        s.evaluate_information("slate")
    assert ei.value.guess == "slate"
    assert ei.value.path == ["slate"]
    assert isinstance(ei.value, ValueError)
    assert s.state is SessionState.EXHAUSTED


def test_estimated_entropy_wrong_length():
    s = _session()
    with pytest.raises(ValueError):
        s.estimated_entropy("slates")


def test_off_list_guess_evaluates():
    s = _session()
    s.add_feedback(score("qzxvj", "crane"))
    out = s.evaluate_information("qzxvj")
    assert out.estimated_entropy == 0.0
    assert out.actual_entropy == 0.0
    assert s.remaining_words() == len(REF)


@pytest.mark.parametrize("strategy", ["entropy", "positional_freq", "letter_freq"])
def test_prioritize_reorders_without_dropping(strategy):
    s = _session()
    ranked = s.prioritize(strategy)
    assert sorted(s.possible_words()) == sorted(REF)
    assert s.possible_words() == [w for w, _ in ranked]
    scores = [v for _, v in ranked]
    assert scores == sorted(scores, reverse=True)


def test_prioritize_wrappers():
    s = _session()
    assert s.prioritize_entropy()[0][0] == s.possible_words()[0]
    assert s.prioritize_position()[0][0] == s.possible_words()[0]
    assert s.prioritize_frequency()[0][0] == s.possible_words()[0]


def test_frequency_model_and_zero_weight_words():
    table = {w: 1.0 for w in REF if w != "blimp"}
    s = GameSession(Frequency(table), REF, workers=1)
    assert s.weights["blimp"] == 0.0
    assert s.estimated_entropy("slate") == pytest.approx(2.75, abs=1e-12)
    # a zero-weight word is still a candidate
    assert "blimp" in s.possible_words()


def test_session_from_cache_path(tmp_path: Path):
    p = write_permutation_cache(PermutationCache.build(REF), tmp_path / "perm.pkl")
    s = GameSession(Uniform(), REF, p, workers=1)
    assert len(s.cache) == len(REF)
    assert s.estimated_entropy("slate") == pytest.approx(math.log2(9) - 2 / 9, abs=1e-12)


def test_missing_cache_path_is_fatal(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        GameSession(Uniform(), REF, tmp_path / "absent.pkl")


def test_feedback_bits_are_positioned():
    s = _session()
    s.add_feedback(score("crane", "slate"))
    assert s.constraints[2] == at(2, correct_position("a"))


def test_given_cache_is_shared_and_filled():
    cache = PermutationCache.build(["slate"])
    s = GameSession(Uniform(), REF, cache=cache)
    assert s.cache is cache
    assert cache.missing(REF) == []


def test_cache_path_and_cache_together_rejected(tmp_path: Path):
    p = write_permutation_cache(PermutationCache.build(REF), tmp_path / "perm.pkl")
    with pytest.raises(ValueError, match="not both"):
        GameSession(Uniform(), REF, p, cache=PermutationCache())
