import pytest
from wordle_info.engine import PermutationCache, generate_weights
from wordle_info.solvers import REGISTRY, create_solver, get_solver_ids
from wordle_info.solvers.base import BaseSolver, register
from wordle_info.solvers.letter_freq import distinct_score, letter_counts
from wordle_info.solvers.positional_freq import location_score, position_counts

WORDS = ["slate", "sleet", "crane"]


def test_registry_ids():
    assert get_solver_ids() == ["entropy", "letter_freq", "positional_freq"]
    with pytest.raises(ValueError):
        create_solver("random_consistent")


def test_register_rejects_duplicates_and_missing_id():
    class Dup(BaseSolver):
        id = "entropy"

    class NoId(BaseSolver):
        id = ""

    with pytest.raises(ValueError):
        register(Dup)
    with pytest.raises(ValueError):
        register(NoId)
    assert REGISTRY["entropy"] is not Dup


def test_letter_freq_scores():
    counts = letter_counts(WORDS)
    assert counts["e"] == 3 and counts["s"] == 2
    assert [distinct_score(w, counts) for w in WORDS] == [11, 9, 8]

    ranked = create_solver("letter_freq").rank(WORDS)
    assert [w for w, _ in ranked] == ["slate", "sleet", "crane"]


def test_positional_freq_scores_and_tiebreak():
    pos = position_counts(WORDS, 5)
    assert [location_score(w, pos) for w in WORDS] == [9, 7, 7]
    # sleet and crane tie on location; sleet covers more common letters
    ranked = create_solver("positional_freq").rank(["crane", "sleet", "slate"])
    assert [w for w, _ in ranked] == ["slate", "sleet", "crane"]
    assert [s for _, s in ranked] == [9.0, 7.0, 7.0]


def test_ties_keep_incoming_order():
    words = ["abc", "bca", "cab"]
    assert create_solver("letter_freq").prioritize(words) == words
    assert create_solver("positional_freq").prioritize(words) == words


@pytest.mark.parametrize("sid", ["letter_freq", "positional_freq", "entropy"])
def test_next_guess_empty(sid):
    assert create_solver(sid).next_guess([]) is None


def test_entropy_solver_without_context():
    words = ["slate", "crane", "trace", "plate", "stale", "crony", "misty", "blimp", "grace"]
    ranked = create_solver("entropy").rank(words)
    assert sorted(w for w, _ in ranked) == sorted(words)
    bits = [b for _, b in ranked]
    assert bits == sorted(bits, reverse=True)


def test_entropy_solver_uses_session_weights():
    words = ["slate", "crane", "blimp"]
    solver = create_solver("entropy")
    solver.reset(weights=generate_weights({"slate": 1.0}, words), cache=PermutationCache.build(words),
                 N=5, workers=1)
    # only one word carries weight, so nothing is learned from any guess
    assert all(b == 0.0 for _, b in solver.rank(words))
