from .correctness import (
    Correctness,
    CharacterCorrectness,
    PositionedCorrectness,
    Pattern,
    not_in_word,
    incorrect_position,
    correct_position,
    at,
)
from .scoring import score, pattern_code, parse_pattern
from .patterns import generate_patterns, PermutationCache, MAX_PRECOMPUTED_LENGTH
from .constraints import is_valid, filter_candidates, CandidateMatrix
from .weights import Uniform, Frequency, WeightMap, generate_weights, resolve_weights, normalize_counts
from .entropy import (
    expected_entropy,
    entropy_distribution,
    pattern_probabilities,
    pattern_probability,
    rank_by_entropy,
)
from .validation import validate_guess

__all__ = [
    "Correctness", "CharacterCorrectness", "PositionedCorrectness", "Pattern",
    "not_in_word", "incorrect_position", "correct_position", "at",
    "score", "pattern_code", "parse_pattern",
    "generate_patterns", "PermutationCache", "MAX_PRECOMPUTED_LENGTH",
    "is_valid", "filter_candidates", "CandidateMatrix",
    "Uniform", "Frequency", "WeightMap", "generate_weights", "resolve_weights", "normalize_counts",
    "expected_entropy", "entropy_distribution", "pattern_probabilities", "pattern_probability",
    "rank_by_entropy",
    "validate_guess",
]
