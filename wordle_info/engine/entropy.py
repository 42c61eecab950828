"""
Expected information (entropy) of a guess.

For each of the 3^L patterns a guess can receive:
    p(pattern) = sum of weights of candidates satisfying the pattern
                 / sum of weights of all candidates
    info       = p * log2(1 / p)          (0 when p == 0)
Expected entropy = sum of info over all patterns, in bits.

The weighted fraction lets likely words (high corpus frequency) dominate the
estimate. The p == 0 guard is required: 0 * log2(1/0) is 0 * inf = NaN.

Ranking a whole candidate list is O(|guesses| * 3^L * |candidates|), so
rank_by_entropy fans the guesses out over a process pool in chunks. Each
worker only reads its arguments and returns (word, bits) pairs.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from .constraints import CandidateMatrix, is_valid
from .correctness import Pattern
from .patterns import PermutationCache, generate_patterns
from .weights import WeightMap

logger = logging.getLogger(__name__)

# Below this many guesses a process pool costs more than it saves.
PARALLEL_MIN_GUESSES = 64

Ranking = List[Tuple[str, float]]


def pattern_probability(pattern: Pattern, candidates: Sequence[str], weights: WeightMap) -> float:
    """Weighted fraction of `candidates` satisfying `pattern` (reference path via is_valid)."""
    total = sum(weights.get(w, 0.0) for w in candidates)
    if total <= 0:
        return 0.0
    hit = sum(weights.get(w, 0.0) for w in candidates if is_valid(w, pattern))
    return hit / total


def _probabilities(patterns: Sequence[Pattern], matrix: CandidateMatrix, wvec: np.ndarray) -> np.ndarray:
    total = float(wvec.sum())
    if total <= 0:
        return np.zeros(len(patterns), dtype=float)
    return np.array([wvec[matrix.satisfying(p)].sum() for p in patterns], dtype=float) / total


def _information(probs: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        info = probs * np.log2(1.0 / probs)
    return np.where(probs > 0, info, 0.0)


def pattern_probabilities(guess: str, candidates: Sequence[str], weights: WeightMap,
                          patterns: Sequence[Pattern] | None = None) -> np.ndarray:
    """Probability of each pattern of `guess` (same order as `patterns`)."""
    if patterns is None:
        patterns = generate_patterns(guess)
    matrix = CandidateMatrix(candidates)
    return _probabilities(patterns, matrix, weights.vector(matrix.words))


def entropy_distribution(guess: str, candidates: Sequence[str], weights: WeightMap,
                         patterns: Sequence[Pattern] | None = None) -> np.ndarray:
    """Per-pattern information contribution p * log2(1/p), in bits."""
    return _information(pattern_probabilities(guess, candidates, weights, patterns))


def expected_entropy(guess: str, candidates: Sequence[str], weights: WeightMap,
                     patterns: Sequence[Pattern] | None = None) -> float:
    """
    Expected information (bits) `guess` yields against `candidates`.

    Args:
      guess      : the probe word (need not be a candidate)
      candidates : current candidate words, all of the guess's length
      weights    : prior weights (words it does not list weigh 0)
      patterns   : the guess's patterns, if already at hand (e.g. from a cache)

    Returns:
      float >= 0; 0.0 when no candidate matches any pattern.
    """
    return float(entropy_distribution(guess, candidates, weights, patterns).sum())


def _entropy_chunk(chunk: Iterable[Tuple[str, List[Pattern]]], candidates: List[str],
                   weight_values: Dict[str, float]) -> Ranking:
    """Worker: entropy of every guess in `chunk` against one shared matrix."""
    matrix = CandidateMatrix(candidates)
    wvec = np.fromiter((weight_values.get(w, 0.0) for w in candidates), dtype=float, count=len(candidates))
    return [(g, float(_information(_probabilities(patts, matrix, wvec)).sum())) for g, patts in chunk]


def rank_by_entropy(
        guesses: Sequence[str],
        candidates: Sequence[str],
        weights: WeightMap,
        cache: PermutationCache,
        *,
        workers: int | None = None,
        progress: bool = False,
) -> Ranking:
    """
    Score every guess by expected entropy against `candidates`.

    Returns:
      [(word, bits), ...] with one entry per element of `guesses` (repeats
      included), sorted by bits descending; ties keep `guesses` order.
    """
    guesses = list(guesses)
    candidates = list(candidates)
    if not guesses:
        return []

    if workers is None:
        workers = os.cpu_count() or 1
    weight_values = {w: weights.get(w, 0.0) for w in candidates}
    jobs = [(g, cache.get(g)) for g in guesses]

    scores: List[float] = [0.0] * len(jobs)
    if workers <= 1 or len(guesses) < PARALLEL_MIN_GUESSES:
        iterator = tqdm(jobs, ncols=80, desc="Entropy", unit="word") if progress else jobs
        for i, (_, bits) in enumerate(_entropy_chunk(iterator, candidates, weight_values)):
            scores[i] = bits
    else:
        chunk_size = max(8, len(jobs) // (workers * 4))
        logger.info("ranking %d guesses x %d candidates in %d chunks on %d workers",
                    len(guesses), len(candidates), -(-len(jobs) // chunk_size), workers)
        bar = tqdm(total=len(jobs), ncols=80, desc="Entropy", unit="word") if progress else None
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futs = {executor.submit(_entropy_chunk, jobs[start:start + chunk_size], candidates, weight_values): start
                    for start in range(0, len(jobs), chunk_size)}
            for fut in as_completed(futs):
                part = fut.result()
                start = futs[fut]
                scores[start:start + len(part)] = [bits for _, bits in part]
                if bar is not None:
                    bar.update(len(part))
        if bar is not None:
            bar.close()

    order = sorted(range(len(guesses)), key=lambda i: (-scores[i], i))
    return [(guesses[i], scores[i]) for i in order]
