"""
Entropy ranking (expected information gain).

Every current candidate is scored by the expected entropy of guessing it
against the CURRENT candidate set, using the session's prior weights and
permutation cache. Scores change from round to round as the set shrinks.

The heavy lifting (vectorized pattern counting, process-pool fan-out) lives
in wordle_info.engine.entropy.
"""

from __future__ import annotations
from typing import List
from .base import BaseSolver, Ranking, register
from wordle_info.engine import PermutationCache, generate_weights, rank_by_entropy


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    def rank(self, candidates: List[str]) -> Ranking:
        if not candidates:
            return []
        # Without session context: uniform prior, cache built from the candidates
        weights = self.weights if self.weights is not None else generate_weights(None, candidates)
        if self.cache is None:
            self.cache = PermutationCache.build(candidates, max_length=max(len(w) for w in candidates))
        return rank_by_entropy(
            candidates, candidates, weights, self.cache,
            workers=self.workers, progress=self.progress,
        )
