"""
Positional Letter Frequency (PLF).

Idea:
  Build per-position histograms from the CURRENT candidate set.
  Score each word by sum(counts[pos][word[pos]]) across positions.
  Ties are broken by distinct-letter coverage (letter_freq), then by the
  incoming order.

This is the autosolver's heuristic: words whose letters sit where letters
usually sit, made of letters most candidates share, come first.

Fast: O(|candidates|*N) to build + O(|candidates|*N) to score.
"""

from __future__ import annotations
from collections import Counter
from typing import List
from .base import BaseSolver, Ranking, register
from .letter_freq import letter_counts, distinct_score


def position_counts(candidates: List[str], N: int) -> List[Counter]:
    counts = [Counter() for _ in range(N)]
    for w in candidates:
        for i, ch in enumerate(w[:N]):
            counts[i][ch] += 1
    return counts


def location_score(w: str, pos_counts: List[Counter]) -> int:
    return sum(pos_counts[i][ch] for i, ch in enumerate(w[:len(pos_counts)]))


@register
class PositionalFreqSolver(BaseSolver):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "1.0.0"

    def rank(self, candidates: List[str]) -> Ranking:
        if not candidates:
            return []
        N = max(len(w) for w in candidates)
        pos_counts = position_counts(candidates, N)
        counts = letter_counts(candidates)

        keyed = [(w, location_score(w, pos_counts), distinct_score(w, counts)) for w in candidates]
        keyed.sort(key=lambda t: (t[1], t[2]), reverse=True)
        return [(w, float(loc)) for w, loc, _ in keyed]
