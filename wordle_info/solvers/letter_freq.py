"""
Letter-Frequency ranking (distinct-letter coverage).

Idea:
  - Count, over the CURRENT candidates, how many words contain each letter
    (a letter counts once per word). Score each word as the sum of its
    DISTINCT letters' counts. Highest first.

Early on this favors words covering common letters; later the counts reflect
the constraints, so the top word tends to fit.

Notes:
  - Ignores positions (see positional_freq for slot-specific counts).
  - Ties keep the incoming candidate order (stable sort).
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List
from .base import BaseSolver, Ranking, register


def letter_counts(candidates: List[str]) -> Counter:
    """Number of candidates containing each letter."""
    counts: Counter = Counter()
    for w in candidates:
        counts.update(set(w))
    return counts


def distinct_score(w: str, counts: Dict[str, int]) -> int:
    """
    Sum letter counts, each letter at most once per word
    (prefer 'slate' over 'sleet' when counts are similar).
    """
    return sum(counts.get(ch, 0) for ch in set(w))


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def rank(self, candidates: List[str]) -> Ranking:
        counts = letter_counts(candidates)
        scored = [(w, float(distinct_score(w, counts))) for w in candidates]
        return sorted(scored, key=lambda t: t[1], reverse=True)
