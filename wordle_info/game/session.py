"""
A solving session: the live candidate set plus everything learned so far.

Lifecycle:
  - built once from a weighting model, a dictionary and a permutation cache
  - feedback arrives one data bit at a time (add_information / add_feedback)
  - eliminate_words() drops every candidate inconsistent with ALL data bits
  - evaluate_information(guess) wraps that with before/after entropy numbers
  - prioritize_*() reorders the candidates, best guess first

States follow the candidate count: ACTIVE (> 1), SOLVED (== 1),
EXHAUSTED (== 0). Candidates only ever shrink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from math import log2
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from wordle_info.datasets.cache import read_permutation_cache
from wordle_info.engine import (
    CharacterCorrectness,
    Pattern,
    PermutationCache,
    PositionedCorrectness,
    WeightMap,
    expected_entropy,
    filter_candidates,
    resolve_weights,
)
from wordle_info.engine.weights import WeightModel
from wordle_info.solvers import Ranking, create_solver

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    ACTIVE = "active"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class InconsistentFeedbackError(ValueError):
    """
    Elimination left no candidates: the feedback contradicts the dictionary
    (a typo, or an answer the dictionary does not contain).
    """

    def __init__(self, guess: str, path: Sequence[str]):
        self.guess = guess
        self.path = list(path)
        super().__init__(
            f"no candidates left after {guess!r}; feedback is inconsistent with the dictionary "
            f"(path so far: {', '.join(self.path)})")


@dataclass(frozen=True)
class GuessOutcome:
    guess: str
    estimated_entropy: float          # bits, computed before elimination
    actual_entropy: float             # log2(before / after)
    possible_answers: Tuple[str, ...]


class GameSession:
    """
    Args:
      weights    : Uniform(), Frequency(table) or a ready WeightMap
      dictionary : the starting candidate words (one length)
      cache_path : pickled permutation cache to load (errors are fatal)
      cache      : an in-memory PermutationCache instead of cache_path; it is
                   shared, not copied, and patterns for dictionary words it
                   lacks are added to it
      workers    : process count for entropy ranking (None = all CPUs)
    """

    def __init__(
            self,
            weights: Union[WeightModel, WeightMap, None],
            dictionary: Optional[Sequence[str]],
            cache_path: Path | str | None = None,
            *,
            cache: PermutationCache | None = None,
            workers: int | None = None,
            progress: bool = False,
    ):
        if weights is None:
            raise ValueError("a weighting model or weight map is required")
        if dictionary is None:
            raise ValueError("a dictionary is required")
        if cache_path is not None and cache is not None:
            raise ValueError("pass either cache_path or cache, not both")

        words: List[str] = []
        seen = set()
        for w in dictionary:
            w = w.strip().lower()
            if w and w not in seen:
                seen.add(w)
                words.append(w)
        if not words:
            raise ValueError("the dictionary is empty")
        lengths = {len(w) for w in words}
        if len(lengths) != 1:
            raise ValueError(f"dictionary words must share one length; got lengths {sorted(lengths)}")

        self.word_length: int = lengths.pop()
        self._candidates: List[str] = words
        self.weights: WeightMap = resolve_weights(weights, words)

        if cache_path is not None:
            self.cache = read_permutation_cache(cache_path)
        elif cache is not None:
            self.cache = cache
        else:
            self.cache = PermutationCache()
        self.cache.ensure(words)

        self.workers = workers
        self.progress = progress
        self._constraints: List[PositionedCorrectness] = []
        self.history: List[GuessOutcome] = []
        self._path: List[str] = []

        logger.info("session started: %d words, total weight %.6g", len(words), self.weights.total)

    # ---- queries ----

    def possible_words(self) -> List[str]:
        return list(self._candidates)

    def remaining_words(self) -> int:
        return len(self._candidates)

    @property
    def constraints(self) -> List[PositionedCorrectness]:
        return list(self._constraints)

    @property
    def path(self) -> List[str]:
        """Every guess evaluated so far, in order."""
        return list(self._path)

    @property
    def state(self) -> SessionState:
        n = len(self._candidates)
        if n == 0:
            return SessionState.EXHAUSTED
        if n == 1:
            return SessionState.SOLVED
        return SessionState.ACTIVE

    # ---- feedback ----

    def add_information(self, pos: int, correctness: CharacterCorrectness) -> None:
        """Record one data bit. Nothing is filtered until eliminate_words()."""
        if not 0 <= pos < self.word_length:
            raise ValueError(f"position {pos} is outside 0..{self.word_length - 1}")
        self._constraints.append(PositionedCorrectness(pos, correctness))

    def add_feedback(self, pattern: Pattern) -> None:
        for bit in pattern:
            self.add_information(bit.pos, bit.character)

    def eliminate_words(self) -> int:
        """Drop every candidate failing any accumulated data bit; return how many went."""
        before = len(self._candidates)
        self._candidates = filter_candidates(self._candidates, self._constraints)
        removed = before - len(self._candidates)
        logger.debug("eliminated %d word(s), %d remain", removed, len(self._candidates))
        return removed

    def estimated_entropy(self, guess: str) -> float:
        """Expected information of `guess` against the current candidates."""
        guess = guess.strip().lower()
        if len(guess) != self.word_length:
            raise ValueError(f"guess {guess!r} must have {self.word_length} letters")
        return expected_entropy(guess, self._candidates, self.weights, self.cache.get(guess))

    def evaluate_information(self, guess: str) -> GuessOutcome:
        """
        Score `guess` before elimination, eliminate, then measure what it did.

        Raises InconsistentFeedbackError when nothing survives; the session is
        then EXHAUSTED and the caller must stop.
        """
        guess = guess.strip().lower()
        estimated = self.estimated_entropy(guess)

        before = len(self._candidates)
        after = before - self.eliminate_words()
        self._path.append(guess)
        if after == 0:
            raise InconsistentFeedbackError(guess, self._path)

        outcome = GuessOutcome(
            guess=guess,
            estimated_entropy=estimated,
            actual_entropy=log2(before / after),
            possible_answers=tuple(self._candidates),
        )
        self.history.append(outcome)
        return outcome

    # ---- ordering ----

    def prioritize(self, strategy: str = "entropy") -> Ranking:
        """Reorder candidates by a registered solver; return its (word, score) ranking."""
        solver = create_solver(strategy)
        solver.reset(weights=self.weights, cache=self.cache, N=self.word_length,
                     workers=self.workers, progress=self.progress)
        ranked = solver.rank(self._candidates)
        self._candidates = [w for w, _ in ranked]
        return ranked

    def prioritize_entropy(self) -> Ranking:
        return self.prioritize("entropy")

    def prioritize_position(self) -> Ranking:
        return self.prioritize("positional_freq")

    def prioritize_frequency(self) -> Ranking:
        return self.prioritize("letter_freq")
