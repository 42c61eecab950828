"""
Candidate filtering given accumulated feedback.

Given:
  - a pool of words (the live dictionary)
  - a sequence of PositionedCorrectness "data bits" learned so far

Return:
  - words that are consistent with ALL of them.

Rules, per data bit at position p with letter c:
  - NOT_IN_WORD(c)        : the word must not contain c anywhere
  - INCORRECT_POSITION(c) : the word must not have c at p, and must have c elsewhere
  - CORRECT_POSITION(c)   : the word must have c at p

NOT_IN_WORD is a global exclusion, even when the same guess also tagged c
green or yellow at another slot (see DESIGN.md, duplicate letters).

`is_valid` is the reference predicate and what elimination uses.
`CandidateMatrix` evaluates the same rules over a whole candidate list at once
with numpy; the entropy calculator uses it to count pattern members.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

import numpy as np

from .correctness import Correctness, PositionedCorrectness

Constraints = Sequence[PositionedCorrectness]


def is_valid(word: str, constraints: Iterable[PositionedCorrectness]) -> bool:
    """Return True iff `word` survives every constraint (checked in order)."""
    for c in constraints:
        kind, letter, pos = c.kind, c.letter, c.pos

        if kind is Correctness.NOT_IN_WORD:
            if letter in word:
                return False

        elif kind is Correctness.INCORRECT_POSITION:
            found = False
            for idx, ch in enumerate(word):
                if ch != letter:
                    continue
                if idx == pos:
                    return False
                found = True
            if not found:
                return False

        else:  # CORRECT_POSITION
            if pos >= len(word) or word[pos] != letter:
                return False

    return True


def filter_candidates(words: Iterable[str], constraints: Constraints) -> List[str]:
    """
    Keep only words consistent with every constraint.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    constraints = list(constraints)
    return [w for w in words if is_valid(w, constraints)]


class CandidateMatrix:
    """
    The candidate list as an (n_words, L) matrix of code points.

    Boolean masks per constraint are memoized: a pattern of L slots shares its
    slot masks with every other pattern of the same guess, so one guess needs
    only 3*L distinct masks however many patterns it has.
    """

    def __init__(self, words: Sequence[str]):
        self.words: List[str] = list(words)
        lengths = {len(w) for w in self.words}
        if len(lengths) > 1:
            raise ValueError(f"candidates must share one length; got lengths {sorted(lengths)}")
        self.N = lengths.pop() if lengths else 0
        self.letters = np.array(
            [[ord(ch) for ch in w] for w in self.words], dtype=np.int32
        ).reshape(len(self.words), self.N)
        self._contains: Dict[str, np.ndarray] = {}
        self._masks: Dict[PositionedCorrectness, np.ndarray] = {}

    def __len__(self) -> int:
        return len(self.words)

    def _has_letter(self, letter: str) -> np.ndarray:
        hit = self._contains.get(letter)
        if hit is None:
            hit = (self.letters == ord(letter)).any(axis=1)
            self._contains[letter] = hit
        return hit

    def _at(self, pos: int, letter: str) -> np.ndarray:
        if pos >= self.N:
            return np.zeros(len(self.words), dtype=bool)
        return self.letters[:, pos] == ord(letter)

    def mask(self, constraint: PositionedCorrectness) -> np.ndarray:
        """Boolean vector: which candidates satisfy this single constraint."""
        m = self._masks.get(constraint)
        if m is not None:
            return m

        kind, letter, pos = constraint.kind, constraint.letter, constraint.pos
        if kind is Correctness.NOT_IN_WORD:
            m = ~self._has_letter(letter)
        elif kind is Correctness.INCORRECT_POSITION:
            # present somewhere, but not here -> present elsewhere
            m = self._has_letter(letter) & ~self._at(pos, letter)
        else:
            m = self._at(pos, letter)

        self._masks[constraint] = m
        return m

    def satisfying(self, constraints: Constraints) -> np.ndarray:
        """Boolean vector: which candidates satisfy every constraint."""
        out = np.ones(len(self.words), dtype=bool)
        for c in constraints:
            out &= self.mask(c)
        return out
