"""
Pattern enumeration and the permutation cache.

Every guess of length L can receive exactly 3^L feedback patterns: each slot
is independently G, Y or -, with the letter fixed by the guess. The entropy
calculator walks all of them, so they are precomputed once per word and kept
in a PermutationCache (word -> list of patterns).

Precomputing is restricted to words up to MAX_PRECOMPUTED_LENGTH letters
(3^L grows quickly). Any word not in the cache is generated on demand the
first time it is asked for, with a warning, and then kept.
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, Iterable, Iterator, List, Mapping

from tqdm import tqdm

from .correctness import (
    Correctness,
    CharacterCorrectness,
    Pattern,
    PositionedCorrectness,
)

logger = logging.getLogger(__name__)

# Words longer than this are left out of a prebuilt cache.
MAX_PRECOMPUTED_LENGTH = 5

_STATES = (
    Correctness.INCORRECT_POSITION,
    Correctness.CORRECT_POSITION,
    Correctness.NOT_IN_WORD,
)


def generate_patterns(word: str) -> List[Pattern]:
    """
    Enumerate all 3^L feedback patterns for `word`.

    The 3*L PositionedCorrectness values are built once and shared by every
    pattern, which keeps the cache small in memory and on disk.
    """
    slots = [
        [PositionedCorrectness(i, CharacterCorrectness(kind, ch)) for kind in _STATES]
        for i, ch in enumerate(word)
    ]
    patterns: List[Pattern] = list(itertools.product(*slots))

    n = len(word)
    assert len(patterns) == 3 ** n, f"expected {3 ** n} patterns for {word!r}, got {len(patterns)}"
    for p in patterns:
        assert len(p) == n, f"pattern of length {len(p)} for {n}-letter word {word!r}"
    return patterns


class PermutationCache:
    """
    Word -> its full pattern list.

    Lookups go through `get`, which serves the precomputed list when there is
    one and otherwise generates (and remembers) it.
    """

    def __init__(self, patterns: Mapping[str, List[Pattern]] | None = None):
        self._patterns: Dict[str, List[Pattern]] = dict(patterns or {})

    @classmethod
    def build(
            cls,
            words: Iterable[str],
            *,
            max_length: int = MAX_PRECOMPUTED_LENGTH,
            progress: bool = False,
    ) -> "PermutationCache":
        """Precompute patterns for every word of at most `max_length` letters."""
        todo = sorted({w for w in words if len(w) <= max_length})
        iterator = tqdm(todo, ncols=80, desc="Permutations", unit="word") if progress else todo
        patterns = {w: generate_patterns(w) for w in iterator}
        logger.info("built permutation cache for %d words (max length %d)", len(patterns), max_length)
        return cls(patterns)

    def get(self, word: str) -> List[Pattern]:
        try:
            return self._patterns[word]
        except KeyError:
            logger.warning("permutation cache does not contain %r; calculating", word)
            patterns = generate_patterns(word)
            self._patterns[word] = patterns
            return patterns

    def missing(self, words: Iterable[str]) -> List[str]:
        return [w for w in words if w not in self._patterns]

    def ensure(self, words: Iterable[str]) -> int:
        """Generate patterns for every word not yet cached; return how many were added."""
        missing = self.missing(words)
        if missing:
            logger.warning(
                "permutation cache is missing %d word(s) (e.g. %s); calculating",
                len(missing), missing[:5])
            for w in missing:
                self._patterns[w] = generate_patterns(w)
        return len(missing)

    def words(self) -> List[str]:
        return list(self._patterns)

    def as_dict(self) -> Dict[str, List[Pattern]]:
        return dict(self._patterns)

    def __contains__(self, word: object) -> bool:
        return word in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)
