"""
Prior weights for dictionary words.

Two weighting models, chosen once when a session is built:
  - Uniform()          : every dictionary word weighs 1.0
  - Frequency(table)   : every dictionary word weighs its table entry,
                         or 0.0 when the table does not list it

A word missing from the frequency table stays in the dictionary (it can
still be filtered and guessed) but contributes nothing to pattern
probabilities. That is a soft exclusion, not a removal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Mapping, Sequence, Union

import numpy as np


@dataclass(frozen=True)
class Uniform:
    """Every word equally likely."""


@dataclass(frozen=True)
class Frequency:
    """Words weighted by a (usually normalized) corpus frequency table."""
    table: Mapping[str, float] = field(repr=False)


WeightModel = Union[Uniform, Frequency]


class WeightMap(Mapping[str, float]):
    """
    Word -> weight, one entry per dictionary word, with the sum precomputed.
    Read-only after construction.
    """

    def __init__(self, weights: Mapping[str, float]):
        for w, v in weights.items():
            if not math.isfinite(v) or v < 0:
                raise ValueError(f"weight for {w!r} must be finite and >= 0; got {v}")
        self._weights: Dict[str, float] = dict(weights)
        self.total: float = float(sum(self._weights.values()))

    def __getitem__(self, word: str) -> float:
        return self._weights[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def vector(self, words: Sequence[str]) -> np.ndarray:
        """Weights aligned with `words` (0.0 for words this map does not know)."""
        return np.fromiter((self._weights.get(w, 0.0) for w in words), dtype=float, count=len(words))

    def __repr__(self) -> str:
        return f"WeightMap({len(self)} words, total={self.total:.6g})"


def generate_weights(frequency_table: Mapping[str, float] | None,
                     dictionary: Iterable[str]) -> WeightMap:
    """
    Build the WeightMap for `dictionary`.

    Args:
      frequency_table : word -> frequency, or None for a uniform prior
      dictionary      : the words to weigh

    Returns:
      WeightMap with exactly one entry per dictionary word.
    """
    if frequency_table is None:
        return WeightMap({w: 1.0 for w in dictionary})
    return WeightMap({w: float(frequency_table.get(w, 0.0)) for w in dictionary})


def resolve_weights(model: Union[WeightModel, WeightMap], dictionary: Iterable[str]) -> WeightMap:
    """Turn a weighting model (or an existing WeightMap) into a WeightMap over `dictionary`."""
    if isinstance(model, Uniform):
        return generate_weights(None, dictionary)
    if isinstance(model, Frequency):
        return generate_weights(model.table, dictionary)
    if isinstance(model, WeightMap):
        return generate_weights(model, dictionary)
    raise TypeError(f"expected Uniform, Frequency or WeightMap; got {type(model).__name__}")


def normalize_counts(counts: Mapping[str, float]) -> Dict[str, float]:
    """
    Divide every raw corpus count by the total so the values sum to 1.
    Summation order is not fixed; expect round-off in the last bits.
    """
    total = float(sum(counts.values()))
    if total <= 0:
        raise ValueError(f"cannot normalize counts with total {total}")
    return {w: c / total for w, c in counts.items()}
