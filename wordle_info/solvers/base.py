from __future__ import annotations
from typing import Dict, List, Tuple, Type

from wordle_info.engine import PermutationCache, WeightMap

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}

# (word, score) pairs, best first
Ranking = List[Tuple[str, float]]


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver orders the current candidates, best guess first.

    Solvers are stateless between calls except for the context handed to
    `reset` (weights, permutation cache, word length, worker count).
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.weights: WeightMap | None = None
        self.cache: PermutationCache | None = None
        self.workers: int | None = 1
        self.progress: bool = False

    def reset(self, *, weights: WeightMap | None = None, cache: PermutationCache | None = None,
              N: int = 5, workers: int | None = 1, progress: bool = False) -> None:
        self.weights = weights
        self.cache = cache
        self.N = int(N)
        self.workers = workers
        self.progress = progress

    def rank(self, candidates: List[str]) -> Ranking:
        raise NotImplementedError("Override in subclass")

    def prioritize(self, candidates: List[str]) -> List[str]:
        return [w for w, _ in self.rank(candidates)]

    def next_guess(self, candidates: List[str]) -> str | None:
        """Top-ranked candidate, or None when there is nothing left."""
        ranked = self.prioritize(candidates)
        return ranked[0] if ranked else None
