"""
Permutation cache artifact.

The whole cache is one pickle blob:
    {"format": CACHE_FORMAT, "patterns": {word: [pattern, ...], ...}}

Patterns are tuples of frozen PositionedCorrectness values; pickle keeps the
objects a word's patterns share, so the file stays far smaller than
3^L * L values per word suggests. Reading back yields identical lists.
"""

from __future__ import annotations

import logging
import pickle
from pathlib import Path

from wordle_info.engine.patterns import PermutationCache

logger = logging.getLogger(__name__)

CACHE_FORMAT = 1


def write_permutation_cache(cache: PermutationCache, p: Path | str) -> str:
    """Serialize `cache` to `p`; returns the string path written."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    blob = {"format": CACHE_FORMAT, "patterns": cache.as_dict()}
    with p.open("wb") as f:
        pickle.dump(blob, f, protocol=pickle.HIGHEST_PROTOCOL)
    logger.info("wrote permutation cache (%d words) to %s", len(cache), p)
    return str(p)


def read_permutation_cache(p: Path | str) -> PermutationCache:
    """
    Load a cache written by write_permutation_cache.

    A missing or unreadable file raises (OSError / pickle.UnpicklingError);
    a blob in another format raises ValueError.
    """
    p = Path(p)
    logger.info("reading permutation cache from %s", p)
    with p.open("rb") as f:
        blob = pickle.load(f)

    if not isinstance(blob, dict) or blob.get("format") != CACHE_FORMAT:
        found = blob.get("format") if isinstance(blob, dict) else type(blob).__name__
        raise ValueError(f"{p}: unsupported permutation cache format {found!r}")

    cache = PermutationCache(blob["patterns"])
    logger.info("loaded permutation cache with %d words", len(cache))
    return cache
