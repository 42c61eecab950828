# apps/cli/build_cache.py
"""
Precompute the permutation cache (word -> all 3^L feedback patterns).

Words come from the dictionary, or with --from-frequency from the keys of the
frequency table. Only words up to --max-length letters are included.

    python -m apps.cli.build_cache --out data/permutations.pkl
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from apps.cli.common import DEFAULT_CACHE, DEFAULT_DICTIONARY, DEFAULT_FREQUENCY, configure_logging
from wordle_info.datasets import load_words, read_frequency_table, write_permutation_cache
from wordle_info.engine import MAX_PRECOMPUTED_LENGTH, PermutationCache


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-info: build the permutation cache")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY, help="word list to precompute")
    ap.add_argument("--frequency", default=DEFAULT_FREQUENCY, help="frequency table (with --from-frequency)")
    ap.add_argument("--from-frequency", action="store_true",
                    help="take the words from the frequency table instead of the dictionary")
    ap.add_argument("--max-length", type=int, default=MAX_PRECOMPUTED_LENGTH,
                    help="skip words longer than this (3^L patterns each)")
    ap.add_argument("--out", default=DEFAULT_CACHE, help="where to write the cache")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.from_frequency:
            words = list(read_frequency_table(args.frequency))
        else:
            words = load_words(args.dictionary)
    except (OSError, ValueError) as e:
        raise SystemExit(f"cannot read word source: {e}") from e

    cache = PermutationCache.build(words, max_length=args.max_length, progress=args.progress == "bar")
    out = write_permutation_cache(cache, args.out)
    print(f"Cached {len(cache)} of {len(words)} words")
    print(f"Wrote: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
