# apps/cli/common.py
"""
Argument and session plumbing shared by the wordle-info CLI scripts.

Every script takes the same dataset flags:
  --N           word length
  --dictionary  newline-separated candidate words
  --frequency   `<word> <count>` table (used by --weights frequency)
  --weights     uniform | frequency
  --cache       pickled permutation cache (optional; see build_cache.py)
  --workers     processes for parallel work (default: all CPUs)
  -v/--verbose  repeat for more log output
"""

from __future__ import annotations

import argparse
import logging
import pickle
from typing import List

from wordle_info.datasets import load_words, read_frequency_table
from wordle_info.engine import Frequency, Uniform
from wordle_info.game import GameSession

DEFAULT_DICTIONARY = "data/dictionary.txt"
DEFAULT_FREQUENCY = "data/frequency.txt"
DEFAULT_CACHE = "data/permutations.pkl"


def add_dataset_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--frequency", default=DEFAULT_FREQUENCY,
                    help="path to a '<word> <count>' frequency table")
    ap.add_argument("--weights", choices=["uniform", "frequency"], default="uniform",
                    help="prior over answers: uniform, or corpus frequency from --frequency")
    ap.add_argument("--cache", default=None,
                    help=f"permutation cache to load (e.g. {DEFAULT_CACHE}); computed on the fly if omitted")
    ap.add_argument("--workers", type=int, default=None,
                    help="worker processes for parallel steps (default: CPU count)")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="more log output (-v info, -vv debug)")


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def load_dictionary(args: argparse.Namespace) -> List[str]:
    """Load the dictionary for --N; missing or empty files end the program."""
    try:
        words = load_words(args.dictionary, N=args.N)
    except OSError as e:
        raise SystemExit(f"cannot read dictionary {args.dictionary}: {e}") from e
    if not words:
        raise SystemExit(f"dictionary {args.dictionary} has no {args.N}-letter words")
    return words


def build_session(args: argparse.Namespace, dictionary: List[str], *, progress: bool = False) -> GameSession:
    """Resolve --weights once and build the session; load errors end the program."""
    if args.weights == "frequency":
        try:
            model = Frequency(read_frequency_table(args.frequency, normalize=True))
        except (OSError, ValueError) as e:
            raise SystemExit(f"cannot load frequency table {args.frequency}: {e}") from e
    else:
        model = Uniform()

    try:
        return GameSession(model, dictionary, args.cache, workers=args.workers, progress=progress)
    except (OSError, ValueError, pickle.UnpicklingError) as e:
        raise SystemExit(f"cannot start session: {e}") from e
