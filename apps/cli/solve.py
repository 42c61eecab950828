# apps/cli/solve.py
"""
Interactive solving session.

Each round:
  1) Ranks the remaining candidates (entropy by default) and shows the top 3.
  2) Asks which word you entered and the feedback it got, as a pattern:
       G = right letter, right slot
       Y = letter is in the word, elsewhere
       - = letter is not in the word
     e.g. "G-Y--" for WEARY against WAIST.
  3) Eliminates inconsistent words and reports estimated vs actual entropy.

Stops when one candidate (or none) is left, or on an empty word.
"""

from __future__ import annotations

import argparse
from typing import Callable, List, Optional

from apps.cli.common import add_dataset_args, build_session, configure_logging, load_dictionary
from wordle_info.engine import parse_pattern, validate_guess
from wordle_info.game import InconsistentFeedbackError, SessionState
from wordle_info.solvers import get_solver_ids

TOP_K = 3


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    ap = argparse.ArgumentParser(description="wordle-info: interactive solver")
    add_dataset_args(ap)
    ap.add_argument("--strategy", default="entropy",
                    help=f"ranking strategy (one of: {', '.join(get_solver_ids())})")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    if args.strategy not in get_solver_ids():
        raise SystemExit(f"Unknown strategy: {args.strategy}. Available: {get_solver_ids()}")

    dictionary = load_dictionary(args)
    session = build_session(args, dictionary, progress=True)
    print(f"{session.remaining_words()} possible words remaining")

    while session.state is SessionState.ACTIVE:
        print("Prioritizing words...")
        ranked = session.prioritize(args.strategy)
        top = ", ".join(f"{w} ({s:.3f})" for w, s in ranked[:TOP_K])
        print(f"The top {min(TOP_K, len(ranked))} answers remaining: {top}")

        word = input_fn("What word did you enter? ").strip().lower()
        if not word:
            print("Goodbye")
            return 0
        if not validate_guess(word, None, session.word_length):
            print(f"'{word}' is not a {session.word_length}-letter word; try again")
            continue

        code = input_fn("Feedback (G=right slot, Y=elsewhere, -=absent): ")
        try:
            pattern = parse_pattern(word, code)
        except ValueError as e:
            print(f"{e}; try again")
            continue

        session.add_feedback(pattern)
        try:
            outcome = session.evaluate_information(word)
        except InconsistentFeedbackError as e:
            raise SystemExit(str(e)) from e

        print(f"Guessing {outcome.guess} had an estimated entropy of {outcome.estimated_entropy:0.4f},\n"
              f"but actually had an entropy of {outcome.actual_entropy:0.4f}")
        print(f"{session.remaining_words()} Remaining")

    print(f"The answer is: {session.possible_words()[0]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
