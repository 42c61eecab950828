# apps/cli/path.py
"""
Find the autosolver's guess path for one answer.

    python -m apps.cli.path --answer eater
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from apps.cli.common import add_dataset_args, configure_logging, load_dictionary
from wordle_info.harness import autosolve
from wordle_info.solvers import get_solver_ids


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-info: autosolve one answer")
    add_dataset_args(ap)
    ap.add_argument("--answer", required=True, help="the answer to solve for")
    ap.add_argument("--solver", default="positional_freq",
                    help=f"ranking heuristic (one of: {', '.join(get_solver_ids())})")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    dictionary = load_dictionary(args)
    r = autosolve(dictionary, args.answer, solver_id=args.solver)
    path = ",".join(r["path"])
    if r["success"]:
        print(f"Managed to solve for {r['answer']} in {r['guesses']} steps:\n{path}")
        return 0

    print(f"Ran out of dictionary while looking for {r['answer']} after {r['guesses']} guesses:\n{path}")
    print("Possibly not a word found in the dictionary?")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
