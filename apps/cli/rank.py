# apps/cli/rank.py
"""
Rank every dictionary word by expected entropy against the whole dictionary.

Writes <outdir>/entropy_<timestamp>.txt (word<TAB>bits, best first) and
prints the top of the list.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from apps.cli.common import add_dataset_args, build_session, configure_logging, load_dictionary
from wordle_info.harness.io import timestamp_id, write_rankings


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-info: rank words by expected entropy")
    add_dataset_args(ap)
    ap.add_argument("--top", type=int, default=10, help="how many words to print")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    dictionary = load_dictionary(args)
    session = build_session(args, dictionary, progress=args.progress == "bar")
    ranked = session.prioritize_entropy()

    for word, bits in ranked[: args.top]:
        print(f"{word}\t{bits:.4f}")

    out = write_rankings(ranked, str(Path(args.outdir) / f"entropy_{timestamp_id()}.txt"))
    print(f"Wrote: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
