# apps/cli/run.py
"""
CLI entry point for batch autosolver runs.

This script:
  1) Validates the dictionary (prints counts + SHA, frequency coverage).
  2) Loads the dictionary and picks the targets (all words, or a sample).
  3) Autosolves every target independently across worker processes, with a
     progress bar, and writes:
       - CSV:  per-target results + guess path
       - JSON: manifest with config, wordlist hashes, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import List, Optional

from apps.cli.common import add_dataset_args, configure_logging, load_dictionary
from wordle_info.datasets import validate_wordlists, pretty_summary
from wordle_info.harness import run_batch
from wordle_info.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_info.solvers import get_solver_ids


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-info: batch autosolver runs")
    add_dataset_args(ap)
    ap.add_argument("--solver", default="positional_freq", choices=get_solver_ids(),
                    help="ranking heuristic used by the autosolver")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of targets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    # 1) Validate and print a one-liner summary (counts, SHAs, coverage)
    freq_path = args.frequency if args.weights == "frequency" else None
    rep = validate_wordlists(args.N, args.dictionary, freq_path)
    print(pretty_summary(rep))

    # 2) Load dictionary and choose targets
    dictionary = load_dictionary(args)
    if args.sample and args.sample < len(dictionary):
        pool = list(dictionary)
        random.Random(args.seed).shuffle(pool)
        targets = pool[: args.sample]
    else:
        targets = list(dictionary)

    # 3) Run
    results = run_batch(dictionary, targets, solver_id=args.solver,
                        workers=args.workers, progress=args.progress == "bar")
    for r in results:
        r["solver_id"] = args.solver

    solved = sum(1 for r in results if r["success"])
    mean = sum(r["guesses"] for r in results) / max(1, len(results))
    worst = max((r["guesses"] for r in results), default=0)
    print(f"Solved {solved}/{len(results)} | mean guesses {mean:.3f} | worst {worst}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "num_solved": solved,
        "solver_id": args.solver,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
