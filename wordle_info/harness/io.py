"""
Report files for batch runs and rankings.

- write_csv:      one row per autosolved answer, guess path included
- write_rankings: a (word, score) ranking as tab-separated text, best first
- write_manifest: run metadata as JSON (config, word-list hashes, commit)
- timestamp_id / git_commit_or_unknown: values that go into file names and manifests
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

CSV_FIELDS = ["solver", "N", "answer", "success", "guesses", "time_ms", "path"]


def _target(path: str) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def _csv_row(result: Dict, N: int) -> Dict:
    return {
        "solver": result.get("solver_id", "?"),
        "N": N,
        "answer": result["answer"],
        "success": result["success"],
        "guesses": result["guesses"],
        "time_ms": round(float(result["time_ms"]), 3),
        "path": ",".join(result.get("path", [])),
    }


def write_csv(results: List[Dict], path: str, N: int) -> str:
    """
    Write autosolver results (as returned by harness.run_batch) to CSV.

    Columns: solver, N, answer, success, guesses, time_ms, path.
    The guess path is comma-joined in a single quoted cell.
    """
    p = _target(path)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(_csv_row(r, N) for r in results)
    return str(p)


def write_rankings(ranked: Sequence[Tuple[str, float]], path: str) -> str:
    """Write `word<TAB>score` lines in the given (best-first) order."""
    p = _target(path)
    p.write_text("".join(f"{word}\t{value:.6f}\n" for word, value in ranked), encoding="utf-8")
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump a run manifest as indented JSON.

    run.py fills in run_id, git_commit, config (the parsed CLI args),
    wordlists (datasets.validate_wordlists output), num_cases, num_solved
    and solver_id.
    """
    p = _target(path)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC time as a file-name-safe id, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout."""
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True, capture_output=True, text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip()
