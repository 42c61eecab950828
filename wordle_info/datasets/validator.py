"""
Word-list checks run before a batch or a session.

validate_wordlists(N, dictionary, frequency=None) inspects:
  - the dictionary: one lowercase alphabetic N-letter word per line; blank or
    malformed lines and repeated words are reported
  - the frequency table (optional): `<word> <number>` lines, and how much of
    the dictionary it covers (uncovered words would get weight 0)

The result is a plain dict (it goes straight into run manifests), with a
`passed` flag and a list of human-readable `issues`. pretty_summary() turns it
into a single console line:

    rep = validate_wordlists(5, "data/dictionary.txt", "data/frequency.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .frequency import parse_frequency_line


@dataclass
class FileReport:
    path: str
    exists: bool
    count: int           # well-formed entries
    sha256: str          # of the raw bytes; "" when missing
    unique_count: int
    invalid_lines: int


@dataclass
class FrequencyCoverage:
    covered: int         # dictionary words the table lists
    zero_weight: int     # dictionary words absent from the table or listed with 0


@dataclass
class ValidationReport:
    N: int
    dictionary: FileReport
    frequency: Optional[FileReport]
    coverage: Optional[FrequencyCoverage]
    passed: bool
    issues: List[str]


def _digest(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


def _is_dictionary_word(line: str, N: int) -> bool:
    return len(line) == N and line.isalpha() and line.islower()


def _scan_dictionary(path: Path, N: int) -> Tuple[List[str], int]:
    """Return (well-formed words in file order, number of rejected lines)."""
    words: List[str] = []
    rejected = 0
    for line in path.read_text(encoding="utf-8").splitlines():
        w = line.strip()
        if _is_dictionary_word(w, N):
            words.append(w)
        else:
            rejected += 1
    return words, rejected


def _scan_frequency(path: Path) -> Tuple[Dict[str, float], int, int]:
    """Lenient counterpart of read_frequency_table: count bad lines, keep going."""
    table: Dict[str, float] = {}
    good = bad = 0
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        try:
            word, value = parse_frequency_line(line)
        except ValueError:
            bad += 1
        else:
            table[word] = value
            good += 1
    return table, good, bad


def _absent(path: str) -> FileReport:
    return FileReport(path=path, exists=False, count=0, sha256="", unique_count=0, invalid_lines=0)


def validate_wordlists(N: int, dictionary_path: str, frequency_path: str | None = None) -> Dict:
    """
    Check the dictionary (and optionally a frequency table) for word length N.

    `passed` requires a non-empty dictionary without malformed lines and, when
    a frequency table is given, that it exists and parses cleanly. Duplicates
    and zero-weight words are reported in `issues` but do not fail the check.
    """
    issues: List[str] = []

    dict_p = Path(dictionary_path)
    if not dict_p.exists():
        issues.append(f"dictionary file not found: {dictionary_path}")
        return asdict(ValidationReport(N, _absent(dictionary_path), None, None, False, issues))

    words, rejected = _scan_dictionary(dict_p, N)
    unique = set(words)
    dictionary = FileReport(
        path=str(dict_p),
        exists=True,
        count=len(words),
        sha256=_digest(dict_p),
        unique_count=len(unique),
        invalid_lines=rejected,
    )
    if not words:
        issues.append("dictionary file contains 0 valid words")
    if rejected:
        issues.append(f"dictionary has {rejected} invalid line(s)")
    if len(words) != len(unique):
        issues.append("dictionary contains duplicate lines")

    frequency: Optional[FileReport] = None
    coverage: Optional[FrequencyCoverage] = None
    frequency_ok = True
    if frequency_path is not None:
        freq_p = Path(frequency_path)
        if not freq_p.exists():
            issues.append(f"frequency file not found: {frequency_path}")
            frequency = _absent(frequency_path)
            frequency_ok = False
        else:
            table, good, bad = _scan_frequency(freq_p)
            frequency = FileReport(
                path=str(freq_p),
                exists=True,
                count=good,
                sha256=_digest(freq_p),
                unique_count=len(table),
                invalid_lines=bad,
            )
            weightless = sorted(w for w in unique if table.get(w, 0.0) <= 0.0)
            coverage = FrequencyCoverage(
                covered=sum(1 for w in unique if w in table),
                zero_weight=len(weightless),
            )
            if bad:
                issues.append(f"frequency table has {bad} malformed line(s)")
                frequency_ok = False
            if weightless:
                issues.append(f"{len(weightless)} dictionary word(s) get weight 0 (e.g., {weightless[:5]})")

    passed = bool(words) and rejected == 0 and frequency_ok
    return asdict(ValidationReport(N, dictionary, frequency, coverage, passed, issues))


def pretty_summary(report: Dict) -> str:
    """
    One console line, e.g.
        N=5 | dictionary=2315 (uniq=2315, sha=abc123def456) | frequency=333333 (covers 2309, zero=6) | OK
    """
    d = report["dictionary"]
    parts = [
        f"N={report['N']}",
        f"dictionary={d['count']} (uniq={d['unique_count']}, sha={(d.get('sha256') or '')[:12]})",
    ]
    f = report.get("frequency")
    if f is not None:
        cov = report.get("coverage") or {}
        parts.append(f"frequency={f['count']} (covers {cov.get('covered', 0)}, zero={cov.get('zero_weight', 0)})")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
