"""
Word-frequency tables.

File format: plain text, one entry per line,
    <word><whitespace><number>
e.g. a corpus count file ("the 23135851162"). Blank lines are ignored; any
other line that does not parse is fatal for the whole load.

Raw counts are turned into a probability distribution with
engine.weights.normalize_counts before they become session weights.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict

from wordle_info.engine.weights import normalize_counts
from .io import read_lines

logger = logging.getLogger(__name__)


def parse_frequency_line(line: str) -> tuple[str, float]:
    """Split one `<word> <number>` line; raises ValueError if malformed."""
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"expected '<word> <number>', got {line!r}")
    word, raw = parts
    value = float(raw)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"frequency must be a finite number >= 0, got {raw!r}")
    return word.lower(), value


def read_frequency_table(p: Path | str, *, normalize: bool = False) -> Dict[str, float]:
    """
    Load a frequency table into a dict.

    Args:
      p         : path to the table
      normalize : divide every count by the total (probabilities summing to 1)

    Raises:
      FileNotFoundError if the file is missing,
      ValueError naming the file and line of the first malformed entry.
    """
    table: Dict[str, float] = {}
    for lineno, line in enumerate(read_lines(p), start=1):
        if not line.strip():
            continue
        try:
            word, value = parse_frequency_line(line)
        except ValueError as e:
            raise ValueError(f"{p}:{lineno}: {e}") from e
        table[word] = value

    logger.info("read %d frequency entries from %s", len(table), p)
    return normalize_counts(table) if normalize else table
