"""
Ground-truth feedback for a single (guess, answer) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = letter present in the answer, but not at this position
  - '-'  : gray   = letter not present in the answer at all

This is the feedback an answer produces under the constraint evaluator's
rules (see constraints.is_valid): a letter is yellow whenever the answer
contains it elsewhere, and gray only when the answer does not contain it.
Duplicate letters in the guess are therefore never "used up"; each slot is
judged on its own. The answer always satisfies the feedback it generates.
"""

from __future__ import annotations

from typing import List

from .correctness import (
    Correctness,
    Pattern,
    PositionedCorrectness,
    CharacterCorrectness,
)

_CODES = {c.code: c for c in Correctness}


def score(guess: str, answer: str) -> Pattern:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      pattern_code(score("weary", "waist")) -> "G-Y--"
      pattern_code(score("slate", "slate")) -> "GGGGG"
    """
    # Wordle is case-insensitive but canonicalizes to lowercase
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(
            f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    out: List[PositionedCorrectness] = []
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            kind = Correctness.CORRECT_POSITION
        elif g in answer:
            kind = Correctness.INCORRECT_POSITION
        else:
            kind = Correctness.NOT_IN_WORD
        out.append(PositionedCorrectness(i, CharacterCorrectness(kind, g)))

    return tuple(out)


def pattern_code(pattern: Pattern) -> str:
    """Render a pattern in 'G'/'Y'/'-' notation, e.g. "G-Y--"."""
    return "".join(p.kind.code for p in pattern)


def parse_pattern(guess: str, code: str) -> Pattern:
    """
    Build the pattern a user typed for `guess`.

    `code` uses one character per letter, case-insensitive: 'G', 'Y' or '-'.
    Raises ValueError on a length mismatch or an unknown character.
    """
    guess = guess.strip().lower()
    code = code.strip().upper()
    if len(code) != len(guess):
        raise ValueError(f"pattern {code!r} does not match guess {guess!r} in length")

    out: List[PositionedCorrectness] = []
    for i, (letter, ch) in enumerate(zip(guess, code)):
        if ch not in _CODES:
            raise ValueError(f"unknown feedback character {ch!r} in {code!r} (use G, Y or -)")
        out.append(PositionedCorrectness(i, CharacterCorrectness(_CODES[ch], letter)))
    return tuple(out)
