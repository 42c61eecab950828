"""
Lightweight guess validation.

This module answers the question: "Can this word be entered as a guess?"
A guess is valid iff:
  - it is a string
  - it is alphabetic only
  - it has exact length N
  - it exists in `allowed`, when an allowed list is given

Passing `allowed=None` accepts any well-formed word. Off-list probes are
legitimate: they can carry information even though they cannot be the answer.
"""

from typing import Iterable, Optional, Set


def validate_guess(word: str, allowed: Optional[Iterable[str]], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : iterable of allowed words, or None for "any word"
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != N or not w.isalpha():
        return False

    if allowed is None:
        return True

    # Membership check (case-normalized)
    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set
