"""
Feedback vocabulary.

A guess is answered one letter at a time. Each letter gets one of three tags:
  - 'G'  : CORRECT_POSITION   = letter is in the word at this slot
  - 'Y'  : INCORRECT_POSITION = letter is in the word, but somewhere else
  - '-'  : NOT_IN_WORD        = letter is not in the word

A tag always travels with its letter (CharacterCorrectness) and, once it is
feedback about a particular guess, with the slot it was observed at
(PositionedCorrectness). A Pattern is the full tuple of those for one guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Correctness(str, Enum):
    NOT_IN_WORD = "-"
    INCORRECT_POSITION = "Y"
    CORRECT_POSITION = "G"

    @property
    def code(self) -> str:
        return self.value


@dataclass(frozen=True)
class CharacterCorrectness:
    """A correctness tag carrying the letter it describes."""
    kind: Correctness
    letter: str

    def __str__(self) -> str:
        return f"{self.kind.name}({self.letter!r})"


@dataclass(frozen=True)
class PositionedCorrectness:
    """A CharacterCorrectness observed at a zero-based slot (one "data bit")."""
    pos: int
    character: CharacterCorrectness

    @property
    def kind(self) -> Correctness:
        return self.character.kind

    @property
    def letter(self) -> str:
        return self.character.letter

    def __str__(self) -> str:
        return f"{self.character}@{self.pos}"


# One PositionedCorrectness per letter of a guess, in slot order.
Pattern = Tuple[PositionedCorrectness, ...]


def not_in_word(letter: str) -> CharacterCorrectness:
    return CharacterCorrectness(Correctness.NOT_IN_WORD, letter)


def incorrect_position(letter: str) -> CharacterCorrectness:
    return CharacterCorrectness(Correctness.INCORRECT_POSITION, letter)


def correct_position(letter: str) -> CharacterCorrectness:
    return CharacterCorrectness(Correctness.CORRECT_POSITION, letter)


def at(pos: int, character: CharacterCorrectness) -> PositionedCorrectness:
    """Shorthand: at(0, correct_position('w'))."""
    return PositionedCorrectness(pos, character)
