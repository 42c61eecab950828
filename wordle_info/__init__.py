"""Entropy-ranked guesses and feedback filtering for Wordle-style puzzles."""

__version__ = "0.1.0"
