"""Tints and Tells: a terminal colour clue game for a Q-Giver and two Guessers."""

__version__ = "1.0.0"