"""Killer sudoku cage combination calculator."""

from .engine import InvalidCageError, KillerCage

__all__ = ["InvalidCageError", "KillerCage"]

__version__ = "0.1.0"
