"""Cage combination engine."""

from .cage import DEFAULT_MAX_CELL_VALUE, InvalidCageError, KillerCage

__all__ = ["DEFAULT_MAX_CELL_VALUE", "InvalidCageError", "KillerCage"]
