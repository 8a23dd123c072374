"""Killer cage combination engine."""

from __future__ import annotations

from dataclasses import dataclass

from killer_cage.logger import get_logger

DEFAULT_MAX_CELL_VALUE = 9

logger = get_logger(__name__)


class InvalidCageError(ValueError):
    """Raised when a cage cannot hold the requested number of distinct cells."""


@dataclass(frozen=True)
class KillerCage:
    """A single cage in a killer sudoku puzzle.

    ``max_cell_value`` is the largest digit a cell may hold (9 for a standard
    grid) and ``cell_count`` is the number of cells in the cage. Digits never
    repeat inside a cage, so a cage cannot have more cells than digits.
    """

    max_cell_value: int
    cell_count: int

    def __post_init__(self) -> None:
        if self.max_cell_value < 0 or self.cell_count < 0:
            raise InvalidCageError(
                "max_cell_value and cell_count must be non-negative. "
                f"Got {{max_cell_value: {self.max_cell_value}, cell_count: {self.cell_count}}}"
            )
        if self.cell_count > self.max_cell_value:
            raise InvalidCageError(
                "cell_count must be less than or equal to max_cell_value. "
                f"Got {{max_cell_value: {self.max_cell_value}, cell_count: {self.cell_count}}}"
            )

    def max_positional_value(self, index: int) -> int:
        """Return the largest value the cell at ``index`` can hold in a sorted cage.

        With 3 cells, index 1 tops out at ``max_cell_value - 1`` because the
        cell after it must be larger and still within range.
        """
        if not 0 <= index < self.cell_count:
            raise IndexError(f"index {index} outside cage of {self.cell_count} cells.")
        return self.max_cell_value - (self.cell_count - 1 - index)

    def minimum_value(self) -> int:
        """Smallest possible cage total, the triangular number of ``cell_count``."""
        return self.cell_count * (self.cell_count + 1) // 2

    def maximum_value(self) -> int:
        """Largest possible cage total, e.g. [7, 8, 9] = 24 for three cells."""
        return self.minimum_value() + self.cell_count * (self.max_cell_value - self.cell_count)

    def find_combinations(self, total: int) -> list[tuple[int, ...]]:
        """Return every ascending combination of distinct cell values summing to ``total``.

        Combinations are produced in ascending lexicographic order.
        """
        if self.cell_count == 0:
            return [()] if total == 0 else []

        last = self.cell_count - 1
        values = list(range(1, self.cell_count + 1))
        solutions: list[tuple[int, ...]] = []
        visited = 1

        if sum(values) == total:
            solutions.append(tuple(values))

        while values[0] < self.max_positional_value(0):
            values[last] += 1
            visited += 1

            # Carry toward index 0; index 0 itself is bounded by the loop condition.
            for index in range(last, 0, -1):
                if values[index] > self.max_positional_value(index):
                    values[index - 1] += 1

            # Reset overflowed cells to one above their settled predecessor.
            for index in range(1, self.cell_count):
                if values[index] > self.max_positional_value(index):
                    values[index] = values[index - 1] + 1

            if sum(values) == total:
                solutions.append(tuple(values))

        logger.debug(
            "cage max=%d cells=%d total=%d: visited %d candidates, %d matched",
            self.max_cell_value,
            self.cell_count,
            total,
            visited,
            len(solutions),
        )
        return solutions
