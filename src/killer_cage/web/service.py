"""Adapter that converts engine output into the HTTP response shape."""

from __future__ import annotations

from killer_cage.engine import DEFAULT_MAX_CELL_VALUE, KillerCage


class CageService:
    """Stateless adapter; a fresh engine is built for every request."""

    def bounds(self, cell_count: int, max_cell_value: int = DEFAULT_MAX_CELL_VALUE) -> dict[str, int]:
        """Return the minimum and maximum totals for a cage size."""

        cage = KillerCage(max_cell_value, cell_count)
        return {"minimum": cage.minimum_value(), "maximum": cage.maximum_value()}

    def describe(
        self,
        cell_count: int,
        total: int | None = None,
        max_cell_value: int = DEFAULT_MAX_CELL_VALUE,
    ) -> dict[str, object]:
        """Return bounds and, when ``total`` is given, every matching combination."""

        cage = KillerCage(max_cell_value, cell_count)
        solutions = None
        if total is not None:
            solutions = [list(combination) for combination in cage.find_combinations(total)]

        return {
            "cage": {"max_cell_value": cage.max_cell_value, "cell_count": cage.cell_count},
            "minimum": cage.minimum_value(),
            "maximum": cage.maximum_value(),
            "total": total,
            "solutions": solutions,
        }
