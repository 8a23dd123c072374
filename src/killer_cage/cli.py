"""Command line front end for the cage combination engine."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from pydantic import ValidationError

from killer_cage.config import CageSettings, ConfigLoadError, load_config
from killer_cage.engine import InvalidCageError, KillerCage
from killer_cage.logger import configure_logging, get_logger

NO_OP_WARNING = (
    "Warning: [TOTAL] was omitted, and neither the -n nor -x options were provided. "
    "This is a no-op. This program will now exit."
)

logger = get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="killer-cage",
        description="List the digit combinations that fill a killer sudoku cage.",
    )
    parser.add_argument("cell_count", type=int, help="Number of cells in the killer cage.")
    parser.add_argument(
        "total",
        type=int,
        nargs="?",
        default=None,
        help="When provided, list every combination of cell values summing to this total.",
    )
    parser.add_argument(
        "-c",
        "--max-cell-value",
        type=int,
        default=None,
        help="Maximum value of a cell in the grid (default: from config, otherwise 9).",
    )
    parser.add_argument(
        "-n",
        "--minimum",
        "--mN",
        action="store_true",
        help="Print the minimum possible sum for a cage of the given size.",
    )
    parser.add_argument(
        "-x",
        "--maximum",
        "--mX",
        action="store_true",
        help="Print the maximum possible sum for a cage of the given size.",
    )
    parser.add_argument("--config", default=None, help="Path to a YAML or JSON settings file.")
    parser.add_argument("--log-level", default=None, help="Override the configured log level.")
    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> CageSettings:
    settings = load_config(args.config) if args.config else CageSettings()
    overrides: dict[str, object] = {}
    if args.max_cell_value is not None:
        overrides["max_cell_value"] = args.max_cell_value
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if not overrides:
        return settings
    return CageSettings.model_validate({**settings.model_dump(), **overrides})


def format_combination(combination: Sequence[int]) -> str:
    """Render a combination the way a list prints, e.g. ``[1, 4]``."""
    return "[" + ", ".join(str(value) for value in combination) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except (ConfigLoadError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid settings: {exc}") from exc

    configure_logging(settings.log_level)
    logger.debug("settings: %s", settings.model_dump())

    try:
        cage = KillerCage(settings.max_cell_value, args.cell_count)
    except InvalidCageError as exc:
        raise SystemExit(str(exc)) from exc

    if not args.minimum and not args.maximum and args.total is None:
        print(NO_OP_WARNING)
        return 0

    if args.minimum:
        print(f"Minimum sum: {cage.minimum_value()}")

    if args.maximum:
        print(f"Maximum sum: {cage.maximum_value()}")

    if args.total is not None:
        solutions = cage.find_combinations(args.total)
        if not solutions:
            print("No solutions found.")
        for solution in solutions:
            print(format_combination(solution))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
