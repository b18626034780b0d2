"""Command line interface: ``crossgrid generate`` and ``crossgrid validate``."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from crossgrid.core.constants import DEFAULT_GRID_SIZE, MAX_GENERATION_ATTEMPTS, Difficulty
from crossgrid.core.exceptions import CrosswordError
from crossgrid.engine.entries import compute_entries
from crossgrid.engine.generator import GeneratorConfig, GridGenerator
from crossgrid.engine.grid import Grid
from crossgrid.engine.validator import GridValidator
from crossgrid.utils.logger import configure_logging, get_logger
from crossgrid.utils.pretty import pretty_print_grid, print_grid_stats, print_validation


LOGGER = get_logger(__name__)


def parse_grid_file(path: Path) -> List[str]:
    """Read grid rows from a file. Blank lines and ``;`` comments are skipped.

    Rows keep their leading and trailing spaces, which are empty white cells.
    """
    rows: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip() or line.lstrip().startswith(";"):
            continue
        rows.append(line.rstrip("\r\n"))
    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and validate symmetric crossword grids",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate one or more grids")
    gen.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    gen.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Difficulty preset controlling black-square density",
    )
    gen.add_argument(
        "--density",
        type=float,
        default=0.0,
        help="Explicit black-square density (overrides --difficulty)",
    )
    gen.add_argument("--seed", type=int, default=0, help="Random seed (0 derives one from the clock)")
    gen.add_argument("--count", type=int, default=1, help="Number of grids to generate")
    gen.add_argument(
        "--max-attempts",
        type=int,
        default=MAX_GENERATION_ATTEMPTS,
        help="Attempts per grid before giving up",
    )
    gen.add_argument("--stats", action="store_true", help="Print grid statistics")
    gen.add_argument("--no-numbers", action="store_true", help="Hide clue numbers in the output")

    val = subparsers.add_parser("validate", help="Validate a text grid ('#' marks black cells)")
    val.add_argument("path", type=Path, help="File with one grid row per line")
    val.add_argument("--stats", action="store_true", help="Print grid statistics")
    return parser


def run_generate(args: argparse.Namespace) -> int:
    for index in range(args.count):
        # Consecutive grids must not share a seed range.
        seed = args.seed + index * args.max_attempts if args.seed else 0
        config = GeneratorConfig(
            size=args.size,
            difficulty=args.difficulty,
            black_density=args.density,
            seed=seed,
            max_attempts=args.max_attempts,
        )
        try:
            grid = GridGenerator(config).generate()
        except CrosswordError as exc:
            LOGGER.error("Grid %s/%s failed: %s", index + 1, args.count, exc)
            return 1
        pretty_print_grid(
            grid,
            label=f"Grid {index + 1}/{args.count}",
            numbers=not args.no_numbers,
        )
        if args.stats:
            print_grid_stats(grid)
        print()
    return 0


def run_validate(args: argparse.Namespace) -> int:
    try:
        grid = Grid.from_rows(parse_grid_file(args.path))
    except (OSError, CrosswordError) as exc:
        LOGGER.error("Unable to read grid from %s: %s", args.path, exc)
        return 1
    compute_entries(grid)
    result = GridValidator().validate(grid)
    pretty_print_grid(grid, label=str(args.path), numbers=True)
    if args.stats:
        print_grid_stats(grid)
    print()
    print_validation(result)
    return 0 if result.ok else 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "generate":
        if args.count < 1:
            parser.error("--count must be at least 1")
        return run_generate(args)
    return run_validate(args)
