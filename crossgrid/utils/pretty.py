"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..core.constants import BLACK_SYMBOL
from ..engine.stats import compute_stats

if TYPE_CHECKING:
    from ..engine.grid import Grid
    from ..engine.validator import ValidationResult


def cell_symbol(cell, numbers: bool = False) -> str:
    if cell.is_black:
        return BLACK_SYMBOL
    if cell.letter:
        return cell.letter
    if numbers and cell.number:
        return str(cell.number)
    return "."


def format_grid(grid: Grid, *, numbers: bool = False) -> str:
    width = 3 if numbers else 2
    header_cells = [f"{c:>{width}}" for c in range(grid.size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * max((width + 1) * grid.size - 1, 0))
    for r in range(grid.size):
        row_cells = [cell_symbol(grid.cell(r, c), numbers) for c in range(grid.size)]
        row_render = " ".join(f"{symbol:>{width}}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(
    grid: Grid, *, label: str | None = None, numbers: bool = False, stream=None
) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, numbers=numbers), file=stream)


def print_grid_stats(grid: Grid, *, stream=None) -> None:
    """Print geometry and entry statistics for a generated grid."""

    stream = stream or sys.stdout
    stats = compute_stats(grid)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {stats.size} x {stats.size} ({stats.total_cells} cells)", file=stream)
    print(f"  Black:         {stats.black_cells} ({stats.black_ratio * 100:.1f}%)", file=stream)
    print(f"  White:         {stats.white_cells}", file=stream)

    print(file=stream)
    print("--- Entries ---", file=stream)
    print(
        f"  Total:         {stats.entry_count} "
        f"({stats.across_entries} across, {stats.down_entries} down)",
        file=stream,
    )
    if stats.length_distribution:
        print(
            f"  Length range:  {stats.min_length}-{stats.max_length} "
            f"(avg {stats.average_length:.1f})",
            file=stream,
        )
        dist_parts = [f"{l}:{c}" for l, c in stats.length_distribution.items()]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    if grid.seed is not None:
        print(file=stream)
        print(f"Seed: {grid.seed}", file=stream)


def print_validation(result: ValidationResult, *, stream=None) -> None:
    stream = stream or sys.stdout
    print("--- Validation ---", file=stream)
    print(f"  Status:        {'OK' if result.ok else 'FAILED'}", file=stream)
    for msg in result.messages:
        print(f"  {msg}", file=stream)
    for msg in result.warnings:
        print(f"  warning: {msg}", file=stream)
