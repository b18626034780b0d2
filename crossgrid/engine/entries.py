"""Clue numbering and across/down slot extraction."""

from __future__ import annotations

from typing import Dict, List, Tuple

from ..core.constants import Direction
from ..core.models import Cell, Entry
from .grid import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def _is_run_start(grid: Grid, row: int, col: int, direction: Direction) -> bool:
    """White cell whose predecessor in ``direction`` is black or off-grid."""

    if grid.cells[row][col].is_black:
        return False
    dr, dc = direction.step
    return not grid.is_white(row - dr, col - dc)


def _starts_entry(grid: Grid, row: int, col: int, direction: Direction) -> bool:
    dr, dc = direction.step
    return _is_run_start(grid, row, col, direction) and grid.is_white(row + dr, col + dc)


def starts_across(grid: Grid, row: int, col: int) -> bool:
    return _starts_entry(grid, row, col, Direction.ACROSS)


def starts_down(grid: Grid, row: int, col: int) -> bool:
    return _starts_entry(grid, row, col, Direction.DOWN)


def _collect_run(grid: Grid, row: int, col: int, direction: Direction) -> List[Cell]:
    dr, dc = direction.step
    cells: List[Cell] = []
    r, c = row, col
    while grid.is_white(r, c):
        cells.append(grid.cells[r][c])
        r += dr
        c += dc
    return cells


def number_cells(grid: Grid) -> Dict[Tuple[int, int], int]:
    """Assign clue numbers in row-major order and return them by position.

    A cell that starts both an across and a down entry gets one number.
    Numbers from any earlier run are cleared first.
    """

    numbers: Dict[Tuple[int, int], int] = {}
    next_number = 1
    for row in range(grid.size):
        for col in range(grid.size):
            cell = grid.cells[row][col]
            cell.number = 0
            if cell.is_black:
                continue
            if starts_across(grid, row, col) or starts_down(grid, row, col):
                cell.number = next_number
                numbers[(row, col)] = next_number
                next_number += 1
    return numbers


def _extract_slots(
    grid: Grid, direction: Direction, numbers: Dict[Tuple[int, int], int]
) -> List[Entry]:
    slots: List[Entry] = []
    for row in range(grid.size):
        for col in range(grid.size):
            if not _is_run_start(grid, row, col, direction):
                continue
            cells = _collect_run(grid, row, col, direction)
            if len(cells) < 2:
                continue
            slots.append(
                Entry(
                    number=numbers.get((row, col), 0),
                    direction=direction,
                    start_row=row,
                    start_col=col,
                    length=len(cells),
                    cells=cells,
                )
            )
    return slots


def compute_entries(grid: Grid) -> List[Entry]:
    """Recompute clue numbers and entries from the current black/white layout.

    Any previous entry list is discarded. All across entries come first, then
    all down entries, each group in row-major order of the start cell. Runs of
    two cells are accepted here; rejecting them is the generator's job.
    """

    grid.entries = []
    numbers = number_cells(grid)
    grid.entries.extend(_extract_slots(grid, Direction.ACROSS, numbers))
    grid.entries.extend(_extract_slots(grid, Direction.DOWN, numbers))
    LOGGER.debug(
        "Computed %s entries (%s numbered cells) on %sx%s grid",
        len(grid.entries),
        len(numbers),
        grid.size,
        grid.size,
    )
    return grid.entries
