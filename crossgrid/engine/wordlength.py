"""Detection of white runs that are too short to hold a word."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..core.constants import MIN_WORD_LENGTH, Direction
from .grid import Grid


@dataclass(frozen=True)
class ShortRun:
    direction: Direction
    start_row: int
    start_col: int
    length: int


def _is_short(length: int, min_length: int) -> bool:
    # Lone white cells are not word slots, so length 1 never counts.
    return 1 < length < min_length


def _iter_runs(grid: Grid, direction: Direction) -> Iterator[ShortRun]:
    """Yield every maximal white run in ``direction`` in scan order."""

    for line in range(grid.size):
        run_start = 0
        length = 0
        for offset in range(grid.size):
            row, col = (line, offset) if direction == Direction.ACROSS else (offset, line)
            if grid.cells[row][col].is_black:
                if length:
                    yield _make_run(direction, line, run_start, length)
                length = 0
                continue
            if length == 0:
                run_start = offset
            length += 1
        if length:
            yield _make_run(direction, line, run_start, length)


def _make_run(direction: Direction, line: int, start: int, length: int) -> ShortRun:
    if direction == Direction.ACROSS:
        return ShortRun(direction, line, start, length)
    return ShortRun(direction, start, line, length)


def has_short_words(grid: Optional[Grid], min_length: int = MIN_WORD_LENGTH) -> bool:
    """Return True as soon as any row or column holds a run in ``(1, min_length)``."""

    if grid is None or grid.size <= 0:
        return False
    for direction in (Direction.ACROSS, Direction.DOWN):
        for run in _iter_runs(grid, direction):
            if _is_short(run.length, min_length):
                return True
    return False


def find_short_runs(grid: Optional[Grid], min_length: int = MIN_WORD_LENGTH) -> List[ShortRun]:
    """List every too-short run, across runs first, each group in scan order."""

    if grid is None or grid.size <= 0:
        return []
    return [
        run
        for direction in (Direction.ACROSS, Direction.DOWN)
        for run in _iter_runs(grid, direction)
        if _is_short(run.length, min_length)
    ]
