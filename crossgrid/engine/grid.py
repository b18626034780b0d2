"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import (
    BLACK_SYMBOL,
    DEFAULT_GRID_SIZE,
    EMPTY_SYMBOLS,
    ORTHOGONAL_STEPS,
    Direction,
)
from ..core.exceptions import GridFormatError, ValidationError
from ..core.models import Cell, Entry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    size: int = DEFAULT_GRID_SIZE


@dataclass
class Grid:
    """Square crossword lattice that owns its cells and derived entries.

    Entries are rebuilt wholesale by :func:`crossgrid.engine.entries.compute_entries`
    and go stale as soon as any ``is_black`` flag changes afterwards.
    """

    size: int
    cells: List[List[Cell]] = field(repr=False)
    entries: List[Entry] = field(default_factory=list, repr=False)
    seed: Optional[int] = None

    @classmethod
    def empty(cls, size: int) -> "Grid":
        size = max(size, 0)
        cells = [[Cell(row=r, col=c) for c in range(size)] for r in range(size)]
        return cls(size=size, cells=cells)

    @classmethod
    def from_config(cls, config: GridConfig) -> "Grid":
        return cls.empty(config.size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Grid":
        """Build a grid from text rows: ``#`` is black, ``.`` empty, letters fill."""

        size = len(rows)
        grid = cls.empty(size)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise GridFormatError(
                    f"Row {r} has {len(row)} cells, expected {size} for a square grid"
                )
            for c, symbol in enumerate(row):
                if len(symbol) != 1:
                    raise GridFormatError(f"Invalid cell symbol {symbol!r} at ({r},{c})")
                cell = grid.cells[r][c]
                if symbol == BLACK_SYMBOL:
                    cell.is_black = True
                elif symbol in EMPTY_SYMBOLS:
                    continue
                elif symbol.isalpha():
                    cell.letter = symbol.upper()
                else:
                    raise GridFormatError(f"Invalid cell symbol {symbol!r} at ({r},{c})")
        LOGGER.debug("Parsed %sx%s grid from text rows", size, size)
        return grid

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def center(self) -> Tuple[int, int]:
        return self.size // 2, self.size // 2

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_black(self, row: int, col: int) -> bool:
        return self.cells[row][col].is_black

    def is_white(self, row: int, col: int) -> bool:
        return self.contains(row, col) and not self.cells[row][col].is_black

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major scan order."""

        for row in self.cells:
            yield from row

    def neighbors(self, row: int, col: int) -> Iterable[Tuple[int, int]]:
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = row + dr, col + dc
            if self.contains(nr, nc):
                yield nr, nc

    def white_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if not cell.is_black)

    def black_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.is_black)

    def pattern(self) -> Tuple[Tuple[bool, ...], ...]:
        """Black/white layout as nested tuples, handy for comparing grids."""

        return tuple(tuple(cell.is_black for cell in row) for row in self.cells)

    # ------------------------------------------------------------------
    # Entry access
    # ------------------------------------------------------------------
    def across_entries(self) -> List[Entry]:
        return [entry for entry in self.entries if entry.direction == Direction.ACROSS]

    def down_entries(self) -> List[Entry]:
        return [entry for entry in self.entries if entry.direction == Direction.DOWN]

    def entry(self, number: int, direction: Direction) -> Optional[Entry]:
        for candidate in self.entries:
            if candidate.number == number and candidate.direction == direction:
                return candidate
        return None

    def entries_at(self, row: int, col: int) -> List[Entry]:
        target = self.cells[row][col]
        return [entry for entry in self.entries if any(cell is target for cell in entry.cells)]

    # ------------------------------------------------------------------
    # Letters
    # ------------------------------------------------------------------
    def place_letters(self, entry: Entry, text: str) -> None:
        """Write ``text`` into the cells of ``entry``, checking crossings."""

        text = text.upper()
        if len(text) != entry.length:
            raise ValidationError(
                f"Word length mismatch for {entry.label}: {len(text)} != {entry.length}"
            )
        for cell, letter in zip(entry.cells, text):
            if cell.letter and cell.letter != letter:
                raise ValidationError(
                    f"Letter conflict at ({cell.row},{cell.col}): {cell.letter} vs {letter}"
                )

        for cell, letter in zip(entry.cells, text):
            self.cells[cell.row][cell.col].letter = letter

    def clear_letters(self) -> None:
        for cell in self.iter_cells():
            cell.letter = None

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_rows(self) -> List[str]:
        rows: List[str] = []
        for row in self.cells:
            rows.append(
                "".join(BLACK_SYMBOL if cell.is_black else (cell.letter or ".") for cell in row)
            )
        return rows


def new_empty_grid(size: int) -> Grid:
    """Allocate a ``size`` x ``size`` all-white grid with no entries.

    Non-positive sizes give a zero-size grid that every validator rejects.
    """

    return Grid.empty(size)
