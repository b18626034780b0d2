"""Data models shared by the grid engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(eq=False)
class Cell:
    """A single grid square. Position is fixed once the grid allocates it."""

    row: int
    col: int
    is_black: bool = False
    letter: Optional[str] = None
    number: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col


@dataclass
class Entry:
    """A numbered word slot.

    ``cells`` holds the grid's own :class:`Cell` objects, so a letter written
    through the grid shows up here and vice versa.
    """

    number: int
    direction: Direction
    start_row: int
    start_col: int
    length: int
    cells: List[Cell] = field(default_factory=list, repr=False, compare=False)

    @property
    def positions(self) -> List[Tuple[int, int]]:
        return [cell.position for cell in self.cells]

    @property
    def text(self) -> str:
        return "".join(cell.letter or "?" for cell in self.cells)

    @property
    def is_filled(self) -> bool:
        return all(cell.letter for cell in self.cells)

    @property
    def label(self) -> str:
        return f"{self.number}-{self.direction.value}"
