"""180-degree rotational symmetry helpers."""

from __future__ import annotations

from typing import Tuple

from .grid import Grid


def mirror(size: int, row: int, col: int) -> Tuple[int, int]:
    """Position of ``(row, col)`` after a half-turn of a ``size`` grid."""

    return size - 1 - row, size - 1 - col


def enforce_symmetry(grid: Grid) -> None:
    """Blacken the rotational counterpart of every black cell.

    Idempotent and only ever adds black cells.
    """

    size = grid.size
    for row in range(size):
        for col in range(size):
            if grid.cells[row][col].is_black:
                mirror_row, mirror_col = mirror(size, row, col)
                grid.cells[mirror_row][mirror_col].is_black = True


def is_symmetric(grid: Grid) -> bool:
    size = grid.size
    for row in range(size):
        for col in range(size):
            mirror_row, mirror_col = mirror(size, row, col)
            if grid.cells[row][col].is_black != grid.cells[mirror_row][mirror_col].is_black:
                return False
    return True
