"""Flood-fill connectivity check over white cells."""

from __future__ import annotations

from collections import deque
from typing import List, Optional

from .grid import Grid


def flood_fill(grid: Grid, start_row: int, start_col: int, visited: List[List[bool]]) -> int:
    """Breadth-first fill from ``(start_row, start_col)``.

    Marks every reachable white cell in ``visited`` (4-directional adjacency,
    no diagonals) and returns how many cells were reached, the start cell
    included. The caller guarantees the start cell is white.
    """

    queue = deque([(start_row, start_col)])
    visited[start_row][start_col] = True
    count = 1

    while queue:
        row, col = queue.popleft()
        for nr, nc in grid.neighbors(row, col):
            if visited[nr][nc] or grid.cells[nr][nc].is_black:
                continue
            visited[nr][nc] = True
            queue.append((nr, nc))
            count += 1
    return count


def new_visited(size: int) -> List[List[bool]]:
    return [[False] * size for _ in range(size)]


def is_connected(grid: Optional[Grid]) -> bool:
    """True iff every white cell is reachable from the centre cell.

    Empty grids, grids with a black centre and grids without white cells
    are all reported as disconnected.
    """

    if grid is None or grid.size <= 0:
        return False

    center_row, center_col = grid.center
    if grid.cells[center_row][center_col].is_black:
        return False

    total_white = grid.white_count()
    if total_white == 0:
        return False

    reached = flood_fill(grid, center_row, center_col, new_visited(grid.size))
    return reached == total_white
