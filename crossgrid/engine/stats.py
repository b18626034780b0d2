"""Summary statistics for a finished grid."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from ..core.constants import Direction
from .grid import Grid


@dataclass
class GridStats:
    size: int
    total_cells: int
    black_cells: int
    white_cells: int
    across_entries: int
    down_entries: int
    min_length: int = 0
    max_length: int = 0
    average_length: float = 0.0
    length_distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def black_ratio(self) -> float:
        return (self.black_cells / self.total_cells) if self.total_cells else 0.0

    @property
    def entry_count(self) -> int:
        return self.across_entries + self.down_entries


def compute_stats(grid: Grid) -> GridStats:
    black = grid.black_count()
    lengths = [entry.length for entry in grid.entries]
    stats = GridStats(
        size=grid.size,
        total_cells=grid.size * grid.size,
        black_cells=black,
        white_cells=grid.size * grid.size - black,
        across_entries=sum(1 for e in grid.entries if e.direction == Direction.ACROSS),
        down_entries=sum(1 for e in grid.entries if e.direction == Direction.DOWN),
    )
    if lengths:
        stats.min_length = min(lengths)
        stats.max_length = max(lengths)
        stats.average_length = sum(lengths) / len(lengths)
        stats.length_distribution = dict(sorted(Counter(lengths).items()))
    return stats
