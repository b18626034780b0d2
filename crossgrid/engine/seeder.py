"""Random placement of black squares in the top-left quadrant."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from .grid import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

# random.Random seeds from abs(seed), so negatives are folded to 64 bits first.
SEED_MASK = 0xFFFF_FFFF_FFFF_FFFF


@dataclass(frozen=True)
class SeedConfig:
    """Per-attempt seeding parameters."""

    seed: int
    black_density: float


def target_black_count(size: int, density: float) -> int:
    """Whole-grid black cell target, ``size**2 * density`` rounded half up."""

    if size <= 0 or density <= 0:
        return 0
    return int(size * size * density + 0.5)


def quadrant_positions(size: int) -> List[Tuple[int, int]]:
    """Candidate cells of the top-left quadrant in row-major order.

    Both coordinates stay below ``size // 2``, so the centre row and column
    (and with them the centre cell) are never candidates.
    """

    half = max(size, 0) // 2
    return [(row, col) for row in range(half) for col in range(half)]


def seed_black_squares(grid: Grid, seed: int, density: float) -> int:
    """Blacken a shuffled sample of top-left quadrant cells.

    Only half of the target is placed here because symmetry enforcement
    mirrors every black cell. The shuffle uses a private ``random.Random``
    seeded with the 64-bit pattern of ``seed`` so identical inputs always
    give identical layouts and ``-seed`` does not replay ``seed``.
    Returns the number of cells blackened.
    """

    quadrant_target = target_black_count(grid.size, density) // 2
    positions = quadrant_positions(grid.size)
    rng = random.Random(seed & SEED_MASK)
    rng.shuffle(positions)

    placed = positions[:quadrant_target]
    for row, col in placed:
        grid.cells[row][col].is_black = True

    LOGGER.debug(
        "Seeded %s/%s quadrant cells black (seed=%s, density=%.3f)",
        len(placed),
        len(positions),
        seed,
        density,
    )
    return len(placed)


def seed_with_config(grid: Grid, config: SeedConfig) -> int:
    return seed_black_squares(grid, config.seed, config.black_density)
