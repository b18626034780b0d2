"""Grid generation orchestration.

Each attempt starts from a fresh empty grid:
  1. Seed black squares in the top-left quadrant.
  2. Mirror them for 180-degree rotational symmetry.
  3. Gate on connectivity, then on minimum word length.
  4. Number the grid and extract entries.

A rejected attempt is thrown away and the next one reseeds with
``base_seed + attempt``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    DEFAULT_DENSITY,
    DEFAULT_GRID_SIZE,
    DIFFICULTY_DENSITY,
    MAX_GENERATION_ATTEMPTS,
    Difficulty,
)
from ..core.exceptions import GenerationFailedError
from .connectivity import is_connected
from .entries import compute_entries
from .grid import Grid, GridConfig, new_empty_grid
from .seeder import SeedConfig, seed_with_config
from .symmetry import enforce_symmetry
from .wordlength import has_short_words
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def density_for_difficulty(difficulty: "Difficulty | str | None") -> float:
    preset = Difficulty.parse(difficulty)
    if preset is None:
        return DEFAULT_DENSITY
    return DIFFICULTY_DENSITY[preset]


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_GRID_SIZE
    difficulty: "Difficulty | str" = Difficulty.MEDIUM
    black_density: float = 0.0
    seed: int = 0
    max_attempts: int = MAX_GENERATION_ATTEMPTS

    def to_grid_config(self) -> GridConfig:
        return GridConfig(size=self.size)

    def resolve_density(self) -> float:
        if self.black_density:
            return self.black_density
        return density_for_difficulty(self.difficulty)

    def resolve_seed(self) -> int:
        if self.seed:
            return self.seed
        return time.time_ns()


class GridGenerator:
    """Bounded retry loop producing one valid grid."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.attempts_used = 0

    def generate(self) -> Grid:
        density = self.config.resolve_density()
        base_seed = self.config.resolve_seed()
        grid_config = self.config.to_grid_config()
        LOGGER.info(
            "Generating %sx%s grid (density=%.3f, seed=%s)",
            grid_config.size,
            grid_config.size,
            density,
            base_seed,
        )

        for attempt in range(self.config.max_attempts):
            self.attempts_used = attempt + 1
            seed_config = SeedConfig(seed=base_seed + attempt, black_density=density)
            grid = self.attempt(grid_config, seed_config)
            if grid is None:
                continue
            LOGGER.info(
                "Grid accepted on attempt %s/%s (seed=%s, %s entries)",
                attempt + 1,
                self.config.max_attempts,
                seed_config.seed,
                len(grid.entries),
            )
            return grid

        LOGGER.error(
            "Grid generation failed after %s attempts (base seed %s)",
            self.config.max_attempts,
            base_seed,
        )
        raise GenerationFailedError(self.config.max_attempts, base_seed)

    @staticmethod
    def attempt(grid_config: GridConfig, seed_config: SeedConfig) -> Optional[Grid]:
        """Run one seeded attempt; ``None`` means a gate rejected the layout."""

        grid = new_empty_grid(grid_config.size)
        seed_with_config(grid, seed_config)
        enforce_symmetry(grid)

        if not is_connected(grid):
            LOGGER.debug("Seed %s rejected: disconnected white cells", seed_config.seed)
            return None
        if has_short_words(grid):
            LOGGER.debug("Seed %s rejected: contains short words", seed_config.seed)
            return None

        compute_entries(grid)
        grid.seed = seed_config.seed
        return grid


def generate(config: GeneratorConfig) -> Grid:
    """Generate a valid grid or raise :class:`GenerationFailedError`."""

    return GridGenerator(config).generate()
