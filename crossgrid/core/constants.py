"""Shared constants and enumerations for the grid generator."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Difficulty(str, Enum):
    """Difficulty presets, each mapped to a black-square density."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @classmethod
    def parse(cls, value: "Difficulty | str | None") -> "Difficulty | None":
        """Return the matching preset, or ``None`` for unknown values."""

        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)


ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Conservative values: random quadrant seeding produces 2-letter runs far more
# easily than hand-built patterns do.
DIFFICULTY_DENSITY: Dict[Difficulty, float] = {
    Difficulty.EASY: 0.06,
    Difficulty.MEDIUM: 0.08,
    Difficulty.HARD: 0.10,
    Difficulty.EXPERT: 0.12,
}
DEFAULT_DENSITY = DIFFICULTY_DENSITY[Difficulty.MEDIUM]

MIN_WORD_LENGTH = 3
MAX_GENERATION_ATTEMPTS = 1000
DEFAULT_GRID_SIZE = 15

BLACK_SYMBOL = "#"
EMPTY_SYMBOLS = frozenset({".", " ", "_"})
