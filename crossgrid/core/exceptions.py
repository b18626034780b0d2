"""Custom exception hierarchy for grid generation."""

from typing import Optional


class CrosswordError(Exception):
    """Base exception for generator failures."""


class GenerationFailedError(CrosswordError):
    """Raised when no valid grid was found within the attempt budget."""

    def __init__(self, attempts: int, seed: Optional[int] = None) -> None:
        super().__init__(
            f"failed to generate valid grid after {attempts} attempts (base seed {seed})"
        )
        self.attempts = attempts
        self.seed = seed


class GridFormatError(CrosswordError):
    """Raised when a textual grid cannot be parsed."""


class ValidationError(CrosswordError):
    """Raised when the grid integrity checks fail."""
