"""Symmetric crossword grid generator.

This package exposes the public API surface via:

- ``crossgrid.engine.generator.generate``: produces one validated, numbered grid.
- ``crossgrid.engine.grid.Grid``: the cell/entry structure handed to encoders.
- ``crossgrid.engine.validator.GridValidator``: structural checks for any grid.
"""

from .core.constants import Difficulty, Direction, MAX_GENERATION_ATTEMPTS, MIN_WORD_LENGTH
from .core.exceptions import CrosswordError, GenerationFailedError
from .core.models import Cell, Entry
from .engine.generator import GeneratorConfig, GridGenerator, generate
from .engine.grid import Grid, GridConfig, new_empty_grid
from .engine.validator import GridValidator, ValidationResult

__all__ = [
    "Cell",
    "CrosswordError",
    "Difficulty",
    "Direction",
    "Entry",
    "GenerationFailedError",
    "GeneratorConfig",
    "Grid",
    "GridConfig",
    "GridGenerator",
    "GridValidator",
    "MAX_GENERATION_ATTEMPTS",
    "MIN_WORD_LENGTH",
    "ValidationResult",
    "generate",
    "new_empty_grid",
]

__version__ = "0.1.0"
