"""Deterministic rule validation for finished grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.constants import MIN_WORD_LENGTH, Direction
from ..core.exceptions import ValidationError
from .connectivity import is_connected
from .entries import starts_across, starts_down
from .grid import Grid
from .symmetry import is_symmetric, mirror
from .wordlength import find_short_runs
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]
    warnings: List[str] = field(default_factory=list)


class GridValidator:
    """Runs the structural checks a published grid must pass.

    Hard failures stop at the first broken rule. Cells that are not crossed by
    both an across and a down entry are reported as warnings only, since the
    generator itself allows lone white cells between two blacks.
    """

    def __init__(self, min_word_length: int = MIN_WORD_LENGTH) -> None:
        self.min_word_length = min_word_length

    def validate(self, grid: Grid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_not_empty(grid)
            self._check_symmetry(grid)
            self._check_center_white(grid)
            self._check_connectivity(grid)
            self._check_word_lengths(grid)
            self._check_numbering(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[], warnings=self._uncrossed_cells(grid))

    def _check_not_empty(self, grid: Grid) -> None:
        if grid.size <= 0:
            raise ValidationError("Grid has no cells")

    def _check_symmetry(self, grid: Grid) -> None:
        if is_symmetric(grid):
            return
        for cell in grid.iter_cells():
            mirror_row, mirror_col = mirror(grid.size, cell.row, cell.col)
            if cell.is_black != grid.is_black(mirror_row, mirror_col):
                raise ValidationError(
                    f"Symmetry violation between ({cell.row},{cell.col}) "
                    f"and ({mirror_row},{mirror_col})"
                )

    def _check_center_white(self, grid: Grid) -> None:
        row, col = grid.center
        if grid.is_black(row, col):
            raise ValidationError(f"Center cell ({row},{col}) is black")

    def _check_connectivity(self, grid: Grid) -> None:
        if not is_connected(grid):
            raise ValidationError("Grid has disconnected regions: not all white cells are reachable")

    def _check_word_lengths(self, grid: Grid) -> None:
        runs = find_short_runs(grid, self.min_word_length)
        if runs:
            first = runs[0]
            raise ValidationError(
                f"{len(runs)} word(s) shorter than {self.min_word_length} letters, first is "
                f"{first.direction.value} at ({first.start_row},{first.start_col}) "
                f"length {first.length}"
            )

    def _check_numbering(self, grid: Grid) -> None:
        expected = 1
        for cell in grid.iter_cells():
            starts = not cell.is_black and (
                starts_across(grid, cell.row, cell.col) or starts_down(grid, cell.row, cell.col)
            )
            if starts:
                if cell.number != expected:
                    raise ValidationError(
                        f"Cell ({cell.row},{cell.col}) should be numbered {expected}, "
                        f"found {cell.number}"
                    )
                expected += 1
            elif cell.number:
                raise ValidationError(
                    f"Cell ({cell.row},{cell.col}) carries number {cell.number} "
                    "but starts no entry"
                )

    def _uncrossed_cells(self, grid: Grid) -> List[str]:
        covered = {Direction.ACROSS: set(), Direction.DOWN: set()}
        for entry in grid.entries:
            covered[entry.direction].update(entry.positions)
        warnings: List[str] = []
        for cell in grid.iter_cells():
            if cell.is_black:
                continue
            missing = [
                d.value for d in (Direction.ACROSS, Direction.DOWN)
                if cell.position not in covered[d]
            ]
            if missing:
                warnings.append(
                    f"Cell ({cell.row},{cell.col}) has no {' or '.join(missing)} entry"
                )
        return warnings
