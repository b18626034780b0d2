import unittest

from crossgrid.engine.entries import compute_entries
from crossgrid.engine.generator import GeneratorConfig, generate
from crossgrid.engine.grid import Grid, new_empty_grid
from crossgrid.engine.validator import GridValidator


def numbered(rows) -> Grid:
    grid = Grid.from_rows(rows)
    compute_entries(grid)
    return grid


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = GridValidator()

    def test_generated_grid_passes(self) -> None:
        grid = generate(GeneratorConfig(size=15, difficulty="easy", seed=12345))
        result = self.validator.validate(grid)
        self.assertTrue(result.ok, result.messages)
        self.assertEqual(result.messages, [])

    def test_open_grid_passes_without_warnings(self) -> None:
        result = self.validator.validate(numbered(["...", "...", "..."]))
        self.assertTrue(result.ok)
        self.assertEqual(result.warnings, [])

    def test_empty_grid_fails(self) -> None:
        result = self.validator.validate(new_empty_grid(0))
        self.assertFalse(result.ok)
        self.assertIn("no cells", result.messages[0])

    def test_asymmetric_grid_fails(self) -> None:
        result = self.validator.validate(numbered(["#....", ".....", ".....", ".....", "....."]))
        self.assertFalse(result.ok)
        self.assertIn("Symmetry violation between (0,0) and (4,4)", result.messages[0])

    def test_black_center_fails(self) -> None:
        result = self.validator.validate(numbered(["...", ".#.", "..."]))
        self.assertFalse(result.ok)
        self.assertIn("Center cell (1,1) is black", result.messages[0])

    def test_disconnected_grid_fails(self) -> None:
        result = self.validator.validate(numbered([".....", "#####", ".....", "#####", "....."]))
        self.assertFalse(result.ok)
        self.assertIn("disconnected", result.messages[0])

    def test_short_word_fails(self) -> None:
        result = self.validator.validate(numbered(["..#..", ".....", ".....", ".....", "..#.."]))
        self.assertFalse(result.ok)
        self.assertIn("shorter than 3 letters", result.messages[0])
        self.assertIn("across at (0,0) length 2", result.messages[0])

    def test_missing_numbers_fail(self) -> None:
        grid = Grid.from_rows(["...", "...", "..."])
        result = self.validator.validate(grid)
        self.assertFalse(result.ok)
        self.assertIn("should be numbered 1", result.messages[0])

    def test_stray_number_fails(self) -> None:
        grid = numbered(["...", "...", "..."])
        grid.cell(2, 2).number = 9
        result = self.validator.validate(grid)
        self.assertFalse(result.ok)
        self.assertIn("starts no entry", result.messages[0])

    def test_uncrossed_cells_are_warnings(self) -> None:
        grid = numbered([".#...", ".....", ".....", ".....", "...#."])
        result = self.validator.validate(grid)
        self.assertTrue(result.ok)
        self.assertEqual(
            result.warnings,
            ["Cell (0,0) has no across entry", "Cell (4,4) has no across entry"],
        )
        self.assertEqual(result.messages, [])

    def test_hard_failure_reports_no_crossing_warnings(self) -> None:
        grid = numbered(["#....", ".....", ".....", ".....", "....."])
        result = self.validator.validate(grid)
        self.assertFalse(result.ok)
        self.assertEqual(len(result.messages), 1)
        self.assertEqual(result.warnings, [])

    def test_custom_minimum_word_length(self) -> None:
        result = GridValidator(min_word_length=4).validate(numbered(["...", "...", "..."]))
        self.assertFalse(result.ok)
        self.assertIn("shorter than 4 letters", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
