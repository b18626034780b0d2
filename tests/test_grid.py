import unittest

from crossgrid.core.constants import Direction
from crossgrid.core.exceptions import GridFormatError, ValidationError
from crossgrid.engine.entries import compute_entries
from crossgrid.engine.grid import Grid, GridConfig, new_empty_grid


class EmptyGridTests(unittest.TestCase):
    def test_new_grid_is_all_white(self) -> None:
        grid = new_empty_grid(15)
        self.assertEqual(grid.size, 15)
        self.assertEqual(len(grid.cells), 15)
        for r in range(15):
            self.assertEqual(len(grid.cells[r]), 15)
            for c in range(15):
                cell = grid.cell(r, c)
                self.assertEqual((cell.row, cell.col), (r, c))
                self.assertFalse(cell.is_black)
                self.assertIsNone(cell.letter)
                self.assertEqual(cell.number, 0)
        self.assertEqual(grid.entries, [])
        self.assertEqual(grid.white_count(), 225)

    def test_non_positive_size_gives_degenerate_grid(self) -> None:
        for size in (0, -4):
            grid = new_empty_grid(size)
            self.assertEqual(grid.size, 0)
            self.assertEqual(grid.cells, [])
            self.assertEqual(grid.entries, [])
            self.assertEqual(grid.white_count(), 0)

    def test_from_config(self) -> None:
        grid = Grid.from_config(GridConfig(size=7))
        self.assertEqual(grid.size, 7)
        self.assertEqual(grid.center, (3, 3))

    def test_cells_are_distinct_objects(self) -> None:
        grid = new_empty_grid(3)
        grid.cell(0, 0).is_black = True
        self.assertFalse(grid.cell(0, 1).is_black)
        self.assertFalse(grid.cell(1, 0).is_black)


class TextRowsTests(unittest.TestCase):
    def test_from_rows_reads_blacks_and_letters(self) -> None:
        grid = Grid.from_rows(["#..", ".a.", "..#"])
        self.assertTrue(grid.is_black(0, 0))
        self.assertTrue(grid.is_black(2, 2))
        self.assertEqual(grid.cell(1, 1).letter, "A")
        self.assertIsNone(grid.cell(0, 1).letter)
        self.assertEqual(grid.to_rows(), ["#..", ".A.", "..#"])

    def test_from_rows_rejects_non_square(self) -> None:
        with self.assertRaises(GridFormatError):
            Grid.from_rows(["...", ".."])

    def test_from_rows_rejects_unknown_symbol(self) -> None:
        with self.assertRaises(GridFormatError):
            Grid.from_rows(["..", ".*"])


class LetterPlacementTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = new_empty_grid(3)
        compute_entries(self.grid)

    def test_letters_visible_through_crossing_entry(self) -> None:
        across = self.grid.entry(1, Direction.ACROSS)
        down = self.grid.entry(1, Direction.DOWN)
        self.grid.place_letters(across, "cat")
        self.assertEqual(across.text, "CAT")
        self.assertEqual(down.text, "C??")
        self.assertEqual(self.grid.cell(0, 2).letter, "T")
        self.assertTrue(across.is_filled)
        self.assertFalse(down.is_filled)

    def test_cell_mutation_visible_through_entry(self) -> None:
        down = self.grid.entry(2, Direction.DOWN)
        self.grid.cell(2, 1).letter = "Z"
        self.assertEqual(down.text, "??Z")

    def test_conflicting_letter_rejected(self) -> None:
        self.grid.place_letters(self.grid.entry(1, Direction.ACROSS), "CAT")
        with self.assertRaises(ValidationError):
            self.grid.place_letters(self.grid.entry(1, Direction.DOWN), "DOG")
        self.assertEqual(self.grid.cell(1, 0).letter, None)

    def test_length_mismatch_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.grid.place_letters(self.grid.entry(1, Direction.ACROSS), "CATS")

    def test_entries_at_returns_both_directions(self) -> None:
        found = self.grid.entries_at(1, 1)
        self.assertEqual({(e.number, e.direction) for e in found}, {(4, Direction.ACROSS), (2, Direction.DOWN)})

    def test_clear_letters(self) -> None:
        self.grid.place_letters(self.grid.entry(1, Direction.ACROSS), "CAT")
        self.grid.clear_letters()
        self.assertEqual(self.grid.to_rows(), ["...", "...", "..."])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
