import unittest

from crossgrid.engine.connectivity import flood_fill, is_connected, new_visited
from crossgrid.engine.grid import new_empty_grid


class IsConnectedTests(unittest.TestCase):
    def test_empty_grid_is_connected(self) -> None:
        self.assertTrue(is_connected(new_empty_grid(15)))

    def test_single_cell_grid_is_connected(self) -> None:
        self.assertTrue(is_connected(new_empty_grid(1)))

    def test_full_black_row_disconnects(self) -> None:
        grid = new_empty_grid(15)
        for col in range(15):
            grid.cell(3, col).is_black = True
        self.assertFalse(is_connected(grid))

    def test_black_center_is_not_connected(self) -> None:
        grid = new_empty_grid(5)
        grid.cell(2, 2).is_black = True
        self.assertFalse(is_connected(grid))

    def test_isolated_corner(self) -> None:
        grid = new_empty_grid(5)
        grid.cell(0, 1).is_black = True
        grid.cell(1, 0).is_black = True
        self.assertFalse(is_connected(grid))
        grid.cell(1, 0).is_black = False
        self.assertTrue(is_connected(grid))

    def test_diagonal_neighbours_do_not_connect(self) -> None:
        grid = new_empty_grid(5)
        for cell in grid.iter_cells():
            cell.is_black = (cell.row + cell.col) % 2 == 1
        self.assertFalse(is_connected(grid))

    def test_degenerate_grids(self) -> None:
        self.assertFalse(is_connected(None))
        self.assertFalse(is_connected(new_empty_grid(0)))
        grid = new_empty_grid(3)
        for cell in grid.iter_cells():
            cell.is_black = True
        self.assertFalse(is_connected(grid))

    def test_border_ring_stays_connected(self) -> None:
        grid = new_empty_grid(7)
        for r in range(1, 6):
            for c in range(1, 6):
                if (r, c) != (3, 3) and (r in (1, 5) or c in (1, 5)):
                    grid.cell(r, c).is_black = True
        # The centre pocket is walled off from the outer ring.
        self.assertFalse(is_connected(grid))
        grid.cell(1, 3).is_black = False
        grid.cell(2, 3).is_black = False
        self.assertTrue(is_connected(grid))


class FloodFillTests(unittest.TestCase):
    def test_counts_every_white_cell(self) -> None:
        grid = new_empty_grid(5)
        visited = new_visited(5)
        self.assertEqual(flood_fill(grid, 0, 0, visited), 25)
        self.assertTrue(all(all(row) for row in visited))

    def test_stops_at_wall(self) -> None:
        grid = new_empty_grid(5)
        for row in range(5):
            grid.cell(row, 2).is_black = True
        visited = new_visited(5)
        self.assertEqual(flood_fill(grid, 0, 0, visited), 10)
        self.assertFalse(visited[0][3])
        self.assertFalse(visited[0][2])
        self.assertTrue(visited[4][1])

    def test_single_enclosed_cell(self) -> None:
        grid = new_empty_grid(3)
        for r, c in ((0, 1), (1, 0), (1, 2), (2, 1)):
            grid.cell(r, c).is_black = True
        self.assertEqual(flood_fill(grid, 1, 1, new_visited(3)), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
