import unittest

from game import (
    CAPACITY,
    Board,
    is_geometrically_valid,
    is_valid_pair,
)
from arrowgame_core.arrows import DOWN, EMPTY, STAR, UP


class TestBoardUnit(unittest.TestCase):
    def test_given_cell_ids_when_converting_then_row_major_round_trip(self):
        self.assertEqual(Board.index(1, 2), 7)
        self.assertEqual(Board.index(4, 4), 24)
        self.assertEqual(Board.rowcol(7), (1, 2))
        self.assertEqual(Board.rowcol(20), (4, 0))
        for cell_id in range(CAPACITY):
            self.assertEqual(Board.index(*Board.rowcol(cell_id)), cell_id)

    def test_given_default_board_when_created_then_all_cells_empty(self):
        board = Board()
        self.assertEqual(len(board.cells), 25)
        self.assertTrue(all(board.is_empty(i) for i in range(CAPACITY)))
        self.assertEqual(board.occupied_count(), 0)
        self.assertFalse(board.is_full())

    def test_given_wrong_cell_count_when_constructing_then_value_error(self):
        with self.assertRaises(ValueError):
            Board(cells=(EMPTY,) * 24)

    def test_given_foreign_values_when_from_values_then_coerced_to_empty(self):
        board = Board.from_values([UP, 99, "5", None, True, STAR, -1])
        self.assertEqual(board.cells[:7], (UP, EMPTY, EMPTY, EMPTY, EMPTY, STAR, EMPTY))
        self.assertEqual(board.occupied_count(), 2)

    def test_given_too_many_values_when_from_values_then_extras_ignored(self):
        board = Board.from_values([UP] * 30)
        self.assertEqual(len(board.cells), 25)
        self.assertTrue(board.is_full())

    def test_given_rows_when_from_rows_then_columns_read_top_first(self):
        rows = [[0] * 5 for _ in range(5)]
        rows[3][2] = UP
        rows[4][2] = DOWN
        board = Board.from_rows(rows)
        self.assertEqual(board.at(3, 2), UP)
        self.assertEqual(board.cell(22), DOWN)
        self.assertEqual(board.column(2), [EMPTY, EMPTY, EMPTY, UP, DOWN])

    def test_given_board_when_with_cells_then_original_unchanged(self):
        board = Board()
        updated = board.with_cells({0: UP, 24: DOWN})
        self.assertEqual(updated.cell(0), UP)
        self.assertEqual(updated.cell(24), DOWN)
        self.assertTrue(board.is_empty(0))

    def test_given_board_when_pretty_then_glyphs_rendered(self):
        board = Board().with_cells({0: UP, 6: STAR})
        txt = board.pretty()
        self.assertIn('↑', txt)
        self.assertIn('*', txt)
        self.assertIn('·', txt)
        self.assertEqual(len(txt.splitlines()), 6)

    def test_given_coordinates_when_checking_bounds_then_only_grid_accepted(self):
        self.assertTrue(Board.in_bounds(0, 0))
        self.assertTrue(Board.in_bounds(4, 4))
        self.assertFalse(Board.in_bounds(5, 0))
        self.assertFalse(Board.in_bounds(0, -1))
        self.assertFalse(Board.valid_id(25))
        self.assertFalse(Board.valid_id(-1))


class TestEdgeResolver(unittest.TestCase):
    def test_given_diagonal_distance_six_when_rows_differ_by_two_then_rejected(self):
        # cell 4 is (0,4), cell 10 is (2,0): linear distance 6 but not a diagonal
        self.assertFalse(is_geometrically_valid((0, 4), (2, 0), 6))
        self.assertFalse(is_valid_pair(4, 10))

    def test_given_diagonal_distance_six_when_rows_differ_by_one_then_accepted(self):
        # cell 3 is (0,3), cell 9 is (1,4)
        self.assertTrue(is_geometrically_valid((0, 3), (1, 4), 6))
        self.assertTrue(is_valid_pair(3, 9))
        self.assertTrue(is_valid_pair(9, 3))

    def test_given_horizontal_distance_when_crossing_row_boundary_then_rejected(self):
        # (0,4) -> (1,0) is linear distance 1
        self.assertFalse(is_geometrically_valid((0, 4), (1, 0), 1))
        self.assertFalse(is_valid_pair(4, 5))
        self.assertTrue(is_valid_pair(3, 4))

    def test_given_anti_diagonal_distance_when_same_row_then_rejected(self):
        # (0,0) -> (0,4) is linear distance 4
        self.assertFalse(is_geometrically_valid((0, 0), (0, 4), 4))
        self.assertTrue(is_geometrically_valid((0, 1), (1, 0), 4))
        self.assertTrue(is_geometrically_valid((1, 0), (0, 1), -4))

    def test_given_vertical_distance_when_checking_then_always_valid(self):
        self.assertTrue(is_geometrically_valid((0, 4), (1, 4), 5))
        self.assertTrue(is_geometrically_valid((3, 0), (2, 0), -5))

    def test_given_other_distances_when_checking_then_no_correction_applied(self):
        self.assertTrue(is_geometrically_valid((0, 0), (0, 2), 2))
        self.assertTrue(is_geometrically_valid((0, 0), (2, 0), 10))

    def test_given_ids_off_the_board_when_validating_pair_then_rejected(self):
        self.assertFalse(is_valid_pair(-1, 4))
        self.assertFalse(is_valid_pair(24, 25))


if __name__ == '__main__':
    unittest.main(verbosity=2)
