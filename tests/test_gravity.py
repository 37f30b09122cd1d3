import itertools
import unittest

from game import (
    Board,
    SettleStep,
    apply_settle_steps,
    is_column_settled,
    settle,
    settle_column,
    settle_columns,
)
from arrowgame_core.arrows import CROSS, DOWN, EMPTY, LEFT, PLUS, RIGHT, UP


def column_board(col, values):
    """Board with `values` (top row first) in column `col`."""
    return Board().with_cells({Board.index(r, col): v for r, v in enumerate(values)})


class TestSettleColumn(unittest.TestCase):
    def test_given_arrow_on_bottom_row_when_settling_then_no_steps(self):
        board = Board().with_cells({20: UP})
        self.assertEqual(settle_column(board, 0, 4), [])

    def test_given_arrow_dropped_at_top_when_bottom_occupied_then_three_steps_to_row_three(self):
        board = Board().with_cells({20: UP, 0: UP})
        steps = settle_column(board, 0, 0)
        self.assertEqual([(s.from_row, s.to_row) for s in steps], [(0, 1), (1, 2), (2, 3)])
        self.assertTrue(all(s.value == UP and s.column == 0 for s in steps))
        settled = apply_settle_steps(board, steps)
        self.assertEqual(settled.cell(15), UP)
        self.assertEqual(settled.cell(0), EMPTY)
        self.assertEqual(settled.cell(20), UP)

    def test_given_stacked_gaps_when_settling_then_lower_arrow_moves_first(self):
        board = column_board(1, [LEFT, EMPTY, RIGHT, EMPTY, EMPTY])
        steps = settle_column(board, 1)
        self.assertEqual(
            steps,
            [
                SettleStep(column=1, from_row=2, value=RIGHT),
                SettleStep(column=1, from_row=3, value=RIGHT),
                SettleStep(column=1, from_row=0, value=LEFT),
                SettleStep(column=1, from_row=1, value=LEFT),
                SettleStep(column=1, from_row=2, value=LEFT),
            ],
        )
        settled = apply_settle_steps(board, steps)
        self.assertEqual(settled.column(1), [EMPTY, EMPTY, EMPTY, LEFT, RIGHT])

    def test_given_settled_column_when_settling_again_then_no_steps(self):
        board = column_board(3, [UP, EMPTY, DOWN, EMPTY, EMPTY])
        settled, steps = settle(board, 3)
        self.assertTrue(steps)
        self.assertEqual(settle_column(settled, 3), [])
        self.assertEqual(settle_column(settled, 3, 0), [])

    def test_given_every_column_pattern_when_settling_then_no_arrow_floats_and_order_kept(self):
        arrows = [UP, DOWN, LEFT, RIGHT, PLUS]
        for mask in itertools.product([False, True], repeat=5):
            values = [arrows[r] if mask[r] else EMPTY for r in range(5)]
            board = column_board(2, values)
            steps = settle_column(board, 2)
            settled = apply_settle_steps(board, steps)
            column = settled.column(2)
            self.assertTrue(is_column_settled(settled, 2), values)
            self.assertEqual([v for v in column if v], [v for v in values if v], values)
            self.assertEqual(settle_column(settled, 2), [], values)

    def test_given_steps_when_replayed_one_by_one_then_each_drop_is_into_an_empty_cell(self):
        board = column_board(4, [UP, DOWN, EMPTY, LEFT, EMPTY])
        current = board
        for step in settle_column(board, 4):
            self.assertEqual(current.cell(step.src_id), step.value)
            self.assertEqual(current.cell(step.dest_id), EMPTY)
            self.assertEqual(step.dest_id - step.src_id, 5)
            current = apply_settle_steps(current, [step])
        self.assertEqual(current.column(4), [EMPTY, EMPTY, UP, DOWN, LEFT])

    def test_given_from_row_when_settling_then_rows_below_untouched(self):
        board = column_board(0, [UP, EMPTY, DOWN, EMPTY, LEFT])
        steps = settle_column(board, 0, 1)
        self.assertEqual(steps, [SettleStep(column=0, from_row=0, value=UP)])

    def test_given_invalid_column_or_row_when_settling_then_no_steps(self):
        board = column_board(0, [UP, EMPTY, EMPTY, EMPTY, EMPTY])
        self.assertEqual(settle_column(board, 5), [])
        self.assertEqual(settle_column(board, -1), [])
        self.assertEqual(settle_column(board, 0, -1), [])

    def test_given_other_columns_when_settling_one_then_they_are_not_moved(self):
        board = column_board(0, [UP, EMPTY, EMPTY, EMPTY, EMPTY]).with_cells({1: DOWN})
        settled, _ = settle(board, 0)
        self.assertEqual(settled.cell(1), DOWN)
        self.assertEqual(settled.cell(20), UP)


class TestSettleColumns(unittest.TestCase):
    def test_given_two_requests_when_settling_then_columns_processed_left_to_right(self):
        board = Board().with_cells({Board.index(2, 3): PLUS, Board.index(3, 1): CROSS})
        settled, steps = settle_columns(board, {3: 4, 1: 4})
        self.assertEqual([s.column for s in steps], [1, 3, 3])
        self.assertEqual(settled.at(4, 1), CROSS)
        self.assertEqual(settled.at(4, 3), PLUS)

    def test_given_floating_arrow_when_checking_settled_then_false(self):
        self.assertFalse(is_column_settled(column_board(0, [UP, EMPTY, EMPTY, EMPTY, EMPTY]), 0))
        self.assertTrue(is_column_settled(column_board(0, [EMPTY, EMPTY, EMPTY, EMPTY, UP]), 0))
        self.assertTrue(is_column_settled(Board(), 0))


if __name__ == '__main__':
    unittest.main(verbosity=2)
