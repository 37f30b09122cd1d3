from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .arrows import EMPTY, Arrow
from .board import HEIGHT, WIDTH, Board


@dataclass(frozen=True)
class SettleStep:
    """One arrow dropping a single row, from (from_row, column) to (from_row + 1, column)."""
    column: int
    from_row: int
    value: Arrow

    @property
    def to_row(self) -> int:
        return self.from_row + 1

    @property
    def src_id(self) -> int:
        return Board.index(self.from_row, self.column)

    @property
    def dest_id(self) -> int:
        return Board.index(self.to_row, self.column)


def settle_column(board: Board, column: int, from_row: int = HEIGHT - 1) -> List[SettleStep]:
    """
    Computes the drops that settle `column`, scanning from `from_row` up to row 0.

    Each occupied cell falls one row at a time while the cell beneath it is empty.
    The working copy of the column is updated after every step, so an arrow higher
    up sees the cells vacated by the arrows below it. Rows under `from_row` are
    taken as already settled. The board itself is not modified.
    """
    if not 0 <= column < WIDTH:
        return []
    work = board.column(column)
    steps: List[SettleStep] = []
    for r in range(min(from_row, HEIGHT - 1), -1, -1):
        value = work[r]
        if value == EMPTY:
            continue
        row = r
        while row + 1 < HEIGHT and work[row + 1] == EMPTY:
            steps.append(SettleStep(column=column, from_row=row, value=value))
            work[row] = EMPTY
            work[row + 1] = value
            row += 1
    return steps


def apply_settle_steps(board: Board, steps: Iterable[SettleStep]) -> Board:
    """Replays steps in order and returns the resulting board."""
    cells = list(board.cells)
    for step in steps:
        cells[step.src_id] = EMPTY
        cells[step.dest_id] = step.value
    return Board(cells=tuple(cells))


def settle(board: Board, column: int, from_row: int = HEIGHT - 1) -> Tuple[Board, List[SettleStep]]:
    steps = settle_column(board, column, from_row)
    return apply_settle_steps(board, steps), steps


def settle_columns(board: Board, requests: Dict[int, int]) -> Tuple[Board, List[SettleStep]]:
    """Settles several columns, one sequence per column ({column: from_row}), left to right."""
    all_steps: List[SettleStep] = []
    for column in sorted(requests):
        board, steps = settle(board, column, requests[column])
        all_steps.extend(steps)
    return board, all_steps


def is_column_settled(board: Board, column: int) -> bool:
    """True when no arrow in `column` has an empty cell directly beneath it."""
    values = board.column(column)
    return all(not (values[r] != EMPTY and values[r + 1] == EMPTY) for r in range(HEIGHT - 1))
