from __future__ import annotations

from typing import Tuple

from .actions import classify_cells
from .board import CAPACITY, Board

# Every signed offset at which two arrows can act on each other.
ACTION_OFFSETS: Tuple[int, ...] = (-6, -5, -4, -1, 1, 4, 5, 6)


def has_any_move(board: Board) -> bool:
    """True as soon as any pair of cells admits a merge, combine or cancel."""
    for src_id in range(CAPACITY):
        if board.is_empty(src_id):
            continue
        for offset in ACTION_OFFSETS:
            dest_id = src_id + offset
            if 0 <= dest_id < CAPACITY and classify_cells(board, src_id, dest_id).applied:
                return True
    return False
