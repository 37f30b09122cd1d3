from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .actions import ActionOutcome, classify
from .arrows import EMPTY
from .board import Board
from .edges import is_valid_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """An applied move. `board` holds the action's values before gravity;
    `gravity` lists (column, from_row) pairs to hand to the gravity engine."""
    board: Board
    outcome: ActionOutcome
    src_id: int
    dest_id: int
    cleared: Tuple[int, ...]
    gravity: Tuple[Tuple[int, int], ...]

    @property
    def score_delta(self) -> int:
        return self.outcome.score_delta

    @property
    def bonus(self) -> int:
        return self.outcome.bonus


def gravity_requests(src_id: int, dest_id: int, outcome: ActionOutcome) -> Dict[int, int]:
    """
    Maps each column that lost an arrow to the row gravity should start from.

    Every cell cleared to EMPTY needs the cells above it to fall. When both cells
    of a vertical pair are cleared in the same column, the column is settled once
    from above the lower cell; the upper cleared cell is then just another gap.
    """
    requests: Dict[int, int] = {}
    for cell_id, new_value in ((src_id, outcome.new_source), (dest_id, outcome.new_dest)):
        if new_value != EMPTY:
            continue
        r, c = Board.rowcol(cell_id)
        if r == 0:
            continue
        requests[c] = max(requests.get(c, 0), r - 1)
    return requests


def resolve_move(
    board: Board,
    src_id: int,
    dest_id: int,
    settling: Iterable[int] = (),
) -> Optional[MoveResult]:
    """Applies the drag of the arrow at `src_id` onto `dest_id`, or returns None if
    nothing happens. Columns in `settling` are locked and reject the move."""
    if not (Board.valid_id(src_id) and Board.valid_id(dest_id)):
        logger.debug("move %s->%s rejected: cell out of range", src_id, dest_id)
        return None
    busy = set(settling)
    src_col = Board.rowcol(src_id)[1]
    dest_col = Board.rowcol(dest_id)[1]
    if src_col in busy or dest_col in busy:
        logger.debug("move %s->%s rejected: column still settling", src_id, dest_id)
        return None
    if not is_valid_pair(src_id, dest_id):
        logger.debug("move %s->%s rejected: wraps across a row boundary", src_id, dest_id)
        return None

    source = board.cell(src_id)
    dest = board.cell(dest_id)
    outcome = classify(source, dest, dest_id - src_id)
    if not outcome.applied:
        return None
    logger.debug(
        "%s: [source, dest] = [%d, %d] at distance %d, +%d",
        outcome.kind.value, source, dest, dest_id - src_id, outcome.score_delta,
    )

    new_board = board.with_cells({src_id: outcome.new_source, dest_id: outcome.new_dest})
    cleared = tuple(sorted(
        cell_id for cell_id, value in ((src_id, outcome.new_source), (dest_id, outcome.new_dest))
        if value == EMPTY
    ))
    requests = gravity_requests(src_id, dest_id, outcome)
    return MoveResult(
        board=new_board,
        outcome=outcome,
        src_id=src_id,
        dest_id=dest_id,
        cleared=cleared,
        gravity=tuple(sorted(requests.items())),
    )
