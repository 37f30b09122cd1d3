from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .actions import ActionOutcome
from .arrows import EMPTY
from .board import HEIGHT, Board
from .config import Settings
from .deal import RngLike, deal_next_arrows, draw_arrow, make_rng
from .gravity import SettleStep, settle, settle_columns
from .moves import resolve_move
from .oracle import has_any_move
from .state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """The outcome of an applied gesture. `steps` are the gravity drops the
    presentation layer animates, in order; `landed` is where a dropped arrow
    came to rest."""
    state: GameState
    steps: Tuple[SettleStep, ...] = ()
    score_delta: int = 0
    cleared: Tuple[int, ...] = ()
    landed: Optional[int] = None
    outcome: Optional[ActionOutcome] = None

    @property
    def game_over(self) -> bool:
        return self.state.game_over


def new_game(seed: RngLike = None, settings: Optional[Settings] = None, high_score: int = 0) -> GameState:
    """Starts a game on an empty board, keeping the high score of earlier games."""
    settings = settings or Settings()
    next_arrow, next_next_arrow = deal_next_arrows(seed)
    return GameState(
        board=Board(),
        next_arrow=next_arrow,
        next_next_arrow=next_next_arrow,
        swaps_remaining=settings.starting_swaps,
        high_score=max(0, high_score),
    )


def is_terminal(state: GameState) -> bool:
    """The board is full and no pair of arrows can act on each other."""
    return state.board.is_full() and not has_any_move(state.board)


def _lock_columns(state: GameState, steps: Tuple[SettleStep, ...]) -> GameState:
    return state.with_settling(state.settling + tuple(step.column for step in steps))


def _check_end(state: GameState) -> GameState:
    if is_terminal(state):
        logger.info("No actions remain, game over with score %d", state.score)
        if state.score > state.high_score:
            logger.info("New high score %d (was %d)", state.score, state.high_score)
        return replace(state, game_over=True, high_score=max(state.high_score, state.score))
    return state


def drop_arrow(state: GameState, row: int, col: int, rng: RngLike = None) -> Optional[TurnResult]:
    """Places the next arrow at (row, col) and lets it fall. None if the drop is ignored."""
    if state.game_over:
        return None
    if not Board.in_bounds(row, col):
        logger.debug("drop at (%s, %s) rejected: outside the grid", row, col)
        return None
    if state.is_settling(col):
        logger.debug("drop at (%d, %d) rejected: column still settling", row, col)
        return None
    cell_id = Board.index(row, col)
    if not state.board.is_empty(cell_id):
        logger.debug("drop at (%d, %d) rejected: cell occupied", row, col)
        return None

    placed = state.board.with_cells({cell_id: state.next_arrow})
    board, steps = settle(placed, col, row)
    # The dropped arrow is scanned first, so it stops at the first occupied cell below it.
    landing_row = row
    while landing_row + 1 < HEIGHT and placed.at(landing_row + 1, col) == EMPTY:
        landing_row += 1
    landed = Board.index(landing_row, col)
    generator: random.Random = make_rng(rng)
    next_state = replace(
        state,
        board=board,
        next_arrow=state.next_next_arrow,
        next_next_arrow=draw_arrow(generator),
    )
    next_state = _check_end(_lock_columns(next_state, tuple(steps)))
    return TurnResult(state=next_state, steps=tuple(steps), landed=landed)


def move_arrow(state: GameState, src_id: int, dest_id: int) -> Optional[TurnResult]:
    """Drags the arrow at src_id onto dest_id. None if nothing happens."""
    if state.game_over:
        return None
    result = resolve_move(state.board, src_id, dest_id, settling=state.settling)
    if result is None:
        return None

    board, steps = settle_columns(result.board, dict(result.gravity))
    next_state = replace(
        state,
        board=board,
        score=state.score + result.score_delta,
        swaps_remaining=state.swaps_remaining + result.bonus,
    )
    if result.bonus:
        logger.debug("bonus swap granted, %d remaining", next_state.swaps_remaining)
    next_state = _check_end(_lock_columns(next_state, tuple(steps)))
    return TurnResult(
        state=next_state,
        steps=tuple(steps),
        score_delta=result.score_delta,
        cleared=result.cleared,
        outcome=result.outcome,
    )


def swap_next_arrows(state: GameState) -> Optional[GameState]:
    """Exchanges the next arrow with the preview, spending one swap."""
    if state.game_over or state.swaps_remaining <= 0:
        return None
    return replace(
        state,
        next_arrow=state.next_next_arrow,
        next_next_arrow=state.next_arrow,
        swaps_remaining=state.swaps_remaining - 1,
    )


def finish_settle(state: GameState, column: int) -> GameState:
    """Releases a column once its gravity animation has completed."""
    return state.with_settling(tuple(c for c in state.settling if c != column))


def finish_all_settles(state: GameState) -> GameState:
    return state.with_settling(())
