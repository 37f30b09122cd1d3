from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from .actions import ActionOutcome
from .arrows import EMPTY, is_arrow
from .board import HEIGHT, WIDTH, Board
from .config import Settings
from .deal import RngLike, draw_arrow, make_rng
from .gravity import SettleStep, settle_columns
from .state import GameState


class SnapshotError(ValueError):
    """The snapshot is not a JSON object at all."""


def _as_int(value: Any) -> Optional[int]:
    """Accepts ints and integer strings (saved values may be strings)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _arrow_or(value: Any, fallback: int) -> int:
    parsed = _as_int(value)
    return parsed if parsed is not None and is_arrow(parsed) else fallback


def board_to_json(board: Board) -> List[int]:
    return [int(v) for v in board.cells]


def board_from_json(cells: Any) -> Board:
    """Unknown or malformed cell values become EMPTY."""
    if not isinstance(cells, (list, tuple)):
        return Board()
    return Board.from_values(_arrow_or(v, EMPTY) for v in cells)


def state_to_json(state: GameState) -> Dict[str, Any]:
    return {
        "cells": board_to_json(state.board),
        "nextArrow": int(state.next_arrow),
        "nextNextArrow": int(state.next_next_arrow),
        "swaps": int(state.swaps_remaining),
        "score": int(state.score),
        "settling": [int(c) for c in state.settling],
        "gameOver": bool(state.game_over),
        "highScore": int(state.high_score),
    }


def json_to_state(
    obj: Any,
    rng: RngLike = None,
    settings: Optional[Settings] = None,
) -> GameState:
    """
    Restores a session from its saved shape, coercing anything damaged:
    bad cells become empty, bad preview arrows are redrawn, a bad swap count
    resets to the starting value and a bad score resets to 0. Arrows left
    floating over an empty cell are settled.
    """
    if not isinstance(obj, Mapping):
        raise SnapshotError(f"snapshot must be an object, got {type(obj).__name__}")
    settings = settings or Settings()
    generator = make_rng(rng)

    board, _ = settle_columns(
        board_from_json(obj.get("cells", [])),
        {column: HEIGHT - 1 for column in range(WIDTH)},
    )
    next_arrow = _arrow_or(obj.get("nextArrow"), EMPTY) or draw_arrow(generator)
    next_next_arrow = _arrow_or(obj.get("nextNextArrow"), EMPTY) or draw_arrow(generator)

    swaps = _as_int(obj.get("swaps"))
    if swaps is None or swaps < 0:
        swaps = settings.starting_swaps
    score = _as_int(obj.get("score"))
    if score is None or score < 0:
        score = 0
    high_score = _as_int(obj.get("highScore"))
    if high_score is None or high_score < 0:
        high_score = 0

    settling = obj.get("settling", [])
    columns: Iterable[Optional[int]] = (_as_int(c) for c in settling) if isinstance(settling, list) else ()
    return GameState(
        board=board,
        next_arrow=next_arrow,
        next_next_arrow=next_next_arrow,
        swaps_remaining=swaps,
        score=score,
        settling=tuple(sorted({c for c in columns if c is not None and 0 <= c < WIDTH})),
        game_over=obj.get("gameOver") is True,
        high_score=high_score,
    )


def outcome_to_json(outcome: ActionOutcome) -> Dict[str, Any]:
    return {
        "action": outcome.kind.value,
        "newSource": int(outcome.new_source),
        "newDest": int(outcome.new_dest),
        "scoreDelta": int(outcome.score_delta),
        "bonus": int(outcome.bonus),
    }


def steps_to_json(steps: Iterable[SettleStep]) -> List[Dict[str, int]]:
    return [
        {"column": s.column, "fromRow": s.from_row, "toRow": s.to_row, "value": int(s.value)}
        for s in steps
    ]
