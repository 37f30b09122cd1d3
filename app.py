from __future__ import annotations

import logging
import os
import random
import sys
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from the repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from arrowgame_core.actions import classify  # noqa: E402
from arrowgame_core.config import configure_logging, load_settings  # noqa: E402
from arrowgame_core.oracle import has_any_move  # noqa: E402
from arrowgame_core.session import (  # noqa: E402
    TurnResult,
    drop_arrow,
    finish_all_settles,
    finish_settle,
    move_arrow,
    new_game,
    swap_next_arrows,
)
from arrowgame_core.snapshot import (  # noqa: E402
    SnapshotError,
    json_to_state,
    outcome_to_json,
    state_to_json,
    steps_to_json,
)
from arrowgame_core.state import GameState  # noqa: E402

logger = logging.getLogger(__name__)

SETTINGS = load_settings()
app = Flask(__name__)

# Errors raised while reading a request body; anything else is a server bug.
BAD_REQUEST_ERRORS = (SnapshotError, KeyError, TypeError, ValueError)


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise SnapshotError("request body must be a JSON object")
    return body


def _rng(body: Dict[str, Any]) -> random.Random:
    seed = body.get("seed", None)
    return random.Random(int(seed)) if seed is not None else random.Random()


def _state_in(body: Dict[str, Any]) -> GameState:
    return json_to_state(body["state"], settings=SETTINGS)


def _bad_request(e: Exception) -> Tuple[Any, int]:
    logger.debug("bad request: %s", e)
    return jsonify({"ok": False, "error": f"bad request: {e}"}), 400


def _noop(state: GameState) -> Any:
    return jsonify({"ok": True, "applied": False, "state": state_to_json(state)})


def _turn_to_json(result: TurnResult) -> Dict[str, Any]:
    return {
        "ok": True,
        "applied": True,
        "state": state_to_json(result.state),
        "steps": steps_to_json(result.steps),
        "scoreDelta": result.score_delta,
        "cleared": list(result.cleared),
        "landed": result.landed,
        "outcome": outcome_to_json(result.outcome) if result.outcome is not None else None,
        "gameOver": result.game_over,
    }


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        body = {}
    try:
        state = new_game(_rng(body), SETTINGS, high_score=int(body.get("highScore", 0)))
    except BAD_REQUEST_ERRORS as e:
        return _bad_request(e)
    return jsonify({"ok": True, "state": state_to_json(state)})


@app.post("/api/drop")
def api_drop() -> Any:
    try:
        body = _body()
        state = _state_in(body)
        row, col = int(body["row"]), int(body["col"])
        rng = _rng(body)
    except BAD_REQUEST_ERRORS as e:
        return _bad_request(e)
    result = drop_arrow(state, row, col, rng)
    if result is None:
        return _noop(state)
    return jsonify(_turn_to_json(result))


@app.post("/api/move")
def api_move() -> Any:
    try:
        body = _body()
        state = _state_in(body)
        src, dest = int(body["src"]), int(body["dest"])
    except BAD_REQUEST_ERRORS as e:
        return _bad_request(e)
    result = move_arrow(state, src, dest)
    if result is None:
        return _noop(state)
    return jsonify(_turn_to_json(result))


@app.post("/api/swap")
def api_swap() -> Any:
    try:
        state = _state_in(_body())
    except BAD_REQUEST_ERRORS as e:
        return _bad_request(e)
    swapped = swap_next_arrows(state)
    if swapped is None:
        return _noop(state)
    return jsonify({"ok": True, "applied": True, "state": state_to_json(swapped)})


@app.post("/api/settled")
def api_settled() -> Any:
    try:
        body = _body()
        state = _state_in(body)
        column: Optional[int] = int(body["column"]) if body.get("column") is not None else None
    except BAD_REQUEST_ERRORS as e:
        return _bad_request(e)
    released = finish_all_settles(state) if column is None else finish_settle(state, column)
    return jsonify({"ok": True, "state": state_to_json(released)})


@app.post("/api/classify")
def api_classify() -> Any:
    try:
        body = _body()
        source, dest, distance = int(body["source"]), int(body["dest"]), int(body["distance"])
    except BAD_REQUEST_ERRORS as e:
        return _bad_request(e)
    return jsonify({"ok": True, "outcome": outcome_to_json(classify(source, dest, distance))})


@app.post("/api/has_move")
def api_has_move() -> Any:
    try:
        state = _state_in(_body())
    except BAD_REQUEST_ERRORS as e:
        return _bad_request(e)
    return jsonify({"ok": True, "hasMove": has_any_move(state.board)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging(SETTINGS.debug)
    app.run(host=SETTINGS.host, port=SETTINGS.port, debug=SETTINGS.debug)
