from __future__ import annotations

import argparse
import json
import random
from typing import List, Optional

from .arrows import glyph
from .board import Board
from .config import configure_logging, load_settings
from .session import (
    TurnResult,
    drop_arrow,
    finish_all_settles,
    move_arrow,
    new_game,
    swap_next_arrows,
)
from .snapshot import SnapshotError, json_to_state, state_to_json
from .state import GameState

HELP = """Commands:
  drop R C          drop the next arrow into row R, column C
  move R1 C1 R2 C2  drag the arrow at (R1, C1) onto (R2, C2)
  swap              swap the next arrow with the preview
  show              print the board
  dump              print the saved-game JSON
  quit              leave the game"""


def render(state: GameState) -> str:
    return "\n".join([
        state.board.pretty(),
        f"next: {glyph(state.next_arrow)}  then: {glyph(state.next_next_arrow)}  "
        f"swaps: {state.swaps_remaining}  score: {state.score}",
    ])


def _parse_ints(parts: List[str], count: int) -> Optional[List[int]]:
    if len(parts) != count:
        return None
    try:
        return [int(p) for p in parts]
    except ValueError:
        return None


def run_command(state: GameState, line: str, rng: random.Random) -> GameState:
    """Applies one command line and returns the (possibly unchanged) state."""
    words = line.split()
    if not words:
        return state
    cmd, args = words[0].lower(), words[1:]
    result: Optional[TurnResult] = None

    if cmd == "drop":
        nums = _parse_ints(args, 2)
        if nums is None:
            print("usage: drop R C")
            return state
        result = drop_arrow(state, nums[0], nums[1], rng)
    elif cmd == "move":
        nums = _parse_ints(args, 4)
        if nums is None:
            print("usage: move R1 C1 R2 C2")
            return state
        r1, c1, r2, c2 = nums
        if not (Board.in_bounds(r1, c1) and Board.in_bounds(r2, c2)):
            print("Nothing happens.")
            return state
        result = move_arrow(state, Board.index(r1, c1), Board.index(r2, c2))
    elif cmd == "swap":
        swapped = swap_next_arrows(state)
        if swapped is None:
            print("No swaps left.")
            return state
        print(render(swapped))
        return swapped
    elif cmd == "show":
        print(render(state))
        return state
    elif cmd == "dump":
        print(json.dumps(state_to_json(state)))
        return state
    else:
        print(HELP)
        return state

    if result is None:
        print("Nothing happens.")
        return state
    if result.outcome is not None:
        print(f"{result.outcome.kind.value.capitalize()}! +{result.score_delta}")
    # No animation in a terminal: every column is released straight away.
    next_state = finish_all_settles(result.state)
    print(render(next_state))
    if next_state.game_over:
        print(f"Game over. Final score: {next_state.score}  High score: {next_state.high_score}")
    return next_state


def main() -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Arrow game in the terminal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for dealt arrows')
    parser.add_argument('--load', default=None, help='Restore a saved-game JSON file')
    parser.add_argument('--debug', action='store_true', default=settings.debug, help='Log every action')
    args = parser.parse_args()
    configure_logging(args.debug)

    rng = random.Random(args.seed)
    if args.load:
        try:
            with open(args.load, 'r', encoding='utf-8') as f:
                state = finish_all_settles(json_to_state(json.load(f), rng, settings))
        except (OSError, json.JSONDecodeError, SnapshotError) as e:
            parser.error(f"could not load {args.load}: {e}")
    else:
        state = new_game(rng, settings)

    print(render(state))
    print(HELP)
    while not state.game_over:
        try:
            line = input('> ').strip()
        except EOFError:
            break
        if line.lower() in ('quit', 'exit', 'q'):
            break
        state = run_command(state, line, rng)
