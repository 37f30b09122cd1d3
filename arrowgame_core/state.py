from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .arrows import Arrow
from .board import Board


@dataclass(frozen=True)
class GameState:
    """Everything a session carries between gestures. `settling` holds the columns
    whose gravity sequence is still being animated, sorted for consistent equality.
    `high_score` is the best final score seen so far, carried from game to game."""
    board: Board
    next_arrow: Arrow
    next_next_arrow: Arrow
    swaps_remaining: int = 3
    score: int = 0
    settling: Tuple[int, ...] = ()
    game_over: bool = False
    high_score: int = 0

    @property
    def arrows_placed(self) -> int:
        return self.board.occupied_count()

    def is_settling(self, column: int) -> bool:
        return column in self.settling

    def with_settling(self, columns: Tuple[int, ...]) -> 'GameState':
        return replace(self, settling=tuple(sorted(set(columns))))
