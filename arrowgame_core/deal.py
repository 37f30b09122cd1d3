from __future__ import annotations

import random
from typing import Sequence, Tuple, Union

from .arrows import DOWN, DOWN_LEFT, DOWN_RIGHT, LEFT, RIGHT, UP, UP_LEFT, UP_RIGHT, Arrow

# Only single-direction arrows are ever dealt.
DEALT_ARROWS: Tuple[Arrow, ...] = (UP, UP_RIGHT, RIGHT, DOWN_RIGHT, DOWN, DOWN_LEFT, LEFT, UP_LEFT)

RngLike = Union[random.Random, int, None]


def make_rng(seed: RngLike = None) -> random.Random:
    """Accepts an existing Random, a seed, or None (system entropy)."""
    if isinstance(seed, random.Random):
        return seed
    return random.Random(seed)


def draw_arrow(rng: random.Random, choices: Sequence[Arrow] = DEALT_ARROWS) -> Arrow:
    """Draws one new arrow for the preview queue."""
    return rng.choice(tuple(choices))


def deal_next_arrows(seed: RngLike = None) -> Tuple[Arrow, Arrow]:
    """Deals the (next, next-next) pair shown at the start of a game."""
    rng = make_rng(seed)
    return draw_arrow(rng), draw_arrow(rng)
