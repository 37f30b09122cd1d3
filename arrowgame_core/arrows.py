from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple, Union

Arrow = int  # 0 is an empty cell

EMPTY: Arrow = 0

# Basic (one direction)
UP: Arrow = 1
UP_RIGHT: Arrow = 2
RIGHT: Arrow = 3
DOWN_RIGHT: Arrow = 4
DOWN: Arrow = 5
DOWN_LEFT: Arrow = 7
LEFT: Arrow = 8
UP_LEFT: Arrow = 10

# Compound (two directions)
VERTICAL: Arrow = 6
DIAGONAL_NE: Arrow = 9
HORIZONTAL: Arrow = 11
DIAGONAL_NW: Arrow = 14

# Maximal
PLUS: Arrow = 17
CROSS: Arrow = 23
STAR: Arrow = 40

# Combine results wrap at this value; two STARs sum to exactly this.
VALUE_MODULUS = 80

# Unit offsets (orthogonal and diagonal) on a width-5 grid.
UNIT_DISTANCES: FrozenSet[int] = frozenset({1, 4, 5, 6})


class Tier(Enum):
    EMPTY = 0
    BASIC = 1
    COMPOUND = 2
    MAXIMAL = 3


@dataclass(frozen=True)
class BasicPartners:
    """A single-direction arrow: one inverse, one signed natural distance."""
    inverse: Arrow
    distance: int


@dataclass(frozen=True)
class CompoundPartners:
    """A two-direction arrow: combines with its inverse at several distances,
    cancels against itself at exactly one."""
    inverse: Arrow
    combine_distances: FrozenSet[int]
    cancel_distance: int


@dataclass(frozen=True)
class MaximalPartners:
    """A terminal arrow. `combines_with` is the other half of the combine pair,
    `self_cancelling` marks the value that cancels against itself."""
    combines_with: Optional[Arrow]
    self_cancelling: bool


Partners = Union[BasicPartners, CompoundPartners, MaximalPartners]


_TABLE: Dict[Arrow, Tuple[Tier, Partners]] = {
    UP: (Tier.BASIC, BasicPartners(inverse=DOWN, distance=5)),
    DOWN: (Tier.BASIC, BasicPartners(inverse=UP, distance=-5)),
    LEFT: (Tier.BASIC, BasicPartners(inverse=RIGHT, distance=1)),
    RIGHT: (Tier.BASIC, BasicPartners(inverse=LEFT, distance=-1)),
    UP_RIGHT: (Tier.BASIC, BasicPartners(inverse=DOWN_LEFT, distance=4)),
    DOWN_LEFT: (Tier.BASIC, BasicPartners(inverse=UP_RIGHT, distance=-4)),
    UP_LEFT: (Tier.BASIC, BasicPartners(inverse=DOWN_RIGHT, distance=6)),
    DOWN_RIGHT: (Tier.BASIC, BasicPartners(inverse=UP_LEFT, distance=-6)),
    HORIZONTAL: (Tier.COMPOUND, CompoundPartners(VERTICAL, frozenset({1, 5}), 1)),
    VERTICAL: (Tier.COMPOUND, CompoundPartners(HORIZONTAL, frozenset({1, 5}), 5)),
    DIAGONAL_NE: (Tier.COMPOUND, CompoundPartners(DIAGONAL_NW, frozenset({4, 6}), 4)),
    DIAGONAL_NW: (Tier.COMPOUND, CompoundPartners(DIAGONAL_NE, frozenset({4, 6}), 6)),
    PLUS: (Tier.MAXIMAL, MaximalPartners(combines_with=CROSS, self_cancelling=False)),
    CROSS: (Tier.MAXIMAL, MaximalPartners(combines_with=PLUS, self_cancelling=False)),
    STAR: (Tier.MAXIMAL, MaximalPartners(combines_with=None, self_cancelling=True)),
}

BASIC_ARROWS: Tuple[Arrow, ...] = (UP, DOWN, LEFT, RIGHT, UP_LEFT, DOWN_RIGHT, UP_RIGHT, DOWN_LEFT)
COMPOUND_ARROWS: Tuple[Arrow, ...] = (DIAGONAL_NW, DIAGONAL_NE, VERTICAL, HORIZONTAL)
MAXIMAL_ARROWS: Tuple[Arrow, ...] = (PLUS, CROSS, STAR)
ALL_ARROWS: Tuple[Arrow, ...] = BASIC_ARROWS + COMPOUND_ARROWS + MAXIMAL_ARROWS

GLYPHS: Dict[Arrow, str] = {
    UP: "↑", DOWN: "↓", LEFT: "←", RIGHT: "→",
    UP_LEFT: "↖", DOWN_RIGHT: "↘", UP_RIGHT: "↗", DOWN_LEFT: "↙",
    DIAGONAL_NW: "⤡", DIAGONAL_NE: "⤢", VERTICAL: "⬍", HORIZONTAL: "⇿",
    PLUS: "+", CROSS: "x", STAR: "*",
}


def is_arrow(value: object) -> bool:
    """True for any value listed in the arrow table (never for EMPTY)."""
    return isinstance(value, int) and not isinstance(value, bool) and value in _TABLE


def tier_of(value: Arrow) -> Tier:
    """Classifies an arrow value. Anything outside the table is Tier.EMPTY."""
    entry = _TABLE.get(value) if is_arrow(value) else None
    return entry[0] if entry else Tier.EMPTY


def partners_of(value: Arrow) -> Optional[Partners]:
    """Returns the partner payload for `value`, or None for empty/unknown values."""
    entry = _TABLE.get(value) if is_arrow(value) else None
    return entry[1] if entry else None


def tier_score(value: Arrow) -> int:
    """Exponent used by the scoring curve for an action started by `value`."""
    tier = tier_of(value)
    if tier is Tier.BASIC:
        return 2
    if tier is Tier.COMPOUND:
        return 4
    if value == STAR:
        return 9
    return 6


def glyph(value: Arrow) -> str:
    return GLYPHS.get(value, "·")
