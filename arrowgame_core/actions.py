from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .arrows import (
    EMPTY,
    UNIT_DISTANCES,
    VALUE_MODULUS,
    Arrow,
    BasicPartners,
    CompoundPartners,
    MaximalPartners,
    partners_of,
    tier_score,
)
from .board import Board
from .edges import is_valid_pair


class ActionKind(Enum):
    NONE = "none"
    MERGE = "merge"
    COMBINE = "combine"
    CANCEL = "cancel"


@dataclass(frozen=True)
class ActionOutcome:
    """What happens to the source and destination cells when one arrow is
    dragged onto another. `bonus` is the number of extra swaps granted."""
    kind: ActionKind
    new_source: Arrow = EMPTY
    new_dest: Arrow = EMPTY
    score_delta: int = 0
    bonus: int = 0

    @property
    def applied(self) -> bool:
        return self.kind is not ActionKind.NONE


NO_ACTION = ActionOutcome(kind=ActionKind.NONE)


def _merge(source: Arrow) -> ActionOutcome:
    return ActionOutcome(ActionKind.MERGE, new_source=EMPTY, new_dest=source, score_delta=2)


def _combine(source: Arrow, dest: Arrow) -> ActionOutcome:
    return ActionOutcome(
        ActionKind.COMBINE,
        new_source=EMPTY,
        new_dest=(source + dest) % VALUE_MODULUS,
        score_delta=2 ** (tier_score(source) + 1),
    )


def _cancel(source: Arrow, dest: Arrow) -> ActionOutcome:
    return ActionOutcome(
        ActionKind.CANCEL,
        new_source=EMPTY,
        new_dest=EMPTY,
        score_delta=2 ** tier_score(source) + 2,
        bonus=1 if source + dest == VALUE_MODULUS else 0,
    )


def classify(source: Arrow, dest: Arrow, distance: int) -> ActionOutcome:
    """
    Decides what happens when `source` is dragged onto `dest`.

    `distance` is the signed linear distance dest_id - src_id, so positive values
    move down or right. Geometry is not checked here; see classify_cells().

    Consider the column
        [↑]
        [↓]
    Dragging ↑ down onto ↓ is classify(UP, DOWN, 5) -> Combine. Dragging ↓ up
    onto ↑ is classify(DOWN, UP, -5) -> Combine as well. Pulling them apart the
    other way round (↓ above ↑) cancels.
    """
    partners = partners_of(source)
    if isinstance(partners, BasicPartners):
        natural = partners.distance
        if dest == source and abs(distance) == abs(natural):
            return _merge(source)
        if dest == partners.inverse and distance == natural:
            return _combine(source, dest)
        if dest == partners.inverse and distance == -natural:
            return _cancel(source, dest)
    elif isinstance(partners, CompoundPartners):
        if dest == source and abs(distance) == partners.cancel_distance:
            return _cancel(source, dest)
        if dest == partners.inverse and abs(distance) in partners.combine_distances:
            return _combine(source, dest)
    elif isinstance(partners, MaximalPartners) and abs(distance) in UNIT_DISTANCES:
        if partners.self_cancelling and dest == source:
            return _cancel(source, dest)
        if partners.combines_with is not None and dest == partners.combines_with:
            return _combine(source, dest)
    return NO_ACTION


def classify_cells(board: Board, src_id: int, dest_id: int) -> ActionOutcome:
    """classify() for two cells of `board`, gated by the wrap-around check."""
    if not is_valid_pair(src_id, dest_id):
        return NO_ACTION
    return classify(board.cell(src_id), board.cell(dest_id), dest_id - src_id)
