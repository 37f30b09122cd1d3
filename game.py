from __future__ import annotations

# Facade module that re-exports the arrow game core.
# Used by the Flask app and tests; single-responsibility modules live under arrowgame_core/*.

from arrowgame_core.arrows import (  # noqa: F401
    ALL_ARROWS,
    BASIC_ARROWS,
    COMPOUND_ARROWS,
    MAXIMAL_ARROWS,
    BasicPartners,
    CompoundPartners,
    MaximalPartners,
    Tier,
    glyph,
    is_arrow,
    partners_of,
    tier_of,
    tier_score,
)
from arrowgame_core.board import CAPACITY, HEIGHT, WIDTH, Board, Coord  # noqa: F401
from arrowgame_core.edges import is_geometrically_valid, is_valid_pair  # noqa: F401
from arrowgame_core.actions import (  # noqa: F401
    NO_ACTION,
    ActionKind,
    ActionOutcome,
    classify,
    classify_cells,
)
from arrowgame_core.moves import MoveResult, gravity_requests, resolve_move  # noqa: F401
from arrowgame_core.gravity import (  # noqa: F401
    SettleStep,
    apply_settle_steps,
    is_column_settled,
    settle,
    settle_column,
    settle_columns,
)
from arrowgame_core.oracle import ACTION_OFFSETS, has_any_move  # noqa: F401
from arrowgame_core.state import GameState  # noqa: F401
from arrowgame_core.session import (  # noqa: F401
    TurnResult,
    drop_arrow,
    finish_all_settles,
    finish_settle,
    is_terminal,
    move_arrow,
    new_game,
    swap_next_arrows,
)
from arrowgame_core.deal import DEALT_ARROWS, deal_next_arrows, draw_arrow  # noqa: F401
from arrowgame_core.snapshot import (  # noqa: F401
    SnapshotError,
    board_from_json,
    board_to_json,
    json_to_state,
    state_to_json,
)
from arrowgame_core.config import Settings, load_settings  # noqa: F401


def main() -> None:
    # CLI driver delegated to arrowgame_core.cli
    from arrowgame_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
