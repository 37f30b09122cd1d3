from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .arrows import EMPTY, Arrow, glyph, is_arrow

Coord = Tuple[int, int]  # (row, col)

WIDTH = 5
HEIGHT = 5
CAPACITY = WIDTH * HEIGHT


@dataclass(frozen=True)
class Board:
    """The 5x5 grid of arrow values, stored row-major (cell id = row * 5 + col)."""
    cells: Tuple[Arrow, ...] = (EMPTY,) * CAPACITY

    def __post_init__(self) -> None:
        if len(self.cells) != CAPACITY:
            raise ValueError(f"Board needs exactly {CAPACITY} cells, got {len(self.cells)}")

    @classmethod
    def from_values(cls, values: Iterable[object]) -> 'Board':
        """Builds a board from untrusted values; anything that is not a known arrow
        becomes EMPTY. Missing trailing cells are empty, extras are ignored."""
        coerced: List[Arrow] = []
        for v in values:
            if len(coerced) == CAPACITY:
                break
            coerced.append(v if is_arrow(v) else EMPTY)  # type: ignore[arg-type]
        coerced.extend([EMPTY] * (CAPACITY - len(coerced)))
        return cls(cells=tuple(coerced))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        return cls.from_values(v for row in rows for v in row)

    @staticmethod
    def index(r: int, c: int) -> int:
        """Calculates the linear cell id for a given row and column."""
        return r * WIDTH + c

    @staticmethod
    def rowcol(cell_id: int) -> Coord:
        """Inverse of index()."""
        return divmod(cell_id, WIDTH)

    @staticmethod
    def in_bounds(r: int, c: int) -> bool:
        return 0 <= r < HEIGHT and 0 <= c < WIDTH

    @staticmethod
    def valid_id(cell_id: int) -> bool:
        return 0 <= cell_id < CAPACITY

    def at(self, r: int, c: int) -> Arrow:
        return self.cells[self.index(r, c)]

    def cell(self, cell_id: int) -> Arrow:
        return self.cells[cell_id]

    def is_empty(self, cell_id: int) -> bool:
        return self.cells[cell_id] == EMPTY

    def column(self, c: int) -> List[Arrow]:
        """Values of column `c`, top row first."""
        return [self.at(r, c) for r in range(HEIGHT)]

    def occupied_count(self) -> int:
        return sum(1 for v in self.cells if v != EMPTY)

    def is_full(self) -> bool:
        return self.occupied_count() == CAPACITY

    def with_cells(self, updates: Dict[int, Arrow]) -> 'Board':
        """Returns a copy with the given cell ids replaced."""
        cells = list(self.cells)
        for cell_id, value in updates.items():
            cells[cell_id] = value
        return Board(cells=tuple(cells))

    def pretty(self) -> str:
        """Generates a human-readable grid of arrow glyphs, with row/column labels."""
        lines: List[str] = ["  " + " ".join(str(c) for c in range(WIDTH))]
        for r in range(HEIGHT):
            row = [glyph(self.at(r, c)) for c in range(WIDTH)]
            lines.append(f"{r} " + " ".join(row))
        return "\n".join(lines)
