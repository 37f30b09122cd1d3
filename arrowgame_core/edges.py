from __future__ import annotations

from .board import WIDTH, Board, Coord


def is_geometrically_valid(src: Coord, dest: Coord, distance: int) -> bool:
    """
    Rejects pairs that only look adjacent because cell ids are linear.

    A linear distance of WIDTH + 1 matches a true diagonal, e.g. (1,0)->(2,1),
    but also (0,4)->(2,0), which wraps past the end of a row. The same holds for
    horizontal moves (distance 1 across a row boundary) and anti-diagonals
    (distance WIDTH - 1). Vertical moves cannot wrap.
    """
    dist = abs(distance)
    if dist == WIDTH:
        return True
    if dist == 1:
        return src[0] == dest[0]
    if dist in (WIDTH - 1, WIDTH + 1):
        return abs(src[0] - dest[0]) == 1
    return True


def is_valid_pair(src_id: int, dest_id: int) -> bool:
    """Both ids on the board and the pair passes the wrap-around check."""
    if not (Board.valid_id(src_id) and Board.valid_id(dest_id)):
        return False
    return is_geometrically_valid(Board.rowcol(src_id), Board.rowcol(dest_id), dest_id - src_id)
