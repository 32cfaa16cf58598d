"""Attack map: per-square counts of the pieces of each side that attack it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessarbiter.core.enums import Color, PieceType
from chessarbiter.core.types import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    SquareID,
    SquareOffset,
)

if TYPE_CHECKING:
    from chessarbiter.core.board import Board


_PAWN_ATTACKS: tuple[tuple[SquareOffset, ...], tuple[SquareOffset, ...]] = (
    (SquareOffset(-1, 1), SquareOffset(1, 1)),
    (SquareOffset(-1, -1), SquareOffset(1, -1)),
)

_SLIDER_DIRS: dict[PieceType, tuple[SquareOffset, ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


def attacked_squares(board: Board, sq_id: SquareID) -> list[SquareID]:
    """Squares attacked by the piece on *sq_id* (empty list if none).

    Sliding rays stop after the first occupied square, which is itself
    included whichever side owns it.
    """
    piece = board[sq_id].piece
    if piece is None:
        return []

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        offsets = _PAWN_ATTACKS[piece.color]
    elif ptype == PieceType.KNIGHT:
        offsets = KNIGHT_OFFSETS
    elif ptype == PieceType.KING:
        offsets = KING_OFFSETS
    else:
        return _ray_targets(board, sq_id, _SLIDER_DIRS[ptype])

    targets: list[SquareID] = []
    for offset in offsets:
        target = sq_id.add_offset(offset)
        if target is not None:
            targets.append(target)
    return targets


def _ray_targets(
    board: Board, origin: SquareID, directions: tuple[SquareOffset, ...]
) -> list[SquareID]:
    targets: list[SquareID] = []
    for direction in directions:
        target = origin.add_offset(direction)
        while target is not None:
            targets.append(target)
            if not board[target].is_empty():
                break
            target = target.add_offset(direction)
    return targets


def recompute_attack_map(board: Board) -> None:
    """Rebuild every square's seen-by counters from the piece placement."""
    for square in board:
        square.clear_seen()

    for square in board:
        piece = square.piece
        if piece is None:
            continue
        color: Color = piece.color
        for target in attacked_squares(board, square.id):
            board[target].add_seen(color)
