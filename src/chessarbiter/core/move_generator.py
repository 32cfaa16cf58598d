"""Pseudo-legal move generation.

Moves produced here follow piece-movement rules but may leave the mover's
king attacked; :class:`chessarbiter.core.rules.Rules` filters those out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessarbiter.core.enums import File, PieceType
from chessarbiter.core.move import PROMOTION_TYPES, Move, promotion_rank
from chessarbiter.core.piece import Piece
from chessarbiter.core.square import Square
from chessarbiter.core.types import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    SquareID,
    SquareOffset,
    make_square,
)

if TYPE_CHECKING:
    from chessarbiter.core.state import GameState


_PAWN_CAPTURE_FILES: tuple[SquareOffset, SquareOffset] = (
    SquareOffset(-1, 0),
    SquareOffset(1, 0),
)


class MoveGenerator:
    """Generates pseudo-legal moves for the side to move of a game state."""

    __slots__ = ("_state", "_board", "_color", "_opponent")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._board = state.board
        self._color = state.active
        self._opponent = state.active.opposite

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves, in board order a1..h8."""
        moves: list[Move] = []
        for square in self._board:
            piece = square.piece
            if piece is None or piece.color != self._color:
                continue
            ptype = piece.piece_type
            if ptype == PieceType.PAWN:
                self._gen_pawn(square.id, piece, moves)
            elif ptype == PieceType.KNIGHT:
                self._gen_steps(square.id, KNIGHT_OFFSETS, moves)
            elif ptype == PieceType.BISHOP:
                self._gen_sliding(square.id, BISHOP_DIRS, moves)
            elif ptype == PieceType.ROOK:
                self._gen_sliding(square.id, ROOK_DIRS, moves)
            elif ptype == PieceType.QUEEN:
                self._gen_sliding(square.id, QUEEN_DIRS, moves)
            else:
                self._gen_king(square, piece, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: SquareID, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        push = SquareOffset(0, self._color.forward)
        last_rank = promotion_rank(self._color)

        one_step = sq.add_offset(push)
        if one_step is None:
            return

        if board.is_empty(one_step):
            if one_step.rank == last_rank:
                for pt in PROMOTION_TYPES:
                    moves.append(Move.promote(one_step, pt))
            else:
                moves.append(Move.quiet(sq, one_step))
                if piece.not_moved:
                    two_step = one_step.add_offset(push)
                    if two_step is not None and board.is_empty(two_step):
                        moves.append(Move.quiet(sq, two_step))

        ep_target = self._state.ep_target
        for side in _PAWN_CAPTURE_FILES:
            cap_sq = one_step.add_offset(side)
            if cap_sq is None:
                continue
            target = board.piece_at(cap_sq)
            if target is not None:
                if target.color != self._color:
                    if cap_sq.rank == last_rank:
                        for pt in PROMOTION_TYPES:
                            moves.append(Move.capture_promote(sq, cap_sq, pt))
                    else:
                        moves.append(Move.capture(sq, cap_sq))
            elif cap_sq == ep_target:
                moves.append(Move.en_passant(sq, cap_sq))

    def _gen_steps(
        self,
        sq: SquareID,
        offsets: tuple[SquareOffset, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for offset in offsets:
            to_sq = sq.add_offset(offset)
            if to_sq is None:
                continue
            target = board.piece_at(to_sq)
            if target is None:
                moves.append(Move.quiet(sq, to_sq))
            elif target.color != self._color:
                moves.append(Move.capture(sq, to_sq))

    def _gen_sliding(
        self,
        sq: SquareID,
        directions: tuple[SquareOffset, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for direction in directions:
            to_sq = sq.add_offset(direction)
            while to_sq is not None:
                target = board.piece_at(to_sq)
                if target is None:
                    moves.append(Move.quiet(sq, to_sq))
                    to_sq = to_sq.add_offset(direction)
                    continue
                if target.color != self._color:
                    moves.append(Move.capture(sq, to_sq))
                break

    def _gen_king(self, square: Square, king: Piece, moves: list[Move]) -> None:
        board = self._board
        sq = square.id
        for offset in KING_OFFSETS:
            to_sq = sq.add_offset(offset)
            if to_sq is None:
                continue
            dest = board[to_sq]
            # Squares the opponent already sees are pruned early.
            if dest.is_seen_by(self._opponent):
                continue
            target = dest.piece
            if target is None:
                moves.append(Move.quiet(sq, to_sq))
            elif target.color != self._color:
                moves.append(Move.capture(sq, to_sq))

        if king.not_moved and square.not_seen_by(self._opponent):
            self._gen_castling(sq, moves)

    def _gen_castling(self, king_sq: SquareID, moves: list[Move]) -> None:
        rank = king_sq.rank

        if self._unmoved_rook_on(make_square(File.H, rank)) and self._path_clear(
            rank, safe=(File.F, File.G)
        ):
            moves.append(Move.short_castle())

        if self._unmoved_rook_on(make_square(File.A, rank)) and self._path_clear(
            rank, safe=(File.D, File.C), empty=(File.B,)
        ):
            moves.append(Move.long_castle())

    def _unmoved_rook_on(self, sq: SquareID) -> bool:
        rook = self._board.piece_at(sq)
        return (
            rook is not None
            and rook.is_a(self._color, PieceType.ROOK)
            and rook.not_moved
        )

    def _path_clear(
        self,
        rank: int,
        safe: tuple[File, ...],
        empty: tuple[File, ...] = (),
    ) -> bool:
        """*safe* files must be empty and unattacked, *empty* files just empty."""
        board = self._board
        for file in safe:
            square = board[make_square(file, rank)]
            if not square.is_empty() or square.is_seen_by(self._opponent):
                return False
        return all(board.is_empty(make_square(file, rank)) for file in empty)

