"""Tests for the per-square attack counters."""

import pytest

from chessarbiter.core.attacks import attacked_squares, recompute_attack_map
from chessarbiter.core.board import Board
from chessarbiter.core.enums import Color, PieceType
from chessarbiter.core.piece import Piece
from chessarbiter.core.types import A1, A2, A3, D4, D5, E4, E5, F5, H1, parse_square
from chessarbiter.notation import state_from_fen

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


def _names(squares) -> set[str]:
    return {sq.name for sq in squares}


class TestAttackedSquares:
    def test_empty_square(self) -> None:
        assert attacked_squares(Board(), E4) == []

    def test_pawn_attacks_diagonally_only(self) -> None:
        board = Board()
        board.place(E4, Piece(Color.WHITE, PieceType.PAWN))
        board.place(D4, Piece(Color.BLACK, PieceType.PAWN))
        assert _names(attacked_squares(board, E4)) == {"d5", "f5"}
        assert _names(attacked_squares(board, D4)) == {"c3", "e3"}

    def test_edge_pawn(self) -> None:
        board = Board()
        board.place(A2, Piece(Color.WHITE, PieceType.PAWN))
        assert _names(attacked_squares(board, A2)) == {"b3"}

    def test_ray_includes_first_blocker_of_either_color(self) -> None:
        board = Board()
        board.place(A1, Piece(Color.WHITE, PieceType.ROOK))
        board.place(A3, Piece(Color.WHITE, PieceType.PAWN))
        board.place(parse_square("c1"), Piece(Color.BLACK, PieceType.KNIGHT))
        assert _names(attacked_squares(board, A1)) == {"a2", "a3", "b1", "c1"}

    def test_king_in_corner(self) -> None:
        board = Board()
        board.place(H1, Piece(Color.WHITE, PieceType.KING))
        assert _names(attacked_squares(board, H1)) == {"g1", "g2", "h2"}


class TestAttackMap:
    def test_after_king_pawn_opening(self, play, state) -> None:
        # e5 stays (0, 0) here and (0, 1) after Nc6: the e4 pawn never covers e5.
        play(state, "e2e4")
        board = state.board
        assert board[D5].seen_by == (1, 0)
        assert board[F5].seen_by == (1, 0)
        # pawns never attack the square in front of them
        assert board[E5].seen_by == (0, 0)

    def test_after_knight_reply(self, play, state) -> None:
        play(state, "e2e4", "b8c6")
        board = state.board
        assert board[E5].seen_by == (0, 1)
        assert board[D4].seen_by == (0, 1)
        assert board[D5].seen_by == (1, 0)

    def test_blocked_ray_counts_once(self) -> None:
        board = Board()
        board.place(A1, Piece(Color.WHITE, PieceType.ROOK))
        board.place(A2, Piece(Color.WHITE, PieceType.PAWN))
        board.recompute_attacks()
        assert board[A2].seen_by == (1, 0)
        assert board[A3].seen_by == (0, 0)

    @pytest.mark.parametrize("color", list(Color))
    def test_counts_add_up_per_side(self, color: Color) -> None:
        board = state_from_fen(KIWIPETE).board
        expected = sum(
            len(attacked_squares(board, sq))
            for sq in board.all_pieces(color)
        )
        assert sum(s.seen_by[color] for s in board) == expected

    def test_recompute_is_idempotent(self) -> None:
        board = state_from_fen(KIWIPETE).board
        before = [s.seen_by for s in board]
        recompute_attack_map(board)
        assert [s.seen_by for s in board] == before
        board.recompute_attacks()
        assert [s.seen_by for s in board] == before
