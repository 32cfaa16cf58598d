"""Tests for Rules: legality filter, check, checkmate, stalemate annotation."""

import random

import pytest

from chessarbiter.core.enums import Annotation, Color, GameResult, PieceType
from chessarbiter.core.rules import Rules
from chessarbiter.core.types import D2, E1, E2, F2
from chessarbiter.notation import STARTING_FEN, state_from_fen


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(state_from_fen(STARTING_FEN))

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4 white is mated
        state = state_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        assert Rules.is_in_check(state)
        assert state.is_in_check()
        assert not Rules.is_in_check(state, Color.BLACK)


class TestLegalityFilter:
    def test_pinned_piece_cannot_move(self) -> None:
        state = state_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        legal = state.legal_moves()
        assert {a.move.from_sq for a in legal} == {E1}
        assert len(legal) == 4

    def test_king_cannot_retreat_along_checking_ray(self) -> None:
        # f1 is not "seen" while the king blocks the ray, but is still illegal.
        state = state_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert {a.move.to_sq for a in state.legal_moves()} == {D2, E2, F2}

    def test_try_move_leaves_original_untouched(self) -> None:
        state = state_from_fen(STARTING_FEN)
        move = state.pseudo_legal_moves()[0]
        after = Rules.try_move(state, move)
        assert after is not None
        assert state.fen() == STARTING_FEN
        assert after.active == Color.BLACK

    def test_try_move_rejects_self_check(self) -> None:
        state = state_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        bishop_moves = [
            m for m in state.pseudo_legal_moves() if m.from_sq == E2
        ]
        assert bishop_moves
        assert all(Rules.try_move(state, m) is None for m in bishop_moves)

    def test_en_passant_exposing_king_is_illegal(self) -> None:
        # Capturing e.p. would clear the fifth rank between the rook and king.
        state = state_from_fen("8/8/8/K2pP2r/8/8/8/7k w - d6 0 1")
        assert [a for a in state.legal_moves() if a.move.is_capture] == []


class TestAnnotations:
    def test_quiet_move(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert all(a.annotation == Annotation.NONE for a in state.legal_moves())

    def test_check(self, find) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/R3K3 w Q - 0 1")
        assert find(state, "a1a8").annotation == Annotation.CHECK

    def test_back_rank_mate(self, find) -> None:
        state = state_from_fen("6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1")
        assert find(state, "a1a8").annotation == Annotation.CHECKMATE
        assert find(state, "a1a7").annotation == Annotation.NONE

    def test_stalemate_is_draw(self, find) -> None:
        state = state_from_fen("7k/8/5K2/8/8/8/8/6Q1 w - - 0 1")
        assert find(state, "g1g6").annotation == Annotation.DRAW

    def test_promotion_with_check(self, find) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/p7/4K3 b - - 0 1")
        queen = find(state, "a2a1q")
        rook = find(state, "a2a1r")
        knight = find(state, "a2a1n")
        assert queen.move.promotion == PieceType.QUEEN
        assert queen.annotation == Annotation.CHECK
        assert rook.annotation == Annotation.CHECK
        assert knight.annotation == Annotation.NONE


class TestHasLegalMoves:
    def test_checkmated_side_has_none(self) -> None:
        state = state_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        assert not Rules.has_legal_moves(state)
        assert state.legal_moves() == []

    def test_stalemated_side_has_none(self) -> None:
        state = state_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert not Rules.has_legal_moves(state)
        assert not state.is_in_check()

    def test_finished_game_offers_no_moves(self, play) -> None:
        state = state_from_fen("7k/8/5K2/8/8/8/8/6Q1 w - - 0 1")
        play(state, "g1g6")
        assert state.result == GameResult.DRAW
        assert not state.has_legal_moves()
        assert state.legal_moves() == []


class TestRandomPlayoutProperties:
    @pytest.mark.parametrize("seed", [3, 5, 8])
    def test_legal_moves_and_annotations_are_consistent(self, seed: int) -> None:
        rng = random.Random(seed)
        state = state_from_fen(STARTING_FEN)
        for _ in range(40):
            legal = state.legal_moves()
            if not legal:
                break
            mover = state.active
            for annotated in legal:
                after = Rules.try_move(state, annotated.move)
                assert after is not None
                after.board.king_square(Color.WHITE)
                after.board.king_square(Color.BLACK)
                assert not Rules.is_in_check(after, mover)

                in_check = Rules.is_in_check(after)
                has_reply = Rules.has_legal_moves(after)
                if annotated.annotation == Annotation.CHECKMATE:
                    assert in_check and not has_reply
                elif annotated.annotation == Annotation.DRAW:
                    assert not in_check and not has_reply
                elif annotated.annotation == Annotation.CHECK:
                    assert in_check and has_reply
                else:
                    assert not in_check and has_reply
            state.apply(rng.choice(legal))
            if state.result is not None:
                break
