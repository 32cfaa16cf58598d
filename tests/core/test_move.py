"""Tests for the Move and AnnotatedMove value objects."""

import pytest

from chessarbiter.core.enums import Annotation, Color, MoveKind, PieceType
from chessarbiter.core.move import AnnotatedMove, Move
from chessarbiter.core.types import A1, A2, D5, D6, D7, E1, E4, E5, E8, G1


class TestConstruction:
    def test_named_constructors(self) -> None:
        assert Move.quiet(E1, G1).kind == MoveKind.MOVE
        assert Move.capture(E4, D5).kind == MoveKind.CAPTURE
        assert Move.en_passant(E5, D6).kind == MoveKind.EN_PASSANT
        assert Move.short_castle().kind == MoveKind.SHORT_CASTLE
        assert Move.long_castle().kind == MoveKind.LONG_CASTLE
        assert Move.promote(E8, PieceType.QUEEN).kind == MoveKind.PROMOTION
        assert (
            Move.capture_promote(D7, E8, PieceType.KNIGHT).kind
            == MoveKind.CAPTURE_PROMOTION
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"kind": MoveKind.MOVE, "to_sq": E4},
            {"kind": MoveKind.CAPTURE, "from_sq": E4},
            {"kind": MoveKind.SHORT_CASTLE, "from_sq": E1, "to_sq": G1},
            {"kind": MoveKind.PROMOTION, "to_sq": E8},
            {"kind": MoveKind.PROMOTION, "from_sq": D7, "to_sq": E8,
             "promotion": PieceType.QUEEN},
            {"kind": MoveKind.MOVE, "from_sq": E1, "to_sq": G1,
             "promotion": PieceType.QUEEN},
        ],
    )
    def test_invalid_payload_rejected(self, kwargs) -> None:
        with pytest.raises(ValueError):
            Move(**kwargs)

    @pytest.mark.parametrize("piece_type", [PieceType.PAWN, PieceType.KING])
    def test_invalid_promotion_type(self, piece_type: PieceType) -> None:
        with pytest.raises(ValueError, match="Cannot promote"):
            Move.promote(E8, piece_type)

    def test_value_equality(self) -> None:
        assert Move.quiet(E1, G1) == Move.quiet(E1, G1)
        assert Move.quiet(E4, D5) != Move.capture(E4, D5)


class TestQueries:
    def test_is_capture(self) -> None:
        assert Move.capture(E4, D5).is_capture
        assert Move.en_passant(E5, D6).is_capture
        assert Move.capture_promote(D7, E8, PieceType.ROOK).is_capture
        assert not Move.quiet(E1, G1).is_capture
        assert not Move.promote(E8, PieceType.QUEEN).is_capture

    def test_promotion_origin_is_inferred(self) -> None:
        assert Move.promote(E8, PieceType.QUEEN).origin(Color.WHITE).name == "e7"
        assert Move.promote(A1, PieceType.QUEEN).origin(Color.BLACK) == A2

    def test_castle_squares(self) -> None:
        assert Move.short_castle().origin(Color.BLACK) == E8
        assert Move.long_castle().destination(Color.WHITE).name == "c1"


class TestDisplay:
    def test_uci(self) -> None:
        assert Move.quiet(E1, G1).to_uci(Color.WHITE) == "e1g1"
        assert Move.short_castle().to_uci(Color.WHITE) == "e1g1"
        assert Move.long_castle().to_uci(Color.BLACK) == "e8c8"
        assert Move.promote(E8, PieceType.KNIGHT).to_uci(Color.WHITE) == "e7e8n"
        assert Move.capture_promote(D7, E8, PieceType.QUEEN).to_uci(Color.WHITE) == "d7e8q"

    def test_str(self) -> None:
        assert str(Move.quiet(E1, G1)) == "e1-g1"
        assert str(Move.capture(E4, D5)) == "e4xd5"
        assert str(Move.en_passant(E5, D6)) == "e5xd6 e.p."
        assert str(Move.long_castle()) == "O-O-O"
        assert str(Move.promote(E8, PieceType.QUEEN)) == "e8=Q"

    def test_annotated_str(self) -> None:
        assert str(AnnotatedMove(Move.capture(E4, D5), Annotation.CHECK)) == "e4xd5+"
        assert str(AnnotatedMove(Move.short_castle(), Annotation.CHECKMATE)) == "O-O#"
        assert str(AnnotatedMove(Move.quiet(E1, G1))) == "e1-g1"
