"""Legality filter and move annotation: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessarbiter.core.enums import Annotation, Color
from chessarbiter.core.move import AnnotatedMove, Move
from chessarbiter.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessarbiter.core.state import GameState


_ANNOTATIONS: dict[tuple[bool, bool], Annotation] = {
    # (in_check, has_reply)
    (True, True): Annotation.CHECK,
    (True, False): Annotation.CHECKMATE,
    (False, True): Annotation.NONE,
    (False, False): Annotation.DRAW,
}


class Rules:
    """Static rule-checker that operates on a :class:`GameState`.

    Legality is decided by playing each candidate on a copy of the state and
    reading the copy's attack map; the caller's state is never touched.
    """

    @staticmethod
    def is_in_check(state: GameState, color: Color | None = None) -> bool:
        """Whether *color*'s king (default: side to move) is attacked."""
        if color is None:
            color = state.active
        board = state.board
        return board[board.king_square(color)].is_seen_by(color.opposite)

    @staticmethod
    def try_move(state: GameState, move: Move) -> GameState | None:
        """The state after *move*, or ``None`` if it leaves the mover in check."""
        mover = state.active
        after = state.copy()
        after.advance(move)
        if Rules.is_in_check(after, mover):
            return None
        return after

    @staticmethod
    def pseudo_legal_moves(state: GameState) -> list[Move]:
        return MoveGenerator(state).generate_pseudo_legal_moves()

    @staticmethod
    def legal_moves(state: GameState) -> list[AnnotatedMove]:
        """All legal moves for the side to move, each with its annotation."""
        if state.result is not None:
            return []
        legal: list[AnnotatedMove] = []
        for move in Rules.pseudo_legal_moves(state):
            after = Rules.try_move(state, move)
            if after is not None:
                legal.append(AnnotatedMove(move, Rules.annotate(after)))
        return legal

    @staticmethod
    def has_legal_moves(state: GameState) -> bool:
        """Whether the side to move has any legal move, ignoring ``result``.

        Stops at the first legal move found.
        """
        return any(
            Rules.try_move(state, move) is not None
            for move in Rules.pseudo_legal_moves(state)
        )

    @staticmethod
    def annotate(after: GameState) -> Annotation:
        """Annotation for the move that produced *after*.

        *after* has the opponent of the mover to move.
        """
        in_check = Rules.is_in_check(after)
        has_reply = Rules.has_legal_moves(after)
        return _ANNOTATIONS[(in_check, has_reply)]
