"""GameState - board + side to move + en passant + clocks + result."""

from __future__ import annotations

import logging
from typing import Final

from chessarbiter.core.board import Board
from chessarbiter.core.enums import Annotation, Color, GameResult, MoveKind, PieceType
from chessarbiter.core.move import AnnotatedMove, Move
from chessarbiter.core.rules import Rules
from chessarbiter.core.types import SquareID, make_square

_LOGGER = logging.getLogger(__name__)

# Plies without a pawn move or capture after which the game is drawn.
FIFTY_MOVE_LIMIT: Final = 50

_PROMOTIONS = (MoveKind.PROMOTION, MoveKind.CAPTURE_PROMOTION)


class GameState:
    """Full chess game state, mutated only through :meth:`apply`.

    Legal moves come annotated (check / checkmate / stalemate draw); the
    annotation passed back to :meth:`apply` is what ends the game, so
    callers must hand in moves obtained from :meth:`legal_moves`.
    """

    __slots__ = (
        "_board",
        "_active",
        "_result",
        "_ep_target",
        "_halfmove_clock",
        "_fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        active: Color = Color.WHITE,
        result: GameResult | None = None,
        ep_target: SquareID | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        if board is None:
            board = Board.initial()
        else:
            board.recompute_attacks()
        self._board = board
        self._active = active
        self._result = result
        self._ep_target = ep_target
        self._halfmove_clock = halfmove_clock
        self._fullmove_number = fullmove_number

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def active(self) -> Color:
        return self._active

    @property
    def result(self) -> GameResult | None:
        return self._result

    @property
    def ep_target(self) -> SquareID | None:
        return self._ep_target

    @property
    def halfmove_clock(self) -> int:
        return self._halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._fullmove_number

    @property
    def is_game_over(self) -> bool:
        return self._result is not None

    # ── Rules queries ────────────────────────────────────────────────────

    def legal_moves(self) -> list[AnnotatedMove]:
        """Annotated legal moves; empty once the game has a result."""
        return Rules.legal_moves(self)

    def has_legal_moves(self) -> bool:
        return self._result is None and Rules.has_legal_moves(self)

    def pseudo_legal_moves(self) -> list[Move]:
        return Rules.pseudo_legal_moves(self)

    def is_in_check(self) -> bool:
        return Rules.is_in_check(self)

    # ── State transition ─────────────────────────────────────────────────

    def apply(self, annotated: AnnotatedMove) -> None:
        """Play a move returned by :meth:`legal_moves`."""
        if self._result is not None:
            raise ValueError("Game is already over")
        mover = self._active
        self.advance(annotated.move, annotated.annotation)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("%s played %s -> %s", mover, annotated, self.fen())
        if self._result is not None:
            _LOGGER.info(
                "Game over after %s: %s", annotated, self._result.name.lower()
            )

    def advance(self, move: Move, annotation: Annotation = Annotation.NONE) -> None:
        """Play *move* without legality or game-over checks.

        Used by :meth:`apply` and by the legality filter on scratch copies.
        """
        mover = self._active
        piece = self._board.piece_at(move.origin(mover))
        if piece is None:
            raise ValueError(f"No piece on {move.origin(mover).name}")
        is_pawn = piece.piece_type == PieceType.PAWN

        self._ep_target = None
        if is_pawn or move.is_capture or move.kind in _PROMOTIONS:
            self._halfmove_clock = 0
        else:
            self._halfmove_clock += 1

        if move.kind == MoveKind.MOVE and is_pawn:
            assert move.from_sq is not None and move.to_sq is not None
            step = move.to_sq - move.from_sq
            if abs(step.drank) == 2:
                self._ep_target = make_square(
                    move.from_sq.file, move.from_sq.rank + step.drank // 2
                )

        self._board.make_move(move, mover)

        if annotation == Annotation.CHECKMATE:
            self._result = GameResult.win_for(mover)
        elif annotation == Annotation.DRAW:
            self._result = GameResult.DRAW

        if mover == Color.BLACK:
            self._fullmove_number += 1

        if self._result is None and self._halfmove_clock >= FIFTY_MOVE_LIMIT:
            self._result = GameResult.DRAW

        self._active = mover.opposite

    # ── Utilities ────────────────────────────────────────────────────────

    def fen(self) -> str:
        from chessarbiter.notation.fen import state_to_fen

        return state_to_fen(self)

    def copy(self) -> GameState:
        """Independent copy; mutating it never affects this state."""
        state = GameState.__new__(GameState)
        state._board = self._board.copy()
        state._active = self._active
        state._result = self._result
        state._ep_target = self._ep_target
        state._halfmove_clock = self._halfmove_clock
        state._fullmove_number = self._fullmove_number
        return state

    def __repr__(self) -> str:
        return f"GameState({self.fen()!r})"


def new_game() -> GameState:
    """Game state in the standard starting position."""
    return GameState()
