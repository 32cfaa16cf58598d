"""chessarbiter — a chess rules engine.

Represents positions, enumerates annotated legal moves, applies them, and
renders the result as FEN::

    from chessarbiter import new_game

    state = new_game()
    state.apply(state.legal_moves()[0])
    print(state.fen())
"""

from chessarbiter.core import (
    AnnotatedMove,
    Annotation,
    Board,
    Color,
    GameResult,
    GameState,
    Move,
    MoveKind,
    Piece,
    PieceType,
    SquareID,
    new_game,
    parse_square,
)
from chessarbiter.notation import STARTING_FEN, state_from_fen, state_to_fen

__all__ = [
    "AnnotatedMove",
    "Annotation",
    "Board",
    "Color",
    "GameResult",
    "GameState",
    "Move",
    "MoveKind",
    "Piece",
    "PieceType",
    "STARTING_FEN",
    "SquareID",
    "new_game",
    "parse_square",
    "state_from_fen",
    "state_to_fen",
]
