"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessarbiter.core import new_game

    state = new_game()
    for annotated in state.legal_moves():
        print(annotated)
"""

from chessarbiter.core.board import Board
from chessarbiter.core.enums import (
    Annotation,
    Color,
    File,
    GameResult,
    MoveKind,
    PieceType,
    Rank,
    SquareColor,
)
from chessarbiter.core.move import PROMOTION_TYPES, AnnotatedMove, Move
from chessarbiter.core.move_generator import MoveGenerator
from chessarbiter.core.perft import divide, perft
from chessarbiter.core.piece import Piece
from chessarbiter.core.rules import Rules
from chessarbiter.core.square import Square
from chessarbiter.core.state import FIFTY_MOVE_LIMIT, GameState, new_game
from chessarbiter.core.types import (
    SquareID,
    SquareOffset,
    make_square,
    parse_square,
)

__all__ = [
    # Enums
    "Annotation",
    "Color",
    "File",
    "GameResult",
    "MoveKind",
    "PieceType",
    "Rank",
    "SquareColor",
    # Geometry
    "SquareID",
    "SquareOffset",
    "make_square",
    "parse_square",
    # Domain objects
    "AnnotatedMove",
    "Board",
    "GameState",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "Square",
    # Constants
    "FIFTY_MOVE_LIMIT",
    "PROMOTION_TYPES",
    # Entry points
    "divide",
    "new_game",
    "perft",
]
