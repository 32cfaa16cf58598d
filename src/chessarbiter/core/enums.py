"""Core enumerations for the chess rules domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. Doubles as the index into a square's seen-by counters."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this color advance in."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class File(IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7

    def __str__(self) -> str:
        return str(self.value + 1)


class SquareColor(IntEnum):
    """Fixed shade of a board cell; a1 is dark."""

    DARK = 0
    LIGHT = 1


class MoveKind(IntEnum):
    """The seven move shapes."""

    MOVE = 0
    CAPTURE = 1
    EN_PASSANT = 2
    SHORT_CASTLE = 3
    LONG_CASTLE = 4
    PROMOTION = 5
    CAPTURE_PROMOTION = 6


class Annotation(IntEnum):
    """Status of the position a legal move leads to."""

    NONE = 0
    CHECK = 1
    CHECKMATE = 2
    DRAW = 3


class GameResult(IntEnum):
    """Outcome of a finished game."""

    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS
