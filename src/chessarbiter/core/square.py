"""Square - one board cell with its occupant and attack counters."""

from __future__ import annotations

from chessarbiter.core.enums import Color, SquareColor
from chessarbiter.core.piece import Piece
from chessarbiter.core.types import SquareID


class Square:
    """Mutable board cell.

    ``seen_by[color]`` counts how many of *color*'s pieces attack the cell.
    The counters are owned by the board's attack-map recompute; everything
    else only reads them through :meth:`is_seen_by` / :meth:`not_seen_by`.
    """

    __slots__ = ("_id", "_color", "_piece", "_seen_by")

    def __init__(self, sq_id: SquareID, piece: Piece | None = None) -> None:
        self._id = sq_id
        self._color = sq_id.color
        self._piece = piece
        self._seen_by: list[int] = [0, 0]

    # -- Read access ----------------------------------------------------------

    @property
    def id(self) -> SquareID:
        return self._id

    @property
    def color(self) -> SquareColor:
        return self._color

    @property
    def piece(self) -> Piece | None:
        return self._piece

    @property
    def seen_by(self) -> tuple[int, int]:
        return (self._seen_by[0], self._seen_by[1])

    def is_empty(self) -> bool:
        return self._piece is None

    def is_seen_by(self, color: Color) -> bool:
        return self._seen_by[color] > 0

    def not_seen_by(self, color: Color) -> bool:
        return self._seen_by[color] == 0

    # -- Mutation -------------------------------------------------------------

    def set_piece(self, piece: Piece) -> None:
        self._piece = piece

    def clear_piece(self) -> None:
        self._piece = None

    def clear_seen(self) -> None:
        self._seen_by[0] = 0
        self._seen_by[1] = 0

    def add_seen(self, color: Color, n: int = 1) -> None:
        self._seen_by[color] += n

    def copy(self) -> Square:
        sq = Square.__new__(Square)
        sq._id = self._id
        sq._color = self._color
        sq._piece = self._piece
        sq._seen_by = self._seen_by.copy()
        return sq

    # -- Dunder helpers -------------------------------------------------------

    def __str__(self) -> str:
        """Debug glyph: the piece's FEN letter, else ' ' (light) or '_' (dark)."""
        if self._piece is not None:
            return str(self._piece)
        return " " if self._color == SquareColor.LIGHT else "_"

    def __repr__(self) -> str:
        return (
            f"Square({self._id.name}, piece={self._piece!s}, "
            f"seen_by={self.seen_by})"
        )
