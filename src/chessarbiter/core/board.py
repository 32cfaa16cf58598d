"""Board - 64 squares with piece placement and attack counters."""

from __future__ import annotations

from collections.abc import Iterator

from chessarbiter.core.attacks import recompute_attack_map
from chessarbiter.core.enums import Color, File, MoveKind, PieceType, Rank
from chessarbiter.core.move import Move, back_rank
from chessarbiter.core.piece import Piece
from chessarbiter.core.square import Square
from chessarbiter.core.types import ALL_SQUARES, SquareID, make_square

_BACK_RANK_LAYOUT: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# castle kind -> ((king from, king to), (rook from, rook to)) files
_CASTLE_FILES: dict[MoveKind, tuple[tuple[File, File], tuple[File, File]]] = {
    MoveKind.SHORT_CASTLE: ((File.E, File.G), (File.H, File.F)),
    MoveKind.LONG_CASTLE: ((File.E, File.C), (File.A, File.D)),
}


class Board:
    """Mutable 64-square board indexed by :class:`SquareID` (a1 first)."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Square] = [Square(sq_id) for sq_id in ALL_SQUARES]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: SquareID) -> Square:
        return self._squares[sq]

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def piece_at(self, sq: SquareID) -> Piece | None:
        return self._squares[sq].piece

    def is_empty(self, sq: SquareID) -> bool:
        return self._squares[sq].piece is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[SquareID]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            s.id
            for s in self._squares
            if s.piece is not None and s.piece.is_a(color, piece_type)
        ]

    def all_pieces(self, color: Color) -> list[SquareID]:
        """All squares occupied by *color*."""
        return [
            s.id for s in self._squares if s.piece is not None and s.piece.color == color
        ]

    def king_square(self, color: Color) -> SquareID:
        """Return the king square for *color*."""
        for s in self._squares:
            if s.piece is not None and s.piece.is_a(color, PieceType.KING):
                return s.id
        raise ValueError(f"No {color.name} king on board")

    # -- Mutation -----------------------------------------------------------

    def place(self, sq: SquareID, piece: Piece) -> None:
        """Put *piece* on *sq* without touching the attack map."""
        self._squares[sq].set_piece(piece)

    def remove(self, sq: SquareID) -> Piece | None:
        """Clear *sq* without touching the attack map; return the old piece."""
        square = self._squares[sq]
        piece = square.piece
        square.clear_piece()
        return piece

    def recompute_attacks(self) -> None:
        recompute_attack_map(self)

    def make_move(self, move: Move, color: Color) -> None:
        """Play *move* for *color* on the board and rebuild the attack map.

        Only piece placement changes here; clocks, en passant target and
        side to move belong to the game state.
        """
        kind = move.kind
        if kind in (MoveKind.MOVE, MoveKind.CAPTURE):
            assert move.from_sq is not None and move.to_sq is not None
            self._relocate(move.from_sq, move.to_sq)
        elif kind == MoveKind.EN_PASSANT:
            assert move.from_sq is not None and move.to_sq is not None
            self._relocate(move.from_sq, move.to_sq)
            self.remove(make_square(move.to_sq.file, move.from_sq.rank))
        elif kind in _CASTLE_FILES:
            rank: Rank = back_rank(color)
            (king_from, king_to), (rook_from, rook_to) = _CASTLE_FILES[kind]
            self._relocate(make_square(king_from, rank), make_square(king_to, rank))
            self._relocate(make_square(rook_from, rank), make_square(rook_to, rank))
        else:
            assert move.to_sq is not None and move.promotion is not None
            origin = move.origin(color)
            if self.remove(origin) is None:
                raise ValueError(f"No piece on {origin.name}")
            self.place(move.to_sq, Piece(color, move.promotion, moved=True))

        self.recompute_attacks()

    def _relocate(self, from_sq: SquareID, to_sq: SquareID) -> None:
        piece = self.remove(from_sq)
        if piece is None:
            raise ValueError(f"No piece on {from_sq.name}")
        self.place(to_sq, piece.mark_moved())

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._squares = [s.copy() for s in self._squares]
        return b

    def clear(self) -> None:
        for s in self._squares:
            s.clear_piece()
        self.recompute_attacks()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, every piece unmoved."""
        b = cls()
        for f in range(8):
            b.place(make_square(f, 1), Piece(Color.WHITE, PieceType.PAWN))
            b.place(make_square(f, 6), Piece(Color.BLACK, PieceType.PAWN))

        for f, pt in enumerate(_BACK_RANK_LAYOUT):
            b.place(make_square(f, 0), Piece(Color.WHITE, pt))
            b.place(make_square(f, 7), Piece(Color.BLACK, pt))
        b.recompute_attacks()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return all(
            a.piece == b.piece for a, b in zip(self._squares, other._squares)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Compact debug grid: ranks 8..1, files a..h, one glyph per square."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            rows.append("".join(str(self._squares[rank * 8 + f]) for f in range(8)))
        return "\n".join(rows) + "\n"

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[rank * 8 + file].piece
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
