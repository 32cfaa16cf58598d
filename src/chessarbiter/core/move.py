"""Move value objects: the seven move shapes and their annotated form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from chessarbiter.core.enums import Annotation, Color, File, MoveKind, PieceType, Rank
from chessarbiter.core.types import SquareID, make_square

PROMOTION_TYPES: Final[tuple[PieceType, ...]] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

# kind -> (needs from_sq, needs to_sq, needs promotion)
_PAYLOAD: dict[MoveKind, tuple[bool, bool, bool]] = {
    MoveKind.MOVE: (True, True, False),
    MoveKind.CAPTURE: (True, True, False),
    MoveKind.EN_PASSANT: (True, True, False),
    MoveKind.SHORT_CASTLE: (False, False, False),
    MoveKind.LONG_CASTLE: (False, False, False),
    MoveKind.PROMOTION: (False, True, True),
    MoveKind.CAPTURE_PROMOTION: (True, True, True),
}

_ANNOTATION_SUFFIX: dict[Annotation, str] = {
    Annotation.NONE: "",
    Annotation.CHECK: "+",
    Annotation.CHECKMATE: "#",
    Annotation.DRAW: "=",
}


def back_rank(color: Color) -> Rank:
    return Rank.ONE if color == Color.WHITE else Rank.EIGHT


def promotion_rank(color: Color) -> Rank:
    return Rank.EIGHT if color == Color.WHITE else Rank.ONE


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``kind`` selects which payload fields are meaningful:

    * ``MOVE`` / ``CAPTURE`` / ``EN_PASSANT``: ``from_sq`` and ``to_sq``.
    * ``SHORT_CASTLE`` / ``LONG_CASTLE``: no squares; the side to move
      determines the king and rook squares.
    * ``PROMOTION``: ``to_sq`` and ``promotion``; the origin is the square
      behind ``to_sq`` from the mover's point of view.
    * ``CAPTURE_PROMOTION``: ``from_sq``, ``to_sq`` and ``promotion``.

    Any other combination is rejected at construction.
    """

    kind: MoveKind
    from_sq: SquareID | None = None
    to_sq: SquareID | None = None
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        needs_from, needs_to, needs_promo = _PAYLOAD[self.kind]
        if (self.from_sq is not None) != needs_from:
            raise ValueError(f"{self.kind.name} move: invalid origin {self.from_sq!r}")
        if (self.to_sq is not None) != needs_to:
            raise ValueError(f"{self.kind.name} move: invalid target {self.to_sq!r}")
        if (self.promotion is not None) != needs_promo:
            raise ValueError(
                f"{self.kind.name} move: invalid promotion {self.promotion!r}"
            )
        if self.promotion is not None and self.promotion not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.promotion.name}")

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def quiet(cls, from_sq: SquareID, to_sq: SquareID) -> Move:
        return cls(MoveKind.MOVE, from_sq, to_sq)

    @classmethod
    def capture(cls, from_sq: SquareID, to_sq: SquareID) -> Move:
        return cls(MoveKind.CAPTURE, from_sq, to_sq)

    @classmethod
    def en_passant(cls, from_sq: SquareID, to_sq: SquareID) -> Move:
        return cls(MoveKind.EN_PASSANT, from_sq, to_sq)

    @classmethod
    def short_castle(cls) -> Move:
        return cls(MoveKind.SHORT_CASTLE)

    @classmethod
    def long_castle(cls) -> Move:
        return cls(MoveKind.LONG_CASTLE)

    @classmethod
    def promote(cls, to_sq: SquareID, piece_type: PieceType) -> Move:
        return cls(MoveKind.PROMOTION, None, to_sq, piece_type)

    @classmethod
    def capture_promote(
        cls, from_sq: SquareID, to_sq: SquareID, piece_type: PieceType
    ) -> Move:
        return cls(MoveKind.CAPTURE_PROMOTION, from_sq, to_sq, piece_type)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.kind in (
            MoveKind.CAPTURE,
            MoveKind.EN_PASSANT,
            MoveKind.CAPTURE_PROMOTION,
        )

    @property
    def is_castle(self) -> bool:
        return self.kind in (MoveKind.SHORT_CASTLE, MoveKind.LONG_CASTLE)

    def origin(self, color: Color) -> SquareID:
        """Square the moving piece leaves when *color* plays this move."""
        if self.from_sq is not None:
            return self.from_sq
        if self.is_castle:
            return make_square(File.E, back_rank(color))
        assert self.to_sq is not None
        return make_square(self.to_sq.file, self.to_sq.rank - color.forward)

    def destination(self, color: Color) -> SquareID:
        """Square the moving piece (the king, for castles) lands on."""
        if self.to_sq is not None:
            return self.to_sq
        king_file = File.G if self.kind == MoveKind.SHORT_CASTLE else File.C
        return make_square(king_file, back_rank(color))

    # ── Display ──────────────────────────────────────────────────────────

    def to_uci(self, color: Color) -> str:
        """UCI long-algebraic notation as played by *color*, e.g. 'e1g1'."""
        text = self.origin(color).name + self.destination(color).name
        if self.promotion is not None:
            text += _PROMO_CHARS[self.promotion]
        return text

    def __str__(self) -> str:
        if self.kind == MoveKind.SHORT_CASTLE:
            return "O-O"
        if self.kind == MoveKind.LONG_CASTLE:
            return "O-O-O"
        assert self.to_sq is not None
        sep = "x" if self.is_capture else "-"
        text = f"{self.from_sq.name}{sep}" if self.from_sq is not None else ""
        text += self.to_sq.name
        if self.promotion is not None:
            text += "=" + _PROMO_CHARS[self.promotion].upper()
        if self.kind == MoveKind.EN_PASSANT:
            text += " e.p."
        return text


@dataclass(frozen=True, slots=True)
class AnnotatedMove:
    """A legal move together with the status of the position it produces."""

    move: Move
    annotation: Annotation = Annotation.NONE

    def __str__(self) -> str:
        return f"{self.move}{_ANNOTATION_SUFFIX[self.annotation]}"
