"""Board geometry: square identities, offsets and direction tables.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from chessarbiter.core.enums import File, Rank, SquareColor


@dataclass(frozen=True, slots=True)
class SquareOffset:
    """Signed (file, rank) displacement."""

    dfile: int
    drank: int

    def __neg__(self) -> SquareOffset:
        return SquareOffset(-self.dfile, -self.drank)


@dataclass(frozen=True, slots=True, order=True)
class SquareID:
    """Identity of one of the 64 squares as an ordered (file, rank) pair."""

    file: File
    rank: Rank

    @classmethod
    def from_index(cls, index: int) -> SquareID:
        """Inverse of :attr:`index`, e.g. 28 → e4."""
        if not 0 <= index < 64:
            raise ValueError(f"Invalid square index: {index}")
        return _SQUARES[index]

    @property
    def index(self) -> int:
        return self.rank * 8 + self.file

    def __index__(self) -> int:
        return self.rank * 8 + self.file

    @property
    def color(self) -> SquareColor:
        return SquareColor((self.file + self.rank) % 2)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. 'e4'."""
        return "abcdefgh"[self.file] + str(self.rank + 1)

    def add_offset(self, offset: SquareOffset) -> SquareID | None:
        """Square reached by *offset*, or ``None`` when it leaves the board."""
        file_idx = self.file + offset.dfile
        rank_idx = self.rank + offset.drank
        if 0 <= file_idx < 8 and 0 <= rank_idx < 8:
            return _SQUARES[rank_idx * 8 + file_idx]
        return None

    def __sub__(self, other: SquareID) -> SquareOffset:
        return SquareOffset(self.file - other.file, self.rank - other.rank)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"SquareID({self.name})"


_SQUARES: Final[tuple[SquareID, ...]] = tuple(
    SquareID(File(i % 8), Rank(i // 8)) for i in range(64)
)

ALL_SQUARES: Final = _SQUARES


def make_square(file: int, rank: int) -> SquareID:
    """Square from file (0–7) and rank (0–7)."""
    return SquareID.from_index(rank * 8 + file)


def parse_square(name: str) -> SquareID:
    """Parse square name, e.g. 'e4' → e4."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


# ── Direction tables ────────────────────────────────────────────────────────

KNIGHT_OFFSETS: Final[tuple[SquareOffset, ...]] = (
    SquareOffset(-2, -1),
    SquareOffset(-2, 1),
    SquareOffset(-1, -2),
    SquareOffset(-1, 2),
    SquareOffset(1, -2),
    SquareOffset(1, 2),
    SquareOffset(2, -1),
    SquareOffset(2, 1),
)

KING_OFFSETS: Final[tuple[SquareOffset, ...]] = (
    SquareOffset(-1, -1),
    SquareOffset(-1, 0),
    SquareOffset(-1, 1),
    SquareOffset(0, -1),
    SquareOffset(0, 1),
    SquareOffset(1, -1),
    SquareOffset(1, 0),
    SquareOffset(1, 1),
)

BISHOP_DIRS: Final[tuple[SquareOffset, ...]] = (
    SquareOffset(-1, -1),
    SquareOffset(-1, 1),
    SquareOffset(1, -1),
    SquareOffset(1, 1),
)
ROOK_DIRS: Final[tuple[SquareOffset, ...]] = (
    SquareOffset(-1, 0),
    SquareOffset(1, 0),
    SquareOffset(0, -1),
    SquareOffset(0, 1),
)
QUEEN_DIRS: Final[tuple[SquareOffset, ...]] = BISHOP_DIRS + ROOK_DIRS


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = _SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = _SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = _SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = _SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = _SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = _SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = _SQUARES[56:64]
