"""FEN serialization and parsing."""

from __future__ import annotations

from typing import Final

from chessarbiter.core.board import Board
from chessarbiter.core.enums import Color, File, PieceType, Rank
from chessarbiter.core.move import back_rank
from chessarbiter.core.piece import Piece
from chessarbiter.core.rules import Rules
from chessarbiter.core.state import GameState
from chessarbiter.core.types import SquareID, make_square, parse_square

STARTING_FEN: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# FEN castling letter -> (color, rook file)
_CASTLING_LETTERS: Final[tuple[tuple[str, Color, File], ...]] = (
    ("K", Color.WHITE, File.H),
    ("Q", Color.WHITE, File.A),
    ("k", Color.BLACK, File.H),
    ("q", Color.BLACK, File.A),
)

_PAWN_HOME: Final[dict[Color, Rank]] = {Color.WHITE: Rank.TWO, Color.BLACK: Rank.SEVEN}


# ── Rendering ───────────────────────────────────────────────────────────────


def placement_to_fen(board: Board) -> str:
    """Piece-placement field: ranks 8..1 joined by '/'."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board.piece_at(make_square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def castling_rights(board: Board) -> str:
    """Castling field derived from the unmoved king and rooks, or '-'."""
    rights = ""
    for letter, color, rook_file in _CASTLING_LETTERS:
        rank = back_rank(color)
        king = board.piece_at(make_square(File.E, rank))
        rook = board.piece_at(make_square(rook_file, rank))
        if (
            king is not None
            and king.is_a(color, PieceType.KING)
            and king.not_moved
            and rook is not None
            and rook.is_a(color, PieceType.ROOK)
            and rook.not_moved
        ):
            rights += letter
    return rights or "-"


def state_to_fen(state: GameState) -> str:
    """Serialise a :class:`GameState` to six-field FEN."""
    side_str = "w" if state.active == Color.WHITE else "b"
    ep_str = state.ep_target.name if state.ep_target is not None else "-"
    return (
        f"{placement_to_fen(state.board)} {side_str} {castling_rights(state.board)} "
        f"{ep_str} {state.halfmove_clock} {state.fullmove_number}"
    )


# ── Parsing ─────────────────────────────────────────────────────────────────


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field. Every piece starts unmoved."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board.place(make_square(file, rank), Piece.from_char(ch))
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def state_from_fen(fen: str) -> GameState:
    """Parse a FEN string into a :class:`GameState`.

    FEN carries no move history, so ``moved`` flags are inferred: pawns off
    their home rank count as moved, and a king or corner rook counts as
    unmoved only when a castling right still refers to it. A position where
    the side not to move is already in check is rejected.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = board_from_placement(placement)
    for color in Color:
        if len(board.pieces(color, PieceType.KING)) != 1:
            raise ValueError(f"Invalid FEN: need exactly one {color.name} king")
    for sq in board.pieces(Color.WHITE, PieceType.PAWN) + board.pieces(
        Color.BLACK, PieceType.PAWN
    ):
        if sq.rank in (Rank.ONE, Rank.EIGHT):
            raise ValueError(f"Invalid FEN: pawn on back rank {sq.name}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    letters: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in "KQkq" or ch in letters:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            letters.add(ch)
    _infer_moved_flags(board, letters, castling_part)

    # 4. En passant
    ep: SquareID | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = Rank.SIX if side == Color.WHITE else Rank.THREE
        if ep.rank != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        pusher = side.opposite
        pawn_sq = make_square(ep.file, ep.rank + pusher.forward)
        pawn = board.piece_at(pawn_sq)
        if pawn is None or not pawn.is_a(pusher, PieceType.PAWN):
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        start_sq = make_square(ep.file, ep.rank - pusher.forward)
        if not (board.is_empty(ep) and board.is_empty(start_sq)):
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")

    # 5-6. Clocks (optional)
    if len(parts) > 4:
        halfmove = int(parts[4])
        if halfmove < 0:
            raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    else:
        halfmove = 0

    if len(parts) > 5:
        fullmove = int(parts[5])
        if fullmove < 1:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")
    else:
        fullmove = 1

    state = GameState(board, side, None, ep, halfmove, fullmove)
    if Rules.is_in_check(state, side.opposite):
        raise ValueError("Invalid FEN: side not to move is in check")
    return state


def _infer_moved_flags(board: Board, letters: set[str], castling_part: str) -> None:
    unmoved: set[SquareID] = set()
    for letter, color, rook_file in _CASTLING_LETTERS:
        if letter not in letters:
            continue
        rank = back_rank(color)
        king_sq = make_square(File.E, rank)
        rook_sq = make_square(rook_file, rank)
        king = board.piece_at(king_sq)
        rook = board.piece_at(rook_sq)
        if king is None or not king.is_a(color, PieceType.KING):
            raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
        if rook is None or not rook.is_a(color, PieceType.ROOK):
            raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
        unmoved.update((king_sq, rook_sq))

    for square in board:
        piece = square.piece
        if piece is None:
            continue
        if piece.piece_type in (PieceType.KING, PieceType.ROOK):
            moved = square.id not in unmoved
        elif piece.piece_type == PieceType.PAWN:
            moved = square.id.rank != _PAWN_HOME[piece.color]
        else:
            moved = False
        if moved:
            board.place(square.id, piece.mark_moved())
