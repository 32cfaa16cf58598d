"""Notation package: FEN serialization and parsing."""

from chessarbiter.notation.fen import (
    STARTING_FEN,
    board_from_placement,
    castling_rights,
    placement_to_fen,
    state_from_fen,
    state_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_placement",
    "castling_rights",
    "placement_to_fen",
    "state_from_fen",
    "state_to_fen",
]
