"""Perft: leaf-node counts of the legal move tree.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

from __future__ import annotations

from chessarbiter.core.rules import Rules
from chessarbiter.core.state import GameState


def perft(state: GameState, depth: int) -> int:
    """Count leaf nodes at *depth* below *state*.

    Works on copies; *state* itself is left untouched. Terminal results set
    by the fifty-move counter are ignored so counts match the published
    tables for positions with high halfmove clocks.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1

    nodes = 0
    for move in Rules.pseudo_legal_moves(state):
        after = Rules.try_move(state, move)
        if after is None:
            continue
        nodes += 1 if depth == 1 else perft(after, depth - 1)
    return nodes


def divide(state: GameState, depth: int) -> dict[str, int]:
    """Per-root-move perft counts keyed by UCI move string."""
    if depth < 1:
        raise ValueError("depth must be >= 1")
    counts: dict[str, int] = {}
    for move in Rules.pseudo_legal_moves(state):
        after = Rules.try_move(state, move)
        if after is None:
            continue
        counts[move.to_uci(state.active)] = perft(after, depth - 1)
    return counts
