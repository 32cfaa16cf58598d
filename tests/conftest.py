"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessarbiter.core.move import AnnotatedMove
from chessarbiter.core.state import GameState, new_game

Play = Callable[..., AnnotatedMove]


def find_move(state: GameState, uci: str) -> AnnotatedMove:
    """The annotated legal move whose UCI form is *uci*."""
    for annotated in state.legal_moves():
        if annotated.move.to_uci(state.active) == uci:
            return annotated
    raise AssertionError(f"{uci} is not legal in {state.fen()}")


@pytest.fixture
def state() -> GameState:
    """Fresh game in the starting position."""
    return new_game()


@pytest.fixture
def play() -> Play:
    """Apply UCI moves in order; returns the last annotated move played."""

    def _play(state: GameState, *moves: str) -> AnnotatedMove:
        played: AnnotatedMove | None = None
        for uci in moves:
            played = find_move(state, uci)
            state.apply(played)
        assert played is not None
        return played

    return _play


@pytest.fixture
def find() -> Callable[[GameState, str], AnnotatedMove]:
    """Look up a legal move by UCI without playing it."""
    return find_move
