"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from retrochess.core.board import Board
from retrochess.core.enums import CastlingRights, Color
from retrochess.core.notation import parse_uci
from retrochess.core.position import Position, create_initial_position
from retrochess.core.rules import apply_move, position_from_board
from retrochess.core.types import Square


@pytest.fixture
def initial() -> Position:
    """Fresh starting position."""
    return create_initial_position()


@pytest.fixture
def play() -> Callable[..., Position]:
    """Apply a line of coordinate moves (``"e2e4"``, ...) to a position."""

    def _play(position: Position, *moves: str) -> Position:
        for text in moves:
            position = apply_move(position, parse_uci(position, text))
        return position

    return _play


@pytest.fixture
def setup() -> Callable[..., Position]:
    """Build a position from an ASCII diagram, rank 8 first."""

    def _setup(
        rows: list[str],
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> Position:
        return position_from_board(
            Board.from_rows(rows),
            side_to_move=side_to_move,
            castling=castling,
            en_passant=en_passant,
        )

    return _setup
