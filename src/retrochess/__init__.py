"""Two-player chess rules engine: legal moves, move application, game status."""

from retrochess.core import (
    Move,
    Position,
    all_legal_moves,
    apply_move,
    create_initial_position,
    glyph_for,
    legal_moves,
    square_to_algebraic,
)
from retrochess.game import GameSession, SessionConfig

__version__ = "0.1.0"

__all__ = [
    "GameSession",
    "Move",
    "Position",
    "SessionConfig",
    "all_legal_moves",
    "apply_move",
    "create_initial_position",
    "glyph_for",
    "legal_moves",
    "square_to_algebraic",
]
