"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from retrochess.core import apply_move, create_initial_position, legal_moves
    from retrochess.core.types import E2

    pos = create_initial_position()
    for move in legal_moves(pos, E2):
        print(move)
    pos = apply_move(pos, legal_moves(pos, E2)[-1])
"""

from retrochess.core.attacks import is_attacked, is_in_check
from retrochess.core.board import Board
from retrochess.core.enums import CastlingRights, Color, GameResult, PieceType
from retrochess.core.move import Move
from retrochess.core.move_generator import MoveGenerator, pseudo_moves
from retrochess.core.notation import (
    MoveRow,
    history_rows,
    move_to_notation,
    parse_uci,
)
from retrochess.core.piece import Piece, glyph_for
from retrochess.core.position import HistoryEntry, Position, create_initial_position
from retrochess.core.rules import (
    ILLEGAL_MOVE_STATUS,
    Rules,
    all_legal_moves,
    apply_move,
    legal_moves,
    position_from_board,
)
from retrochess.core.types import (
    Square,
    parse_square,
    square_name,
    square_to_algebraic,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    "square_to_algebraic",
    # Domain objects
    "Board",
    "HistoryEntry",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "glyph_for",
    # Rules
    "ILLEGAL_MOVE_STATUS",
    "all_legal_moves",
    "apply_move",
    "create_initial_position",
    "is_attacked",
    "is_in_check",
    "legal_moves",
    "position_from_board",
    "pseudo_moves",
    # Notation
    "MoveRow",
    "history_rows",
    "move_to_notation",
    "parse_uci",
]
