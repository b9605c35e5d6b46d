"""Simplified move notation and move-list helpers.

The notation is close to SAN but never disambiguates between two like
pieces that can reach the same square; it is meant for display only.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from retrochess.core.enums import Color, PieceType
from retrochess.core.move import Move, promotion_from_char
from retrochess.core.piece import PIECE_LETTERS
from retrochess.core.types import FILES, parse_square, square_to_algebraic

if TYPE_CHECKING:
    from retrochess.core.position import HistoryEntry, Position


@dataclass(frozen=True, slots=True)
class MoveRow:
    """One numbered line of the move list."""

    number: int
    white: str
    black: str = ""


def move_to_notation(
    position: Position,
    move: Move,
    *,
    check: bool = False,
    mate: bool = False,
) -> str:
    """Notation for a legal *move* given the *position* before the move."""
    board = position.board
    piece = board[move.from_sq]
    if piece is None:
        return ""

    if move.is_castle:
        text = "O-O" if move.to_sq.file > move.from_sq.file else "O-O-O"
    else:
        is_capture = board[move.to_sq] is not None or move.is_en_passant
        text = ""
        if piece.piece_type == PieceType.PAWN:
            if is_capture:
                text += FILES[move.from_sq.file]
        else:
            text += PIECE_LETTERS[piece.piece_type]

        if is_capture:
            text += "x"
        text += square_to_algebraic(move.to_sq)

        if move.promotion is not None:
            text += "=" + PIECE_LETTERS[move.promotion]

    if mate:
        text += "#"
    elif check:
        text += "+"
    return text


def parse_uci(position: Position, text: str) -> Move:
    """Find the legal move written as ``e2e4`` / ``e7e8n`` in *position*.

    A promotion without a suffix letter resolves to the queen.
    """
    from retrochess.core.rules import legal_moves

    clean = text.strip().lower()
    if len(clean) not in (4, 5):
        raise ValueError(f"Invalid move text: {text!r}")

    from_sq = parse_square(clean[:2])
    to_sq = parse_square(clean[2:4])
    promotion = promotion_from_char(clean[4]) if len(clean) == 5 else None

    candidates = [m for m in legal_moves(position, from_sq) if m.to_sq == to_sq]
    if candidates and candidates[0].promotion is not None:
        wanted = promotion if promotion is not None else PieceType.QUEEN
        candidates = [m for m in candidates if m.promotion == wanted]
    elif promotion is not None:
        candidates = []

    if not candidates:
        raise ValueError(f"Illegal move: {text}")
    return candidates[0]


def history_rows(history: Sequence[HistoryEntry]) -> list[MoveRow]:
    """Pair up history entries into numbered white / black rows.

    A game set up with black to move opens with a ``"..."`` placeholder
    in the white column.
    """
    rows: list[MoveRow] = []
    for entry in history:
        if entry.color == Color.WHITE:
            rows.append(MoveRow(entry.fullmove_number, entry.notation))
        elif rows and rows[-1].number == entry.fullmove_number and not rows[-1].black:
            rows[-1] = replace(rows[-1], black=entry.notation)
        else:
            rows.append(MoveRow(entry.fullmove_number, "...", entry.notation))
    return rows
