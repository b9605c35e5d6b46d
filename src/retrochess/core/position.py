"""Position — an immutable game snapshot (board + metadata + history)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from retrochess.core.board import Board
from retrochess.core.enums import CastlingRights, Color, GameResult
from retrochess.core.move import Move
from retrochess.core.piece import Piece
from retrochess.core.types import Square

INITIAL_STATUS = "White to move"


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """A single applied move with its display annotations."""

    move: Move
    notation: str
    color: Color
    fullmove_number: int
    captured: Piece | None = None


@dataclass(frozen=True, slots=True)
class Position:
    """Full game snapshot: board, side to move, castling, en passant, clocks.

    A position is never modified after creation. Rule operations in
    :mod:`retrochess.core.rules` always return a new snapshot with its own
    board, so holding on to an old position is safe.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    history: tuple[HistoryEntry, ...] = ()
    result: GameResult | None = None
    status: str = INITIAL_STATUS

    @property
    def is_over(self) -> bool:
        return self.result is not None

    @property
    def last_move(self) -> Move | None:
        return self.history[-1].move if self.history else None

    def copy(self) -> Position:
        """Snapshot sharing nothing mutable with this one."""
        return replace(self, board=self.board.copy())


def create_initial_position() -> Position:
    """Standard starting array, white to move, all castling rights."""
    return Position()
