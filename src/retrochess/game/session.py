"""GameSession — holds the current position of a local two-player game.

Front ends ask the session which squares a piece may move to, hand it the
chosen move and read back the new position. Every accepted move replaces
the current :class:`Position` snapshot wholesale.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from retrochess.core.enums import Color, GameResult
from retrochess.core.move import Move
from retrochess.core.notation import MoveRow, history_rows
from retrochess.core.position import HistoryEntry, Position, create_initial_position
from retrochess.core.rules import ILLEGAL_MOVE_STATUS, apply_move, legal_moves
from retrochess.core.types import Square
from retrochess.game.config import SessionConfig

_LOGGER = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Session states."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[HistoryEntry, Position], None]
IllegalMoveCallback = Callable[[Move, Position], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_illegal_move: list[IllegalMoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """One local game between two people sharing a board.

    Single-threaded: call every method from the thread that owns the UI.
    """

    __slots__ = ("_config", "_position", "_undo_stack", "events")

    def __init__(self, config: SessionConfig | None = None) -> None:
        self._config = config if config is not None else SessionConfig()
        self._position = create_initial_position()
        self._undo_stack: list[Position] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def position(self) -> Position:
        return self._position

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def phase(self) -> GamePhase:
        if self._position.result is not None:
            return GamePhase.GAME_OVER
        return GamePhase.AWAITING_MOVE

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def last_move(self) -> Move | None:
        return self._position.last_move

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self, position: Position | None = None) -> None:
        """Discard the current game and start over (optionally from *position*)."""
        if position is None:
            position = create_initial_position()
        self._position = position
        self._undo_stack.clear()
        _LOGGER.debug("New game: %s", self._position.status)
        self._emit_phase(self.phase)

    # ── Move queries ─────────────────────────────────────────────────────

    def legal_moves_from(self, square: Square) -> list[Move]:
        """Legal moves from *square*; none once the game is over."""
        if self.is_game_over:
            return []
        return legal_moves(self._position, square)

    def legal_targets(self, square: Square) -> set[Square]:
        """Destination squares to highlight for the piece on *square*."""
        return {move.to_sq for move in self.legal_moves_from(square)}

    def move_for(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The legal move from *from_sq* to *to_sq*, if there is one.

        Promotion variants resolve to the configured default promotion.
        """
        candidates = [m for m in self.legal_moves_from(from_sq) if m.to_sq == to_sq]
        for move in candidates:
            if move.promotion in (None, self._config.default_promotion):
                return move
        return None

    def move_rows(self) -> list[MoveRow]:
        return history_rows(self._position.history)

    # ── Move submission ──────────────────────────────────────────────────

    def submit_move(self, move: Move) -> bool:
        """Apply *move*; returns whether it was accepted.

        An illegal attempt still replaces the current snapshot so that its
        "Illegal move" status reaches the front end.
        """
        if self.is_game_over:
            return False

        before = self._position
        after = apply_move(before, move)
        if after.status == ILLEGAL_MOVE_STATUS:
            _LOGGER.debug("Rejected illegal move %s", move)
            self._position = after
            for illegal_cb in self.events.on_illegal_move:
                illegal_cb(move, after)
            return False

        self._undo_stack.append(before)
        self._position = after
        entry = after.history[-1]
        _LOGGER.debug("Played %s (%s)", entry.notation, after.status)
        for move_cb in self.events.on_move:
            move_cb(entry, after)

        if after.result is not None:
            _LOGGER.info("Game over: %s %s", after.result.value, after.status)
            self._emit_phase(GamePhase.GAME_OVER)
            for over_cb in self.events.on_game_over:
                over_cb(after.result)
        return True

    def play(self, from_sq: Square, to_sq: Square) -> bool:
        """Move the piece on *from_sq* to *to_sq* if that is legal.

        A click-style request with no legal move behind it returns False
        and leaves the position alone: no "Illegal move" status and no
        ``on_illegal_move`` event. Use :meth:`submit_move` to record a
        rejected attempt.
        """
        move = self.move_for(from_sq, to_sq)
        if move is None:
            return False
        return self.submit_move(move)

    def undo_last_move(self) -> Move | None:
        """Take back the last move. Returns the undone move, or None."""
        if not self._config.allow_undo or not self._undo_stack:
            return None

        undone = self._position.last_move
        was_over = self.is_game_over
        self._position = self._undo_stack.pop()
        _LOGGER.debug("Undid %s", undone)
        if was_over:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        return undone

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
