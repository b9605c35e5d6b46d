"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

from retrochess.core.enums import PROMOTION_TYPES, PieceType


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Options for a :class:`~retrochess.game.session.GameSession`.

    Args:
        default_promotion: Piece a pawn becomes when the front end does not
            ask the player (the retro UI always promotes to a queen).
        allow_undo: Whether :meth:`GameSession.undo_last_move` may take
            moves back.
    """

    default_promotion: PieceType = PieceType.QUEEN
    allow_undo: bool = True

    def __post_init__(self) -> None:
        if self.default_promotion not in PROMOTION_TYPES:
            raise ValueError(
                f"Cannot promote to {self.default_promotion.name.lower()}"
            )
