"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from retrochess.core.enums import PieceType
from retrochess.core.types import Square, square_to_algebraic

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    The castle / en-passant flags and the promotion kind are part of the
    move's identity: two moves between the same squares compare unequal
    when any of them differ.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_castle: bool = False
    is_en_passant: bool = False

    def with_promotion(self, piece_type: PieceType) -> Move:
        return replace(self, promotion=piece_type)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_to_algebraic(self.from_sq)}{square_to_algebraic(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base


def promotion_from_char(char: str) -> PieceType:
    """Promotion kind for a lowercase UCI suffix letter."""
    for piece_type, promo_char in _PROMO_CHARS.items():
        if promo_char == char:
            return piece_type
    raise ValueError(f"Invalid promotion character: {char!r}")
