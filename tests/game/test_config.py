"""Tests for SessionConfig."""

import dataclasses

import pytest

from retrochess.core.enums import PieceType
from retrochess.game.config import SessionConfig


class TestSessionConfig:
    def test_defaults(self) -> None:
        cfg = SessionConfig()
        assert cfg.default_promotion == PieceType.QUEEN
        assert cfg.allow_undo

    @pytest.mark.parametrize("kind", [PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK])
    def test_under_promotion_allowed(self, kind: PieceType) -> None:
        assert SessionConfig(default_promotion=kind).default_promotion == kind

    @pytest.mark.parametrize("kind", [PieceType.PAWN, PieceType.KING])
    def test_invalid_promotion(self, kind: PieceType) -> None:
        with pytest.raises(ValueError, match="Cannot promote"):
            SessionConfig(default_promotion=kind)

    def test_frozen(self) -> None:
        cfg = SessionConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.allow_undo = False  # type: ignore[misc]
