"""Pseudo-legal move generation (moves that may still leave the king in check)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from retrochess.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_FORWARD,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_attacked,
)
from retrochess.core.enums import CastlingRights, Color, PieceType
from retrochess.core.move import Move
from retrochess.core.piece import Piece
from retrochess.core.types import Square

if TYPE_CHECKING:
    from retrochess.core.position import Position


_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_HOME_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

_KING_FILE = 4
KINGSIDE_FILE = 6
QUEENSIDE_FILE = 2

_KINGSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_KINGSIDE,
    Color.BLACK: CastlingRights.BLACK_KINGSIDE,
}
_QUEENSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_QUEENSIDE,
    Color.BLACK: CastlingRights.BLACK_QUEENSIDE,
}


class MoveGenerator:
    """Generates pseudo-legal moves for the piece on one square of a :class:`Position`.

    Promotion kinds are not chosen here: a pawn move onto the last rank is
    produced once, without a promotion piece.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def pseudo_moves(self, from_sq: Square) -> list[Move]:
        """Moves of the piece on *from_sq*, ignoring self-check."""
        piece = self._board[from_sq]
        if piece is None:
            return []

        moves: list[Move] = []
        color = piece.color
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(from_sq, color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_stepping(from_sq, color, KNIGHT_TARGETS[from_sq], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(from_sq, color, BISHOP_RAYS[from_sq], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(from_sq, color, ROOK_RAYS[from_sq], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(from_sq, color, QUEEN_RAYS[from_sq], moves)
        else:
            self._gen_stepping(from_sq, color, KING_TARGETS[from_sq], moves)
            self._gen_castling(from_sq, color, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        forward = PAWN_FORWARD[color]

        one_step = sq.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(Move(sq, one_step))
            if sq.rank == _PAWN_START_RANK[color]:
                two_step = Square(sq.rank + 2 * forward, sq.file)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for df in (-1, 1):
            cap_sq = sq.offset(forward, df)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.append(Move(sq, cap_sq))
            elif cap_sq == self._pos.en_passant:
                moves.append(Move(sq, cap_sq, is_en_passant=True))

    def _gen_stepping(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        rank = _HOME_RANK[color]
        if king_sq != Square(rank, _KING_FILE):
            return

        castling = self._pos.castling
        can_kingside = bool(castling & _KINGSIDE_RIGHT[color])
        can_queenside = bool(castling & _QUEENSIDE_RIGHT[color])
        if not (can_kingside or can_queenside):
            return

        board = self._board
        opponent = color.opposite
        if is_attacked(board, king_sq, opponent):
            return

        rook = Piece(color, PieceType.ROOK)

        if (
            can_kingside
            and board[Square(rank, 7)] == rook
            and board.is_empty(Square(rank, 5))
            and board.is_empty(Square(rank, 6))
            and not is_attacked(board, Square(rank, 5), opponent)
            and not is_attacked(board, Square(rank, 6), opponent)
        ):
            moves.append(Move(king_sq, Square(rank, KINGSIDE_FILE), is_castle=True))

        if (
            can_queenside
            and board[Square(rank, 0)] == rook
            and board.is_empty(Square(rank, 1))
            and board.is_empty(Square(rank, 2))
            and board.is_empty(Square(rank, 3))
            and not is_attacked(board, Square(rank, 3), opponent)
            and not is_attacked(board, Square(rank, 2), opponent)
        ):
            moves.append(Move(king_sq, Square(rank, QUEENSIDE_FILE), is_castle=True))


def pseudo_moves(position: Position, from_sq: Square) -> list[Move]:
    """Pseudo-legal moves of the piece on *from_sq* (see :class:`MoveGenerator`)."""
    return MoveGenerator(position).pseudo_moves(from_sq)
