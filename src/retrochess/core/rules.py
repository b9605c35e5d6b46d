"""Legality filtering, move application and game-status derivation."""

from __future__ import annotations

from dataclasses import replace

from retrochess.core.attacks import is_in_check
from retrochess.core.board import Board
from retrochess.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    GameResult,
    PieceType,
)
from retrochess.core.move import Move
from retrochess.core.move_generator import KINGSIDE_FILE, MoveGenerator
from retrochess.core.notation import move_to_notation
from retrochess.core.piece import Piece
from retrochess.core.position import HistoryEntry, Position
from retrochess.core.types import Square

ILLEGAL_MOVE_STATUS = "Illegal move"

_LAST_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square(7, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(7, 7): CastlingRights.WHITE_KINGSIDE,
    Square(0, 0): CastlingRights.BLACK_QUEENSIDE,
    Square(0, 7): CastlingRights.BLACK_KINGSIDE,
}
_KING_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}


# ── Legal move generation ────────────────────────────────────────────────────


def legal_moves(position: Position, square: Square) -> list[Move]:
    """Legal moves of the side to move from *square*.

    Empty when the square is empty or holds an opponent piece. Pawn moves
    onto the last rank come once per promotion kind.
    """
    piece = position.board[square]
    if piece is None or piece.color != position.side_to_move:
        return []

    candidates = MoveGenerator(position).pseudo_moves(square)
    if piece.piece_type == PieceType.PAWN:
        candidates = _expand_promotions(candidates, _LAST_RANK[piece.color])

    legal: list[Move] = []
    for move in candidates:
        after, _ = _play(position, move)
        if not is_in_check(after.board, piece.color):
            legal.append(move)
    return legal


def all_legal_moves(position: Position) -> list[Move]:
    """Every legal move of the side to move."""
    moves: list[Move] = []
    for sq in position.board.all_pieces(position.side_to_move):
        moves.extend(legal_moves(position, sq))
    return moves


def has_legal_move(position: Position) -> bool:
    """Whether the side to move has at least one legal move."""
    return any(
        legal_moves(position, sq)
        for sq in position.board.all_pieces(position.side_to_move)
    )


def _expand_promotions(moves: list[Move], last_rank: int) -> list[Move]:
    expanded: list[Move] = []
    for move in moves:
        if move.to_sq.rank == last_rank:
            expanded.extend(move.with_promotion(pt) for pt in PROMOTION_TYPES)
        else:
            expanded.append(move)
    return expanded


# ── Move application ─────────────────────────────────────────────────────────


def apply_move(position: Position, move: Move) -> Position:
    """Play *move* and return the resulting position.

    An illegal move leaves everything but ``status`` as it was and marks
    the returned snapshot with :data:`ILLEGAL_MOVE_STATUS`.
    """
    matched = _find_legal(position, move)
    if matched is None:
        return replace(
            position, board=position.board.copy(), status=ILLEGAL_MOVE_STATUS
        )

    after, captured = _play(position, matched)
    in_check = is_in_check(after.board, after.side_to_move)
    has_moves = has_legal_move(after)
    result, status = _derive_status(after.side_to_move, in_check, has_moves)

    entry = HistoryEntry(
        move=matched,
        notation=move_to_notation(
            position, matched, check=in_check, mate=in_check and not has_moves
        ),
        color=position.side_to_move,
        fullmove_number=position.fullmove_number,
        captured=captured,
    )
    return replace(
        after,
        history=position.history + (entry,),
        result=result,
        status=status,
    )


def _find_legal(position: Position, move: Move) -> Move | None:
    for candidate in legal_moves(position, move.from_sq):
        if _same_move(candidate, move):
            return candidate
    return None


def _same_move(candidate: Move, requested: Move) -> bool:
    promotion = requested.promotion
    if promotion is None and candidate.promotion is not None:
        promotion = PieceType.QUEEN
    return (
        candidate.to_sq == requested.to_sq
        and candidate.is_castle == requested.is_castle
        and candidate.is_en_passant == requested.is_en_passant
        and candidate.promotion == promotion
    )


def _play(position: Position, move: Move) -> tuple[Position, Piece | None]:
    """Apply *move* without validating it or deriving the status.

    Returns the new position (status cleared, history untouched) and the
    captured piece, if any.
    """
    board = position.board.copy()
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    captured = board[move.to_sq]
    board[move.from_sq] = None

    # The en-passant victim sits beside the origin, behind the destination.
    if move.is_en_passant:
        victim_sq = Square(move.from_sq.rank, move.to_sq.file)
        captured = board[victim_sq]
        board[victim_sq] = None

    if move.is_castle:
        rank = move.from_sq.rank
        if move.to_sq.file == KINGSIDE_FILE:
            rook_from, rook_to = Square(rank, 7), Square(rank, 5)
        else:
            rook_from, rook_to = Square(rank, 0), Square(rank, 3)
        board[rook_to] = board[rook_from]
        board[rook_from] = None

    placed = piece
    is_pawn = piece.piece_type == PieceType.PAWN
    if is_pawn and move.to_sq.rank == _LAST_RANK[piece.color]:
        placed = Piece(piece.color, move.promotion or PieceType.QUEEN)
    board[move.to_sq] = placed

    castling = position.castling
    if piece.piece_type == PieceType.KING:
        castling &= ~_KING_RIGHTS[piece.color]
    for sq in (move.from_sq, move.to_sq):
        if sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[sq]

    en_passant: Square | None = None
    if is_pawn and abs(move.to_sq.rank - move.from_sq.rank) == 2:
        en_passant = Square(
            (move.from_sq.rank + move.to_sq.rank) // 2, move.from_sq.file
        )

    halfmove_clock = position.halfmove_clock + 1
    if is_pawn or captured is not None:
        halfmove_clock = 0

    fullmove_number = position.fullmove_number
    if position.side_to_move == Color.BLACK:
        fullmove_number += 1

    after = replace(
        position,
        board=board,
        side_to_move=position.side_to_move.opposite,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
        result=None,
        status="",
    )
    return after, captured


# ── Status derivation ────────────────────────────────────────────────────────


def _derive_status(
    side: Color, in_check: bool, has_moves: bool
) -> tuple[GameResult | None, str]:
    if not has_moves:
        if in_check:
            winner = side.opposite
            return GameResult.win_for(winner), f"Checkmate: {winner.display_name} wins"
        return GameResult.DRAW, "Stalemate: draw"
    status = f"{side.display_name} to move"
    if in_check:
        status += " (check)"
    return None, status


def position_from_board(
    board: Board,
    side_to_move: Color = Color.WHITE,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: Square | None = None,
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
) -> Position:
    """Build a starting snapshot from an arbitrary board.

    The board is copied and must hold exactly one king per side. Status
    and result are derived the same way as after a move.
    """
    for color in Color:
        kings = board.pieces(color, PieceType.KING)
        if len(kings) != 1:
            raise ValueError(f"Expected one {color.name} king, found {len(kings)}")

    position = Position(
        board=board.copy(),
        side_to_move=side_to_move,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )
    in_check = is_in_check(position.board, side_to_move)
    result, status = _derive_status(side_to_move, in_check, has_legal_move(position))
    return replace(position, result=result, status=status)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.board, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and not has_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(position) and not has_legal_move(position)

    @staticmethod
    def game_result(position: Position) -> GameResult | None:
        """Result derived from the board alone; ``None`` while play goes on."""
        in_check = Rules.is_in_check(position)
        result, _ = _derive_status(
            position.side_to_move, in_check, has_legal_move(position)
        )
        return result
