"""Attack detection and the precomputed geometry it shares with move generation."""

from __future__ import annotations

from retrochess.core.board import Board
from retrochess.core.enums import Color, PieceType
from retrochess.core.types import ALL_SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Rank step of a pawn advance; white moves toward rank index 0.
PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for dr, df in offsets:
            to_sq = sq.offset(dr, df)
            if to_sq is not None:
                moves.append(to_sq)
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ray: list[Square] = []
            to_sq = sq.offset(dr, df)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Attack detection -------------------------------------------------------


def _ray_attacks(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    attackers: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for sq in ray:
            piece = board[sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in attackers:
                return True
            break
    return False


def is_attacked(board: Board, target: Square, by_color: Color) -> bool:
    """Could *by_color* capture on *target* in one move?

    Turn order and the attacker's own king safety are ignored, and the
    target may be empty or occupied by either side.
    """
    # A pawn attacks diagonally forward, so look one rank behind the target.
    pawn_rank = -PAWN_FORWARD[by_color]
    for df in (-1, 1):
        sq = target.offset(pawn_rank, df)
        if sq is None:
            continue
        piece = board[sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for sq in KNIGHT_TARGETS[target]:
        piece = board[sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for sq in KING_TARGETS[target]:
        piece = board[sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    if _ray_attacks(board, BISHOP_RAYS[target], by_color, _DIAGONAL_ATTACKERS):
        return True
    return _ray_attacks(board, ROOK_RAYS[target], by_color, _ORTHOGONAL_ATTACKERS)


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_attacked(board, board.king_square(color), color.opposite)
