"""Tests for pseudo-legal move generation."""

from collections.abc import Callable

from retrochess.core.enums import CastlingRights, Color
from retrochess.core.move import Move
from retrochess.core.move_generator import pseudo_moves
from retrochess.core.position import Position
from retrochess.core.types import (
    A1, A7, A8, B1, C1, D6, E1, E2, E3, E4, E5, E8, F1, G1,
    parse_square,
)

Setup = Callable[..., Position]

CASTLING_ROWS = [
    "r...k..r",
    "........",
    "........",
    "........",
    "........",
    "........",
    "........",
    "R...K..R",
]


def _targets(moves: list[Move]) -> set[str]:
    return {str(m.to_sq) for m in moves}


class TestPawn:
    def test_single_and_double_push(self, initial: Position) -> None:
        assert pseudo_moves(initial, E2) == [Move(E2, E3), Move(E2, E4)]

    def test_black_pawn_moves_down(self, initial: Position) -> None:
        assert _targets(pseudo_moves(initial, parse_square("d7"))) == {"d6", "d5"}

    def test_blocked(self, setup: Setup) -> None:
        pos = setup([
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "....n...",
            "....P...",
            "....K...",
        ])
        assert pseudo_moves(pos, E2) == []

    def test_double_step_needs_empty_destination(self, setup: Setup) -> None:
        pos = setup([
            "....k...",
            "........",
            "........",
            "........",
            "....n...",
            "........",
            "....P...",
            "K.......",
        ])
        assert pseudo_moves(pos, E2) == [Move(E2, E3)]

    def test_no_double_step_off_start_rank(self, setup: Setup) -> None:
        pos = setup([
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "....P...",
            "........",
            "K.......",
        ])
        assert pseudo_moves(pos, E3) == [Move(E3, E4)]

    def test_captures_only_enemies(self, setup: Setup) -> None:
        pos = setup([
            "....k...",
            "........",
            "........",
            "...p.N..",
            "....P...",
            "........",
            "........",
            "K.......",
        ])
        assert _targets(pseudo_moves(pos, E4)) == {"e5", "d5"}

    def test_last_rank_has_no_promotion_kind(self, setup: Setup) -> None:
        pos = setup([
            ".......k",
            "P.......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "K.......",
        ])
        assert pseudo_moves(pos, A7) == [Move(A7, A8)]

    def test_en_passant(self, setup: Setup) -> None:
        pos = setup(
            [
                "....k...",
                "........",
                "........",
                "...pP...",
                "........",
                "........",
                "........",
                "....K...",
            ],
            en_passant=D6,
        )
        moves = pseudo_moves(pos, E5)
        assert Move(E5, D6, is_en_passant=True) in moves
        assert Move(E5, D6) not in moves

    def test_en_passant_target_must_be_adjacent(self, setup: Setup) -> None:
        pos = setup(
            [
                "....k...",
                "........",
                "........",
                "p......P",
                "........",
                "........",
                "........",
                "....K...",
            ],
            en_passant=parse_square("a6"),
        )
        assert all(not m.is_en_passant for m in pseudo_moves(pos, parse_square("h5")))


class TestPieces:
    def test_knight_from_start(self, initial: Position) -> None:
        assert _targets(pseudo_moves(initial, B1)) == {"a3", "c3"}

    def test_rook_boxed_in(self, initial: Position) -> None:
        assert pseudo_moves(initial, A1) == []

    def test_empty_square(self, initial: Position) -> None:
        assert pseudo_moves(initial, E4) == []

    def test_slider_stops_at_first_piece(self, setup: Setup) -> None:
        pos = setup([
            "....k...",
            "........",
            "........",
            "p.......",
            "........",
            "........",
            "P.......",
            "R...K...",
        ])
        # Own pawn on a2 blocks the file; the rank runs up to the king.
        assert _targets(pseudo_moves(pos, A1)) == {"b1", "c1", "d1"}

    def test_slider_includes_enemy_blocker(self, setup: Setup) -> None:
        pos = setup([
            "....k...",
            "........",
            "........",
            "p.......",
            "........",
            "........",
            "........",
            "R...K...",
        ])
        assert _targets(pseudo_moves(pos, A1)) == {
            "a2", "a3", "a4", "a5", "b1", "c1", "d1",
        }

    def test_queen_count_on_empty_board(self, setup: Setup) -> None:
        pos = setup([
            "k.......",
            "........",
            "........",
            "........",
            "...Q....",
            "........",
            "........",
            ".......K",
        ])
        # Nothing on the queen's lines, so all 27 squares are reachable.
        assert len(pseudo_moves(pos, parse_square("d4"))) == 27

    def test_ignores_pins(self, setup: Setup) -> None:
        pos = setup([
            "....r..k",
            "........",
            "........",
            "........",
            "........",
            "........",
            "....N...",
            "....K...",
        ])
        assert len(pseudo_moves(pos, E2)) == 6


class TestCastling:
    def test_both_sides_offered(self, setup: Setup) -> None:
        pos = setup(CASTLING_ROWS, castling=CastlingRights.ALL)
        moves = pseudo_moves(pos, E1)
        assert Move(E1, G1, is_castle=True) in moves
        assert Move(E1, C1, is_castle=True) in moves

    def test_black_castles_on_rank_zero(self, setup: Setup) -> None:
        pos = setup(
            CASTLING_ROWS, side_to_move=Color.BLACK, castling=CastlingRights.ALL
        )
        moves = pseudo_moves(pos, E8)
        assert Move(E8, parse_square("g8"), is_castle=True) in moves
        assert Move(E8, parse_square("c8"), is_castle=True) in moves

    def test_no_rights(self, setup: Setup) -> None:
        pos = setup(CASTLING_ROWS)
        assert not any(m.is_castle for m in pseudo_moves(pos, E1))

    def test_one_right_only(self, setup: Setup) -> None:
        pos = setup(CASTLING_ROWS, castling=CastlingRights.WHITE_QUEENSIDE)
        castles = [m for m in pseudo_moves(pos, E1) if m.is_castle]
        assert castles == [Move(E1, C1, is_castle=True)]

    def test_path_must_be_empty(self, setup: Setup) -> None:
        rows = CASTLING_ROWS[:7] + ["RN..K.NR"]
        pos = setup(rows, castling=CastlingRights.ALL)
        assert not any(m.is_castle for m in pseudo_moves(pos, E1))

    def test_not_out_of_check(self, setup: Setup) -> None:
        rows = ["k......."] + CASTLING_ROWS[1:3] + ["....r..."] + CASTLING_ROWS[4:]
        pos = setup(rows, castling=CastlingRights.WHITE_BOTH)
        assert not any(m.is_castle for m in pseudo_moves(pos, E1))

    def test_not_through_attacked_square(self, setup: Setup) -> None:
        rows = ["....kr.."] + CASTLING_ROWS[1:]
        pos = setup(rows, castling=CastlingRights.WHITE_BOTH)
        castles = [m for m in pseudo_moves(pos, E1) if m.is_castle]
        assert castles == [Move(E1, C1, is_castle=True)]

    def test_not_into_attacked_square(self, setup: Setup) -> None:
        rows = ["....k.r."] + CASTLING_ROWS[1:]
        pos = setup(rows, castling=CastlingRights.WHITE_BOTH)
        castles = [m for m in pseudo_moves(pos, E1) if m.is_castle]
        assert castles == [Move(E1, C1, is_castle=True)]

    def test_queenside_b_file_may_be_attacked(self, setup: Setup) -> None:
        rows = ["kr......"] + CASTLING_ROWS[1:]
        pos = setup(rows, castling=CastlingRights.WHITE_QUEENSIDE)
        assert Move(E1, C1, is_castle=True) in pseudo_moves(pos, E1)

    def test_rook_must_be_on_corner(self, setup: Setup) -> None:
        rows = CASTLING_ROWS[:7] + ["R...K..."]
        pos = setup(rows, castling=CastlingRights.WHITE_BOTH)
        castles = [m for m in pseudo_moves(pos, E1) if m.is_castle]
        assert castles == [Move(E1, C1, is_castle=True)]

    def test_king_off_home_square(self, setup: Setup) -> None:
        rows = CASTLING_ROWS[:6] + ["....K...", "R......R"]
        pos = setup(rows, castling=CastlingRights.WHITE_BOTH)
        assert not any(m.is_castle for m in pseudo_moves(pos, E2))

    def test_castle_and_plain_step_are_distinct(self, setup: Setup) -> None:
        pos = setup(CASTLING_ROWS, castling=CastlingRights.ALL)
        moves = pseudo_moves(pos, E1)
        assert Move(E1, F1) in moves
        assert Move(E1, G1) not in moves
        assert Move(E1, G1) != Move(E1, G1, is_castle=True)

