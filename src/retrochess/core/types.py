"""Square type and coordinate helpers.

Board layout (rank index grows toward white's side):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from typing import NamedTuple

FILES = "abcdefgh"


class Square(NamedTuple):
    """Zero-based ``(rank, file)`` coordinates; rank 0 is black's home rank."""

    rank: int
    file: int

    def __str__(self) -> str:
        return square_to_algebraic(self)

    def offset(self, d_rank: int, d_file: int) -> Square | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if 0 <= rank < 8 and 0 <= file < 8:
            return Square(rank, file)
        return None


def square_to_algebraic(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(7, 0)`` -> ``'a1'``."""
    return FILES[sq.file] + str(8 - sq.rank)


square_name = square_to_algebraic


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` -> ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(rank, file) for rank in range(8) for file in range(8)
)

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, f) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, f) for f in range(8))
