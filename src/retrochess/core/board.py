"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from retrochess.core.enums import Color, PieceType
from retrochess.core.piece import Piece
from retrochess.core.types import Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_EMPTY_CHARS = ".-"


class Board:
    """8x8 grid of optional pieces indexed by :class:`Square`.

    Rank 0 holds black's back rank, rank 7 white's. A board is only ever
    mutated while it is being built; every position transition works on a
    :meth:`copy`.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        rank, file = sq
        if not (0 <= rank < 8 and 0 <= file < 8):
            raise IndexError(f"Square out of range: {sq!r}")
        return self._grid[rank][file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        rank, file = sq
        if not (0 <= rank < 8 and 0 <= file < 8):
            raise IndexError(f"Square out of range: {sq!r}")
        self._grid[rank][file] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs, rank 0 first, files a..h."""
        for rank, row in enumerate(self._grid):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield Square(rank, file), piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise ValueError(f"No {color.name} king on board")
        return kings[0]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[Square(0, f)] = Piece(Color.BLACK, pt)
            b[Square(1, f)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, f)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, f)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from an ASCII diagram, rank 8 first.

        Each row holds eight glyphs (``K``, ``q``, ...) or ``.`` for an empty
        square; spaces are ignored, so ``"r . . . k . . r"`` works too.
        """
        if len(rows) != 8:
            raise ValueError(f"Expected 8 rows, got {len(rows)}")
        b = cls()
        for rank, row in enumerate(rows):
            cells = row.replace(" ", "")
            if len(cells) != 8:
                raise ValueError(f"Row {rank} must hold 8 squares: {row!r}")
            for file, char in enumerate(cells):
                if char not in _EMPTY_CHARS:
                    b[Square(rank, file)] = Piece.from_char(char)
        return b

    def to_rows(self) -> list[str]:
        """ASCII diagram rows, inverse of :meth:`from_rows`."""
        return [
            "".join(str(p) if p is not None else "." for p in row)
            for row in self._grid
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self.to_rows()):
            rows.append(f"{8 - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
