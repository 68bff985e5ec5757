"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

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


class Board:
    """Mutable 64-square board; each square holds at most one piece."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def get(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` if it is empty."""
        return self._squares[sq.index]

    def place(self, sq: Square, piece: Piece) -> None:
        self._squares[sq.index] = piece

    def remove(self, sq: Square) -> Piece | None:
        """Empty *sq* and return whatever stood there."""
        previous = self._squares[sq.index]
        self._squares[sq.index] = None
        return previous

    def place_or_remove(self, sq: Square, piece: Piece | None) -> None:
        """Place *piece* on *sq*, or empty the square when *piece* is ``None``."""
        self._squares[sq.index] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a1 first.

        When *color* is given only that side's pieces are yielded.
        """
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield sq, piece

    def first_occupied(
        self, start: Square, delta_file: int, delta_rank: int
    ) -> tuple[Square, Piece] | None:
        """First occupied square walking from *start* (exclusive) along a ray."""
        sq = start.offset(delta_file, delta_rank)
        while sq is not None:
            piece = self._squares[sq.index]
            if piece is not None:
                return sq, piece
            sq = sq.offset(delta_file, delta_rank)
        return None

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it has none."""
        king = Piece(color, PieceType.KING)
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece == king:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[Square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Color.WHITE, pt)
            b[Square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
