"""Square value type and coordinate helpers.

A square is a ``(file, rank)`` pair, both 0–7. File 0 is the ``a`` file and
rank 0 is the first rank, so ``b4`` is ``Square(1, 3)``.

Board storage uses the Little-Endian Rank-File index:
    a1=0, b1=1, ..., h1=7
    a2=8, ...
    a8=56, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import SquareParseError

_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate.

    Raises:
        ValueError: if *file* or *rank* is outside ``0..7``.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not 0 <= self.file <= 7:
            raise ValueError(f"file must be in the inclusive range [0-7], got {self.file}")
        if not 0 <= self.rank <= 7:
            raise ValueError(f"rank must be in the inclusive range [0-7], got {self.rank}")

    @property
    def index(self) -> int:
        """Storage index 0–63."""
        return self.rank * 8 + self.file

    @property
    def file_char(self) -> str:
        return _FILES[self.file]

    def offset(self, delta_file: int, delta_rank: int) -> Square | None:
        """Square shifted by the deltas, or ``None`` when it falls off the board."""
        file = self.file + delta_file
        rank = self.rank + delta_rank
        if 0 <= file < 8 and 0 <= rank < 8:
            return Square(file, rank)
        return None

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index & 7, index >> 3)

    def __str__(self) -> str:
        return f"{self.file_char}{self.rank + 1}"

    def __repr__(self) -> str:
        return f"Square({self})"


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(0, 0)`` → ``'a1'``."""
    return str(sq)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(4, 3)``."""
    if len(name) < 2:
        raise SquareParseError("String too short")
    if len(name) > 2:
        raise SquareParseError("String too long")
    file_char, rank_char = name
    if rank_char not in "0123456789":
        raise SquareParseError("Second character must be a digit")
    if file_char not in _FILES:
        raise SquareParseError("First character must be a file letter a-h")
    rank = int(rank_char)
    if not 1 <= rank <= 8:
        raise SquareParseError("Rank must be between 1 and 8")
    return Square(_FILES.index(file_char), rank - 1)


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(64))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
