"""Exception hierarchy for notation, query and move errors."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by this library."""


# -- Square parsing ---------------------------------------------------------


class SquareParseError(ChessError, ValueError):
    """Raised when a square name such as ``e4`` is malformed."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


# -- Position string parsing ------------------------------------------------


class FenError(ChessError, ValueError):
    """Raised when a placement or position string is malformed."""


class LargeSkipError(FenError):
    def __init__(self) -> None:
        super().__init__("Empty run larger than 8 squares")


class OutsideBoardError(FenError):
    def __init__(self, file: int, rank: int) -> None:
        super().__init__(f"Placement leaves the board at file {file}, rank {rank}")
        self.file = file
        self.rank = rank


class InvalidPieceError(FenError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid piece character: {char!r}")
        self.char = char


class TooShortError(FenError):
    def __init__(self) -> None:
        super().__init__("Position string is missing fields")


class InvalidTurnError(FenError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid side-to-move field: {text!r}")
        self.text = text


class InvalidCastlingError(FenError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid castling field: {text!r}")
        self.text = text


class InvalidEnPassantTargetError(FenError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid en passant target: {reason}")
        self.reason = reason


class InvalidClockError(FenError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid move clock field: {text!r}")
        self.text = text


# -- Queries and moves ------------------------------------------------------


class MoveError(ChessError):
    """Raised when a move query or move request cannot be honoured."""


class NoTileError(MoveError):
    """There is no piece on the requested square."""


class NotCurrentTurnError(MoveError):
    """The piece on the requested square belongs to the side not to move."""


class InvalidMoveError(MoveError):
    """The destination is not among the piece's legal moves."""


class PromotionPendingError(MoveError):
    """A pawn awaits promotion; :meth:`promote` must be called first."""
