"""FEN parsing and serialization.

A position string has six whitespace-separated fields: piece placement,
side to move, castling rights, en passant target, halfmove clock and
fullmove number.
"""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.errors import (
    InvalidCastlingError,
    InvalidClockError,
    InvalidEnPassantTargetError,
    InvalidPieceError,
    InvalidTurnError,
    LargeSkipError,
    OutsideBoardError,
    SquareParseError,
    TooShortError,
)
from chessrules.core.piece import Piece
from chessrules.core.state import GameState
from chessrules.core.types import Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


# -- Placement field ----------------------------------------------------------


def board_from_placement(placement: str) -> Board:
    """Parse the placement field (ranks 8 → 1 separated by ``/``).

    Ranks given with fewer than eight files, and missing trailing ranks,
    are left empty.
    """
    board = Board()
    file = 0
    rank = 7
    for ch in placement:
        if ch in "0123456789":
            skip = int(ch)
            if skip > 8:
                raise LargeSkipError()
            file += skip
            if file > 8:
                raise OutsideBoardError(file, rank)
        elif ch == "/":
            file = 0
            rank -= 1
            if rank < 0:
                raise OutsideBoardError(file, rank)
        else:
            try:
                piece = Piece.from_char(ch)
            except ValueError:
                raise InvalidPieceError(ch) from None
            if file > 7:
                raise OutsideBoardError(file, rank)
            board[Square(file, rank)] = piece
            file += 1
    return board


def board_to_placement(board: Board) -> str:
    """Serialise the board to the placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


# -- Full position string ---------------------------------------------------


def state_from_fen(fen: str, config: RulesConfig | None = None) -> GameState:
    """Parse a six-field position string into a :class:`GameState`.

    Fields are validated in order; fields after the sixth are ignored.
    """
    fields = iter(fen.split())

    board = board_from_placement(_next_field(fields))
    side = _parse_side(_next_field(fields))
    castling = _parse_castling(_next_field(fields))
    ep = _parse_en_passant(_next_field(fields), side)
    halfmove = _parse_clock(_next_field(fields), minimum=0)
    fullmove = _parse_clock(_next_field(fields), minimum=1)

    return GameState(
        board=board,
        side_to_move=side,
        castling=castling,
        en_passant=ep,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
        config=config,
    )


def state_to_fen(state: GameState) -> str:
    """Serialise a :class:`GameState` to a six-field position string."""
    board_str = board_to_placement(state.board)
    side_str = "w" if state.side_to_move == Color.WHITE else "b"

    castling_str = "".join(ch for ch, right in _CASTLING_CHARS if state.castling & right)
    if not castling_str:
        castling_str = "-"

    ep_str = str(state.en_passant) if state.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )


# -- Field parsers ------------------------------------------------------------


def _parse_side(text: str) -> Color:
    if text == "w":
        return Color.WHITE
    if text == "b":
        return Color.BLACK
    raise InvalidTurnError(text)


def _parse_castling(text: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if text == "-":
        return castling
    # Letters must be a subsequence of "KQkq".
    pending = iter(_CASTLING_CHARS)
    for ch in text:
        for letter, right in pending:
            if letter == ch:
                castling |= right
                break
        else:
            raise InvalidCastlingError(text)
    return castling


def _parse_en_passant(text: str, side: Color) -> Square | None:
    if text == "-":
        return None
    try:
        ep = parse_square(text)
    except SquareParseError as exc:
        raise InvalidEnPassantTargetError(exc.msg) from exc
    # The target lies behind a pawn of the side that just moved.
    expected_rank = 5 if side == Color.WHITE else 2
    if ep.rank != expected_rank:
        raise InvalidEnPassantTargetError(
            f"{text} is not on rank {expected_rank + 1} for {side} to move"
        )
    return ep


def _parse_clock(text: str, minimum: int) -> int:
    if not text.isdecimal():
        raise InvalidClockError(text)
    value = int(text)
    if value < minimum:
        raise InvalidClockError(text)
    return value


def _next_field(fields: Iterator[str]) -> str:
    try:
        return next(fields)
    except StopIteration:
        raise TooShortError() from None
