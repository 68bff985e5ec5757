"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveGenerator, parse_square, state_from_fen, STARTING_FEN

    state = state_from_fen(STARTING_FEN)
    gen = MoveGenerator(state)
    print(gen.legal_moves(parse_square("g1")))
"""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, GamePhase, PieceType
from chessrules.core.errors import (
    ChessError,
    FenError,
    InvalidCastlingError,
    InvalidClockError,
    InvalidEnPassantTargetError,
    InvalidMoveError,
    InvalidPieceError,
    InvalidTurnError,
    LargeSkipError,
    MoveError,
    NoTileError,
    NotCurrentTurnError,
    OutsideBoardError,
    PromotionPendingError,
    SquareParseError,
    TooShortError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    state_from_fen,
    state_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.state import GameState, MoveUndo
from chessrules.core.types import Square, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GamePhase",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "MoveUndo",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "board_from_placement",
    "board_to_placement",
    "state_from_fen",
    "state_to_fen",
    # Errors
    "ChessError",
    "FenError",
    "InvalidCastlingError",
    "InvalidClockError",
    "InvalidEnPassantTargetError",
    "InvalidMoveError",
    "InvalidPieceError",
    "InvalidTurnError",
    "LargeSkipError",
    "MoveError",
    "NoTileError",
    "NotCurrentTurnError",
    "OutsideBoardError",
    "PromotionPendingError",
    "SquareParseError",
    "TooShortError",
]
