"""chessrules — a chess rules engine.

Legal move generation, castling, en passant, two-step promotion and
position string import/export.
"""

from chessrules.config import RulesConfig
from chessrules.core import (
    STARTING_FEN,
    ChessError,
    Color,
    FenError,
    GamePhase,
    GameStatus,
    InvalidMoveError,
    MoveError,
    NoTileError,
    NotCurrentTurnError,
    Piece,
    PieceType,
    PromotionPendingError,
    Square,
    SquareParseError,
    parse_square,
)
from chessrules.game import Game

__all__ = [
    "STARTING_FEN",
    "ChessError",
    "Color",
    "FenError",
    "Game",
    "GamePhase",
    "GameStatus",
    "InvalidMoveError",
    "MoveError",
    "NoTileError",
    "NotCurrentTurnError",
    "Piece",
    "PieceType",
    "PromotionPendingError",
    "RulesConfig",
    "Square",
    "SquareParseError",
    "parse_square",
]
