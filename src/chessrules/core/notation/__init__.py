"""Notation package: placement and full position string parsing and serialization."""

from chessrules.core.notation.fen import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    state_from_fen,
    state_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_placement",
    "board_to_placement",
    "state_from_fen",
    "state_to_fen",
]
