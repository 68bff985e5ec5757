"""High-level chess rules: check, checkmate and the phase report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GamePhase
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.state import GameState


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Phase of the game plus the color or square it concerns."""

    phase: GamePhase
    color: Color | None = None
    square: Square | None = None

    @classmethod
    def normal(cls) -> GameStatus:
        return cls(GamePhase.NORMAL)

    @classmethod
    def check(cls, color: Color) -> GameStatus:
        return cls(GamePhase.CHECK, color=color)

    @classmethod
    def checkmate(cls, color: Color) -> GameStatus:
        return cls(GamePhase.CHECKMATE, color=color)

    @classmethod
    def promotion_required(cls, square: Square) -> GameStatus:
        return cls(GamePhase.PROMOTION_REQUIRED, square=square)

    def __str__(self) -> str:
        name = self.phase.name.lower()
        if self.color is not None:
            return f"{name}({self.color})"
        if self.square is not None:
            return f"{name}({self.square})"
        return name


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Draws (stalemate, repetition, fifty-move rule, insufficient material)
    # are not detected; such positions report NORMAL.

    @staticmethod
    def is_in_check(state: GameState, color: Color) -> bool:
        return MoveGenerator(state).is_in_check(color)

    @staticmethod
    def is_checkmate(state: GameState, color: Color) -> bool:
        """*color* is in check and no move of its pieces lifts the check.

        Every pseudo-legal move (castling excluded) of every *color* piece is
        tried on the board and undone.
        """
        gen = MoveGenerator(state)
        if not gen.is_in_check(color):
            return False

        for from_sq, _ in list(state.board.occupied(color)):
            for to_sq in gen.pseudo_legal_moves(from_sq, include_castling=False):
                undo = state.perform_move(from_sq, to_sq)
                try:
                    escaped = not gen.is_in_check(color)
                finally:
                    state.undo_move(undo)
                if escaped:
                    return False
        return True

    @staticmethod
    def status(state: GameState) -> GameStatus:
        """Current phase, checked in priority order: pending promotion,
        checkmate, check, normal. Check and mate concern the side to move."""
        if state.promotion_pending is not None:
            return GameStatus.promotion_required(state.promotion_pending)

        color = state.side_to_move
        if Rules.is_checkmate(state, color):
            return GameStatus.checkmate(color)
        if Rules.is_in_check(state, color):
            return GameStatus.check(color)
        return GameStatus.normal()
