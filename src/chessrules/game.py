"""Game — the library surface for playing a chess game.

Wraps a :class:`~chessrules.core.state.GameState` and exposes the move query,
move execution, promotion and phase report a front-end needs::

    game = Game()
    game.get_legal_moves("e2")        # {Square(e3), Square(e4)}
    game.move_piece("e2", "e4")
    game.get_state()                  # GameStatus(phase=NORMAL)

Promotion is a two-step turn: after a pawn reaches its last rank
:meth:`Game.get_state` reports ``PROMOTION_REQUIRED`` and :meth:`Game.promote`
must be called before the next move. The side to move has already flipped
at that point.
"""

from __future__ import annotations

import logging

from chessrules.config import RulesConfig
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidMoveError, MoveError, PromotionPendingError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import STARTING_FEN, state_from_fen, state_to_fen
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.state import GameState
from chessrules.core.types import Square, parse_square

_LOGGER = logging.getLogger(__name__)

SquareLike = Square | str


def _as_square(sq: SquareLike) -> Square:
    return parse_square(sq) if isinstance(sq, str) else sq


class Game:
    """A single chess game: position, legal move queries and move execution.

    Not thread-safe: move queries temporarily mutate the board.
    """

    __slots__ = ("_state",)

    def __init__(self, config: RulesConfig | None = None) -> None:
        self._state = state_from_fen(STARTING_FEN, config)

    @classmethod
    def from_state(cls, state: GameState) -> Game:
        game = cls.__new__(cls)
        game._state = state
        return game

    @classmethod
    def from_position_string(cls, fen: str, config: RulesConfig | None = None) -> Game:
        """Create a game from a six-field position string.

        Raises:
            FenError: a subclass naming the malformed field.
        """
        return cls.from_state(state_from_fen(fen, config))

    def to_position_string(self) -> str:
        return state_to_fen(self._state)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    def current_turn(self) -> Color:
        return self._state.side_to_move

    def get_tile(self, sq: SquareLike) -> Piece | None:
        return self._state.board[_as_square(sq)]

    def get_legal_moves(self, sq: SquareLike) -> set[Square]:
        """Legal destinations for the piece on *sq*.

        Raises:
            NoTileError: *sq* is empty.
            NotCurrentTurnError: the piece is not the side to move's.
        """
        return MoveGenerator(self._state).legal_moves(_as_square(sq))

    def legal_moves(self) -> list[Move]:
        """Every legal move for the side to move."""
        return MoveGenerator(self._state).generate_legal_moves()

    def is_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._state, color)

    def is_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self._state, color)

    def get_state(self) -> GameStatus:
        return Rules.status(self._state)

    # ── Moves ────────────────────────────────────────────────────────────

    def move_piece(self, from_sq: SquareLike, to_sq: SquareLike) -> None:
        """Validate and play a move.

        Raises:
            NoTileError: *from_sq* is empty.
            NotCurrentTurnError: the piece is not the side to move's.
            InvalidMoveError: *to_sq* is not a legal destination.
            PromotionPendingError: :meth:`promote` has not been called yet.
        """
        origin = _as_square(from_sq)
        target = _as_square(to_sq)

        if self._state.promotion_pending is not None:
            _LOGGER.debug(
                "Rejected %s%s: promotion on %s pending",
                origin,
                target,
                self._state.promotion_pending,
            )
            raise PromotionPendingError(
                f"Promotion on {self._state.promotion_pending} must be resolved first"
            )

        try:
            legal = self.get_legal_moves(origin)
        except MoveError as exc:
            _LOGGER.debug("Rejected %s%s: %s", origin, target, exc)
            raise
        if target not in legal:
            _LOGGER.debug("Rejected %s%s: not a legal destination", origin, target)
            raise InvalidMoveError(f"{origin} cannot move to {target}")

        mover = self._state.side_to_move
        undo = self._state.make_move(origin, target)
        _LOGGER.debug(
            "%s played %s%s%s",
            mover,
            origin,
            target,
            " (capture)" if undo.is_capture else "",
        )
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Phase after %s%s: %s", origin, target, self.get_state())

    def promote(self, piece_type: PieceType) -> None:
        """Resolve a pending promotion.

        Raises:
            RuntimeError: no promotion is pending.
            ValueError: *piece_type* is a pawn or a king.
        """
        sq = self._state.promotion_pending
        self._state.promote(piece_type)
        _LOGGER.debug("Promoted on %s to %s", sq, piece_type.name.lower())

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        return Game.from_state(self._state.copy())

    def __repr__(self) -> str:
        return f"Game({self.to_position_string()!r})"
