"""GameState — board + metadata, with the move executor.

Promotion is a two-step turn. :meth:`GameState.make_move` moves a pawn onto
its last rank, flips the side to move and sets ``promotion_pending``; the
caller must then pick the new piece with :meth:`GameState.promote` before any
other move is made. Until then the state is transient: the pawn still stands
on the last rank and the opponent is already on move.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square


@dataclass(slots=True)
class MoveUndo:
    """Every square :meth:`GameState.perform_move` touched, with its previous
    occupant, so the board can be restored exactly."""

    entries: list[tuple[Square, Piece | None]] = field(default_factory=list)
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


class GameState:
    """Full chess position: board + side to move + castling + en passant +
    pending promotion + clocks.

    The legality filter in :class:`~chessrules.core.move_generator.MoveGenerator`
    tries candidate moves with :meth:`perform_move` / :meth:`undo_move` on this
    very object, so a state must only be used by one caller at a time.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "promotion_pending",
        "halfmove_clock",
        "fullmove_number",
        "config",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        promotion_pending: Square | None = None,
        config: RulesConfig | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.promotion_pending = promotion_pending
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.config = config if config is not None else RulesConfig()

    # ── Board-level primitive ────────────────────────────────────────────

    def perform_move(self, from_sq: Square, to_sq: Square) -> MoveUndo:
        """Relocate pieces for a move and record how to put them back.

        Handles the rook shift of castling and the removal of a pawn taken
        en passant. Only the board changes; clocks, rights and turn are left
        alone.
        """
        board = self.board
        piece = board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        target = board[to_sq]
        undo = MoveUndo([(from_sq, piece), (to_sq, target)], captured=target)

        if piece.piece_type == PieceType.KING and abs(to_sq.file - from_sq.file) == 2:
            direction = 1 if to_sq.file > from_sq.file else -1
            crossed = from_sq.offset(direction, 0)
            assert crossed is not None
            rook_sq = Square(7 if direction == 1 else 0, from_sq.rank)
            rook = board[rook_sq]
            assert rook is not None
            undo.entries.append((rook_sq, rook))
            undo.entries.append((crossed, board[crossed]))
            undo.captured = None

            board.remove(from_sq)
            board.remove(rook_sq)
            board.place(to_sq, piece)
            board.place(crossed, rook)
            return undo

        board.remove(from_sq)
        board.place(to_sq, piece)

        if (
            piece.piece_type == PieceType.PAWN
            and to_sq == self.en_passant
            and to_sq.file != from_sq.file
        ):
            victim_sq = Square(to_sq.file, from_sq.rank)
            victim = board.remove(victim_sq)
            undo.entries.append((victim_sq, victim))
            undo.captured = victim

        return undo

    def undo_move(self, undo: MoveUndo) -> None:
        """Restore every square recorded by :meth:`perform_move`."""
        board = self.board
        for sq, piece in reversed(undo.entries):
            board.place_or_remove(sq, piece)

    # ── Full move execution ──────────────────────────────────────────────

    def make_move(self, from_sq: Square, to_sq: Square) -> MoveUndo:
        """Play a move and update all derived state.

        The caller is responsible for the legality check.
        """
        piece = self.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        color = piece.color
        is_pawn = piece.piece_type == PieceType.PAWN

        undo = self.perform_move(from_sq, to_sq)

        # Clocks
        if undo.is_capture or (is_pawn and self.config.reset_halfmove_on_pawn_move):
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        # En passant target for the opponent
        self.en_passant = None
        if is_pawn and abs(to_sq.rank - from_sq.rank) == 2:
            self.en_passant = Square(from_sq.file, (from_sq.rank + to_sq.rank) // 2)

        self._update_castling(piece, from_sq, to_sq, undo.captured)

        if is_pawn and to_sq.rank == color.last_rank:
            self.promotion_pending = to_sq

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        return undo

    def promote(self, piece_type: PieceType) -> None:
        """Replace the pawn awaiting promotion with *piece_type*.

        Raises:
            RuntimeError: if no promotion is pending.
            ValueError: if *piece_type* is a pawn or a king.
        """
        sq = self.promotion_pending
        if sq is None:
            raise RuntimeError("No promotion is pending")
        if piece_type in (PieceType.PAWN, PieceType.KING):
            raise ValueError(f"Cannot promote to {piece_type.name.lower()}")
        pawn = self.board[sq]
        assert pawn is not None
        self.board[sq] = Piece(pawn.color, piece_type)
        self.promotion_pending = None

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(
        self,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        captured: Piece | None,
    ) -> None:
        color = piece.color
        castling = self.castling

        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(color)
        elif piece.piece_type == PieceType.ROOK and from_sq.rank == color.back_rank:
            castling &= ~_corner_right(color, from_sq.file)

        if (
            self.config.revoke_castling_on_rook_capture
            and captured is not None
            and captured.piece_type == PieceType.ROOK
            and to_sq.rank == captured.color.back_rank
        ):
            castling &= ~_corner_right(captured.color, to_sq.file)

        self.castling = castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> GameState:
        return GameState(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            promotion_pending=self.promotion_pending,
            config=self.config,
        )


def _corner_right(color: Color, file: int) -> CastlingRights:
    if file == 0:
        return CastlingRights.queenside(color)
    if file == 7:
        return CastlingRights.kingside(color)
    return CastlingRights.NONE
