"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.errors import NoTileError, NotCurrentTurnError
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.state import GameState


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}
_STEPPING_OFFSETS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.KING: KING_OFFSETS,
    PieceType.KNIGHT: KNIGHT_OFFSETS,
}

# (file direction, right for that flank)
_CASTLING_FLANKS = (
    (1, CastlingRights.kingside),
    (-1, CastlingRights.queenside),
)


class MoveGenerator:
    """Generates moves for pieces of a :class:`GameState`.

    The generator mutates the state via ``perform_move`` / ``undo_move``
    internally but always restores it before returning.
    """

    __slots__ = ("_state", "_board")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._board = state.board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> set[Square]:
        """Destinations the piece on *sq* may legally move to.

        Raises:
            NoTileError: *sq* is empty.
            NotCurrentTurnError: the piece belongs to the side not to move.
        """
        piece = self._board[sq]
        if piece is None:
            raise NoTileError(f"No piece on {sq}")
        if piece.color != self._state.side_to_move:
            raise NotCurrentTurnError(
                f"{piece.color} piece on {sq}, {self._state.side_to_move} to move"
            )

        return {
            to_sq
            for to_sq in self.pseudo_legal_moves(sq, include_castling=True)
            if self._is_safe(sq, to_sq, piece.color)
        }

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move, a1 origin first."""
        moves: list[Move] = []
        color = self._state.side_to_move
        for from_sq, _ in list(self._board.occupied(color)):
            for to_sq in sorted(self.legal_moves(from_sq), key=lambda s: s.index):
                moves.append(Move(from_sq, to_sq))
        return moves

    def pseudo_legal_moves(self, sq: Square, include_castling: bool = True) -> set[Square]:
        """Moves obeying piece movement and board geometry for the piece on
        *sq*; they may leave the mover's own king in check.

        Castling is only proposed when *include_castling* is true.
        """
        piece = self._board[sq]
        if piece is None:
            raise ValueError(f"No piece on {sq}")

        moves: set[Square] = set()
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype in _SLIDING_DIRS:
            self._gen_sliding(sq, piece.color, _SLIDING_DIRS[ptype], moves)
        else:
            self._gen_stepping(sq, piece.color, _STEPPING_OFFSETS[ptype], moves)
            if ptype == PieceType.KING and include_castling:
                self._gen_castling(sq, piece.color, moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A side without a king is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Uses each piece's moves without castling. Pawns attack their two
        forward diagonals whether or not the target is occupied.
        """
        for from_sq, piece in self._board.occupied(by_color):
            if piece.piece_type == PieceType.PAWN:
                if sq.rank - from_sq.rank == by_color.forward and abs(sq.file - from_sq.file) == 1:
                    return True
                continue
            if sq in self.pseudo_legal_moves(from_sq, include_castling=False):
                return True
        return False

    # -- Legality test ------------------------------------------------------

    def _is_safe(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        """Try the move and report whether *color*'s king is left unattacked."""
        undo = self._state.perform_move(from_sq, to_sq)
        try:
            return not self.is_in_check(color)
        finally:
            self._state.undo_move(undo)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: set[Square]) -> None:
        board = self._board
        forward = color.forward

        one_step = sq.offset(0, forward)
        if one_step is not None and board.is_empty(one_step):
            moves.add(one_step)
            if sq.rank == color.pawn_rank:
                two_step = sq.offset(0, 2 * forward)
                if two_step is not None and board.is_empty(two_step):
                    moves.add(two_step)

        for side in (-1, 1):
            cap_sq = sq.offset(side, forward)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.add(cap_sq)
            elif cap_sq == self._state.en_passant:
                beside = board[Square(cap_sq.file, sq.rank)]
                if beside == Piece(color.opposite, PieceType.PAWN):
                    moves.add(cap_sq)

    def _gen_stepping(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: set[Square],
    ) -> None:
        board = self._board
        for df, dr in offsets:
            to_sq = sq.offset(df, dr)
            if to_sq is None:
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.add(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: set[Square],
    ) -> None:
        board = self._board
        for df, dr in directions:
            to_sq = sq.offset(df, dr)
            while to_sq is not None:
                target = board[to_sq]
                if target is None:
                    moves.add(to_sq)
                    to_sq = to_sq.offset(df, dr)
                    continue
                if target.color != color:
                    moves.add(to_sq)
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: set[Square]) -> None:
        # The landing square is checked by the legality filter, not here.
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)

        for direction, right in _CASTLING_FLANKS:
            if not self._state.castling & right(color):
                continue
            crossed = king_sq.offset(direction, 0)
            landing = king_sq.offset(2 * direction, 0)
            if crossed is None or landing is None:
                continue
            if self.is_square_attacked(king_sq, opponent):
                return
            if self.is_square_attacked(crossed, opponent):
                continue
            # The rook carrying the right must be the first piece met.
            found = self._board.first_occupied(king_sq, direction, 0)
            if found is None or found[1] != rook:
                continue
            if found[0].file == _corner_file(direction):
                moves.add(landing)


def _corner_file(direction: int) -> int:
    return 7 if direction == 1 else 0
