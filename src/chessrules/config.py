"""Rule options a game is created with."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RulesConfig:
    """Bookkeeping choices that differ between strict FIDE rules and the
    historical behaviour of this library.

    Args:
        reset_halfmove_on_pawn_move: Reset the halfmove clock on every pawn
            move, not only on captures.
        revoke_castling_on_rook_capture: Clear the opponent's castling right
            when a rook is captured on its original corner.
    """

    reset_halfmove_on_pawn_move: bool = False
    revoke_castling_on_rook_capture: bool = True

    @classmethod
    def standard(cls) -> RulesConfig:
        """Settings matching the FIDE Laws of Chess."""
        return cls(reset_halfmove_on_pawn_move=True, revoke_castling_on_rook_capture=True)
