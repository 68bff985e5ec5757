"""Move value object; renders as UCI-style text such as ``e2e4``."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A piece relocation from one square to another.

    Promotion is not part of the move: the piece kind is chosen afterwards
    with :meth:`GameState.promote`.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"
