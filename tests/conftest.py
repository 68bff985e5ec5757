"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.types import Square, parse_square
from chessrules.game import Game


@pytest.fixture
def game_at() -> Callable[[str], Game]:
    """Build a :class:`Game` from a position string."""
    return Game.from_position_string


@pytest.fixture
def squares() -> Callable[[str], set[Square]]:
    """Turn ``"e3 e4"`` into ``{Square(e3), Square(e4)}``."""

    def _squares(names: str) -> set[Square]:
        return {parse_square(name) for name in names.split()}

    return _squares
