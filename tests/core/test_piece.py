"""Tests for Piece, PieceType and Color."""

import pytest

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece


class TestColor:
    def test_opposite_is_involution(self) -> None:
        for color in Color:
            assert color.opposite != color
            assert color.opposite.opposite == color

    def test_ranks(self) -> None:
        assert (Color.WHITE.forward, Color.BLACK.forward) == (1, -1)
        assert (Color.WHITE.pawn_rank, Color.BLACK.pawn_rank) == (1, 6)
        assert (Color.WHITE.last_rank, Color.BLACK.last_rank) == (7, 0)
        assert (Color.WHITE.back_rank, Color.BLACK.back_rank) == (0, 7)


class TestPieceType:
    @pytest.mark.parametrize(
        ("char", "ptype"),
        [
            ("k", PieceType.KING),
            ("q", PieceType.QUEEN),
            ("r", PieceType.ROOK),
            ("b", PieceType.BISHOP),
            ("n", PieceType.KNIGHT),
            ("p", PieceType.PAWN),
        ],
    )
    def test_code_letters(self, char: str, ptype: PieceType) -> None:
        assert ptype.char == char
        assert PieceType.from_char(char) == ptype
        assert PieceType.from_char(char.upper()) == ptype

    def test_unknown_letter_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece"):
            PieceType.from_char("x")


class TestPiece:
    def test_fen_char_case(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.KNIGHT)) == "n"

    def test_from_char(self) -> None:
        assert Piece.from_char("Q") == Piece(Color.WHITE, PieceType.QUEEN)
        assert Piece.from_char("p") == Piece(Color.BLACK, PieceType.PAWN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("?")

    def test_structural_equality(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK) == Piece(Color.WHITE, PieceType.ROOK)
        assert Piece(Color.WHITE, PieceType.ROOK) != Piece(Color.BLACK, PieceType.ROOK)

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"


class TestCastlingRights:
    def test_per_color_views(self) -> None:
        assert CastlingRights.kingside(Color.WHITE) == CastlingRights.WHITE_KINGSIDE
        assert CastlingRights.queenside(Color.BLACK) == CastlingRights.BLACK_QUEENSIDE
        assert CastlingRights.both(Color.BLACK) == CastlingRights.BLACK_BOTH
