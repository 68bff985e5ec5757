"""Tests for position-string parsing and serialisation."""

import pytest

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.errors import (
    FenError,
    InvalidCastlingError,
    InvalidClockError,
    InvalidEnPassantTargetError,
    InvalidPieceError,
    InvalidTurnError,
    LargeSkipError,
    OutsideBoardError,
    TooShortError,
)
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    state_from_fen,
    state_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.types import D6, E1, E2, E3, E4, E8


class TestPlacement:
    def test_starting_placement(self) -> None:
        board = board_from_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        assert board == Board.initial()

    def test_placement_roundtrip(self) -> None:
        placement = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R"
        assert board_to_placement(board_from_placement(placement)) == placement

    def test_empty_board(self) -> None:
        assert board_to_placement(Board()) == "8/8/8/8/8/8/8/8"

    def test_short_ranks_are_padded(self) -> None:
        board = board_from_placement("4k/8/8/8/8/8/8/4K")
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert board_to_placement(board) == "4k3/8/8/8/8/8/8/4K3"

    def test_missing_ranks_are_empty(self) -> None:
        board = board_from_placement("4k3")
        assert list(board.occupied()) == [(E8, Piece(Color.BLACK, PieceType.KING))]

    def test_zero_skip_is_noop(self) -> None:
        assert board_from_placement("4k003") == board_from_placement("4k3")

    def test_large_skip(self) -> None:
        with pytest.raises(LargeSkipError):
            board_from_placement("9/8/8/8/8/8/8/8")

    @pytest.mark.parametrize(
        "placement",
        [
            "54/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "8p/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/8/8",
        ],
    )
    def test_outside_board(self, placement: str) -> None:
        with pytest.raises(OutsideBoardError):
            board_from_placement(placement)

    def test_invalid_piece(self) -> None:
        with pytest.raises(InvalidPieceError) as info:
            board_from_placement("x7/8/8/8/8/8/8/8")
        assert info.value.char == "x"


class TestFenParsing:
    def test_starting_fields(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert state.side_to_move == Color.WHITE
        assert state.castling == CastlingRights.ALL
        assert state.en_passant is None
        assert state.promotion_pending is None
        assert (state.halfmove_clock, state.fullmove_number) == (0, 1)
        assert state.board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert state_from_fen(fen).en_passant == E3

    def test_en_passant_for_white(self) -> None:
        fen = "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 3"
        assert state_from_fen(fen).en_passant == D6

    def test_partial_castling(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert state.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_castling_subset_in_order(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Qk - 0 1")
        assert state.castling == (
            CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_KINGSIDE
        )

    def test_clocks(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/4K3 b - - 37 112")
        assert (state.halfmove_clock, state.fullmove_number) == (37, 112)

    def test_extra_fields_ignored(self) -> None:
        state = state_from_fen(STARTING_FEN + " trailing junk")
        assert state_to_fen(state) == STARTING_FEN

    def test_config_attached(self) -> None:
        config = RulesConfig.standard()
        assert state_from_fen(STARTING_FEN, config).config is config


class TestFenErrors:
    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/8 w",
            "8/8/8/8/8/8/8/8 w - - 0",
        ],
    )
    def test_too_short(self, fen: str) -> None:
        with pytest.raises(TooShortError):
            state_from_fen(fen)

    @pytest.mark.parametrize("side", ["x", "W", "white"])
    def test_invalid_turn(self, side: str) -> None:
        with pytest.raises(InvalidTurnError):
            state_from_fen(f"4k3/8/8/8/8/8/8/4K3 {side} - - 0 1")

    @pytest.mark.parametrize(
        "castling", ["KX", "KK", "--", "kqKQk", "qkQK", "QK", "qk", "kQ"]
    )
    def test_invalid_castling(self, castling: str) -> None:
        fen = f"4k3/8/8/8/8/8/8/4K3 w {castling} - 0 1"
        with pytest.raises(InvalidCastlingError):
            state_from_fen(fen)

    def test_invalid_en_passant_square(self) -> None:
        with pytest.raises(InvalidEnPassantTargetError) as info:
            state_from_fen("4k3/8/8/8/8/8/8/4K3 w - e9 0 1")
        assert info.value.reason == "Rank must be between 1 and 8"

    def test_en_passant_wrong_rank_for_side(self) -> None:
        with pytest.raises(InvalidEnPassantTargetError):
            state_from_fen("4k3/8/8/8/4P3/8/8/4K3 w - e3 0 1")
        with pytest.raises(InvalidEnPassantTargetError):
            state_from_fen("4k3/8/8/4p3/8/8/8/4K3 b - e6 0 1")

    @pytest.mark.parametrize(
        ("halfmove", "fullmove"),
        [("x", "1"), ("-1", "1"), ("0", "0"), ("0", "one"), ("1.5", "1")],
    )
    def test_invalid_clock(self, halfmove: str, fullmove: str) -> None:
        with pytest.raises(InvalidClockError):
            state_from_fen(f"4k3/8/8/8/8/8/8/4K3 w - - {halfmove} {fullmove}")

    def test_placement_errors_come_first(self) -> None:
        with pytest.raises(LargeSkipError):
            state_from_fen("9/8/8/8/8/8/8/8 x")

    def test_all_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            state_from_fen("nonsense")
        assert issubclass(TooShortError, FenError)


class TestFenSerialisation:
    def test_roundtrip_starting(self) -> None:
        assert state_to_fen(state_from_fen(STARTING_FEN)) == STARTING_FEN

    def test_after_e4(self) -> None:
        state = state_from_fen(STARTING_FEN)
        state.make_move(E2, E4)
        assert state_to_fen(state) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 1 1"
        )

    @pytest.mark.parametrize(
        "fen",
        [
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w Kq d6 0 3",
            "4k3/8/8/8/8/8/8/4K3 b - - 99 250",
        ],
    )
    def test_roundtrip(self, fen: str) -> None:
        assert state_to_fen(state_from_fen(fen)) == fen

    def test_castling_field_roundtrip(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert state_to_fen(state).split()[2] == "Kq"
