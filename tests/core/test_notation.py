"""Tests for board notation (FEN-style) parsing and serialization."""

import pytest

from chesstrainer.core.enums import CastlingRights, Color, PieceType
from chesstrainer.core.notation import (
    STARTING_FEN,
    castling_to_fen,
    placement_to_fen,
    position_from_fen,
    position_to_fen,
)
from chesstrainer.core.piece import Piece
from chesstrainer.core.position import Position
from chesstrainer.core.types import D5, E1, E8, parse_square


class TestSerialization:
    def test_initial_position(self) -> None:
        assert position_to_fen(Position()) == STARTING_FEN
        assert STARTING_FEN == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0"

    def test_placement_only(self) -> None:
        assert placement_to_fen(Position().board) == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

    def test_en_passant_field(self) -> None:
        pos = Position()
        pos.play_legal_move(parse_square("d2"), parse_square("d4"))
        assert position_to_fen(pos).split()[3] == "d4"

    def test_castling_field(self) -> None:
        assert castling_to_fen(CastlingRights.ALL) == "KQkq"
        assert castling_to_fen(CastlingRights.NONE) == "-"
        assert castling_to_fen(CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_KINGSIDE) == "Qk"

    def test_castling_field_after_king_moves(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        pos.play_legal_move(E1, parse_square("e2"))
        pos.play_legal_move(E8, parse_square("e7"))
        assert position_to_fen(pos) == "r6r/4k3/8/8/8/8/4K3/R6R w - - 2 3"


class TestParsing:
    def test_starting_fields(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos == Position()

    def test_pieces_and_side(self) -> None:
        pos = position_from_fen("7k/8/8/3pP3/8/8/8/K7 w - d5 0 1")
        assert pos.side_to_move == Color.WHITE
        assert pos.piece_at(D5) == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.en_passant == D5
        assert pos.castling == CastlingRights.NONE

    def test_counters_are_optional(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/K7 b - -")
        assert pos.side_to_move == Color.BLACK
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 0

    def test_counters(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/K7 w - - 12 40")
        assert pos.halfmove_clock == 12
        assert pos.fullmove_number == 40

    def test_reparse_is_stable(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R b Kq e4 3 21"
        assert position_to_fen(position_from_fen(fen)) == fen


class TestParseErrors:
    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w - -",
            "9/8/8/8/8/8/8/8 w - -",
            "ppppppppp/8/8/8/8/8/8/8 w - -",
            "7/8/8/8/8/8/8/8 w - -",
            "x7/8/8/8/8/8/8/8 w - -",
            "4k3/8/8/8/8/8/8/4K3 x - -",
            "4k3/8/8/8/8/8/8/4K3 w KX -",
            "4k3/8/8/8/8/8/8/4K3 w KK -",
            "4k3/8/8/8/8/8/8/4K3 w - z9",
            "4k3/8/8/8/8/8/8/4K3 w - e3",
            "4k3/8/8/8/8/8/8/4K3 b - e5",
            "4k3/8/8/8/8/8/8/4K3 w - - a 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 -1",
        ],
    )
    def test_rejects(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)

    @pytest.mark.parametrize(
        ("fen", "message"),
        [
            ("8/8/8/8/8/8/8/K7 w - - 0 0", "need one black king, found 0"),
            ("4k3/8/8/8/8/8/8/8 b - - 0 0", "need one white king, found 0"),
            ("4k3/8/8/8/8/8/8/K3K3 w - - 0 0", "need one white king, found 2"),
        ],
    )
    def test_rejects_wrong_king_count(self, fen: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            position_from_fen(fen)
