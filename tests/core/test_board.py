"""Tests for Board and Piece."""

import pytest

from chesstrainer.core.board import Board
from chesstrainer.core.enums import Color, PieceType
from chesstrainer.core.piece import Piece
from chesstrainer.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_middle_is_empty(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board.is_empty(sq)

    def test_occupied_counts(self) -> None:
        board = Board.initial()
        assert len(list(board.occupied(Color.WHITE))) == 16
        assert len(list(board.occupied(Color.BLACK))) == 16


class TestBoardMutation:
    def test_set_and_clear(self) -> None:
        board = Board()
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        board[E4] = knight
        assert board[E4] == knight
        board[E4] = None
        assert board.is_empty(E4)

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E2] = None
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert clone != board

    def test_find(self) -> None:
        board = Board.initial()
        assert board.find(Piece(Color.BLACK, PieceType.QUEEN)) == D8
        assert Board().find(Piece(Color.BLACK, PieceType.QUEEN)) is None

    def test_repr_draws_diagram(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  a b c d e f g h"


class TestPiece:
    def test_str_is_notation_letter(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)

    def test_from_char_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"
