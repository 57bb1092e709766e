"""Tests for Rules: check, checkmate, stalemate."""

from chesstrainer.core.enums import Color, GameResult
from chesstrainer.core.move import Move
from chesstrainer.core.notation import position_from_fen
from chesstrainer.core.position import Position
from chesstrainer.core.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 4"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"
BACK_RANK_MATE = "R2k4/8/3K4/8/8/8/8/8 b - - 0 1"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(Position())

    def test_rook_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)

    def test_only_side_to_move_is_reported(self) -> None:
        # Black is "in check" here, but it is White's turn.
        pos = position_from_fen("4k3/8/8/8/8/8/8/4RK2 w - - 0 1")
        assert not Rules.is_in_check(pos)


class TestCheckmate:
    def test_fools_mate_played_out(self) -> None:
        pos = Position()
        for text in ("f2f3", "e7e5", "g2g4", "d8h4"):
            move = Move.from_uci(text)
            assert pos.play_legal_move(move.from_sq, move.to_sq)
        assert pos.side_to_move == Color.WHITE
        assert Rules.is_in_check(pos)
        assert Rules.is_checkmate(pos)
        assert not Rules.is_stalemate(pos)

    def test_fools_mate_from_fen(self) -> None:
        assert Rules.is_checkmate(position_from_fen(FOOLS_MATE))

    def test_back_rank(self) -> None:
        pos = position_from_fen(BACK_RANK_MATE)
        assert Rules.is_checkmate(pos)
        assert Rules.game_result(pos) == GameResult.WHITE_WINS

    def test_black_mated_means_white_wins_and_vice_versa(self) -> None:
        assert Rules.game_result(position_from_fen(FOOLS_MATE)) == GameResult.BLACK_WINS


class TestStalemate:
    def test_lone_king(self) -> None:
        pos = position_from_fen(STALEMATE)
        assert Rules.is_stalemate(pos)
        assert not Rules.is_checkmate(pos)
        assert not Rules.is_in_check(pos)
        assert Rules.game_result(pos) == GameResult.DRAW

    def test_start_is_in_progress(self) -> None:
        pos = Position()
        assert not Rules.is_stalemate(pos)
        assert Rules.game_result(pos) == GameResult.IN_PROGRESS
