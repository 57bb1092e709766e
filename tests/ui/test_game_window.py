"""Tests for GameWindow wiring between board clicks and the controller."""

from __future__ import annotations

from chesstrainer.core.enums import Color
from chesstrainer.core.types import E1, E2, E3, E4, E7, parse_square
from chesstrainer.ui.game_window import GameWindow
from chesstrainer.ui.settings import AppSettings


def click(window: GameWindow, *names: str) -> None:
    for name in names:
        window.board_view.square_clicked.emit(parse_square(name))


class TestClicks:
    def test_selecting_shows_hints_and_highlight(self) -> None:
        window = GameWindow()
        click(window, "e2")
        scene = window.board_view.board_scene
        assert scene.highlighted_squares() == [E2]
        assert set(scene.hinted_squares()) == {E3, E4}

    def test_moving_updates_board_and_status(self) -> None:
        window = GameWindow()
        click(window, "e2", "e4")
        scene = window.board_view.board_scene
        assert window.controller.side_to_move == Color.BLACK
        assert scene.piece_item(E4) is not None
        assert scene.piece_item(E2) is None
        assert set(scene.highlighted_squares()) == {E2, E4}
        assert scene.hinted_squares() == []
        assert window.status_text == "Black to move"

    def test_deselect_keeps_last_move_highlight(self) -> None:
        window = GameWindow()
        click(window, "e2", "e4", "e7", "a4")
        scene = window.board_view.board_scene
        assert set(scene.highlighted_squares()) == {E2, E4}
        assert E7 not in scene.highlighted_squares()

    def test_opponent_piece_ignored(self) -> None:
        window = GameWindow()
        click(window, "e7")
        assert window.controller.selected is None
        assert window.board_view.board_scene.hinted_squares() == []

    def test_checkmate_status(self) -> None:
        window = GameWindow()
        click(window, "f2", "f3", "e7", "e5", "g2", "g4", "d8", "h4")
        assert window.status_text == "Checkmate: Black wins"
        assert len(window.board_view.board_scene._check_items) == 1


class TestSettings:
    def test_start_fen_and_hints_off(self) -> None:
        settings = AppSettings(
            start_fen="4k3/8/8/8/8/8/8/r3K3 w - - 0 1",
            show_hints=False,
        )
        window = GameWindow(settings)
        assert window.status_text == "White to move (check)"
        click(window, "e1")
        assert window.controller.selected == E1
        assert window.board_view.board_scene.hinted_squares() == []

    def test_flipped(self) -> None:
        window = GameWindow(AppSettings(flipped=True))
        assert window.board_view.board_scene.is_flipped()

    def test_free_play(self) -> None:
        settings = AppSettings(start_fen="4r2k/8/8/8/8/8/4B3/4K3 w - - 0 1", legal_only=False)
        window = GameWindow(settings)
        click(window, "e2", "d3")
        assert window.controller.side_to_move == Color.BLACK


class TestActions:
    def test_new_game_restores_start(self) -> None:
        window = GameWindow()
        click(window, "e2", "e4")
        window.new_game()
        scene = window.board_view.board_scene
        assert window.controller.side_to_move == Color.WHITE
        assert scene.piece_item(E2) is not None
        assert scene.highlighted_squares() == []
        assert window.status_text == "White to move"

    def test_flip_board(self) -> None:
        window = GameWindow()
        window.flip_board()
        assert window.board_view.board_scene.is_flipped()
        window.flip_board()
        assert not window.board_view.board_scene.is_flipped()
