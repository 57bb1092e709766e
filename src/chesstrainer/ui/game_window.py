"""GameWindow — play a two-player game by clicking squares."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesstrainer.core.enums import GameResult
from chesstrainer.core.move import Move
from chesstrainer.core.position import Position
from chesstrainer.core.types import Square
from chesstrainer.game.controller import GameController
from chesstrainer.ui.board.board_view import BoardView
from chesstrainer.ui.settings import AppSettings
from chesstrainer.ui.styles.theme import BoardTheme


class GameWindow(QMainWindow):
    """Board, status line and Flip / New game buttons around a controller."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._controller = GameController(legal_only=self._settings.legal_only)
        if self._settings.start_fen:
            self._controller.new_game(self._settings.start_fen)

        self.setWindowTitle("Chess Trainer")

        self._board_view = BoardView()
        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        self._flip_button = QPushButton("Flip")
        self._new_game_button = QPushButton("New game")

        buttons = QHBoxLayout()
        buttons.addWidget(self._flip_button)
        buttons.addWidget(self._new_game_button)
        buttons.addStretch(1)

        layout = QVBoxLayout()
        layout.addWidget(self._status_label)
        layout.addWidget(self._board_view, 1)
        layout.addLayout(buttons)
        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

        self._apply_settings()

        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._flip_button.clicked.connect(self.flip_board)
        self._new_game_button.clicked.connect(self.new_game)

        events = self._controller.events
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_move.append(self._on_move)
        events.on_game_over.append(self._on_game_over)

        self._refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Actions ──────────────────────────────────────────────────────────

    def flip_board(self) -> None:
        self._board_view.board_scene.flip()
        self._refresh_check()

    def new_game(self) -> None:
        self._controller.new_game(self._settings.start_fen)
        self._board_view.board_scene.clear_highlights()
        self._refresh()

    # ── Controller / view wiring ─────────────────────────────────────────

    def _on_square_clicked(self, sq: Square) -> None:
        self._controller.handle_square_click(sq)

    def _on_selection_changed(self, sq: Square | None, targets: list[Square]) -> None:
        scene = self._board_view.board_scene
        scene.clear_hints()
        scene.highlight_last_move(self._controller.last_move)
        if sq is None:
            return
        scene.highlight_squares([sq])
        scene.show_hints(targets)

    def _on_move(self, move: Move, position: Position) -> None:
        scene = self._board_view.board_scene
        scene.set_position(position)
        scene.highlight_last_move(move)
        self._refresh_check()
        self._status_label.setText(self._controller.status_text())

    def _on_game_over(self, result: GameResult) -> None:
        self._status_label.setText(self._controller.status_text())

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_hints(s.show_hints)
        scene.set_flipped(s.flipped)

    def _refresh(self) -> None:
        scene = self._board_view.board_scene
        scene.clear_hints()
        scene.set_position(self._controller.position)
        self._refresh_check()
        self._status_label.setText(self._controller.status_text())

    def _refresh_check(self) -> None:
        scene = self._board_view.board_scene
        if self._controller.is_in_check():
            position = self._controller.position
            scene.highlight_check(position.king_square(position.side_to_move))
        else:
            scene.highlight_check(None)
