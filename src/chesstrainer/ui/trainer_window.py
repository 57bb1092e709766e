"""TrainerWindow — click the square whose name is shown."""

from __future__ import annotations

import random

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesstrainer.core.types import Square, square_name
from chesstrainer.game.trainer import SquareTrainer
from chesstrainer.ui.board.board_view import BoardView
from chesstrainer.ui.settings import AppSettings
from chesstrainer.ui.styles.theme import BoardTheme


class TrainerWindow(QMainWindow):
    """Empty board, the requested square name, and the running score."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        rng: random.Random | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings(mode="squares")
        self._trainer = SquareTrainer(rng)

        self.setWindowTitle("Chess Trainer - Squares")

        self._board_view = BoardView()
        self._prompt_label = QLabel()
        self._prompt_label.setObjectName("statusLabel")
        self._feedback_label = QLabel()
        self._flip_button = QPushButton("Flip")

        buttons = QHBoxLayout()
        buttons.addWidget(self._flip_button)
        buttons.addStretch(1)
        buttons.addWidget(self._feedback_label)

        layout = QVBoxLayout()
        layout.addWidget(self._prompt_label)
        layout.addWidget(self._board_view, 1)
        layout.addLayout(buttons)
        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(self._settings.board_theme))
        # Coordinates would give the answer away.
        scene.set_show_coordinates(False)
        scene.set_flipped(self._settings.flipped)

        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._flip_button.clicked.connect(scene.flip)
        self._trainer.events.on_answer.append(self._on_answer)
        self._trainer.events.on_target_changed.append(self._on_target_changed)

        self._on_target_changed(self._trainer.target)

    @property
    def trainer(self) -> SquareTrainer:
        return self._trainer

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def prompt_text(self) -> str:
        return self._prompt_label.text()

    @property
    def feedback_text(self) -> str:
        return self._feedback_label.text()

    def _on_square_clicked(self, sq: Square) -> None:
        self._trainer.answer(sq)

    def _on_answer(self, target: Square, clicked: Square, correct: bool) -> None:
        scene = self._board_view.board_scene
        scene.clear_highlights()
        scene.highlight_squares([target])
        verdict = "Correct" if correct else f"Wrong: that was {square_name(clicked)}"
        self._feedback_label.setText(f"{verdict}  ({self._trainer.score_text()})")

    def _on_target_changed(self, target: Square) -> None:
        self._prompt_label.setText(square_name(target))
