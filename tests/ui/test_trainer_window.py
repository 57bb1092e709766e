"""Tests for TrainerWindow."""

from __future__ import annotations

import random

from chesstrainer.core.types import square_name
from chesstrainer.ui.bootstrap import create_window
from chesstrainer.ui.game_window import GameWindow
from chesstrainer.ui.settings import AppSettings
from chesstrainer.ui.trainer_window import TrainerWindow


def test_prompt_shows_target_name() -> None:
    window = TrainerWindow(rng=random.Random(1))
    assert window.prompt_text == window.trainer.target_name


def test_coordinates_are_hidden() -> None:
    window = TrainerWindow(rng=random.Random(1))
    scene = window.board_view.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)


def test_correct_click() -> None:
    window = TrainerWindow(rng=random.Random(1))
    target = window.trainer.target
    window.board_view.square_clicked.emit(target)
    assert window.feedback_text == "Correct  (1/1)"
    assert window.board_view.board_scene.highlighted_squares() == [target]
    assert window.prompt_text == window.trainer.target_name


def test_wrong_click() -> None:
    window = TrainerWindow(rng=random.Random(1))
    target = window.trainer.target
    wrong = (target + 1) % 64
    window.board_view.square_clicked.emit(wrong)
    assert window.feedback_text == f"Wrong: that was {square_name(wrong)}  (0/1)"
    assert window.board_view.board_scene.highlighted_squares() == [target]


def test_create_window_picks_mode() -> None:
    assert isinstance(create_window(AppSettings(mode="squares")), TrainerWindow)
    assert isinstance(create_window(AppSettings()), GameWindow)
