"""Game layer — click-driven controller and the square-naming drill.

Quick start::

    from chesstrainer.core import parse_square
    from chesstrainer.game import GameController

    ctrl = GameController()
    ctrl.handle_square_click(parse_square("e2"))
    ctrl.handle_square_click(parse_square("e4"))
"""

from chesstrainer.game.controller import ClickOutcome, GameController, GameEvents
from chesstrainer.game.trainer import SquareTrainer, TrainerEvents

__all__ = [
    "ClickOutcome",
    "GameController",
    "GameEvents",
    "SquareTrainer",
    "TrainerEvents",
]
