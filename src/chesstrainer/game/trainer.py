"""SquareTrainer — name-the-square drill.

A random square label is shown; the player clicks the board square it
names. Only the coordinate helpers of the core are involved.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from chesstrainer.core.types import Square, square_name

AnswerCallback = Callable[[Square, Square, bool], None]  # target, clicked, correct


@dataclass
class TrainerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_answer: list[AnswerCallback] = field(default_factory=list)
    on_target_changed: list[Callable[[Square], None]] = field(default_factory=list)


class SquareTrainer:
    """Keeps the current target square and a running score.

    Args:
        rng: Source of randomness; pass a seeded ``random.Random`` for
            reproducible drills.
    """

    __slots__ = ("_rng", "_target", "correct", "attempts", "events")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.correct = 0
        self.attempts = 0
        self.events = TrainerEvents()
        self._target = self._rng.randrange(64)

    @property
    def target(self) -> Square:
        return self._target

    @property
    def target_name(self) -> str:
        return square_name(self._target)

    def next_target(self) -> Square:
        """Pick a new random square to ask for."""
        self._target = self._rng.randrange(64)
        for cb in self.events.on_target_changed:
            cb(self._target)
        return self._target

    def answer(self, sq: Square) -> bool:
        """Score a click on *sq*, then move on to a new target."""
        target = self._target
        is_correct = sq == target
        self.attempts += 1
        if is_correct:
            self.correct += 1
        for cb in self.events.on_answer:
            cb(target, sq, is_correct)
        self.next_target()
        return is_correct

    def reset(self) -> None:
        self.correct = 0
        self.attempts = 0
        self.next_target()

    def score_text(self) -> str:
        return f"{self.correct}/{self.attempts}"
