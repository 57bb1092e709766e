"""GameController — click-driven play on top of a :class:`Position`.

Turns a stream of clicked squares into selections and moves, and emits
events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chesstrainer.core.enums import Color, GameResult
from chesstrainer.core.move import Move, MoveResult
from chesstrainer.core.move_generator import MoveGenerator
from chesstrainer.core.notation import position_from_fen
from chesstrainer.core.position import Position
from chesstrainer.core.rules import Rules
from chesstrainer.core.types import Square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Position], None]
SelectionCallback = Callable[[Square | None, list[Square]], None]  # square, targets
GameOverCallback = Callable[[GameResult], None]


class ClickOutcome(IntEnum):
    """What a single square click did."""

    SELECTED = auto()
    MOVED = auto()
    CLEARED = auto()


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns the live :class:`Position` of one game and the click selection.

    With ``legal_only=False`` moves are checked for pseudo-legality only,
    so a player may leave their own king en prise.
    """

    __slots__ = (
        "_position",
        "_legal_only",
        "_selected",
        "_targets",
        "_last_move",
        "_result",
        "events",
    )

    def __init__(self, position: Position | None = None, *, legal_only: bool = True) -> None:
        self._position = position if position is not None else Position()
        self._legal_only = legal_only
        self._selected: Square | None = None
        self._targets: list[Square] = []
        self._last_move: Move | None = None
        self._result = Rules.game_result(self._position)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def targets(self) -> list[Square]:
        """Destinations offered for the selected piece."""
        return list(self._targets)

    @property
    def last_move(self) -> Move | None:
        return self._last_move

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._result != GameResult.IN_PROGRESS

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Reset to the starting position (or *fen*)."""
        self._position = position_from_fen(fen) if fen else Position()
        self._last_move = None
        self._result = Rules.game_result(self._position)
        self._set_selection(None, [])

    # ── Interaction ──────────────────────────────────────────────────────

    def handle_square_click(self, sq: Square) -> ClickOutcome:
        """Select an own piece, play to a highlighted target, or clear."""
        if self._position.is_own_piece(sq) and not self.is_game_over:
            self.select(sq)
            return ClickOutcome.SELECTED

        if self._selected is not None and sq in self._targets:
            result = self.submit_move(self._selected, sq)
            if result:
                return ClickOutcome.MOVED

        self._set_selection(None, [])
        return ClickOutcome.CLEARED

    def select(self, sq: Square) -> list[Square]:
        """Select *sq* and return the destinations it offers."""
        gen = MoveGenerator(self._position)
        targets = gen.legal_moves(sq) if self._legal_only else gen.pseudo_legal_moves(sq)
        self._set_selection(sq, targets)
        return targets

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Play a move. Rejected moves change nothing and are returned as such."""
        if self._legal_only:
            result = self._position.play_legal_move(from_sq, to_sq)
        else:
            result = self._position.play_pseudo_legal_move(from_sq, to_sq)
        if not result:
            return result

        self._last_move = result.move
        self._result = Rules.game_result(self._position)
        self._set_selection(None, [])
        self._emit_move(result.move)

        if self.is_game_over:
            _LOGGER.info("Game over: %s", self._result.name)
            self._emit_game_over(self._result)
        return result

    # ── Status queries ───────────────────────────────────────────────────

    def is_in_check(self) -> bool:
        return Rules.is_in_check(self._position)

    def is_checkmate(self) -> bool:
        return Rules.is_checkmate(self._position)

    def is_stalemate(self) -> bool:
        return Rules.is_stalemate(self._position)

    def status_text(self) -> str:
        """One-line description of the game state for display."""
        side = str(self.side_to_move).capitalize()
        if self._result == GameResult.DRAW:
            return f"Stalemate: {side} has no legal moves"
        if self.is_game_over:
            winner = str(self.side_to_move.opposite).capitalize()
            return f"Checkmate: {winner} wins"
        if self.is_in_check():
            return f"{side} to move (check)"
        return f"{side} to move"

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selection(self, sq: Square | None, targets: list[Square]) -> None:
        self._selected = sq
        self._targets = targets
        for cb in self.events.on_selection_changed:
            cb(sq, list(targets))

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._position)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
