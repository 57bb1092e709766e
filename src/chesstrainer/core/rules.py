"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesstrainer.core.enums import Color, GameResult
from chesstrainer.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesstrainer.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # The game ends only when the side to move has no legal move.
    # Repetition, fifty-move and dead-position draws are not recognised.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        gen = MoveGenerator(position)
        color = position.side_to_move
        return not gen.has_legal_moves(color) and gen.is_in_check(color)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        gen = MoveGenerator(position)
        color = position.side_to_move
        return not gen.has_legal_moves(color) and not gen.is_in_check(color)

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        gen = MoveGenerator(position)
        color = position.side_to_move
        if gen.has_legal_moves(color):
            return GameResult.IN_PROGRESS
        if gen.is_in_check(color):
            return GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        return GameResult.DRAW
