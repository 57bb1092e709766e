"""Notation package: board-notation parsing and serialization."""

from chesstrainer.core.notation.fen import (
    STARTING_FEN,
    castling_to_fen,
    placement_to_fen,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "castling_to_fen",
    "placement_to_fen",
    "position_from_fen",
    "position_to_fen",
]
