"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chesstrainer.core import Position, MoveGenerator, parse_square, position_to_fen

    pos = Position()
    gen = MoveGenerator(pos)
    print(gen.legal_moves(parse_square("g1")))
    pos.play_legal_move(parse_square("e2"), parse_square("e4"))
    print(position_to_fen(pos))
"""

from chesstrainer.core.board import Board
from chesstrainer.core.enums import CastlingRights, Color, GameResult, MoveStatus, PieceType
from chesstrainer.core.move import Move, MoveResult
from chesstrainer.core.move_generator import MoveGenerator
from chesstrainer.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesstrainer.core.piece import Piece
from chesstrainer.core.position import Position
from chesstrainer.core.rules import Rules
from chesstrainer.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
