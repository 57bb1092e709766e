"""Board rendering widgets."""

from chesstrainer.ui.board.board_scene import BoardScene
from chesstrainer.ui.board.board_view import BoardView
from chesstrainer.ui.board.piece_item import PieceItem

__all__ = ["BoardScene", "BoardView", "PieceItem"]
