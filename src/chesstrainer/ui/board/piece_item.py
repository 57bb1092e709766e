"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from chesstrainer.core.piece import Piece
from chesstrainer.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece drawn as its Unicode symbol.

    Stores its logical *square*; the scene positions it.
    """

    _FONT_RATIO = 0.75

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size

        font = QFont()
        font.setPixelSize(int(tile_size * self._FONT_RATIO))
        self.setFont(font)
        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self.setZValue(1)

    def place_at(self, x: float, y: float) -> None:
        """Center the glyph inside the tile whose top-left corner is (*x*, *y*)."""
        bounds = self.boundingRect()
        t = self._tile_size
        self.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
