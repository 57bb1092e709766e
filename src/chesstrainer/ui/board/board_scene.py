"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesstrainer.core.enums import Color
from chesstrainer.core.types import Square, file_of, is_light_square, make_square, rank_of
from chesstrainer.ui.board.piece_item import PieceItem
from chesstrainer.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chesstrainer.core.move import Move
    from chesstrainer.core.position import Position


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, hints and piece items.

    The scene knows nothing about chess rules: it shows whatever the
    position reports via ``piece_at`` and whatever squares it is told to
    highlight or hint.

    Signals:
        square_clicked(int): Emitted with the square under a mouse press.
    """

    square_clicked = pyqtSignal(int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_hints = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: dict[Square, QGraphicsRectItem] = {}
        self._check_items: list[QGraphicsRectItem] = []
        self._hint_items: dict[Square, QGraphicsItem] = {}
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._position = position
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        highlighted = list(self._highlight_items)
        hinted = list(self._hint_items)
        self.clear_highlights()
        self.clear_hints()
        self._clear_items(self._check_items)
        self._draw_board()
        self._sync_pieces()
        self.highlight_squares(highlighted)
        self.show_hints(hinted)

    def flip(self) -> None:
        self.set_flipped(not self._flipped)

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_hints(self, visible: bool) -> None:
        """Show or hide legal-move hints."""
        self._show_hints = visible
        if not visible:
            self.clear_hints()

    def piece_item(self, sq: Square) -> PieceItem | None:
        return self._piece_items.get(sq)

    # ── Highlights and hints ─────────────────────────────────────────────

    def highlight_squares(self, squares: Iterable[Square]) -> None:
        """Tint *squares* with the highlight colour (idempotent per square)."""
        for sq in squares:
            if sq in self._highlight_items:
                continue
            rect = self._make_overlay(sq, self._theme.highlight)
            rect.setZValue(0.5)
            self._highlight_items[sq] = rect

    def unhighlight_square(self, sq: Square) -> None:
        item = self._highlight_items.pop(sq, None)
        if item is not None:
            self.removeItem(item)

    def clear_highlights(self) -> None:
        for item in self._highlight_items.values():
            self.removeItem(item)
        self._highlight_items.clear()

    def highlighted_squares(self) -> list[Square]:
        return list(self._highlight_items)

    def highlight_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move only."""
        self.clear_highlights()
        if move is not None:
            self.highlight_squares((move.from_sq, move.to_sq))

    def highlight_check(self, king_sq: Square | None) -> None:
        """Mark *king_sq* as a king in check, or clear the mark."""
        self._clear_items(self._check_items)
        if king_sq is None:
            return
        rect = self._make_overlay(king_sq, self._theme.highlight_check)
        rect.setZValue(0.6)
        self._check_items.append(rect)

    def show_hints(self, squares: Iterable[Square]) -> None:
        """Dot on empty targets, ring on occupied ones."""
        if not self._show_hints:
            return
        for sq in squares:
            if sq in self._hint_items:
                continue
            occupied = self._position is not None and self._position.piece_at(sq) is not None
            item = self._make_ring(sq) if occupied else self._make_dot(sq)
            self._hint_items[sq] = item

    def clear_hints(self) -> None:
        for item in self._hint_items.values():
            self.removeItem(item)
        self._hint_items.clear()

    def hinted_squares(self) -> list[Square]:
        return list(self._hint_items)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 6))

        for sq in range(64):
            f, r = file_of(sq), rank_of(sq)
            vf, vr = self._visual_coords(f, r)
            is_light = is_light_square(sq)
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Rank numbers along the left edge of the visible board
            if vf == 0:
                txt = QGraphicsSimpleTextItem(str(r + 1))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vf * t + 2, vr * t + 1)
                self._add_coord(txt)

            # File letters along the bottom edge
            if vr == 7:
                txt = QGraphicsSimpleTextItem(chr(ord("a") + f))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vf * t + t - 12, vr * t + t - 16)
                self._add_coord(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(self, item: QGraphicsSimpleTextItem) -> None:
        item.setZValue(0.3)
        item.setVisible(self._show_coordinates)
        self.addItem(item)
        self._coord_items.append(item)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._position is None:
            return

        t = self.TILE
        for sq in range(64):
            piece = self._position.piece_at(sq)
            if piece is None:
                continue
            if piece.color == Color.WHITE:
                fill, outline = self._theme.white_piece, self._theme.black_piece
            else:
                fill, outline = self._theme.black_piece, self._theme.white_piece
            item = PieceItem(piece, sq, t, fill, outline)
            vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
            item.place_at(vf * t, vr * t)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return make_square(f, r)

    def _square_center(self, sq: Square) -> QPointF:
        t = self.TILE
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        return QPointF(vf * t + t / 2, vr * t + t / 2)

    def _make_overlay(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        radius = self.TILE * 0.15
        center = self._square_center(sq)
        dot = QGraphicsEllipseItem(
            center.x() - radius, center.y() - radius, 2 * radius, 2 * radius
        )
        dot.setBrush(QBrush(self._theme.hint))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        return dot

    def _make_ring(self, sq: Square) -> QGraphicsEllipseItem:
        t = self.TILE
        width = t / 12
        center = self._square_center(sq)
        radius = t / 2 - width / 2
        ring = QGraphicsEllipseItem(
            center.x() - radius, center.y() - radius, 2 * radius, 2 * radius
        )
        ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        ring.setPen(QPen(self._theme.hint, width))
        ring.setZValue(2)
        self.addItem(ring)
        return ring

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
