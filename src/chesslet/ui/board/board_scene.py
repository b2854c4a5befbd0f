"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesslet.core.move import Destination, HistoryRecord
from chesslet.core.types import Square, col_of, make_square, row_of
from chesslet.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chesslet.core.position import Position


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    The scene holds no game logic: clicks are reported as squares and the
    owner decides what they mean.

    Signals:
        square_clicked(int): Emitted with the board square under a click.
    """

    square_clicked = pyqtSignal(int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True

        self._selected_sq: Square | None = None
        self._destinations: list[Destination] = []

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._last_move: HistoryRecord | None = None

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._position = position
        self.clear_selection()
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide destination highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)
        elif self._selected_sq is not None:
            self.show_selection(self._selected_sq, self._destinations)

    def show_selection(self, sq: Square, destinations: list[Destination]) -> None:
        """Highlight the selected square and its destinations."""
        self.clear_selection()
        self._selected_sq = sq
        self._destinations = list(destinations)
        self._highlight_items.append(
            self._make_highlight(sq, self._theme.highlight_from)
        )
        if not self._show_legal_moves:
            return
        for dest in self._destinations:
            color = (
                self._theme.highlight_capture
                if dest.is_capture
                else self._theme.highlight_to
            )
            self._legal_dot_items.append(self._make_highlight(dest.square, color))

    def clear_selection(self) -> None:
        self._selected_sq = None
        self._destinations = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def highlight_last_move(self, record: HistoryRecord | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._last_move = record
        self._clear_items(self._last_move_highlights)
        if record is None:
            return
        for sq in (record.from_sq, record.to_sq):
            rect = self._make_highlight(sq, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        selected, destinations = self._selected_sq, self._destinations
        self._draw_board()
        self._sync_pieces()
        self.highlight_last_move(self._last_move)
        if selected is not None:
            self.show_selection(selected, destinations)

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in range(64):
            row, col = row_of(sq), col_of(sq)
            vc, vr = self._visual_coords(row, col)
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = (
                self._theme.coord_light if is_light else self._theme.coord_dark
            )
            # Rank numbers along the left visual edge
            if vc == 0:
                self._add_coord(
                    str(8 - row), vc * t + 2, vr * t + 1, font, coord_color
                )
            # File letters along the bottom visual edge
            if vr == 7:
                self._add_coord(
                    chr(ord("a") + col),
                    vc * t + t - 12,
                    vr * t + t - 16,
                    font,
                    coord_color,
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._position is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq in self._position.board.occupied():
            piece = self._position.board[sq]
            assert piece is not None
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece_ink))
            vc, vr = self._visual_coords(row_of(sq), col_of(sq))
            bounds = item.boundingRect()
            item.setPos(
                vc * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self._emit_square_at(event.scenePos())
        super().mousePressEvent(event)

    def _emit_square_at(self, pos: QPointF) -> None:
        if self._position is None:
            return
        sq = self._pos_to_square(pos)
        if sq is not None:
            self.square_clicked.emit(sq)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Convert board row/column to visual column/row."""
        if self._flipped:
            return 7 - col, 7 - row
        return col, row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        vc = int(pos.x() // t)
        vr = int(pos.y() // t)
        if not (0 <= vc < 8 and 0 <= vr < 8):
            return None
        if self._flipped:
            return make_square(7 - vr, 7 - vc)
        return make_square(vr, vc)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(row_of(sq), col_of(sq))
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
