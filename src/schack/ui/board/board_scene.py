"""BoardScene — QGraphicsScene that draws the chessboard, pieces and status."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from schack.core.enums import MouseButton
from schack.core.snapshot import BoardSnapshot
from schack.core.types import BOARD_SIZE, FILES, Square, all_squares
from schack.game.controller import BoardController
from schack.game.selection import SelectionState
from schack.ui.board.piece_item import PieceItem
from schack.ui.styles.theme import BoardTheme, add_color

_LOGGER = logging.getLogger(__name__)

_QT_BUTTONS: dict[Qt.MouseButton, MouseButton] = {
    Qt.MouseButton.LeftButton: MouseButton.LEFT,
    Qt.MouseButton.RightButton: MouseButton.RIGHT,
    Qt.MouseButton.MiddleButton: MouseButton.MIDDLE,
}


class BoardScene(QGraphicsScene):
    """Renders tiles, highlights, piece sprites and the game-state text.

    All game logic lives in the ``BoardController``; the scene redraws
    whenever the controller refreshes or changes its selection.
    """

    TILE = 90  # px per square

    _STATUS_FONT_PX = 30
    _STATUS_PADDING = 8

    def __init__(
        self,
        controller: BoardController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._tile = self.TILE
        self._show_coordinates = False
        self._show_legal_moves = True
        self._show_status = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._status_box: QGraphicsRectItem | None = None
        self._status_item: QGraphicsSimpleTextItem | None = None

        self._controller = controller if controller is not None else BoardController()
        self._controller.tile_size = self._tile
        self._connect_controller()

        self._draw_board()
        self._sync_all()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    def set_controller(self, controller: BoardController) -> None:
        """Attach a different controller (e.g. after a new game)."""
        self._disconnect_controller()
        self._controller = controller
        self._controller.tile_size = self._tile
        self._connect_controller()
        self._sync_all()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_all()

    def set_tile_size(self, size: int) -> None:
        """Change the pixel size of a square and redraw everything."""
        self._controller.tile_size = size
        self._tile = size
        self._draw_board()
        self._sync_all()

    def tile_size(self) -> int:
        return self._tile

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    def set_show_status(self, visible: bool) -> None:
        """Show or hide the game-state text over the board."""
        self._show_status = visible
        self._sync_status()

    def status_text(self) -> str:
        return self._status_item.text() if self._status_item is not None else ""

    def handle_click(self, pos: QPointF, button: Qt.MouseButton) -> bool:
        """Forward a click in scene coordinates to the controller."""
        mapped = _QT_BUTTONS.get(button, MouseButton.OTHER)
        _LOGGER.debug("Scene click at (%.1f, %.1f) with %s", pos.x(), pos.y(), mapped.name)
        return self._controller.click(pos.x(), pos.y(), mapped)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        # Accepting the press makes the scene receive the matching release.
        if event is None:
            return super().mousePressEvent(event)
        event.accept()

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mouseReleaseEvent(event)
        self.handle_click(event.scenePos(), event.button())
        event.accept()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self._tile
        font = QFont()
        font.setPixelSize(max(9, t // 8))

        for column, row in all_squares():
            is_light = (column + row) % 2 == 0
            rect = QGraphicsRectItem(column * t, row * t, t, t)
            rect.setBrush(QBrush(self._theme.square_color(column, row)))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[(column, row)] = rect

            # Rank numbers (left edge)
            if column == 0:
                self._add_coord(
                    str(BOARD_SIZE - row), font, is_light, QPointF(2, row * t + 1)
                )
            # File letters (bottom edge)
            if row == BOARD_SIZE - 1:
                self._add_coord(
                    FILES[column].lower(),
                    font,
                    is_light,
                    QPointF(column * t + t - 12, row * t + t - 16),
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, font: QFont, is_light: bool, pos: QPointF
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(
            QBrush(self._theme.coord_dark if is_light else self._theme.coord_light)
        )
        txt.setPos(pos)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Synchronisation with the controller ──────────────────────────────

    def _connect_controller(self) -> None:
        events = self._controller.events
        events.on_refresh.append(self._on_refresh)
        events.on_selection_changed.append(self._on_selection_changed)

    def _disconnect_controller(self) -> None:
        events = self._controller.events
        if self._on_refresh in events.on_refresh:
            events.on_refresh.remove(self._on_refresh)
        if self._on_selection_changed in events.on_selection_changed:
            events.on_selection_changed.remove(self._on_selection_changed)

    def _on_refresh(self, _snapshot: BoardSnapshot) -> None:
        self._sync_all()

    def _on_selection_changed(self, _state: SelectionState) -> None:
        self._sync_highlights()

    def _sync_all(self) -> None:
        self._sync_highlights()
        self._sync_pieces()
        self._sync_status()

    def _sync_highlights(self) -> None:
        """Recolour tiles: destinations and the selected origin are blended."""
        targets = self._controller.highlights if self._show_legal_moves else frozenset()
        selected = self._controller.selected_piece
        origin = selected.square if selected is not None else None

        for (column, row), item in self._square_items.items():
            color = self._theme.square_color(column, row)
            if (column, row) in targets:
                color = add_color(color, self._theme.highlight_to)
            elif (column, row) == origin:
                color = add_color(color, self._theme.highlight_from)
            item.setBrush(QBrush(color))

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current snapshot."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self._tile
        for piece in self._controller.snapshot.pieces():
            item = PieceItem(piece, t)
            item.place(t)
            self.addItem(item)
            self._piece_items[piece.square] = item

    def _sync_status(self) -> None:
        """Redraw the centred game-state text on a white box."""
        for item in (self._status_box, self._status_item):
            if item is not None:
                self.removeItem(item)
        self._status_box = None
        self._status_item = None

        text = QGraphicsSimpleTextItem(self._controller.status_text())
        font = QFont()
        font.setPixelSize(self._STATUS_FONT_PX)
        text.setFont(font)
        text.setBrush(QBrush(self._theme.status_text))

        bounds = text.boundingRect()
        size = BOARD_SIZE * self._tile
        x = (size - bounds.width()) / 2
        y = (size - bounds.height()) / 2
        text.setPos(x, y)
        text.setZValue(3)

        pad = self._STATUS_PADDING
        box = QGraphicsRectItem(
            QRectF(x - pad, y, bounds.width() + 2 * pad, bounds.height())
        )
        box.setBrush(QBrush(self._theme.status_background))
        box.setPen(QPen(Qt.PenStyle.NoPen))
        box.setZValue(2.5)

        for item in (box, text):
            item.setVisible(self._show_status)
            self.addItem(item)
        self._status_box = box
        self._status_item = text
