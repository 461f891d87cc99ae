"""PieceItem — a chess piece sprite on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import QGraphicsItem

from schack.core.piece import Piece
from schack.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """A single chess piece, scaled to fill its tile."""

    _MARGIN_RATIO = 0.03

    def __init__(self, piece: Piece, tile_size: int) -> None:
        super().__init__()
        self.piece = piece
        self._margin = 0.0

        self.setSharedRenderer(piece_renderer(piece.is_white, piece.role))
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self._update_size(tile_size)
        self.setZValue(1)

    @property
    def margin(self) -> float:
        """Inner margin to keep the piece away from tile edges."""
        return self._margin

    def place(self, tile_size: int) -> None:
        """Position the sprite on its square."""
        column, row = self.piece.square
        self.setPos(column * tile_size + self._margin, row * tile_size + self._margin)

    def _update_size(self, size: int) -> None:
        self._margin = float(size) * self._MARGIN_RATIO
        draw_size = max(float(size) - 2.0 * self._margin, 1.0)

        renderer = self.renderer()
        if renderer is None:
            return
        bounds = self.boundingRect()
        width = float(bounds.width()) or float(renderer.defaultSize().width()) or 1.0
        height = float(bounds.height()) or float(renderer.defaultSize().height()) or 1.0
        self.setScale(min(draw_size / width, draw_size / height))
