"""PieceItem — SVG glyph of one piece, sized to a board tile."""

from __future__ import annotations

from PyQt6.QtSvgWidgets import QGraphicsSvgItem

from chesstrainer.core.move import Square
from chesstrainer.core.piece import Piece
from chesstrainer.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """Static piece glyph; the scene owns positioning and click handling."""

    MARGIN_RATIO = 0.03

    def __init__(self, piece: Piece, square: Square, tile_size: int) -> None:
        super().__init__()
        self.piece = piece
        self.square = square
        self.setSharedRenderer(piece_renderer(piece))
        self.setZValue(1)
        self.fit_to_tile(tile_size)

    @property
    def margin(self) -> float:
        """Gap between the glyph and the tile edge, in scene pixels."""
        return self._margin

    def fit_to_tile(self, tile_size: int) -> None:
        self._margin = tile_size * self.MARGIN_RATIO
        target = max(tile_size - 2 * self._margin, 1.0)
        natural = self.boundingRect()
        side = max(natural.width(), natural.height()) or 1.0
        self.setScale(target / side)
