"""Piece rendering helpers.

Glyphs are the SVG pieces shipped with ``python-chess`` (``chess.svg.piece``),
so the application needs no asset files.
"""

from __future__ import annotations

from functools import lru_cache

import chess
import chess.svg
from PyQt6.QtCore import QByteArray, QRectF, Qt
from PyQt6.QtGui import QImage, QPainter, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from chesstrainer.core.enums import Color, PieceKind
from chesstrainer.core.piece import Piece

# One shared renderer per (color, kind)
_renderers: dict[tuple[Color, PieceKind], QSvgRenderer] = {}


def piece_svg(piece: Piece) -> str:
    """SVG markup of *piece*."""
    oracle_piece = chess.Piece(int(piece.kind), piece.color.oracle_value)
    return chess.svg.piece(oracle_piece)


def _get_renderer(color: Color, kind: PieceKind) -> QSvgRenderer:
    key = (color, kind)
    if key not in _renderers:
        data = QByteArray(piece_svg(Piece(color, kind)).encode("utf-8"))
        renderer = QSvgRenderer(data)
        if not renderer.isValid():
            raise ValueError(f"Invalid SVG for {color} {kind.name.lower()}")
        _renderers[key] = renderer
    return _renderers[key]


def piece_renderer(piece: Piece) -> QSvgRenderer:
    """Return a cached SVG renderer for *piece*."""
    return _get_renderer(piece.color, piece.kind)


@lru_cache(maxsize=128)
def piece_pixmap(piece: Piece, size: int) -> QPixmap:
    """Render a chess piece as a *size* × *size* QPixmap."""
    renderer = piece_renderer(piece)

    image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

    margin = int(size * 0.03)
    target = QRectF(margin, margin, size - 2 * margin, size - 2 * margin)
    renderer.render(painter, target)

    painter.end()
    return QPixmap.fromImage(image)
