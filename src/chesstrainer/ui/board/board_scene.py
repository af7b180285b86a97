"""ReviewBoardScene — QGraphicsScene that draws one example's board."""

from __future__ import annotations

from collections.abc import Iterable

import chess
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

from chesstrainer.core.move import Move, Square
from chesstrainer.core.position import Position
from chesstrainer.ui.board.piece_item import PieceItem
from chesstrainer.ui.styles.theme import BoardTheme


class ReviewBoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights and pieces.

    The scene holds no chess logic: it draws what it is given and reports
    clicked squares.

    Signals:
        square_clicked(int): A square was clicked while the board is interactive.
    """

    square_clicked = pyqtSignal(int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._flipped = False
        self._interactive = False
        self._show_coordinates = True
        self._show_legal_moves = True

        self._last_move: Move | None = None
        self._selected_sq: Square | None = None
        self._destinations: frozenset[Square] = frozenset()
        self._check_sq: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsItem] = []
        self._last_move_highlights: list[QGraphicsItem] = []
        self._legal_dot_items: list[QGraphicsItem] = []
        self._piece_items: dict[Square, PieceItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(
        self,
        position: Position | None,
        *,
        last_move: Move | None = None,
        selected: Square | None = None,
        destinations: Iterable[Square] = (),
        check_square: Square | None = None,
    ) -> None:
        """Redraw pieces and every highlight from a full snapshot."""
        self._position = position
        self._last_move = last_move
        self._selected_sq = selected
        self._destinations = frozenset(destinations)
        self._check_sq = check_square
        self._sync_pieces()
        self._sync_highlights()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive

    def is_interactive(self) -> bool:
        return self._interactive

    def set_flipped(self, flipped: bool) -> None:
        """Black at the bottom when *flipped*."""
        if flipped == self._flipped:
            return
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
        """Show or hide legal-move dots."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def _draw_board(self) -> None:
        """Rebuild squares and coordinate labels after a flip or theme change."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for sq in range(64):
            f, r = chess.square_file(sq), chess.square_rank(sq)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            # Rank numbers on the left edge, file letters on the bottom edge
            if vf == 0:
                self._add_coord(str(r + 1), vf * t + 2, vr * t + 1, font, text_color)
            if vr == 7:
                letter = chr(ord("a") + f)
                self._add_coord(letter, vf * t + t - 12, vr * t + t - 16, font, text_color)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(self, label: str, x: float, y: float, font: QFont, color: QColor) -> None:
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
        """One PieceItem per occupied square of the shown position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._position is None:
            return

        t = self.TILE
        for sq, piece in self._position.pieces().items():
            item = PieceItem(piece, sq, t)
            vf, vr = self._visual_coords(chess.square_file(sq), chess.square_rank(sq))
            item.setPos(vf * t + item.margin, vr * t + item.margin)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._last_move_highlights)
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

        if self._last_move is not None:
            for sq in (self._last_move.from_sq, self._last_move.to_sq):
                rect = self._make_highlight(sq, self._theme.last_move)
                rect.setZValue(0.5)
                self._last_move_highlights.append(rect)

        if self._check_sq is not None:
            rect = self._make_highlight(self._check_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._highlight_items.append(rect)

        if self._selected_sq is not None:
            rect = self._make_highlight(self._selected_sq, self._theme.highlight_from)
            self._highlight_items.append(rect)
            if self._show_legal_moves:
                for sq in sorted(self._destinations):
                    self._legal_dot_items.append(self._make_dot(sq))

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Translucent overlay covering *sq*."""
        t = self.TILE
        vf, vr = self._visual_coords(chess.square_file(sq), chess.square_rank(sq))
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        """A centred dot marking a legal destination."""
        t = self.TILE
        d = t / 3
        vf, vr = self._visual_coords(chess.square_file(sq), chess.square_rank(sq))
        dot = QGraphicsEllipseItem(vf * t + (t - d) / 2, vr * t + (t - d) / 2, d, d)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        return dot

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
        event.accept()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Screen column/row of a file/rank; rank 8 is row 0 unless flipped."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Board square under *pos*, or None outside the board."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return chess.square(f, r)
