"""PieceItem — a pawn disc on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QCursor, QPen
from PyQt6.QtWidgets import QGraphicsEllipseItem

from breakthrough.core.enums import Side
from breakthrough.core.piece import Piece
from breakthrough.core.types import Coordinate
from breakthrough.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsEllipseItem):
    """A single piece drawn as a filled disc; stores its logical *pos*."""

    _MARGIN_RATIO = 0.15

    def __init__(
        self, piece: Piece, pos: Coordinate, tile_size: int, theme: BoardTheme
    ) -> None:
        margin = tile_size * self._MARGIN_RATIO
        diameter = tile_size - 2 * margin
        super().__init__(0, 0, diameter, diameter)
        self.piece = piece
        self.coordinate = pos
        self.margin = margin

        fill = theme.white_piece if piece.side == Side.WHITE else theme.black_piece
        self.setBrush(QBrush(fill))
        pen = QPen(theme.piece_outline)
        pen.setWidthF(max(1.0, tile_size / 40))
        self.setPen(pen)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
