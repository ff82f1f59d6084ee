"""BoardScene — QGraphicsScene that draws the board and pieces."""

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

from breakthrough.core.move import Move
from breakthrough.core.types import BOARD_SIZE, Coordinate, all_coordinates
from breakthrough.ui.board.piece_item import PieceItem
from breakthrough.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from breakthrough.game.state import Game


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Click a piece of the side to move, then click a destination. Any
    destination is emitted; the controller decides whether it is legal.

    Signals:
        move_made(Move): Emitted when the user picks a source and a target.
    """

    move_made = pyqtSignal(Move)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._game: Game | None = None
        self._flipped = False

        # Interaction state
        self._selected: Coordinate | None = None
        self._last_move: Move | None = None
        self._interactive = True
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coordinate, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_game(self, game: Game) -> None:
        """Display *game* (full redraw of pieces)."""
        self._game = game
        self._clear_selection()
        self.highlight_last_move(None)
        self._sync_pieces()

    def refresh(self, last_move: Move | None = None) -> None:
        """Redraw pieces after the game changed in place."""
        self._clear_selection()
        self._sync_pieces()
        self.highlight_last_move(last_move)

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation (Black at the bottom)."""
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

    def highlight_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_highlights)
        self._last_move = move
        if move is None:
            return
        for pos in (move.from_pos, move.to_pos):
            rect = self._make_highlight(pos, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    @property
    def selected(self) -> Coordinate | None:
        return self._selected

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    @property
    def show_coordinates(self) -> bool:
        return self._show_coordinates

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        """Rebuild every layer after an orientation or theme change."""
        self._clear_selection()
        self._draw_board()
        self._sync_pieces()
        self.highlight_last_move(self._last_move)

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for pos in all_coordinates():
            vc, vr = self._visual_coords(pos)
            is_light = (pos.row + pos.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[pos] = rect

            text_color = self._theme.coord_light if is_light else self._theme.coord_dark

            # Rank numbers (left edge)
            if vc == 0:
                self._add_coord_label(
                    str(BOARD_SIZE - pos.row), font, text_color, vc * t + 2, vr * t + 1
                )

            # File letters (bottom edge)
            if vr == BOARD_SIZE - 1:
                self._add_coord_label(
                    "abcdefgh"[pos.col], font, text_color, vc * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord_label(
        self, label: str, font: QFont, color: QColor, x: float, y: float
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
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._game is None:
            return

        t = self.TILE
        for pos, piece in self._game.board.enumerate_pieces():
            item = PieceItem(piece, pos, t, self._theme)
            vc, vr = self._visual_coords(pos)
            item.setPos(vc * t + item.margin, vr * t + item.margin)
            self.addItem(item)
            self._piece_items[pos] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._game is None or event is None:
            return super().mousePressEvent(event)
        self.click(self._pos_to_coordinate(event.scenePos()))
        super().mousePressEvent(event)

    def click(self, pos: Coordinate | None) -> None:
        """Handle a click on *pos* (``None`` = outside the board)."""
        if pos is None or self._game is None or self._game.is_game_over:
            self._clear_selection()
            return

        piece = self._game.board.get(pos)

        # Own piece → (re)select
        if piece is not None and piece.side == self._game.turn:
            if pos == self._selected:
                self._clear_selection()
            else:
                self._select(pos)
            return

        # Anything else with a selection → attempt the move
        if self._selected is not None:
            move = Move(self._selected, pos)
            self._clear_selection()
            self.move_made.emit(move)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, pos: Coordinate) -> None:
        self._clear_selection()
        self._selected = pos

        # Highlight origin
        self._highlight_items.append(self._make_highlight(pos, self._theme.highlight_from))

        # Legal move dots
        if self._game is not None:
            for move in self._game.legal_moves_from(pos):
                dot = self._make_highlight(move.to_pos, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected = None
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, pos: Coordinate) -> tuple[int, int]:
        """Board coordinate → visual (column, row)."""
        if self._flipped:
            return BOARD_SIZE - 1 - pos.col, BOARD_SIZE - 1 - pos.row
        return pos.col, pos.row

    def _pos_to_coordinate(self, point: QPointF) -> Coordinate | None:
        """Scene position → board coordinate."""
        t = self.TILE
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Coordinate(BOARD_SIZE - 1 - row, BOARD_SIZE - 1 - col)
        return Coordinate(row, col)

    def _make_highlight(self, pos: Coordinate, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(pos)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
