"""BoardView — fits the board scene into the window and owns view options."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QKeyEvent, QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from breakthrough.core.move import Move
from breakthrough.ui.board.board_scene import BoardScene
from breakthrough.ui.styles.theme import BoardTheme


class BoardView(QGraphicsView):
    """Shows a :class:`BoardScene` scaled to the widget, with view options.

    Orientation, theme and coordinate labels are set here so that menu
    actions and keyboard shortcuts go through one place.

    Keys:
        Esc drops the current selection. ``F`` flips the board.

    Signals:
        move_made(Move): A move picked on the board.
        flipped_changed(bool): Orientation changed (menu checkmarks follow it).
    """

    move_made = pyqtSignal(Move)
    flipped_changed = pyqtSignal(bool)

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(320, 320)
        self._apply_background()

        self._scene.move_made.connect(self.move_made.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    # ── View options ─────────────────────────────────────────────────────

    def set_flipped(self, flipped: bool) -> None:
        if flipped == self._scene.is_flipped():
            return
        self._scene.set_flipped(flipped)
        self._fit()
        self.flipped_changed.emit(flipped)

    def toggle_flipped(self) -> None:
        self.set_flipped(not self._scene.is_flipped())

    def set_theme(self, theme: BoardTheme) -> None:
        self._scene.set_theme(theme)
        self._apply_background()

    def set_show_coordinates(self, visible: bool) -> None:
        self._scene.set_show_coordinates(visible)

    # ── Qt overrides ─────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_Escape:
            self._scene.click(None)
        elif key == Qt.Key.Key_F and not event.modifiers():
            self.toggle_flipped()
        else:
            super().keyPressEvent(event)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit()

    # ── Internal ─────────────────────────────────────────────────────────

    def _fit(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def _apply_background(self) -> None:
        # Letterbox area around the board uses the dark square colour
        self.setBackgroundBrush(QBrush(self._scene.theme.dark_square))
