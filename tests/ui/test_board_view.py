"""Tests for BoardView view options and keyboard shortcuts."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtCore import QEvent, Qt  # noqa: E402
from PyQt6.QtGui import QKeyEvent  # noqa: E402

from breakthrough.core.move import Move, parse_move  # noqa: E402
from breakthrough.core.types import parse_coordinate  # noqa: E402
from breakthrough.game.state import Game  # noqa: E402
from breakthrough.ui.board.board_view import BoardView  # noqa: E402
from breakthrough.ui.styles.theme import BoardTheme  # noqa: E402


def _key(
    key: Qt.Key, modifiers: Qt.KeyboardModifier = Qt.KeyboardModifier.NoModifier
) -> QKeyEvent:
    return QKeyEvent(QEvent.Type.KeyPress, key, modifiers)


def _view() -> BoardView:
    view = BoardView()
    view.board_scene.set_game(Game())
    return view


class TestFlip:
    def test_set_flipped_reports_change_once(self) -> None:
        view = _view()
        seen: list[bool] = []
        view.flipped_changed.connect(seen.append)

        view.set_flipped(True)
        view.set_flipped(True)
        view.toggle_flipped()

        assert seen == [True, False]
        assert not view.board_scene.is_flipped()

    def test_f_key_flips(self) -> None:
        view = _view()
        view.keyPressEvent(_key(Qt.Key.Key_F))
        assert view.board_scene.is_flipped()

    def test_ctrl_f_left_to_menu_shortcut(self) -> None:
        view = _view()
        view.keyPressEvent(_key(Qt.Key.Key_F, Qt.KeyboardModifier.ControlModifier))
        assert not view.board_scene.is_flipped()


class TestOptions:
    def test_escape_drops_selection(self) -> None:
        view = _view()
        view.board_scene.click(parse_coordinate("d2"))
        assert view.board_scene.selected is not None

        view.keyPressEvent(_key(Qt.Key.Key_Escape))
        assert view.board_scene.selected is None

    def test_theme_sets_scene_and_background(self) -> None:
        view = _view()
        green = BoardTheme.green()
        view.set_theme(green)
        assert view.board_scene.theme == green
        assert view.backgroundBrush().color() == green.dark_square

    def test_show_coordinates_passthrough(self) -> None:
        view = _view()
        view.set_show_coordinates(False)
        assert not view.board_scene.show_coordinates

    def test_scene_moves_bubble_up(self) -> None:
        view = _view()
        emitted: list[Move] = []
        view.move_made.connect(emitted.append)
        view.board_scene.click(parse_coordinate("b2"))
        view.board_scene.click(parse_coordinate("b3"))
        assert emitted == [parse_move("b2 b3")]
