"""Tests for MainWindow wiring: moves, results, files, language."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from breakthrough.config import AppConfig  # noqa: E402
from breakthrough.core.enums import Side  # noqa: E402
from breakthrough.core.move import parse_move  # noqa: E402
from breakthrough.core.snapshot import GameSnapshot  # noqa: E402
from breakthrough.ui.main_window import MainWindow  # noqa: E402
from breakthrough.ui.styles.theme import BoardTheme  # noqa: E402

NEAR_WIN_ROWS = ["........", ".W......"] + ["........"] * 5 + ["B......."]


class _Dialogs:
    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.infos: list[str] = []


def _make_window(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> tuple[MainWindow, _Dialogs]:
    config = AppConfig(save_path=tmp_path / "save.json", scores_path=tmp_path / "scores.json")
    window = MainWindow(config)
    dialogs = _Dialogs()
    monkeypatch.setattr(window, "_show_warning", lambda _t, text: dialogs.warnings.append(text))
    monkeypatch.setattr(window, "_show_info", lambda _t, text: dialogs.infos.append(text))
    return window, dialogs


class TestMoves:
    def test_initial_status(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        assert window.status_text == "Turn: White (White)   |   Plies: 0"
        assert window.windowTitle() == "Breakthrough"

    def test_board_move_reaches_controller(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, dialogs = _make_window(tmp_path, monkeypatch)
        window.board_view.move_made.emit(parse_move("a2 a3"))
        assert window.controller.game.ply_count == 1
        assert "Black" in window.status_text
        assert dialogs.warnings == []

    def test_clicks_play_a_move(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        scene = window.board_view.board_scene
        scene.click(parse_move("e2 e3").from_pos)
        scene.click(parse_move("e2 e3").to_pos)
        assert window.controller.game.turn == Side.BLACK

    def test_illegal_move_warns(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        window, dialogs = _make_window(tmp_path, monkeypatch)
        window.board_view.move_made.emit(parse_move("a2 a4"))
        assert dialogs.warnings == ["Pieces may only move one row forward."]
        assert window.controller.game.ply_count == 0


class TestGameOver:
    def test_win_records_score_and_locks_board(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, dialogs = _make_window(tmp_path, monkeypatch)
        window.controller.load_snapshot(
            GameSnapshot("Alice", "Bob", Side.WHITE, 10, NEAR_WIN_ROWS)
        )
        window.board_view.move_made.emit(parse_move("b7 b8"))

        assert dialogs.infos == ["Alice (White) wins by reaching the far edge."]
        assert window.status_text == dialogs.infos[0]
        assert not window.board_view.board_scene._interactive

        data = json.loads((tmp_path / "scores.json").read_text(encoding="utf-8"))
        assert data["entries"][0]["plyCount"] == 11
        assert [e.winner_name for e in window.load_scores()] == ["Alice"]

    def test_new_game_unlocks_board(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        window.controller.load_snapshot(GameSnapshot(rows=NEAR_WIN_ROWS))
        window.board_view.move_made.emit(parse_move("b7 b8"))
        window.controller.new_game("C", "D")
        assert window.board_view.board_scene._interactive
        assert window.status_text.startswith("Turn: C (White)")


class TestFiles:
    def test_save_and_load(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        window, dialogs = _make_window(tmp_path, monkeypatch)
        window.board_view.move_made.emit(parse_move("a2 a3"))
        target = tmp_path / "game"

        assert window.save_game(target)
        assert (tmp_path / "game.json").is_file()

        window.controller.new_game()
        assert window.load_game(tmp_path / "game.json")
        assert window.controller.game.ply_count == 1
        assert window.status_text == "Loaded from: game.json"
        assert dialogs.warnings == []

    def test_load_corrupt_file_warns(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, dialogs = _make_window(tmp_path, monkeypatch)
        path = tmp_path / "bad.json"
        path.write_text('{"rows": []}', encoding="utf-8")

        assert not window.load_game(path)
        assert len(dialogs.warnings) == 1
        assert dialogs.warnings[0].startswith("Load failed:")

    def test_load_missing_file_warns(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, dialogs = _make_window(tmp_path, monkeypatch)
        assert not window.load_game(tmp_path / "missing.json")
        assert len(dialogs.warnings) == 1

    def test_corrupt_scoreboard_reads_empty(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        (tmp_path / "scores.json").write_text("{", encoding="utf-8")
        assert window.load_scores() == []


class TestLanguage:
    def test_switch_to_russian(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        window._on_language("Russian")
        assert window.windowTitle() == "Прорыв"
        assert window.status_text.startswith("Ход:")
        menu_bar = window.menuBar()
        assert menu_bar is not None
        titles = [action.text() for action in menu_bar.actions()]
        assert titles == ["&Игра", "&Вид", "&Язык"]


class TestViewMenu:
    def test_flip_action_flips_board(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        window._act_flip.trigger()
        assert window.board_view.board_scene.is_flipped()
        assert window._act_flip.isChecked()

    def test_flip_key_keeps_action_in_step(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        window.board_view.toggle_flipped()
        assert window._act_flip.isChecked()

    def test_coordinates_action_hides_labels(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        assert window._act_coords.isChecked()
        window._act_coords.trigger()
        assert not window.board_view.board_scene.show_coordinates

    def test_theme_actions(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        classic, green = window._menu_theme.actions()
        assert classic.isChecked()

        green.trigger()
        assert window.board_view.board_scene.theme == BoardTheme.green()
        assert green.isChecked() and not classic.isChecked()

    def test_view_state_survives_language_switch(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window, _ = _make_window(tmp_path, monkeypatch)
        window._act_flip.trigger()
        window._menu_theme.actions()[1].trigger()

        window._on_language("Russian")
        assert window._act_flip.isChecked()
        assert window._act_flip.text() == "&Перевернуть доску"
        assert window._menu_theme.actions()[1].isChecked()
