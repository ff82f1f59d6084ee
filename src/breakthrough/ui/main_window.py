"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
)

from breakthrough.config import AppConfig
from breakthrough.core.errors import DataFormatError, IllegalMoveError
from breakthrough.core.move import Move
from breakthrough.game.controller import GameController
from breakthrough.game.interfaces import MoveResult
from breakthrough.game.state import Game
from breakthrough.storage.files import FileGameStorage, FileScoreStorage
from breakthrough.storage.interfaces import IGameStorage, IScoreStorage
from breakthrough.storage.models import ScoreEntry
from breakthrough.ui.board.board_view import BoardView
from breakthrough.ui.dialogs.new_game_dialog import NewGameDialog
from breakthrough.ui.dialogs.scores_dialog import ScoresDialog
from breakthrough.ui.i18n import (
    LANGUAGES,
    describe_error,
    describe_win,
    set_language,
    side_name,
    t,
)
from breakthrough.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        game_storage: IGameStorage | None = None,
        score_storage: IScoreStorage | None = None,
    ) -> None:
        super().__init__()
        self._config = config or AppConfig()
        self._controller = GameController()
        self._game_storage = game_storage or FileGameStorage()
        self._score_storage = score_storage or FileScoreStorage()

        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        # Start with a default game
        self._controller.new_game()
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView()
        self.setCentralWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        menu_bar.clear()
        s = t()
        self.setWindowTitle(s.app_title)

        # Game menu
        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game_dialog)
        self._menu_game.addAction(self._act_new_game)

        self._act_open = QAction(s.menu_open, self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open)
        self._menu_game.addAction(self._act_open)

        self._act_save = QAction(s.menu_save, self)
        self._act_save.setShortcut("Ctrl+S")
        self._act_save.triggered.connect(self._on_save)
        self._menu_game.addAction(self._act_save)

        self._menu_game.addSeparator()

        self._act_scores = QAction(s.menu_scores, self)
        self._act_scores.triggered.connect(self._on_scores)
        self._menu_game.addAction(self._act_scores)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        view = self._board_view
        scene = view.board_scene
        self._menu_view = menu_bar.addMenu(s.menu_view)
        assert self._menu_view is not None

        self._act_flip = QAction(s.menu_flip_board, self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.setCheckable(True)
        self._act_flip.setChecked(scene.is_flipped())
        self._act_flip.triggered.connect(view.set_flipped)
        self._menu_view.addAction(self._act_flip)

        self._act_coords = QAction(s.menu_show_coordinates, self)
        self._act_coords.setCheckable(True)
        self._act_coords.setChecked(scene.show_coordinates)
        self._act_coords.triggered.connect(view.set_show_coordinates)
        self._menu_view.addAction(self._act_coords)

        self._menu_theme = self._menu_view.addMenu(s.menu_theme)
        assert self._menu_theme is not None
        theme_group = QActionGroup(self)
        themes = ((s.theme_classic, BoardTheme.default()), (s.theme_green, BoardTheme.green()))
        for title, theme in themes:
            act = QAction(title, self)
            act.setCheckable(True)
            act.setChecked(theme == scene.theme)
            act.triggered.connect(lambda _checked=False, th=theme: view.set_theme(th))
            theme_group.addAction(act)
            self._menu_theme.addAction(act)

        # Language menu
        self._menu_language = menu_bar.addMenu(s.menu_language)
        assert self._menu_language is not None
        group = QActionGroup(self)
        for language in LANGUAGES:
            act = QAction(language, self)
            act.setCheckable(True)
            act.setChecked(language == self._config.language)
            act.triggered.connect(
                lambda _checked=False, lang=language: self._on_language(lang)
            )
            group.addAction(act)
            self._menu_language.addAction(act)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.move_made.connect(self._on_user_move)
        self._board_view.flipped_changed.connect(self._on_flipped_changed)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_new_game.append(self._on_new_game)
        events.on_move.append(self._on_game_move)
        events.on_rejected.append(self._on_move_rejected)
        events.on_game_over.append(self._on_game_over)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_user_move(self, move: Move) -> None:
        self._controller.submit_move(move)

    def _on_new_game(self, game: Game) -> None:
        scene = self._board_view.board_scene
        scene.set_game(game)
        scene.set_interactive(not game.is_game_over)
        self._update_status()

    def _on_game_move(self, move: Move, result: MoveResult, game: Game) -> None:
        self._board_view.board_scene.refresh(move)
        self._update_status()

    def _on_move_rejected(self, move: Move, error: IllegalMoveError) -> None:
        self._show_warning(t().illegal_move_title, describe_error(error))

    def _on_game_over(self, game: Game) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._update_status()

        winner = game.winner
        assert winner is not None
        message = describe_win(game.player(winner).name, winner, game.end_reason)
        try:
            self._score_storage.add_result(
                self._config.scores_path, ScoreEntry.from_game(game), self._config.keep_top
            )
        except (OSError, DataFormatError) as exc:
            _LOGGER.warning("Cannot record result: %s", exc)
            message += "\n" + t().result_failed.format(msg=exc)
        self._show_info(t().game_over_title, message)

    # ── Menu actions ─────────────────────────────────────────────────────

    def _on_new_game_dialog(self) -> None:
        dlg = NewGameDialog(self)
        if dlg.exec():
            white, black = dlg.names()
            self._controller.new_game(white, black)

    def _on_open(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, t().open_title, str(self._config.save_path), t().json_filter
        )
        if path:
            self.load_game(Path(path))

    def _on_save(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self, t().save_title, str(self._config.save_path), t().json_filter
        )
        if path:
            self.save_game(Path(path))

    def _on_scores(self) -> None:
        ScoresDialog(self.load_scores(), self).exec()

    def _on_flipped_changed(self, flipped: bool) -> None:
        self._act_flip.setChecked(flipped)

    def _on_language(self, language: str) -> None:
        self._config.language = language
        set_language(language)
        self._setup_menu()
        self._update_status()

    # ── File operations ──────────────────────────────────────────────────

    def load_game(self, path: Path) -> bool:
        try:
            snapshot = self._game_storage.load(path)
            self._controller.load_snapshot(snapshot)
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Cannot load game from %s: %s", path, exc)
            self._show_warning(t().open_title, t().load_failed.format(msg=exc))
            return False
        self._status_label.setText(t().loaded_from.format(path=path.name))
        return True

    def save_game(self, path: Path) -> bool:
        if path.suffix.lower() != ".json":
            path = path.with_suffix(".json")
        try:
            written = self._game_storage.save(path, self._controller.snapshot())
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Cannot save game to %s: %s", path, exc)
            self._show_warning(t().save_title, t().save_failed.format(msg=exc))
            return False
        self._status_label.setText(t().saved_to.format(path=written.name))
        return True

    def load_scores(self) -> list[ScoreEntry]:
        try:
            return self._score_storage.load(self._config.scores_path)
        except (OSError, DataFormatError) as exc:
            _LOGGER.warning("Cannot read scoreboard: %s", exc)
            return []

    # ── Internal helpers ─────────────────────────────────────────────────

    def _update_status(self) -> None:
        game = self._controller.game
        winner = game.winner
        if winner is None:
            text = t().status_turn.format(
                name=game.current_player.name,
                side=side_name(game.turn),
                ply=game.ply_count,
            )
        else:
            text = describe_win(game.player(winner).name, winner, game.end_reason)
        self._status_label.setText(text)

    def _show_warning(self, title: str, text: str) -> None:
        QMessageBox.warning(self, title, text)

    def _show_info(self, title: str, text: str) -> None:
        QMessageBox.information(self, title, text)
