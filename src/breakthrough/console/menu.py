"""Interactive console menu and game loop.

Input and output are injected callables, so the loop runs the same against a
terminal (``input`` / ``print``) and against scripted test input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from breakthrough.config import AppConfig
from breakthrough.console.commands import CommandKind, parse_command
from breakthrough.console.renderer import render_board, render_help, render_scores
from breakthrough.core.errors import DataFormatError, InputFormatError
from breakthrough.game.controller import GameController
from breakthrough.game.state import Game
from breakthrough.storage.files import FileGameStorage, FileScoreStorage
from breakthrough.storage.interfaces import IGameStorage, IScoreStorage
from breakthrough.storage.models import ScoreEntry
from breakthrough.ui.i18n import describe_error, describe_win, side_name, t

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class _ExitRequested(Exception):
    """Raised by ``:exit`` to unwind straight out of :meth:`ConsoleMenu.run`."""


class ConsoleMenu:
    """Main menu plus the in-game command loop."""

    MAX_LISTED_MOVES = 30

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        controller: GameController | None = None,
        game_storage: IGameStorage | None = None,
        score_storage: IScoreStorage | None = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self._config = config or AppConfig()
        self._controller = controller or GameController()
        self._game_storage = game_storage or FileGameStorage()
        self._score_storage = score_storage or FileScoreStorage()
        self._input = input_fn
        self._out = output_fn

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Main menu ────────────────────────────────────────────────────────

    def run(self) -> None:
        """Loop until the user picks exit, types ``:exit``, or input ends."""
        try:
            while True:
                s = t()
                self._out(f"=== {s.app_title} ===")
                self._out(f"1) {s.menu_new_game}")
                self._out(f"2) {s.menu_how_to_play}")
                self._out(f"3) {s.menu_scores}")
                self._out(f"0) {s.menu_exit}")
                choice = self._read("> ")

                if choice == "1":
                    self.start_new_game()
                elif choice == "2":
                    self._out(render_help())
                    self._pause()
                elif choice == "3":
                    self.show_scores()
                elif choice in ("0", ":exit"):
                    return
                else:
                    self._out(s.menu_unknown)
                    self._pause()
        except (_ExitRequested, EOFError):
            return

    def start_new_game(self) -> None:
        s = t()
        white_name = self._read(s.prompt_white_name)
        black_name = self._read(s.prompt_black_name)
        self._controller.new_game(white_name, black_name)
        self.play()

    def show_scores(self) -> None:
        try:
            entries = self._score_storage.load(self._config.scores_path)
        except (OSError, DataFormatError) as exc:
            _LOGGER.warning("Cannot read scoreboard: %s", exc)
            self._out(t().load_failed.format(msg=exc))
            entries = []
        self._out(render_scores(entries, self._config.scores_shown))
        self._pause()

    # ── Game loop ────────────────────────────────────────────────────────

    def play(self) -> None:
        """Run the current game until it ends or the user leaves."""
        while True:
            self._out(render_board(self._controller.game))
            line = self._read("> ")

            try:
                command = parse_command(line)
            except InputFormatError as exc:
                self._out(str(exc))
                self._pause()
                continue

            kind = command.kind
            if kind == CommandKind.EXIT:
                raise _ExitRequested
            if kind == CommandKind.MENU:
                return
            if kind == CommandKind.HELP:
                self._out(render_help())
                self._pause()
            elif kind == CommandKind.SCORES:
                self.show_scores()
            elif kind == CommandKind.MOVES:
                self._list_moves()
            elif kind == CommandKind.SAVE:
                self._save(command.argument)
            elif kind == CommandKind.LOAD:
                self._load(command.argument)
            else:
                assert command.move is not None
                result = self._controller.submit_move(command.move)
                if result.error is not None:
                    self._out(describe_error(result.error))
                    self._pause()
                elif result.winner is not None:
                    self._finish(self._controller.game)
                    return

    # ── Command handlers ─────────────────────────────────────────────────

    def _list_moves(self) -> None:
        s = t()
        moves = self._controller.legal_moves()
        self._out(s.moves_available.format(count=len(moves)))
        for move in moves[: self.MAX_LISTED_MOVES]:
            self._out(f"{move.from_pos} -> {move.to_pos}")
        if len(moves) > self.MAX_LISTED_MOVES:
            self._out(s.moves_truncated.format(shown=self.MAX_LISTED_MOVES))
        self._pause()

    def _save(self, argument: str | None) -> None:
        path = Path(argument) if argument else self._config.save_path
        try:
            written = self._game_storage.save(path, self._controller.snapshot())
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Cannot save game to %s: %s", path, exc)
            self._out(t().save_failed.format(msg=exc))
        else:
            self._out(t().saved_to.format(path=written))
        self._pause()

    def _load(self, argument: str | None) -> None:
        path = Path(argument) if argument else self._config.save_path
        try:
            snapshot = self._game_storage.load(path)
            self._controller.load_snapshot(snapshot)
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Cannot load game from %s: %s", path, exc)
            self._out(t().load_failed.format(msg=exc))
        else:
            self._out(t().loaded_from.format(path=path))
        self._pause()

    def _finish(self, game: Game) -> None:
        s = t()
        winner = game.winner
        assert winner is not None
        name = game.player(winner).name

        self._out(render_board(game))
        self._out(s.victory.format(name=name, side=side_name(winner)))
        self._out(describe_win(name, winner, game.end_reason))
        self._out(s.plies_played.format(ply=game.ply_count))

        try:
            self._score_storage.add_result(
                self._config.scores_path, ScoreEntry.from_game(game), self._config.keep_top
            )
        except (OSError, DataFormatError) as exc:
            _LOGGER.warning("Cannot record result: %s", exc)
            self._out(s.result_failed.format(msg=exc))
        else:
            self._out(s.result_recorded.format(path=self._config.scores_path))
        self._pause()

    # ── IO helpers ───────────────────────────────────────────────────────

    def _read(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _pause(self) -> None:
        self._input(t().press_enter)
