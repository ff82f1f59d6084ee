"""GameController — the orchestrator shared by the console and Qt frontends.

Owns the current :class:`Game`, forwards moves to it, and emits events via
simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from breakthrough.core.enums import Side
from breakthrough.core.errors import IllegalMoveError
from breakthrough.core.move import Move
from breakthrough.core.rules import STANDARD_RULES, RulesPolicy
from breakthrough.core.snapshot import GameSnapshot
from breakthrough.game.interfaces import MoveResult
from breakthrough.game.player import Player
from breakthrough.game.state import Game

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, MoveResult, Game], None]
RejectedCallback = Callable[[Move, IllegalMoveError], None]
GameOverCallback = Callable[[Game], None]
NewGameCallback = Callable[[Game], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_new_game: list[NewGameCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Drives one match at a time.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_game", "_rules", "events")

    def __init__(self, rules: RulesPolicy = STANDARD_RULES) -> None:
        self._rules = rules
        self._game = Game(rules=rules)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def rules(self) -> RulesPolicy:
        return self._rules

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self, white_name: str = "", black_name: str = "") -> Game:
        """Discard the current match and start a fresh one."""
        game = Game(
            Player(white_name, Side.WHITE),
            Player(black_name, Side.BLACK),
            self._rules,
        )
        self._replace_game(game)
        return game

    def load_snapshot(self, data: GameSnapshot | dict[str, Any]) -> Game:
        """Replace the current match with one rebuilt from *data*.

        On :class:`DataFormatError` the current match is kept.
        """
        game = Game.from_snapshot(data, self._rules)
        self._replace_game(game)
        return game

    def snapshot(self) -> GameSnapshot:
        return self._game.to_snapshot()

    # ── Moves ────────────────────────────────────────────────────────────

    def submit_move(self, move: Move) -> MoveResult:
        """Try *move* on the current game and notify listeners."""
        result = self._game.try_apply_move(move)
        if result.error is not None:
            _LOGGER.debug("Rejected %s: %s", move, result.error)
            for cb in self.events.on_rejected:
                cb(move, result.error)
            return result

        for cb in self.events.on_move:
            cb(move, result, self._game)

        if result.winner is not None:
            self._emit_game_over()
        return result

    def legal_moves(self) -> list[Move]:
        return self._game.legal_moves()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _replace_game(self, game: Game) -> None:
        self._game = game
        _LOGGER.info("New game: %s vs %s", game.white.name, game.black.name)
        for cb in self.events.on_new_game:
            cb(game)

    def _emit_game_over(self) -> None:
        game = self._game
        winner = game.winner
        assert winner is not None
        reason = game.end_reason
        _LOGGER.info(
            "Game over: %s wins by %s after %d plies",
            game.player(winner).name,
            reason.name,
            game.ply_count,
        )
        for cb in self.events.on_game_over:
            cb(game)
