"""Tests for the plain-text renderers."""

from __future__ import annotations

from datetime import datetime, timezone

from breakthrough.console.renderer import render_board, render_help, render_scores
from breakthrough.core.enums import Side
from breakthrough.core.move import parse_move
from breakthrough.game.player import Player
from breakthrough.game.state import Game
from breakthrough.storage.models import ScoreEntry
from breakthrough.ui.i18n import set_language


class TestRenderBoard:
    def test_header_names_current_player(self) -> None:
        game = Game(Player("Alice", Side.WHITE), Player("Bob", Side.BLACK))
        text = render_board(game)
        assert "Turn: Alice (White)" in text
        assert "Plies: 0" in text

        game.apply_move(parse_move("a2 a3"))
        text = render_board(game)
        assert "Turn: Bob (Black)" in text
        assert "Plies: 1" in text

    def test_grid_layout(self) -> None:
        lines = render_board(Game()).splitlines()
        files = "    a  b  c  d  e  f  g  h "
        assert lines.count(files) == 2
        assert " 8  B  B  B  B  B  B  B  B  8" in lines
        assert " 5  .  .  .  .  .  .  .  .  5" in lines
        assert " 1  W  W  W  W  W  W  W  W  1" in lines

    def test_rank_order_top_to_bottom(self) -> None:
        text = render_board(Game())
        assert text.index(" 8 ") < text.index(" 1 ")

    def test_localised_header(self) -> None:
        set_language("Russian")
        assert "Ход:" in render_board(Game())


class TestRenderHelp:
    def test_mentions_commands(self) -> None:
        text = render_help()
        for command in (":menu", ":exit", ":moves", ":save", ":load", ":scores"):
            assert command in text


class TestRenderScores:
    def test_empty(self) -> None:
        assert render_scores([]) == "No results yet."

    def test_lines(self) -> None:
        entry = ScoreEntry(
            "Alice", Side.WHITE, "Bob", 17, datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        )
        text = render_scores([entry])
        lines = text.splitlines()
        assert lines[0].startswith("===")
        assert lines[1] == " 1. Alice (White) beat Bob | plies: 17 | 2024-05-01 09:30 UTC"

    def test_limit(self) -> None:
        entry = ScoreEntry("A", Side.BLACK, "B", 5)
        text = render_scores([entry] * 15, limit=10)
        assert len(text.splitlines()) == 11
