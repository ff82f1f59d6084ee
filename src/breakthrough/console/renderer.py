"""Plain-text rendering of the board, help, and scoreboard."""

from __future__ import annotations

from collections.abc import Iterable

from breakthrough.core.types import BOARD_SIZE, Coordinate
from breakthrough.game.state import Game
from breakthrough.storage.models import ScoreEntry
from breakthrough.ui.i18n import side_name, t

_FILES_ROW = "   " + "".join(f" {f} " for f in "abcdefgh")


def render_board(game: Game) -> str:
    """Header, command hints, and the grid with coordinates on all sides."""
    s = t()
    player = game.current_player
    lines = [
        s.app_title,
        s.status_turn.format(
            name=player.name, side=side_name(game.turn), ply=game.ply_count
        ),
        s.commands_hint,
        s.move_hint,
        "",
        _FILES_ROW,
    ]
    for row in range(BOARD_SIZE):
        rank = BOARD_SIZE - row
        cells = "".join(
            f" {piece.symbol if piece else '.'} "
            for piece in (game.board.get(Coordinate(row, col)) for col in range(BOARD_SIZE))
        )
        lines.append(f" {rank} {cells} {rank}")
    lines.append(_FILES_ROW)
    return "\n".join(lines) + "\n"


def render_help() -> str:
    return "\n".join(t().help_lines) + "\n"


def render_scores(entries: Iterable[ScoreEntry], limit: int = 10) -> str:
    s = t()
    shown = list(entries)[:limit]
    if not shown:
        return s.scores_empty
    lines = [s.scores_header]
    for rank, e in enumerate(shown, start=1):
        lines.append(
            s.score_line.format(
                rank=rank,
                winner=e.winner_name,
                side=side_name(e.winner_side),
                loser=e.loser_name,
                ply=e.ply_count,
                date=e.date_utc.strftime("%Y-%m-%d %H:%M"),
            )
        )
    return "\n".join(lines)
