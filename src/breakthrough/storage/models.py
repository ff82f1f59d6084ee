"""Scoreboard records and ranking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from breakthrough.core.enums import Side
from breakthrough.core.errors import DataFormatError

if TYPE_CHECKING:
    from breakthrough.game.state import Game


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class ScoreEntry:
    """One completed match."""

    winner_name: str
    winner_side: Side
    loser_name: str
    ply_count: int
    date_utc: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_game(cls, game: Game, date_utc: datetime | None = None) -> ScoreEntry:
        """Entry for a finished *game*."""
        winner = game.winner
        if winner is None:
            raise ValueError("Game is not finished")
        return cls(
            winner_name=game.player(winner).name,
            winner_side=winner,
            loser_name=game.player(winner.opposite).name,
            ply_count=game.ply_count,
            date_utc=date_utc or _utcnow(),
        )

    # ── JSON shape ───────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "winnerName": self.winner_name,
            "winnerSide": self.winner_side.display_name,
            "loserName": self.loser_name,
            "plyCount": self.ply_count,
            "dateUtc": self.date_utc.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> ScoreEntry:
        if not isinstance(data, dict):
            raise DataFormatError("Score entry must be a JSON object")
        try:
            date_utc = datetime.fromisoformat(str(data["dateUtc"]))
            ply_count = data["plyCount"]
            if not isinstance(ply_count, int) or isinstance(ply_count, bool):
                raise ValueError(f"Invalid ply count: {ply_count!r}")
            entry = cls(
                winner_name=str(data["winnerName"]),
                winner_side=Side.from_value(data["winnerSide"]),
                loser_name=str(data["loserName"]),
                ply_count=ply_count,
                date_utc=_as_utc(date_utc),
            )
        except (KeyError, ValueError) as exc:
            raise DataFormatError(f"Invalid score entry: {exc}") from exc
        return entry


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def rank_entries(entries: Iterable[ScoreEntry], keep_top: int) -> list[ScoreEntry]:
    """Fewest plies first; ties go to the most recent. Keep at least one."""
    by_recency = sorted(entries, key=lambda e: e.date_utc, reverse=True)
    ranked = sorted(by_recency, key=lambda e: e.ply_count)
    return ranked[: max(1, keep_top)]
