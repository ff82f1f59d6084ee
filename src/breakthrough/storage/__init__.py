"""Persistence layer — JSON save files and the scoreboard."""

from breakthrough.storage.files import FileGameStorage, FileScoreStorage
from breakthrough.storage.interfaces import DEFAULT_KEEP_TOP, IGameStorage, IScoreStorage
from breakthrough.storage.models import ScoreEntry, rank_entries

__all__ = [
    "DEFAULT_KEEP_TOP",
    "FileGameStorage",
    "FileScoreStorage",
    "IGameStorage",
    "IScoreStorage",
    "ScoreEntry",
    "rank_entries",
]
