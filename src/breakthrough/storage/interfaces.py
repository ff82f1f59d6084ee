"""Abstract storage interfaces.

Frontends depend on these ABCs, not on the JSON-file implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TypeAlias

from breakthrough.core.snapshot import GameSnapshot
from breakthrough.storage.models import ScoreEntry

DEFAULT_KEEP_TOP = 20

PathLike: TypeAlias = str | Path


class IGameStorage(ABC):
    """Saves and restores a single game snapshot."""

    @abstractmethod
    def save(self, path: PathLike, snapshot: GameSnapshot) -> Path:
        """Persist *snapshot*; return the path written."""

    @abstractmethod
    def load(self, path: PathLike) -> GameSnapshot:
        """Read and validate a snapshot."""


class IScoreStorage(ABC):
    """Top-N table of finished games."""

    @abstractmethod
    def load(self, path: PathLike) -> list[ScoreEntry]:
        """Ranked entries; empty when nothing was stored yet."""

    @abstractmethod
    def add_result(
        self, path: PathLike, entry: ScoreEntry, keep_top: int = DEFAULT_KEEP_TOP
    ) -> list[ScoreEntry]:
        """Insert *entry*, re-rank, truncate to *keep_top*, persist, return the table."""
