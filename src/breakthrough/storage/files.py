"""JSON-file implementations of the storage interfaces."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from breakthrough.core.errors import DataFormatError
from breakthrough.core.snapshot import GameSnapshot
from breakthrough.storage.interfaces import (
    DEFAULT_KEEP_TOP,
    IGameStorage,
    IScoreStorage,
    PathLike,
)
from breakthrough.storage.models import ScoreEntry, rank_entries

_LOGGER = logging.getLogger(__name__)


def _to_path(path: PathLike) -> Path:
    if not str(path).strip():
        raise ValueError("File path is empty")
    return Path(path)


def _read_json(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataFormatError(f"Corrupt JSON in {path}: {exc.msg}") from exc


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


class FileGameStorage(IGameStorage):
    """Stores one snapshot per JSON file."""

    def save(self, path: PathLike, snapshot: GameSnapshot) -> Path:
        save_path = _to_path(path)
        snapshot.validate()
        _write_json(save_path, snapshot.to_dict())
        _LOGGER.info("Saved game to %s", save_path)
        return save_path

    def load(self, path: PathLike) -> GameSnapshot:
        load_path = _to_path(path)
        if not load_path.is_file():
            raise FileNotFoundError(f"Save file not found: {load_path}")
        snapshot = GameSnapshot.from_dict(_read_json(load_path))
        _LOGGER.info("Loaded game from %s", load_path)
        return snapshot


class FileScoreStorage(IScoreStorage):
    """Scoreboard kept as ``{"entries": [...]}`` in a JSON file."""

    def load(self, path: PathLike) -> list[ScoreEntry]:
        load_path = _to_path(path)
        if not load_path.is_file():
            return []
        data = _read_json(load_path)
        if data is None:
            return []
        if not isinstance(data, dict) or not isinstance(data.get("entries", []), list):
            raise DataFormatError(f"Unexpected scoreboard layout in {load_path}")
        return [ScoreEntry.from_dict(item) for item in data.get("entries", [])]

    def add_result(
        self, path: PathLike, entry: ScoreEntry, keep_top: int = DEFAULT_KEEP_TOP
    ) -> list[ScoreEntry]:
        save_path = _to_path(path)
        entries = rank_entries([*self.load(save_path), entry], keep_top)
        _write_json(save_path, {"entries": [e.to_dict() for e in entries]})
        _LOGGER.info(
            "Recorded %s win in %d plies to %s", entry.winner_name, entry.ply_count, save_path
        )
        return entries
