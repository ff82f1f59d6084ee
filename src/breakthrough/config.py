"""Application configuration with environment-variable overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from breakthrough.storage.interfaces import DEFAULT_KEEP_TOP

_LOGGER = logging.getLogger(__name__)

ENV_SAVE_FILE = "BREAKTHROUGH_SAVE_FILE"
ENV_SCORES_FILE = "BREAKTHROUGH_SCORES_FILE"
ENV_KEEP_TOP = "BREAKTHROUGH_KEEP_TOP"
ENV_LANGUAGE = "BREAKTHROUGH_LANGUAGE"
ENV_LOG_LEVEL = "BREAKTHROUGH_LOG_LEVEL"


@dataclass
class AppConfig:
    """All user-configurable settings."""

    # Files
    save_path: Path = Path("save.json")
    scores_path: Path = Path("scores.json")

    # Scoreboard
    keep_top: int = DEFAULT_KEEP_TOP
    scores_shown: int = 10

    # General
    language: str = "English"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Defaults overridden by ``BREAKTHROUGH_*`` variables."""
        env = os.environ if environ is None else environ
        cfg = cls()
        if env.get(ENV_SAVE_FILE):
            cfg = replace(cfg, save_path=Path(env[ENV_SAVE_FILE]))
        if env.get(ENV_SCORES_FILE):
            cfg = replace(cfg, scores_path=Path(env[ENV_SCORES_FILE]))
        if env.get(ENV_KEEP_TOP):
            cfg = replace(cfg, keep_top=_int_setting(env, ENV_KEEP_TOP, cfg.keep_top))
        if env.get(ENV_LANGUAGE):
            cfg = replace(cfg, language=env[ENV_LANGUAGE])
        if env.get(ENV_LOG_LEVEL):
            cfg = replace(cfg, log_level=_level_setting(env[ENV_LOG_LEVEL], cfg.log_level))
        return cfg


def _int_setting(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env[key]
    try:
        value = int(raw)
    except ValueError:
        _LOGGER.warning("Ignoring %s=%r: not an integer", key, raw)
        return default
    if value < 1:
        _LOGGER.warning("Ignoring %s=%r: must be at least 1", key, raw)
        return default
    return value


def _level_setting(raw: str, default: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        _LOGGER.warning("Ignoring %s=%r: unknown log level", ENV_LOG_LEVEL, raw)
        return default
    return level
