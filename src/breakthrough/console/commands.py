"""Parsing of in-game console commands (``:save``, ``a2 a3`` ...)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from breakthrough.core.errors import InputFormatError
from breakthrough.core.move import Move, parse_move
from breakthrough.ui.i18n import t


class CommandKind(IntEnum):
    MOVE = auto()
    MENU = auto()
    EXIT = auto()
    HELP = auto()
    MOVES = auto()
    SCORES = auto()
    SAVE = auto()
    LOAD = auto()


_KEYWORDS: dict[str, CommandKind] = {
    ":menu": CommandKind.MENU,
    ":exit": CommandKind.EXIT,
    ":help": CommandKind.HELP,
    ":moves": CommandKind.MOVES,
    ":scores": CommandKind.SCORES,
    ":save": CommandKind.SAVE,
    ":load": CommandKind.LOAD,
}


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed input line. ``argument`` is the optional file for save/load."""

    kind: CommandKind
    move: Move | None = None
    argument: str | None = None


def read_move(line: str) -> Move:
    """Like :func:`parse_move`, with messages in the active locale."""
    try:
        return parse_move(line)
    except InputFormatError as exc:
        if exc.token is None:
            raise InputFormatError(t().input_need_two) from None
        raise InputFormatError(
            t().input_bad_coordinate.format(token=exc.token), token=exc.token
        ) from None


def parse_command(line: str) -> Command:
    """Classify *line*. Raises :class:`InputFormatError` for unreadable moves."""
    parts = line.split()
    kind = _KEYWORDS.get(parts[0].lower()) if parts else None
    if kind is None:
        return Command(CommandKind.MOVE, move=read_move(line))
    if kind in (CommandKind.SAVE, CommandKind.LOAD):
        return Command(kind, argument=parts[1] if len(parts) > 1 else None)
    return Command(kind)
