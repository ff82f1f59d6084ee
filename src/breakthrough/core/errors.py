"""Error taxonomy.

Illegal moves are *returned* by :meth:`Game.try_apply_move` as instances of
:class:`IllegalMoveError`; they are only raised by :meth:`Game.apply_move`.
"""

from __future__ import annotations


class BreakthroughError(Exception):
    """Base class for all domain errors."""


class InputFormatError(BreakthroughError, ValueError):
    """Malformed coordinate or move text.

    ``token`` is the unreadable coordinate, or ``None`` when the token count
    itself is wrong.
    """

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class DataFormatError(BreakthroughError, ValueError):
    """Malformed snapshot or stored data."""


class IllegalMoveError(BreakthroughError):
    """A move rejected by the rules. ``str(err)`` is a readable reason."""

    default_message = "Illegal move."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def reason(self) -> str:
        return str(self)


class OutOfBoundsError(IllegalMoveError):
    default_message = "Coordinates are outside the board."


class EmptySourceError(IllegalMoveError):
    default_message = "There is no piece on the source square."


class WrongOwnerError(IllegalMoveError):
    default_message = "That piece does not belong to you."


class WrongDirectionError(IllegalMoveError):
    default_message = "Pieces may only move one row forward."


class TooWideStepError(WrongDirectionError):
    default_message = (
        "A piece moves only to an adjacent square (straight or diagonal)."
    )


class BlockedBySelfError(IllegalMoveError):
    default_message = "The destination is occupied by your own piece."


class BlockedStraightMoveError(IllegalMoveError):
    default_message = (
        "A straight move needs an empty square. Capture diagonally instead."
    )


class GameOverError(IllegalMoveError):
    default_message = "The game is already over."
