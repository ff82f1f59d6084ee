"""Shared game-layer types: phases, end reasons, move results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from breakthrough.core.enums import Side
    from breakthrough.core.errors import IllegalMoveError
    from breakthrough.core.piece import Piece


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a match."""

    ONGOING = auto()
    FINISHED = auto()


class GameEndReason(IntEnum):
    """Why the game ended."""

    NONE = 0
    REACHED_FAR_EDGE = auto()
    ELIMINATED = auto()
    BLOCKADE = auto()


# ── Move outcome ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :meth:`Game.try_apply_move`.

    Exactly one of ``applied`` / ``error`` is meaningful: an applied move has
    ``error is None``; a rejected one leaves the game untouched.
    """

    applied: bool
    error: IllegalMoveError | None = None
    winner: Side | None = None
    captured: Piece | None = None

    @classmethod
    def rejected(cls, error: IllegalMoveError) -> MoveResult:
        return cls(applied=False, error=error)

    def __bool__(self) -> bool:
        return self.applied
