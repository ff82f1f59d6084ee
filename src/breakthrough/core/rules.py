"""Movement policy: forward direction and winning row per side.

The policy is a pair of pure functions injected into :class:`Game`, so a
variant can swap them without touching the state machine.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from breakthrough.core.enums import Side
from breakthrough.core.types import BOARD_SIZE


class RulesPolicy(Protocol):
    """What :class:`Game` needs from a rules variant."""

    def forward_direction(self, side: Side) -> int: ...

    def is_winning_row(self, side: Side, row: int) -> bool: ...


@dataclass(frozen=True, slots=True)
class Rules:
    """Closure-pair implementation of :class:`RulesPolicy`."""

    forward_direction: Callable[[Side], int]
    is_winning_row: Callable[[Side, int], bool]

    @classmethod
    def standard(cls) -> Rules:
        """White moves up (-1) and wins on row 0; Black moves down and wins on row 7."""
        return cls(
            forward_direction=_standard_direction,
            is_winning_row=_standard_winning_row,
        )


def _standard_direction(side: Side) -> int:
    return -1 if side == Side.WHITE else 1


def _standard_winning_row(side: Side, row: int) -> bool:
    return row == (0 if side == Side.WHITE else BOARD_SIZE - 1)


STANDARD_RULES = Rules.standard()
