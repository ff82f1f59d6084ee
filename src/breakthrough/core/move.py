"""Move value object and the two-token move syntax (``"a2 a3"``)."""

from __future__ import annotations

from dataclasses import dataclass

from breakthrough.core.errors import InputFormatError
from breakthrough.core.types import Coordinate, parse_coordinate


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (source, destination) pair.

    Carries no piece: the mover is looked up on the board at validation time.
    """

    from_pos: Coordinate
    to_pos: Coordinate

    @property
    def d_row(self) -> int:
        return self.to_pos.row - self.from_pos.row

    @property
    def d_col(self) -> int:
        return self.to_pos.col - self.from_pos.col

    def __str__(self) -> str:
        return f"{_fmt(self.from_pos)} {_fmt(self.to_pos)}"


def _fmt(pos: Coordinate) -> str:
    return pos.name if pos.is_inside() else f"({pos.row},{pos.col})"


def parse_move(text: str) -> Move:
    """Parse exactly two whitespace-separated coordinates, e.g. ``'a2 a3'``."""
    parts = text.split()
    if len(parts) != 2:
        raise InputFormatError(
            f"Expected two coordinates (e.g. 'a2 a3'), got {len(parts)} token(s)"
        )
    return Move(parse_coordinate(parts[0]), parse_coordinate(parts[1]))
