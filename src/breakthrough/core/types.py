"""Coordinate value type and notation helpers.

Board layout (row 0 is the top edge, as printed)::

    row 0 -> rank 8   a8 b8 ... h8
    row 7 -> rank 1   a1 b1 ... h1

Columns map to files ``a``-``h``; ``rank = 8 - row``.
"""

from __future__ import annotations

from dataclasses import dataclass

from breakthrough.core.errors import InputFormatError

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (row, col) pair. May lie outside the board; see :meth:`is_inside`."""

    row: int
    col: int

    def is_inside(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Coordinate(6, 0)`` -> ``'a2'``."""
        return coordinate_name(self)

    def __str__(self) -> str:
        return self.name


def coordinate_name(pos: Coordinate) -> str:
    """Format an inside-the-board coordinate in algebraic notation."""
    if not pos.is_inside():
        raise ValueError(f"Coordinate outside the board: ({pos.row}, {pos.col})")
    return _FILES[pos.col] + str(BOARD_SIZE - pos.row)


def parse_coordinate(text: str) -> Coordinate:
    """Parse algebraic notation, e.g. ``'e2'`` -> ``Coordinate(6, 4)``.

    Surrounding whitespace and case are ignored.
    """
    name = text.strip().lower()
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise InputFormatError(f"Invalid coordinate: {text!r}", token=text)
    return Coordinate(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


def all_coordinates() -> list[Coordinate]:
    """Every board cell in row-major order."""
    return [Coordinate(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
