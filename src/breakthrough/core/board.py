"""Board - piece placement on an 8x8 grid. Storage only, no rules."""

from __future__ import annotations

from collections.abc import Iterator

from breakthrough.core.enums import Side
from breakthrough.core.piece import Piece
from breakthrough.core.types import BOARD_SIZE, Coordinate

_HOME_ROWS: dict[Side, tuple[int, ...]] = {
    Side.BLACK: (0, 1),
    Side.WHITE: (BOARD_SIZE - 2, BOARD_SIZE - 1),
}


class Board:
    """Mutable 8x8 grid of optional pieces."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, pos: Coordinate) -> Piece | None:
        """Piece at *pos*, or ``None`` when empty or off the board."""
        if not pos.is_inside():
            return None
        return self._cells[pos.row][pos.col]

    def set(self, pos: Coordinate, piece: Piece | None) -> None:
        """Overwrite the cell at *pos*."""
        if not pos.is_inside():
            raise IndexError(f"Coordinate outside the board: ({pos.row}, {pos.col})")
        self._cells[pos.row][pos.col] = piece

    def __getitem__(self, pos: Coordinate) -> Piece | None:
        return self.get(pos)

    def __setitem__(self, pos: Coordinate, piece: Piece | None) -> None:
        self.set(pos, piece)

    def is_empty(self, pos: Coordinate) -> bool:
        return self.get(pos) is None

    # -- Query helpers ------------------------------------------------------

    def enumerate_pieces(self) -> Iterator[tuple[Coordinate, Piece]]:
        """Yield ``(pos, piece)`` for occupied cells in row-major order."""
        for r, row in enumerate(self._cells):
            for c, piece in enumerate(row):
                if piece is not None:
                    yield Coordinate(r, c), piece

    def pieces(self, side: Side) -> list[Coordinate]:
        """Cells occupied by *side*, row-major."""
        return [pos for pos, piece in self.enumerate_pieces() if piece.side == side]

    def count(self, side: Side) -> int:
        return sum(1 for _, piece in self.enumerate_pieces() if piece.side == side)

    # -- Mutation / copying -------------------------------------------------

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def reset_initial_setup(self) -> None:
        """Clear, then fill each side's two home rows."""
        self.clear()
        for side, rows in _HOME_ROWS.items():
            for r in rows:
                for c in range(BOARD_SIZE):
                    self._cells[r][c] = Piece(side)

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset_initial_setup()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._cells):
            cells = " ".join(str(p) if p else "." for p in row)
            rows.append(f"{BOARD_SIZE - r} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
