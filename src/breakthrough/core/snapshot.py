"""Plain-data game snapshot shared with persistence and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from breakthrough.core.enums import Side
from breakthrough.core.errors import DataFormatError
from breakthrough.core.types import BOARD_SIZE

EMPTY_CHAR = "."
_VALID_CHARS = frozenset("WB" + EMPTY_CHAR)
_REQUIRED_KEYS = ("whiteName", "blackName", "turn", "plyCount", "rows")


@dataclass(slots=True)
class GameSnapshot:
    """One persisted game record.

    ``rows[0]`` is board row 0 (rank 8); each row holds 8 of ``W``, ``B``, ``.``.
    """

    white_name: str = "White"
    black_name: str = "Black"
    turn: Side = Side.WHITE
    ply_count: int = 0
    rows: list[str] = field(default_factory=list)

    def validate(self) -> None:
        """Raise :class:`DataFormatError` unless every field is well-typed and the
        board is 8x8 of valid chars.
        """
        if not isinstance(self.white_name, str) or not isinstance(self.black_name, str):
            raise DataFormatError("Player names must be strings")
        if not isinstance(self.turn, Side):
            raise DataFormatError(f"Invalid turn: {self.turn!r}")
        if not isinstance(self.ply_count, int) or isinstance(self.ply_count, bool):
            raise DataFormatError(f"Invalid ply count: {self.ply_count!r}")
        validate_rows(self.rows)
        if self.ply_count < 0:
            raise DataFormatError(f"Negative ply count: {self.ply_count}")

    # ── JSON shape ───────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "whiteName": self.white_name,
            "blackName": self.black_name,
            "turn": self.turn.display_name,
            "plyCount": self.ply_count,
            "rows": list(self.rows),
        }

    @classmethod
    def from_dict(cls, data: Any) -> GameSnapshot:
        """Build and validate a snapshot from decoded JSON."""
        if not isinstance(data, dict):
            raise DataFormatError("Snapshot must be a JSON object")

        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise DataFormatError(f"Snapshot is missing: {', '.join(missing)}")

        try:
            turn = Side.from_value(data["turn"])
        except ValueError:
            raise DataFormatError(f"Invalid turn: {data['turn']!r}") from None

        rows = data["rows"]
        if not isinstance(rows, list):
            raise DataFormatError("Snapshot rows must be a list of strings")

        snapshot = cls(
            data["whiteName"], data["blackName"], turn, data["plyCount"], list(rows)
        )
        snapshot.validate()
        return snapshot


def validate_rows(rows: Any) -> None:
    if not isinstance(rows, (list, tuple)) or len(rows) != BOARD_SIZE:
        raise DataFormatError(f"Board must have exactly {BOARD_SIZE} rows")
    for r, row in enumerate(rows):
        if not isinstance(row, str) or len(row) != BOARD_SIZE:
            raise DataFormatError(
                f"Row {r} must be a string of exactly {BOARD_SIZE} characters"
            )
        for ch in row:
            if ch not in _VALID_CHARS:
                raise DataFormatError(f"Invalid character {ch!r} in row {r}")
