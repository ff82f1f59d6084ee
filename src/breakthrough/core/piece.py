"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from breakthrough.core.enums import PieceKind, Side
from breakthrough.core.errors import DataFormatError

# Snapshot character <-> (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "W": (Side.WHITE, PieceKind.PAWN),
    "B": (Side.BLACK, PieceKind.PAWN),
}

_SNAPSHOT_CHARS: dict[tuple[Side, PieceKind], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

# Display symbols; pawns reuse their snapshot letter.
_SYMBOLS: dict[tuple[Side, PieceKind], str] = dict(_SNAPSHOT_CHARS)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a unit owned by *side*."""

    side: Side
    kind: PieceKind = PieceKind.PAWN

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Snapshot character, ``'W'`` or ``'B'``."""
        return _SNAPSHOT_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a snapshot character, e.g. 'W' → white pawn."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise DataFormatError(f"Invalid piece character: {char!r}") from None
        return cls(side, kind)

    @property
    def symbol(self) -> str:
        """Symbol used by the renderers."""
        return _SYMBOLS[(self.side, self.kind)]
