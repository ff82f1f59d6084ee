"""Core enumerations for the Breakthrough domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side color. White starts on rows 6-7, Black on rows 0-1."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def display_name(self) -> str:
        """Capitalised name, e.g. ``"White"``."""
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> Side:
        """Parse ``"White"`` / ``"black"`` (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid side name: {name!r}") from None

    @classmethod
    def from_value(cls, value: object) -> Side:
        """Accept a stored side: a name (``"White"``) or its number (``0``/``1``)."""
        if isinstance(value, bool):
            raise ValueError(f"Invalid side: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            return cls.from_name(value)
        raise ValueError(f"Invalid side: {value!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Unit kinds. Breakthrough only has pawns."""

    PAWN = 1
