"""Player record."""

from __future__ import annotations

from dataclasses import dataclass

from breakthrough.core.enums import Side


@dataclass(frozen=True, slots=True)
class Player:
    """A named participant bound to one side for the whole match.

    A blank name falls back to the side's display name.
    """

    name: str
    side: Side

    def __post_init__(self) -> None:
        name = (self.name or "").strip()
        object.__setattr__(self, "name", name or self.side.display_name)

    def __str__(self) -> str:
        return f"{self.name} ({self.side.display_name})"
