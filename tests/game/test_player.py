"""Tests for Player."""

from breakthrough.core.enums import Side
from breakthrough.game.player import Player


class TestPlayer:
    def test_properties(self) -> None:
        p = Player("Alice", Side.WHITE)
        assert p.side == Side.WHITE
        assert p.name == "Alice"

    def test_name_is_stripped(self) -> None:
        assert Player("  Bob ", Side.BLACK).name == "Bob"

    def test_blank_name_falls_back_to_side(self) -> None:
        assert Player("", Side.WHITE).name == "White"
        assert Player("   ", Side.BLACK).name == "Black"

    def test_str(self) -> None:
        assert str(Player("Alice", Side.BLACK)) == "Alice (Black)"
