"""Tests for the movement policy."""

from __future__ import annotations

from breakthrough.core.enums import Side
from breakthrough.core.rules import STANDARD_RULES, Rules


class TestStandardRules:
    def test_forward_direction(self) -> None:
        assert STANDARD_RULES.forward_direction(Side.WHITE) == -1
        assert STANDARD_RULES.forward_direction(Side.BLACK) == 1

    def test_winning_rows(self) -> None:
        assert STANDARD_RULES.is_winning_row(Side.WHITE, 0)
        assert not STANDARD_RULES.is_winning_row(Side.WHITE, 7)
        assert STANDARD_RULES.is_winning_row(Side.BLACK, 7)
        assert not STANDARD_RULES.is_winning_row(Side.BLACK, 0)

    def test_no_other_row_wins(self) -> None:
        for row in range(1, 7):
            assert not STANDARD_RULES.is_winning_row(Side.WHITE, row)
            assert not STANDARD_RULES.is_winning_row(Side.BLACK, row)

    def test_standard_factory_is_equivalent(self) -> None:
        assert Rules.standard() == STANDARD_RULES


class TestCustomRules:
    def test_functions_are_swappable(self) -> None:
        reversed_rules = Rules(
            forward_direction=lambda side: 1 if side == Side.WHITE else -1,
            is_winning_row=lambda side, row: row == (7 if side == Side.WHITE else 0),
        )
        assert reversed_rules.forward_direction(Side.WHITE) == 1
        assert reversed_rules.is_winning_row(Side.WHITE, 7)
        assert reversed_rules.is_winning_row(Side.BLACK, 0)
