"""Tests for Piece and Side."""

from __future__ import annotations

import pytest

from breakthrough.core.enums import PieceKind, Side
from breakthrough.core.errors import DataFormatError
from breakthrough.core.piece import Piece


class TestSide:
    def test_opposite(self) -> None:
        assert Side.WHITE.opposite == Side.BLACK
        assert Side.BLACK.opposite == Side.WHITE

    def test_display_name(self) -> None:
        assert Side.WHITE.display_name == "White"
        assert Side.BLACK.display_name == "Black"

    def test_from_name_case_insensitive(self) -> None:
        assert Side.from_name("white") == Side.WHITE
        assert Side.from_name(" BLACK ") == Side.BLACK

    def test_from_name_unknown(self) -> None:
        with pytest.raises(ValueError):
            Side.from_name("red")

    @pytest.mark.parametrize(
        "value, side",
        [(0, Side.WHITE), (1, Side.BLACK), ("black", Side.BLACK), (Side.WHITE, Side.WHITE)],
    )
    def test_from_value(self, value: object, side: Side) -> None:
        assert Side.from_value(value) == side

    @pytest.mark.parametrize("value", [True, False, 2, None, 1.0, "red"])
    def test_from_value_rejects(self, value: object) -> None:
        with pytest.raises(ValueError):
            Side.from_value(value)


class TestPiece:
    def test_default_kind_is_pawn(self) -> None:
        assert Piece(Side.WHITE).kind == PieceKind.PAWN

    def test_snapshot_chars(self) -> None:
        assert str(Piece(Side.WHITE)) == "W"
        assert str(Piece(Side.BLACK)) == "B"
        assert Piece.from_char("W") == Piece(Side.WHITE)
        assert Piece.from_char("B") == Piece(Side.BLACK)

    def test_symbol(self) -> None:
        assert Piece(Side.WHITE).symbol == "W"
        assert Piece(Side.BLACK).symbol == "B"

    @pytest.mark.parametrize("char", ["", ".", "w", "X", "WB"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(DataFormatError):
            Piece.from_char(char)

    def test_value_equality(self) -> None:
        assert Piece(Side.BLACK) == Piece(Side.BLACK)
        assert Piece(Side.BLACK) != Piece(Side.WHITE)
