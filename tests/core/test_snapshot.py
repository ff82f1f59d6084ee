"""Tests for GameSnapshot validation and its JSON shape."""

from __future__ import annotations

from typing import Any

import pytest

from breakthrough.core.enums import Side
from breakthrough.core.errors import DataFormatError
from breakthrough.core.snapshot import GameSnapshot, validate_rows

EMPTY_ROWS = ["........"] * 8


def _payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "whiteName": "Alice",
        "blackName": "Bob",
        "turn": "Black",
        "plyCount": 3,
        "rows": list(EMPTY_ROWS),
    }
    data.update(overrides)
    return data


class TestValidateRows:
    def test_accepts_valid_board(self) -> None:
        validate_rows(["BBBBBBBB", "BBBBBBBB"] + ["........"] * 4 + ["WWWWWWWW"] * 2)

    def test_wrong_row_count(self) -> None:
        with pytest.raises(DataFormatError):
            validate_rows(EMPTY_ROWS[:7])

    def test_wrong_row_length(self) -> None:
        with pytest.raises(DataFormatError):
            validate_rows(["......."] + EMPTY_ROWS[1:])

    def test_invalid_character(self) -> None:
        with pytest.raises(DataFormatError):
            validate_rows(["...X...."] + EMPTY_ROWS[1:])

    def test_lowercase_piece_rejected(self) -> None:
        with pytest.raises(DataFormatError):
            validate_rows(["w......."] + EMPTY_ROWS[1:])

    def test_not_a_list(self) -> None:
        with pytest.raises(DataFormatError):
            validate_rows("........" * 8)


class TestFromDict:
    def test_valid_payload(self) -> None:
        snap = GameSnapshot.from_dict(_payload())
        assert snap.white_name == "Alice"
        assert snap.black_name == "Bob"
        assert snap.turn == Side.BLACK
        assert snap.ply_count == 3
        assert snap.rows == EMPTY_ROWS

    def test_turn_accepts_numeric_side(self) -> None:
        assert GameSnapshot.from_dict(_payload(turn=0)).turn == Side.WHITE

    @pytest.mark.parametrize("turn", ["Red", True, None, 5])
    def test_bad_turn(self, turn: Any) -> None:
        with pytest.raises(DataFormatError):
            GameSnapshot.from_dict(_payload(turn=turn))

    @pytest.mark.parametrize("ply", [-1, "3", 1.5, False])
    def test_bad_ply_count(self, ply: Any) -> None:
        with pytest.raises(DataFormatError):
            GameSnapshot.from_dict(_payload(plyCount=ply))

    def test_missing_rows(self) -> None:
        data = _payload()
        del data["rows"]
        with pytest.raises(DataFormatError):
            GameSnapshot.from_dict(data)

    @pytest.mark.parametrize("key", ["whiteName", "blackName", "turn", "plyCount", "rows"])
    def test_every_key_required(self, key: str) -> None:
        data = _payload()
        del data[key]
        with pytest.raises(DataFormatError, match=key):
            GameSnapshot.from_dict(data)

    def test_non_string_name(self) -> None:
        with pytest.raises(DataFormatError):
            GameSnapshot.from_dict(_payload(whiteName=42))

    def test_not_an_object(self) -> None:
        with pytest.raises(DataFormatError):
            GameSnapshot.from_dict(["rows"])


class TestToDict:
    def test_keys_and_turn_name(self) -> None:
        snap = GameSnapshot("A", "B", Side.WHITE, 0, list(EMPTY_ROWS))
        assert snap.to_dict() == {
            "whiteName": "A",
            "blackName": "B",
            "turn": "White",
            "plyCount": 0,
            "rows": EMPTY_ROWS,
        }

    def test_from_dict_inverts_to_dict(self) -> None:
        snap = GameSnapshot("A", "B", Side.BLACK, 7, list(EMPTY_ROWS))
        assert GameSnapshot.from_dict(snap.to_dict()) == snap

    def test_validate_rejects_negative_ply(self) -> None:
        with pytest.raises(DataFormatError):
            GameSnapshot(ply_count=-1, rows=list(EMPTY_ROWS)).validate()

    def test_validate_rejects_non_side_turn(self) -> None:
        snap = GameSnapshot(turn=1, rows=list(EMPTY_ROWS))  # type: ignore[arg-type]
        with pytest.raises(DataFormatError, match="turn"):
            snap.validate()

    @pytest.mark.parametrize("ply", ["3", 2.0, True])
    def test_validate_rejects_non_int_ply(self, ply: Any) -> None:
        with pytest.raises(DataFormatError, match="ply"):
            GameSnapshot(ply_count=ply, rows=list(EMPTY_ROWS)).validate()
